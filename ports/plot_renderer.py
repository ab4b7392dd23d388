"""
Port: PlotRenderer
Odpowiedzialność: graficzna prezentacja spróbkowanych punktów.
"""
from typing import Protocol, Sequence, runtime_checkable


@runtime_checkable
class PlotRenderer(Protocol):
    def draw_scatter_plot(
        self,
        title: str,
        x_label: str,
        y_label: str,
        xs: Sequence[float],
        ys: Sequence[float],
    ) -> None:
        """
        Draws a scatter plot of the (xs[i], ys[i]) points.
        Called exactly once per successful plot. Failures are the renderer's
        own concern and propagate unchanged.
        """
        ...
