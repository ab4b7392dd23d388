"""
Adapter: RichTablePlotRenderer
Implementuje port PlotRenderer - wypisuje punkty wykresu jako tabelę rich.
"""
from __future__ import annotations

import math
from typing import Sequence

from rich import box
from rich.console import Console
from rich.table import Table


def _fmt(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    return f"{value:.6g}"


class RichTablePlotRenderer:
    """Tekstowy „wykres” dla terminala: tabela x / y."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console(highlight=False)

    def draw_scatter_plot(
        self,
        title: str,
        x_label: str,
        y_label: str,
        xs: Sequence[float],
        ys: Sequence[float],
    ) -> None:
        table = Table(title=f"{title} [{len(xs)}]", box=box.ASCII)
        table.add_column(x_label, justify="right", no_wrap=True, style="cyan")
        table.add_column(y_label, justify="right")
        for x, y in zip(xs, ys):
            table.add_row(_fmt(x), _fmt(y))
        self._console.print(table)
