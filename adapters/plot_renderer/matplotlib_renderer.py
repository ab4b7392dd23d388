"""
Adapter: MatplotlibPlotRenderer
Implementuje port PlotRenderer - zapisuje wykres punktowy do pliku PNG (backend Agg).
"""
from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Sequence

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402

logger = logging.getLogger("expr_plot.matplotlib_renderer")

_SLUG_RE = re.compile(r"[^A-Za-z0-9]+")


def _slug(title: str) -> str:
    return _SLUG_RE.sub("_", title).strip("_")[:48] or "plot"


class MatplotlibPlotRenderer:
    """Każde wywołanie tworzy nowy plik <output_dir>/<nr>_<tytuł>.png."""

    def __init__(self, output_dir: str | Path, dpi: int = 100) -> None:
        self._output_dir = Path(output_dir)
        self._dpi = dpi
        self._counter = 0
        self.last_path: Path | None = None

    def draw_scatter_plot(
        self,
        title: str,
        x_label: str,
        y_label: str,
        xs: Sequence[float],
        ys: Sequence[float],
    ) -> None:
        self._output_dir.mkdir(parents=True, exist_ok=True)
        self._counter += 1
        path = self._output_dir / f"{self._counter:04d}_{_slug(title)}.png"

        fig, ax = plt.subplots()
        try:
            ax.scatter(list(xs), list(ys), s=12, color="dodgerblue")
            ax.set_title(title)
            ax.set_xlabel(x_label)
            ax.set_ylabel(y_label)
            ax.grid(True, alpha=0.3)
            fig.savefig(path, format="png", dpi=self._dpi, bbox_inches="tight")
        finally:
            plt.close(fig)

        self.last_path = path
        logger.info("Scatter plot written to %s", path)
