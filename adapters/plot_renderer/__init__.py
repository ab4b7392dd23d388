"""
Plot renderer adapters.

    from adapters.plot_renderer import build_renderer
"""
from __future__ import annotations

from pathlib import Path

from adapters.plot_renderer.rich_renderer import RichTablePlotRenderer
from ports.plot_renderer import PlotRenderer


def build_renderer(backend: str, output_dir: str | Path = "plots", dpi: int = 100) -> PlotRenderer:
    """Tworzy renderer dla nazwy backendu z konfiguracji ('rich' | 'matplotlib')."""
    if backend == "rich":
        return RichTablePlotRenderer()
    if backend == "matplotlib":
        # matplotlib ładowany leniwie - niepotrzebny dla renderera tekstowego
        from adapters.plot_renderer.matplotlib_renderer import MatplotlibPlotRenderer

        return MatplotlibPlotRenderer(output_dir=output_dir, dpi=dpi)
    raise ValueError(f"Unknown plot backend: {backend!r}")


__all__ = ["RichTablePlotRenderer", "build_renderer"]
