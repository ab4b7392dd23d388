"""
Adapter: FunctionSampler
Implementuje port Sampler - próbkowanie wyrażenia po jednej wolnej zmiennej.

Liczba próbek: floor((var_max - var_min) / step) + 1,  x_i = var_min + i * step.
Zmienna jest wiązana w kontekście tylko na czas próbkowania (context manager),
więc po wywołaniu kontekst jest dokładnie taki jak przed nim - także po błędzie.
"""
from __future__ import annotations

import logging
import math
from contextlib import contextmanager
from typing import Iterator

from contracts import (
    ExprNode,
    InvalidRange,
    InvalidStep,
    NumberNode,
    PlotSeries,
    SamplePoint,
    VariableAlreadyBound,
    to_infix,
)
from ports.evaluator import Evaluator
from ports.plot_renderer import PlotRenderer
from ports.variable_store import VariableStore

logger = logging.getLogger("expr_plot.sampler")


@contextmanager
def _temporary_binding(context: VariableStore, name: str) -> Iterator[None]:
    """Gwarantuje usunięcie powiązania `name` na każdej ścieżce wyjścia."""
    try:
        yield
    finally:
        context.remove(name)


def _sample_count(var_min: float, var_max: float, step: float) -> int:
    span = (var_max - var_min) / step
    if not math.isfinite(span):
        raise InvalidRange(var_min, var_max)
    return math.floor(span) + 1


class FunctionSampler:
    """Próbkuje wyrażenie i oddaje punkty do PlotRenderer."""

    def __init__(self, evaluator: Evaluator, renderer: PlotRenderer) -> None:
        self._evaluator = evaluator
        self._renderer = renderer

    # -- Sampler protocol -------------------------------------------------------

    def sample(
        self,
        context: VariableStore,
        expr: ExprNode,
        var_name: str,
        var_min: float,
        var_max: float,
        step: float,
    ) -> PlotSeries:
        self._check_preconditions(context, var_name, var_min, var_max, step)
        count = _sample_count(var_min, var_max, step)
        logger.debug("Sampling %s over %s: %d points", to_infix(expr), var_name, count)

        points: list[SamplePoint] = []
        with _temporary_binding(context, var_name):
            for i in range(count):
                x = var_min + i * step
                context.set(var_name, NumberNode(value=x))
                y = self._evaluator.evaluate(context, expr)
                points.append(SamplePoint(x=x, y=y))

        expr_text = to_infix(expr)
        return PlotSeries(
            title=expr_text,
            x_label=var_name,
            y_label=expr_text,
            points=points,
        )

    def plot(
        self,
        context: VariableStore,
        expr: ExprNode,
        var_name: str,
        var_min: float,
        var_max: float,
        step: float,
    ) -> ExprNode:
        series = self.sample(context, expr, var_name, var_min, var_max, step)
        self.render(series)
        return expr

    def render(self, series: PlotSeries) -> None:
        self._renderer.draw_scatter_plot(
            series.title, series.x_label, series.y_label, series.xs, series.ys
        )
        logger.info("Plotted %s (%d points)", series.title, len(series.points))

    # -- Prywatne ------------------------------------------------------------------

    @staticmethod
    def _check_preconditions(
        context: VariableStore,
        var_name: str,
        var_min: float,
        var_max: float,
        step: float,
    ) -> None:
        if context.contains(var_name):
            raise VariableAlreadyBound(var_name)
        if math.isnan(var_min) or math.isnan(var_max) or var_min > var_max:
            raise InvalidRange(var_min, var_max)
        if math.isnan(step) or step <= 0:
            raise InvalidStep(step)
