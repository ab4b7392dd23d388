"""
Port: Sampler
Odpowiedzialność: próbkowanie funkcji jednej zmiennej i przekazanie punktów do renderera.
"""
from typing import Protocol, runtime_checkable

from contracts import ExprNode, PlotSeries
from ports.variable_store import VariableStore


@runtime_checkable
class Sampler(Protocol):
    def sample(
        self,
        context: VariableStore,
        expr: ExprNode,
        var_name: str,
        var_min: float,
        var_max: float,
        step: float,
    ) -> PlotSeries:
        """
        Evaluates `expr` at x = var_min + i*step for
        i in 0..floor((var_max - var_min) / step).
        `var_name` is bound in `context` only while sampling and is always
        removed afterwards, also when evaluation fails.
        Raises VariableAlreadyBound, InvalidRange or InvalidStep on bad input.
        """
        ...

    def plot(
        self,
        context: VariableStore,
        expr: ExprNode,
        var_name: str,
        var_min: float,
        var_max: float,
        step: float,
    ) -> ExprNode:
        """
        sample() followed by render().
        Returns `expr` unchanged.
        """
        ...

    def render(self, series: PlotSeries) -> None:
        """Hands the sampled points to the PlotRenderer (exactly one call)."""
        ...
