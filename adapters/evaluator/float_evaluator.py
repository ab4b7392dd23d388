"""
Adapter: FloatEvaluator
Implementuje port Evaluator - rekurencyjne przejście drzewa w arytmetyce double.

Semantyka IEEE-754: dzielenie przez zero daje ±inf/nan, przepełnienie daje inf,
żadna z tych sytuacji nie jest błędem. Wykładnik '^' jest obcinany do liczby
całkowitej (w stronę zera) przed potęgowaniem: 2 ^ 3.9 == 8.0.
"""
from __future__ import annotations

import logging
import math

from contracts import (
    TO_DOUBLE,
    ExprNode,
    NumberNode,
    OperationNode,
    UnknownOperation,
    UndefinedVariable,
    VariableNode,
)
from ports.variable_store import VariableStore

logger = logging.getLogger("expr_plot.evaluator")

_INT_MIN = -(2 ** 31)
_INT_MAX = 2 ** 31 - 1


def _ieee_div(a: float, b: float) -> float:
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _truncate_exponent(value: float) -> int:
    """Obcięcie w stronę zera z nasyceniem do zakresu int32; nan → 0."""
    if math.isnan(value):
        return 0
    if value >= _INT_MAX:
        return _INT_MAX
    if value <= _INT_MIN:
        return _INT_MIN
    return int(value)


def _int_pow(base: float, exponent: float) -> float:
    n = _truncate_exponent(exponent)
    odd = n % 2 == 1
    try:
        return math.pow(base, n)
    except OverflowError:
        return -math.inf if base < 0 and odd else math.inf
    except ValueError:
        # 0 ^ ujemny wykładnik
        return -math.inf if odd and math.copysign(1.0, base) < 0 else math.inf


def _trig(fn):
    def apply(x: float) -> float:
        if math.isinf(x):
            return math.nan
        return fn(x)
    return apply


# Operatory binarne i funkcje jednoargumentowe na float
_BINARY_FUNCS = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": _ieee_div,
    "^": _int_pow,
}

_UNARY_FUNCS = {
    "negate": lambda a: -a,
    "sin": _trig(math.sin),
    "cos": _trig(math.cos),
}


class FloatEvaluator:
    """Ewaluator drzew wyrażeń do wartości double."""

    # -- Evaluator protocol ------------------------------------------------

    def to_double(self, context: VariableStore, node: ExprNode) -> float:
        # Pomija nadmiarowe opakowanie toDouble(...) z warstwy poleceń
        if isinstance(node, OperationNode) and node.name == TO_DOUBLE and node.children:
            node = node.children[0]
        return self.evaluate(context, node)

    def evaluate(self, context: VariableStore, node: ExprNode) -> float:
        if isinstance(node, NumberNode):
            return node.value

        if isinstance(node, VariableNode):
            bound = context.get(node.name)
            if bound is None:
                raise UndefinedVariable(node.name)
            return self.evaluate(context, bound)

        if isinstance(node, OperationNode):
            return self._evaluate_operation(context, node)

        raise TypeError(f"Unknown expression node type: {type(node)}")

    # -- Prywatne ----------------------------------------------------------

    def _evaluate_operation(self, context: VariableStore, node: OperationNode) -> float:
        name = node.name
        if name in _BINARY_FUNCS and len(node.children) == 2:
            left = self.evaluate(context, node.children[0])
            right = self.evaluate(context, node.children[1])
            return _BINARY_FUNCS[name](left, right)

        if name in _UNARY_FUNCS and len(node.children) == 1:
            return _UNARY_FUNCS[name](self.evaluate(context, node.children[0]))

        logger.debug("Rejecting operation %r with %d children", name, len(node.children))
        raise UnknownOperation(name)
