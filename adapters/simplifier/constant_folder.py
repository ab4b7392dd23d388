"""
Adapter: ConstantFoldingSimplifier
Implementuje port Simplifier - podstawienie zmiennych + constant-folding.

Reguły:
  Number           → bez zmian
  Variable         → związana? węzeł z kontekstu (jedno podstawienie); wolna → bez zmian
  + - *            → upraszcza dzieci; oba Number → Number(evaluate(oryginał))
  /                → upraszcza dzieci, NIGDY nie zwija do stałej
  pozostałe (negate, sin, cos, ^, nieznane)
                   → upraszcza pierwsze dziecko, NIGDY nie zwija do stałej

Asymetria dzielenia i operacji jednoargumentowych jest zachowana celowo
(sin(2) zostaje drzewem sin(2), 6 / 2 zostaje dzieleniem).
"""
from __future__ import annotations

import logging

from contracts import (
    SIMPLIFY,
    ExprNode,
    NumberNode,
    OperationNode,
    VariableNode,
)
from ports.evaluator import Evaluator
from ports.variable_store import VariableStore

logger = logging.getLogger("expr_plot.simplifier")

_FOLDABLE = frozenset({"+", "-", "*"})


class ConstantFoldingSimplifier:
    """Upraszcza drzewo, zostawiając wolne zmienne w postaci symbolicznej."""

    def __init__(self, evaluator: Evaluator) -> None:
        self._evaluator = evaluator

    # -- Simplifier protocol -------------------------------------------------

    def simplify(self, context: VariableStore, node: ExprNode) -> ExprNode:
        # Pomija nadmiarowe (także zagnieżdżone) opakowania simplify(...) z warstwy poleceń
        while isinstance(node, OperationNode) and node.name == SIMPLIFY and node.children:
            node = node.children[0]
        return self._simplify(context, node)

    # -- Prywatne ------------------------------------------------------------

    def _simplify(self, context: VariableStore, node: ExprNode) -> ExprNode:
        if isinstance(node, NumberNode):
            return node

        if isinstance(node, VariableNode):
            bound = context.get(node.name)
            return node if bound is None else bound

        if isinstance(node, OperationNode):
            if (node.name in _FOLDABLE or node.name == "/") and len(node.children) == 2:
                return self._simplify_binary(context, node)
            return self._simplify_unary(context, node)

        raise TypeError(f"Unknown expression node type: {type(node)}")

    def _simplify_binary(self, context: VariableStore, node: OperationNode) -> ExprNode:
        left = self._simplify(context, node.children[0])
        right = self._simplify(context, node.children[1])
        if (
            node.name in _FOLDABLE
            and isinstance(left, NumberNode)
            and isinstance(right, NumberNode)
        ):
            value = self._evaluator.evaluate(context, node)
            logger.debug("Folded %s over constants into %r", node.name, value)
            return NumberNode(value=value)
        return OperationNode(name=node.name, children=(left, right))

    def _simplify_unary(self, context: VariableStore, node: OperationNode) -> ExprNode:
        if not node.children:
            return node
        first = self._simplify(context, node.children[0])
        return OperationNode(name=node.name, children=(first, *node.children[1:]))
