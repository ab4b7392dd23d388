"""
Port: Simplifier
Odpowiedzialność: podstawienie związanych zmiennych i constant-folding drzewa.
"""
from typing import Protocol, runtime_checkable

from contracts import ExprNode
from ports.variable_store import VariableStore


@runtime_checkable
class Simplifier(Protocol):
    def simplify(self, context: VariableStore, node: ExprNode) -> ExprNode:
        """
        Rewrites a tree into an equivalent, more-reduced tree.
        Bound variables are substituted once, + - * over numbers are folded,
        free variables stay symbolic. Division and unary operations are
        never folded. Returns new nodes; never mutates `context`.
        """
        ...
