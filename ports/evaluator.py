"""
Port: Evaluator
Odpowiedzialność: deterministyczne liczenie drzewa wyrażenia do wartości double.
"""
from typing import Protocol, runtime_checkable

from contracts import ExprNode
from ports.variable_store import VariableStore


@runtime_checkable
class Evaluator(Protocol):
    def evaluate(self, context: VariableStore, node: ExprNode) -> float:
        """
        Reduces a tree to a single double-precision value.
        Variables are resolved through `context`, following chained bindings.
        Division by zero and overflow follow IEEE-754 (inf/nan), never raise.
        Raises UndefinedVariable for an unbound variable.
        Raises UnknownOperation for an unrecognized operation name.
        Never mutates `context`.
        """
        ...

    def to_double(self, context: VariableStore, node: ExprNode) -> float:
        """
        Entry point of the `toDouble` command: unwraps one `toDouble(...)`
        wrapper node, then delegates to evaluate().
        """
        ...
