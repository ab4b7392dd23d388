"""
Port: ExpressionParser
Odpowiedzialność: zamiana tekstu kalkulatora na drzewo wyrażenia.
"""
from typing import Protocol, runtime_checkable

from contracts import ExprNode


@runtime_checkable
class ExpressionParser(Protocol):
    def parse(self, text: str) -> ExprNode:
        """
        Parses one calculator statement ("3 * x", "y := sin(x) ^ 2",
        "plot(x ^ 2, x, -2, 2, 0.5)") into an expression tree.
        Raises ExpressionSyntaxError on malformed input.
        """
        ...
