"""
Adapter: CommandInterpreter
Warstwa poleceń kalkulatora nad rdzeniem (Evaluator / Simplifier / Sampler).

Obsługiwane instrukcje najwyższego poziomu:
  x := e                     → zapisuje simplify(e) pod x, zwraca zapisany węzeł
  toDouble(e)                → Number(to_double(e))
  simplify(e)                → simplify(e)
  plot(e, x, min, max, step) → rysuje e po x, zwraca e
  wszystko inne              → simplify(e)
"""
from __future__ import annotations

import logging

from contracts import (
    ASSIGN,
    PLOT,
    SIMPLIFY,
    TO_DOUBLE,
    ExprNode,
    InvalidCommand,
    NumberNode,
    OperationNode,
    VariableNode,
    to_infix,
)
from ports.evaluator import Evaluator
from ports.expression_parser import ExpressionParser
from ports.sampler import Sampler
from ports.simplifier import Simplifier
from ports.variable_store import VariableStore

logger = logging.getLogger("expr_plot.interpreter")


class CommandInterpreter:
    def __init__(
        self,
        store: VariableStore,
        evaluator: Evaluator,
        simplifier: Simplifier,
        sampler: Sampler,
        parser: ExpressionParser | None = None,
    ) -> None:
        self.store = store
        self._evaluator = evaluator
        self._simplifier = simplifier
        self._sampler = sampler
        self._parser = parser

    def run_text(self, text: str) -> ExprNode:
        """Parsuje i wykonuje jedną instrukcję tekstową."""
        if self._parser is None:
            raise RuntimeError("CommandInterpreter was created without a parser")
        return self.run(self._parser.parse(text))

    def run(self, node: ExprNode) -> ExprNode:
        if not isinstance(node, OperationNode):
            return self._simplifier.simplify(self.store, node)

        if node.name == ASSIGN:
            return self._assign(node)
        if node.name == TO_DOUBLE:
            self._require_arity(node, 1)
            return NumberNode(value=self._evaluator.to_double(self.store, node))
        if node.name == SIMPLIFY:
            self._require_arity(node, 1)
            return self._simplifier.simplify(self.store, node)
        if node.name == PLOT:
            return self._plot(node)
        return self._simplifier.simplify(self.store, node)

    # -- Prywatne ----------------------------------------------------------

    def _assign(self, node: OperationNode) -> ExprNode:
        self._require_arity(node, 2)
        target, value = node.children
        if not isinstance(target, VariableNode):
            raise InvalidCommand(f"Cannot assign to {to_infix(target)}")
        simplified = self._simplifier.simplify(self.store, value)
        self.store.set(target.name, simplified)
        logger.debug("Bound %s := %s", target.name, to_infix(simplified))
        return simplified

    def _plot(self, node: OperationNode) -> ExprNode:
        self._require_arity(node, 5)
        expr, var, *bounds = node.children
        if not isinstance(var, VariableNode):
            raise InvalidCommand(f"plot() expects a variable name, got {to_infix(var)}")
        var_min, var_max, step = (self._evaluator.evaluate(self.store, b) for b in bounds)
        return self._sampler.plot(self.store, expr, var.name, var_min, var_max, step)

    @staticmethod
    def _require_arity(node: OperationNode, arity: int) -> None:
        if len(node.children) != arity:
            logger.warning(
                "Rejected %s with %d arguments (expected %d)",
                node.name, len(node.children), arity,
            )
            raise InvalidCommand(
                f"{node.name} expects {arity} argument(s), got {len(node.children)}"
            )
