"""
contracts.py - Jedyne źródło prawdy dla typów danych ExprPlot.
Wszystkie moduły importują WYŁĄCZNIE stąd (drzewo wyrażeń, wyniki, błędy).
"""
from __future__ import annotations

import math
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

CONTRACTS_VERSION = "1.0.0"


# Nazwy poleceń warstwy interpretera (węzły-opakowania)
TO_DOUBLE = "toDouble"
SIMPLIFY = "simplify"
PLOT = "plot"
ASSIGN = ":="


# ─────────────────────────── Expression tree ─────────────────────────────

class NumberNode(BaseModel):
    model_config = ConfigDict(frozen=True)

    node_type: Literal["number"] = "number"
    value: float


class VariableNode(BaseModel):
    model_config = ConfigDict(frozen=True)

    node_type: Literal["variable"] = "variable"
    name: str


class OperationNode(BaseModel):
    """Operator lub funkcja z uporządkowaną krotką dzieci (arność wynika z nazwy)."""
    model_config = ConfigDict(frozen=True)

    node_type: Literal["operation"] = "operation"
    name: str
    children: tuple["ExprNode", ...] = ()


ExprNode = Annotated[
    Union[NumberNode, VariableNode, OperationNode],
    Field(discriminator="node_type"),
]
OperationNode.model_rebuild()


def number(value: float) -> NumberNode:
    return NumberNode(value=value)


def variable(name: str) -> VariableNode:
    return VariableNode(name=name)


def operation(name: str, *children: ExprNode) -> OperationNode:
    return OperationNode(name=name, children=tuple(children))


# ─────────────────────────── Rendering to text ───────────────────────────

_PRECEDENCE = {"+": 10, "-": 10, "*": 20, "/": 20, "^": 30}


def _fmt_number(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == int(value) and abs(value) < 1e15:
        return str(int(value))
    return repr(value)


def to_infix(node: ExprNode, parent_bp: int = 0) -> str:
    """Zamienia drzewo z powrotem na tekst kalkulatora, np. '3 * x'."""
    if isinstance(node, NumberNode):
        text = _fmt_number(node.value)
        return f"({text})" if node.value < 0 and parent_bp else text
    if isinstance(node, VariableNode):
        return node.name

    name, children = node.name, node.children
    if name in _PRECEDENCE and len(children) == 2:
        bp = _PRECEDENCE[name]
        # '^' wiąże prawostronnie, pozostałe lewostronnie
        left_bp, right_bp = (bp + 1, bp) if name == "^" else (bp, bp + 1)
        text = f"{to_infix(children[0], left_bp)} {name} {to_infix(children[1], right_bp)}"
        return f"({text})" if bp < parent_bp else text
    if name == "negate" and len(children) == 1:
        text = f"-{to_infix(children[0], _PRECEDENCE['^'])}"
        # podstawa '^' wiąże mocniej niż minus jednoargumentowy: (-x) ^ 2
        return f"({text})" if parent_bp > _PRECEDENCE["^"] else text
    if name == ASSIGN and len(children) == 2:
        return f"{to_infix(children[0])} := {to_infix(children[1])}"
    return f"{name}({', '.join(to_infix(c) for c in children)})"


# ─────────────────────────── Sampler ─────────────────────────────────────

class SamplePoint(BaseModel):
    x: float
    y: float


class PlotSeries(BaseModel):
    title: str
    x_label: str
    y_label: str
    points: list[SamplePoint] = Field(default_factory=list)

    @property
    def xs(self) -> list[float]:
        return [p.x for p in self.points]

    @property
    def ys(self) -> list[float]:
        return [p.y for p in self.points]


# ─────────────────────────── Errors ──────────────────────────────────────

class EvaluationError(Exception):
    """Bazowy błąd rdzenia; `kind` identyfikuje rodzaj błędu dla wywołującego."""

    kind = "evaluation_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UndefinedVariable(EvaluationError):
    kind = "undefined_variable"

    def __init__(self, name: str) -> None:
        super().__init__(f"Undefined variable: {name}")
        self.name = name


class UnknownOperation(EvaluationError):
    kind = "unknown_operation"

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown operation: {name}")
        self.name = name


class VariableAlreadyBound(EvaluationError):
    kind = "variable_already_bound"

    def __init__(self, name: str) -> None:
        super().__init__(f"Variable already bound: {name}")
        self.name = name


class InvalidRange(EvaluationError):
    kind = "invalid_range"

    def __init__(self, var_min: float, var_max: float) -> None:
        super().__init__(f"Invalid range: min {var_min} is greater than max {var_max}")
        self.var_min = var_min
        self.var_max = var_max


class InvalidStep(EvaluationError):
    kind = "invalid_step"

    def __init__(self, step: float) -> None:
        super().__init__(f"Invalid step: {step} (must be > 0)")
        self.step = step


class InvalidCommand(EvaluationError):
    kind = "invalid_command"


class ExpressionSyntaxError(ValueError):
    """Tekst nie daje się sparsować do drzewa wyrażenia."""

    def __init__(self, message: str, position: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.position = position


# ─────────────────────────── Error values ────────────────────────────────

class ErrorResponse(BaseModel):
    """Typowana wartość błędu przekazywana do API/CLI."""
    kind: str
    detail: str
    name: Optional[str] = None

    @classmethod
    def from_error(cls, exc: EvaluationError) -> "ErrorResponse":
        return cls(kind=exc.kind, detail=exc.message, name=getattr(exc, "name", None))
