"""
schemas.py - Request/Response modele FastAPI.
Oddzielone od contracts.py żeby API mogło ewoluować niezależnie.
"""
from __future__ import annotations

import math
from typing import Optional

from pydantic import BaseModel, Field

from contracts import ExprNode


def finite_or_none(value: float) -> Optional[float]:
    """JSON nie ma inf/nan - takie wartości idą jako null (+ pole text)."""
    return value if math.isfinite(value) else None


# ─────────────────────────── /evaluate, /simplify ─────────────────

class ExprRequest(BaseModel):
    expr: ExprNode
    variables: dict[str, ExprNode] = Field(default_factory=dict)


class EvaluateResponse(BaseModel):
    value: Optional[float]
    text: str


class SimplifyResponse(BaseModel):
    expr: ExprNode
    text: str


# ─────────────────────────── /plot ───────────────────────────────

class PlotRequest(BaseModel):
    expr: ExprNode
    var_name: str = Field(..., min_length=1)
    var_min: float
    var_max: float
    step: float
    variables: dict[str, ExprNode] = Field(default_factory=dict)


class PlotPoint(BaseModel):
    x: Optional[float]
    y: Optional[float]


class PlotResponse(BaseModel):
    title: str
    x_label: str
    y_label: str
    points: list[PlotPoint]


# ─────────────────────────── /run ────────────────────────────────

class RunRequest(BaseModel):
    text: str = Field(..., min_length=1, max_length=10_000)


class RunResponse(BaseModel):
    result: ExprNode
    text: str


# ─────────────────────────── /variables ──────────────────────────

class VariableBinding(BaseModel):
    name: str
    expr: ExprNode
    text: str


# ─────────────────────────── /health ─────────────────────────────

class HealthResponse(BaseModel):
    status: str
    plot_backend: str
    version: str
