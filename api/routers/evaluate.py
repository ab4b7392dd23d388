"""
Router: POST /evaluate, POST /simplify
Jednorazowe obliczenia na drzewie z powiązaniami przekazanymi w żądaniu.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends

from adapters.variable_store.dict_variable_store import DictVariableStore
from api.dependencies import get_evaluator, get_simplifier
from api.schemas import EvaluateResponse, ExprRequest, SimplifyResponse, finite_or_none
from contracts import NumberNode, to_infix

router = APIRouter(tags=["evaluate"])


@router.post("/evaluate", response_model=EvaluateResponse)
async def evaluate(
    body: ExprRequest,
    evaluator=Depends(get_evaluator),
) -> EvaluateResponse:
    value = evaluator.to_double(DictVariableStore(body.variables), body.expr)
    return EvaluateResponse(value=finite_or_none(value), text=to_infix(NumberNode(value=value)))


@router.post("/simplify", response_model=SimplifyResponse)
async def simplify(
    body: ExprRequest,
    simplifier=Depends(get_simplifier),
) -> SimplifyResponse:
    result = simplifier.simplify(DictVariableStore(body.variables), body.expr)
    return SimplifyResponse(expr=result, text=to_infix(result))
