"""
Router: POST /run
Wykonuje instrukcję tekstową na współdzielonym magazynie zmiennych sesji.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends

from api.dependencies import get_interpreter
from api.schemas import RunRequest, RunResponse
from contracts import to_infix

router = APIRouter(prefix="/run", tags=["run"])


@router.post("", response_model=RunResponse)
async def run(
    body: RunRequest,
    interpreter=Depends(get_interpreter),
) -> RunResponse:
    result = interpreter.run_text(body.text)
    return RunResponse(result=result, text=to_infix(result))
