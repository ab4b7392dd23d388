"""
Router: GET /variables, DELETE /variables
Listuje / czyści powiązania zmiennych sesji (ustawiane przez POST /run).
"""
from fastapi import APIRouter, Depends

from api.dependencies import get_session_store
from api.schemas import VariableBinding
from contracts import to_infix

router = APIRouter(prefix="/variables", tags=["variables"])


@router.get("", response_model=list[VariableBinding])
async def list_variables(store=Depends(get_session_store)) -> list[VariableBinding]:
    bindings = []
    for name in store.names():
        node = store.get(name)
        bindings.append(VariableBinding(name=name, expr=node, text=to_infix(node)))
    return bindings


@router.delete("", status_code=204)
async def clear_variables(store=Depends(get_session_store)) -> None:
    store.clear()
