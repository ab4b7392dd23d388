"""
Router: POST /plot
Próbkuje wyrażenie, renderuje wykres skonfigurowanym rendererem i zwraca punkty.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends

from adapters.variable_store.dict_variable_store import DictVariableStore
from api.dependencies import get_sampler
from api.schemas import PlotPoint, PlotRequest, PlotResponse, finite_or_none

router = APIRouter(prefix="/plot", tags=["plot"])


@router.post("", response_model=PlotResponse)
async def plot(
    body: PlotRequest,
    sampler=Depends(get_sampler),
) -> PlotResponse:
    context = DictVariableStore(body.variables)
    series = sampler.sample(
        context, body.expr, body.var_name, body.var_min, body.var_max, body.step
    )
    sampler.render(series)
    return PlotResponse(
        title=series.title,
        x_label=series.x_label,
        y_label=series.y_label,
        points=[PlotPoint(x=finite_or_none(p.x), y=finite_or_none(p.y)) for p in series.points],
    )
