"""
api/main.py - punkt wejścia FastAPI.

Lifespan:
  - Tworzy adaptery rdzenia (FloatEvaluator, ConstantFoldingSimplifier, FunctionSampler)
  - Renderer wykresów wybierany przez config.plot_backend
  - Magazyn zmiennych sesji współdzielony przez POST /run i /variables

Endpointy są `async def` - wykonują się na wątku pętli zdarzeń, więc dostęp
do magazynu sesji jest jednowątkowy.
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from adapters.evaluator.float_evaluator import FloatEvaluator
from adapters.expression_parser.infix_parser import InfixExpressionParser
from adapters.interpreter.command_interpreter import CommandInterpreter
from adapters.plot_renderer import build_renderer
from adapters.sampler.function_sampler import FunctionSampler
from adapters.simplifier.constant_folder import ConstantFoldingSimplifier
from adapters.variable_store.dict_variable_store import DictVariableStore
from api.routers import evaluate, plot, run, variables
from api.schemas import HealthResponse
from config import Settings
from contracts import ErrorResponse, EvaluationError, ExpressionSyntaxError

logger = logging.getLogger("expr_plot")


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings

    # Adaptery bezstanowe - tworzone raz
    evaluator = FloatEvaluator()
    simplifier = ConstantFoldingSimplifier(evaluator)
    renderer = build_renderer(
        settings.plot_backend,
        output_dir=settings.plot_output_dir,
        dpi=settings.plot_dpi,
    )
    sampler = FunctionSampler(evaluator, renderer)

    app.state.evaluator = evaluator
    app.state.simplifier = simplifier
    app.state.sampler = sampler
    app.state.session_store = DictVariableStore()
    app.state.interpreter = CommandInterpreter(
        store=app.state.session_store,
        evaluator=evaluator,
        simplifier=simplifier,
        sampler=sampler,
        parser=InfixExpressionParser(),
    )

    logger.info("ExprPlot API ready (plot backend: %s).", settings.plot_backend)
    yield

    logger.info("Shutting down - dropping session variables.")
    app.state.session_store.clear()


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings()
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Routers
    app.include_router(evaluate.router)
    app.include_router(plot.router)
    app.include_router(run.router)
    app.include_router(variables.router)

    # Health
    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health():
        return HealthResponse(
            status="ok",
            plot_backend=settings.plot_backend,
            version=settings.app_version,
        )

    # Globalne handlery błędów
    @app.exception_handler(EvaluationError)
    async def evaluation_error_handler(request: Request, exc: EvaluationError):
        logger.warning("%s: %s", exc.kind, exc.message)
        return JSONResponse(
            status_code=422,
            content=ErrorResponse.from_error(exc).model_dump(),
        )

    @app.exception_handler(ExpressionSyntaxError)
    async def syntax_error_handler(request: Request, exc: ExpressionSyntaxError):
        return JSONResponse(
            status_code=400,
            content={"kind": "syntax_error", "detail": exc.message, "position": exc.position},
        )

    # Cykl w powiązaniach (a := b, b := a) - ewaluacja nie ma końca
    @app.exception_handler(RecursionError)
    async def recursion_error_handler(request: Request, exc: RecursionError):
        logger.warning("cyclic_binding: %s", exc)
        return JSONResponse(
            status_code=422,
            content=ErrorResponse(
                kind="cyclic_binding",
                detail="Variable bindings form a cycle",
            ).model_dump(),
        )

    return app


app = create_app()
