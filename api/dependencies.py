"""
dependencies.py - FastAPI Dependency Injection.
Każda zależność zwraca odpowiedni adapter przez Request.app.state.
"""
from __future__ import annotations

from fastapi import Request

from adapters.evaluator.float_evaluator import FloatEvaluator
from adapters.interpreter.command_interpreter import CommandInterpreter
from adapters.sampler.function_sampler import FunctionSampler
from adapters.simplifier.constant_folder import ConstantFoldingSimplifier
from adapters.variable_store.dict_variable_store import DictVariableStore


def get_evaluator(request: Request) -> FloatEvaluator:
    return request.app.state.evaluator


def get_simplifier(request: Request) -> ConstantFoldingSimplifier:
    return request.app.state.simplifier


def get_sampler(request: Request) -> FunctionSampler:
    return request.app.state.sampler


def get_interpreter(request: Request) -> CommandInterpreter:
    return request.app.state.interpreter


def get_session_store(request: Request) -> DictVariableStore:
    return request.app.state.session_store
