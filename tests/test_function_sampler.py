from __future__ import annotations

from typing import Sequence

import pytest

from adapters.evaluator.float_evaluator import FloatEvaluator
from adapters.sampler.function_sampler import FunctionSampler
from adapters.variable_store.dict_variable_store import DictVariableStore
from contracts import (
    InvalidRange,
    InvalidStep,
    UndefinedVariable,
    VariableAlreadyBound,
    number,
    operation,
    variable,
)


class _RecordingRenderer:
    def __init__(self) -> None:
        self.calls: list[tuple[str, str, str, list[float], list[float]]] = []

    def draw_scatter_plot(
        self, title: str, x_label: str, y_label: str, xs: Sequence[float], ys: Sequence[float]
    ) -> None:
        self.calls.append((title, x_label, y_label, list(xs), list(ys)))


class _FailingEvaluator(FloatEvaluator):
    """Rzuca UndefinedVariable przy n-tym wywołaniu evaluate() z poziomu samplera."""

    def __init__(self, fail_on: int) -> None:
        self._fail_on = fail_on
        self.calls = 0

    def evaluate(self, context, node):
        if node == _EXPR:
            self.calls += 1
            if self.calls == self._fail_on:
                raise UndefinedVariable("boom")
        return super().evaluate(context, node)


_EXPR = operation("*", number(3), variable("x"))


def _sampler(renderer=None, evaluator=None) -> FunctionSampler:
    return FunctionSampler(evaluator or FloatEvaluator(), renderer or _RecordingRenderer())


def test_sample_three_x_over_range():
    series = _sampler().sample(DictVariableStore(), _EXPR, "x", 2, 5, 0.5)

    assert [(p.x, p.y) for p in series.points] == [
        (2.0, 6.0), (2.5, 7.5), (3.0, 9.0), (3.5, 10.5), (4.0, 12.0), (4.5, 13.5), (5.0, 15.0),
    ]
    assert series.title == "3 * x"
    assert series.x_label == "x"
    assert series.y_label == "3 * x"


def test_sample_count_is_floor_of_span_over_step_plus_one():
    series = _sampler().sample(DictVariableStore(), variable("x"), "x", 0, 1, 0.3)

    assert len(series.points) == 4
    assert series.xs[-1] == pytest.approx(0.9)


def test_sample_single_point_when_min_equals_max():
    series = _sampler().sample(DictVariableStore(), _EXPR, "x", 1, 1, 0.25)

    assert series.xs == [1.0]
    assert series.ys == [3.0]


def test_sample_uses_other_bindings_from_context():
    store = DictVariableStore({"k": number(10)})
    expr = operation("+", variable("x"), variable("k"))

    series = _sampler().sample(store, expr, "x", 0, 2, 1)

    assert series.ys == [10.0, 11.0, 12.0]
    assert store.names() == ["k"]


def test_plot_renders_once_and_returns_expression_unchanged():
    renderer = _RecordingRenderer()
    store = DictVariableStore()

    result = _sampler(renderer).plot(store, _EXPR, "x", 2, 5, 0.5)

    assert result is _EXPR
    assert len(renderer.calls) == 1
    title, x_label, y_label, xs, ys = renderer.calls[0]
    assert (title, x_label, y_label) == ("3 * x", "x", "3 * x")
    assert xs == [2.0, 2.5, 3.0, 3.5, 4.0, 4.5, 5.0]
    assert ys == [6.0, 7.5, 9.0, 10.5, 12.0, 13.5, 15.0]
    assert not store.contains("x")


def test_invalid_range_raises():
    with pytest.raises(InvalidRange):
        _sampler().sample(DictVariableStore(), _EXPR, "x", 5, 2, 0.5)


@pytest.mark.parametrize("step", [0, -0.5])
def test_non_positive_step_raises(step):
    with pytest.raises(InvalidStep):
        _sampler().sample(DictVariableStore(), _EXPR, "x", 2, 5, step)


def test_already_bound_variable_raises_and_keeps_binding():
    store = DictVariableStore({"x": number(7)})

    with pytest.raises(VariableAlreadyBound) as exc_info:
        _sampler().sample(store, _EXPR, "x", 5, 2, 0.5)

    assert exc_info.value.name == "x"
    assert store.get("x") == number(7)


def test_failed_precondition_does_not_render():
    renderer = _RecordingRenderer()

    with pytest.raises(InvalidStep):
        _sampler(renderer).plot(DictVariableStore(), _EXPR, "x", 2, 5, 0)

    assert renderer.calls == []


def test_binding_is_released_when_evaluation_fails_midway():
    store = DictVariableStore({"k": number(1)})
    evaluator = _FailingEvaluator(fail_on=3)
    renderer = _RecordingRenderer()

    with pytest.raises(UndefinedVariable):
        _sampler(renderer, evaluator).plot(store, _EXPR, "x", 0, 10, 1)

    assert evaluator.calls == 3
    assert store.names() == ["k"]
    assert renderer.calls == []


def test_binding_is_released_when_expression_has_undefined_variable():
    store = DictVariableStore()
    expr = operation("*", variable("x"), variable("y"))

    with pytest.raises(UndefinedVariable):
        _sampler().sample(store, expr, "x", 0, 1, 0.5)

    assert not store.contains("x")
