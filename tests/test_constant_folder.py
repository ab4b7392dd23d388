from __future__ import annotations

import pytest

from adapters.evaluator.float_evaluator import FloatEvaluator
from adapters.simplifier.constant_folder import ConstantFoldingSimplifier
from adapters.variable_store.dict_variable_store import DictVariableStore
from contracts import NumberNode, number, operation, variable


@pytest.fixture
def simplifier() -> ConstantFoldingSimplifier:
    return ConstantFoldingSimplifier(FloatEvaluator())


def test_folds_addition_of_constants(simplifier):
    result = simplifier.simplify(DictVariableStore(), operation("+", number(2), number(3)))

    assert result == NumberNode(value=5)


def test_never_folds_division(simplifier):
    node = operation("/", number(6), number(2))

    assert simplifier.simplify(DictVariableStore(), node) == node


def test_never_folds_unary_operations(simplifier):
    store = DictVariableStore()

    assert simplifier.simplify(store, operation("sin", number(2))) == operation("sin", number(2))
    assert simplifier.simplify(store, operation("negate", operation("+", number(1), number(2)))) == (
        operation("negate", number(3))
    )


def test_preserves_free_variables(simplifier):
    node = operation("+", variable("x"), number(2))

    assert simplifier.simplify(DictVariableStore(), node) == node


def test_substitutes_bound_variable_and_folds(simplifier):
    store = DictVariableStore({"x": number(3)})

    result = simplifier.simplify(store, operation("*", variable("x"), number(2)))

    assert result == NumberNode(value=6)


def test_substitution_is_not_resimplified(simplifier):
    bound = operation("+", variable("y"), number(1))
    store = DictVariableStore({"x": bound})

    result = simplifier.simplify(store, operation("*", variable("x"), number(2)))

    assert result == operation("*", bound, number(2))


def test_folds_inner_constants_under_symbolic_parent(simplifier):
    node = operation(
        "/",
        operation("+", number(1), number(2)),
        operation("*", number(3), variable("x")),
    )

    result = simplifier.simplify(DictVariableStore(), node)

    assert result == operation("/", number(3), operation("*", number(3), variable("x")))


def test_power_simplifies_base_only(simplifier):
    node = operation(
        "^",
        operation("+", number(1), number(1)),
        operation("+", number(2), number(2)),
    )

    result = simplifier.simplify(DictVariableStore(), node)

    assert result == operation("^", number(2), operation("+", number(2), number(2)))


def test_unknown_operation_is_rebuilt_not_rejected(simplifier):
    node = operation("foo", operation("-", number(5), number(1)))

    assert simplifier.simplify(DictVariableStore(), node) == operation("foo", number(4))


def test_unwraps_simplify_command_wrapper(simplifier):
    node = operation("simplify", operation("+", number(2), number(3)))

    assert simplifier.simplify(DictVariableStore(), node) == NumberNode(value=5)


@pytest.mark.parametrize(
    "node",
    [
        operation("+", variable("x"), operation("*", number(2), number(3))),
        operation("/", operation("-", variable("a"), number(1)), number(4)),
        operation("sin", operation("*", variable("a"), variable("x"))),
        operation("^", variable("a"), operation("+", number(1), number(1))),
        operation("negate", operation("negate", variable("x"))),
    ],
)
def test_simplify_is_idempotent(simplifier, node):
    store = DictVariableStore({"a": number(2)})

    once = simplifier.simplify(store, node)

    assert simplifier.simplify(store, once) == once


def test_simplify_does_not_mutate_context(simplifier):
    store = DictVariableStore({"x": number(1)})
    before = store.snapshot()

    simplifier.simplify(store, operation("+", variable("x"), variable("y")))

    assert store.snapshot() == before


def test_unwraps_nested_simplify_wrappers(simplifier):
    store = DictVariableStore({"a": number(2)})
    node = operation("simplify", operation("simplify", operation("*", variable("a"), variable("x"))))

    once = simplifier.simplify(store, node)

    assert once == operation("*", number(2), variable("x"))
    assert simplifier.simplify(store, once) == once
