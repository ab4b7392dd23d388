from __future__ import annotations

import pytest

import exprplot


@pytest.fixture(autouse=True)
def _rich_backend(monkeypatch):
    monkeypatch.setenv("EXPR_PLOT_PLOT_BACKEND", "rich")


def test_eval_prints_value(capsys):
    assert exprplot.main(["eval", "2 ^ 3.9"]) == 0

    out = capsys.readouterr().out
    assert "value" in out
    assert "8" in out


def test_eval_undefined_variable_returns_error_code(capsys):
    assert exprplot.main(["eval", "x + 1"]) == 1

    assert "undefined_variable" in capsys.readouterr().out


def test_simplify_with_bound_variable(capsys):
    assert exprplot.main(["--var", "y=4", "simplify", "x + y * 2"]) == 0

    assert "x + 8" in capsys.readouterr().out


def test_plot_with_rich_backend_prints_points(capsys):
    assert exprplot.main(["plot", "3 * x", "x", "2", "5", "0.5"]) == 0

    out = capsys.readouterr().out
    assert "3 * x [7]" in out
    assert "13.5" in out


def test_run_shares_variables_between_statements(capsys):
    code = exprplot.main(["--var", "x=2", "run", "-s", "y := x * 3", "-s", "toDouble(y + 1)"])

    assert code == 0
    out = capsys.readouterr().out
    assert "y := x * 3  =>  6" in out
    assert "toDouble(y + 1)  =>  7" in out


def test_syntax_error_returns_error_code(capsys):
    assert exprplot.main(["eval", "(1 + 2"]) == 1

    assert "syntax_error" in capsys.readouterr().out


def test_repl_assigns_and_lists_variables(monkeypatch, capsys):
    lines = iter(["a := 2", "", "vars", "quit"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(lines))

    assert exprplot.main(["repl"]) == 0

    out = capsys.readouterr().out
    assert "ExprPlot REPL" in out
    assert "Variables" in out
    assert "a" in out and "2" in out


def test_repl_reports_errors_and_exits_on_eof(monkeypatch, capsys):
    def _input(prompt=""):
        if not calls:
            calls.append(prompt)
            return "x + 1 +"
        raise EOFError

    calls: list[str] = []
    monkeypatch.setattr("builtins.input", _input)

    assert exprplot.main(["repl"]) == 0

    assert "syntax_error" in capsys.readouterr().out
