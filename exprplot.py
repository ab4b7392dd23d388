#!/usr/bin/env python3
"""
exprplot.py - CLI narzędzie ExprPlot.

Działa całkowicie lokalnie - nie wymaga uruchomionego serwera API.

Konfiguracja: zmienne środowiskowe z prefiksem EXPR_PLOT_
lub plik .env (np. EXPR_PLOT_PLOT_BACKEND=rich).

Podkomendy:
    eval      - policz wyrażenie do wartości double
    simplify  - uprość wyrażenie (podstawienia + constant-folding)
    plot      - spróbkuj wyrażenie po jednej zmiennej i narysuj wykres
    run       - wykonaj kolejne instrukcje na wspólnym magazynie zmiennych
    repl      - interaktywna pętla poleceń

Użycie:
    python exprplot.py eval "2 ^ 3.9"
    python exprplot.py simplify "x + 2 * 3" --var y=4
    python exprplot.py plot "3 * x" x 2 5 0.5 --backend rich
    python exprplot.py run -s "a := 3" -s "toDouble(a * 2)"
    python exprplot.py repl
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Any

from rich import box
from rich.console import Console
from rich.table import Table

from adapters.evaluator.float_evaluator import FloatEvaluator
from adapters.expression_parser.infix_parser import InfixExpressionParser
from adapters.interpreter.command_interpreter import CommandInterpreter
from adapters.plot_renderer import RichTablePlotRenderer, build_renderer
from adapters.sampler.function_sampler import FunctionSampler
from adapters.simplifier.constant_folder import ConstantFoldingSimplifier
from adapters.variable_store.dict_variable_store import DictVariableStore
from config import Settings
from contracts import (
    ErrorResponse,
    EvaluationError,
    ExpressionSyntaxError,
    NumberNode,
    to_infix,
)

logger = logging.getLogger("expr_plot.cli")


# -- helpers ---------------------------------------------------------------

_CONSOLE: Console | None = None


def _console() -> Console:
    global _CONSOLE
    if _CONSOLE is None:
        _CONSOLE = Console(highlight=False)
    return _CONSOLE


def _print_kv_table(title: str, rows: list[tuple[str, Any]]) -> None:
    table = Table(title=title, box=box.ASCII, show_header=False, pad_edge=False)
    table.add_column("Key", no_wrap=True, style="bold cyan")
    table.add_column("Value")
    for key, value in rows:
        table.add_row(str(key), str(value))
    _console().print(table)


def _print_error(err: ErrorResponse) -> None:
    _console().print(f"[bold red]{err.kind}[/bold red]: {err.detail}")


def _parse_var(binding: str) -> tuple[str, str]:
    name, sep, expr = binding.partition("=")
    if not sep or not name.strip():
        raise argparse.ArgumentTypeError(f"Expected NAME=EXPR, got {binding!r}")
    return name.strip(), expr


class _Session:
    """Składa adaptery rdzenia wokół jednego magazynu zmiennych."""

    def __init__(self, backend: str, settings: Settings) -> None:
        self.store = DictVariableStore()
        self.parser = InfixExpressionParser()
        self.evaluator = FloatEvaluator()
        self.simplifier = ConstantFoldingSimplifier(self.evaluator)
        if backend == "rich":
            renderer = RichTablePlotRenderer(console=_console())
        else:
            renderer = build_renderer(backend, settings.plot_output_dir, settings.plot_dpi)
        self.renderer = renderer
        self.sampler = FunctionSampler(self.evaluator, renderer)
        self.interpreter = CommandInterpreter(
            store=self.store,
            evaluator=self.evaluator,
            simplifier=self.simplifier,
            sampler=self.sampler,
            parser=self.parser,
        )

    def bind(self, variables: list[tuple[str, str]]) -> None:
        for name, text in variables:
            self.store.set(name, self.parser.parse(text))


def _guarded(fn) -> int:
    """Wykonuje fn(); błędy rdzenia i składni → komunikat + kod 1."""
    try:
        fn()
        return 0
    except EvaluationError as exc:
        logger.debug("Command failed with %s", exc.kind)
        _print_error(ErrorResponse.from_error(exc))
    except ExpressionSyntaxError as exc:
        _print_error(ErrorResponse(kind="syntax_error", detail=exc.message))
    return 1


# -- commands --------------------------------------------------------------

def _eval(args: argparse.Namespace, session: _Session) -> None:
    value = session.evaluator.to_double(session.store, session.parser.parse(args.expr))
    _print_kv_table("Evaluate", [("expr", args.expr), ("value", to_infix(NumberNode(value=value)))])


def _simplify(args: argparse.Namespace, session: _Session) -> None:
    result = session.simplifier.simplify(session.store, session.parser.parse(args.expr))
    _print_kv_table("Simplify", [("expr", args.expr), ("result", to_infix(result))])


def _plot(args: argparse.Namespace, session: _Session) -> None:
    expr = session.parser.parse(args.expr)
    session.sampler.plot(
        session.store, expr, args.var_name, args.var_min, args.var_max, args.step
    )
    last_path = getattr(session.renderer, "last_path", None)
    if last_path is not None:
        _console().print(f"Plot written to {last_path}")


def _run(args: argparse.Namespace, session: _Session) -> None:
    for statement in args.statements:
        result = session.interpreter.run_text(statement)
        _console().print(f"{statement}  =>  {to_infix(result)}")


def _repl(args: argparse.Namespace, session: _Session) -> int:
    _console().print("ExprPlot REPL - 'vars' lists bindings, 'quit' exits.")
    while True:
        try:
            line = input(">>> ").strip()
        except EOFError:
            return 0
        if not line:
            continue
        if line in ("quit", "exit"):
            return 0
        if line == "vars":
            _print_kv_table(
                "Variables",
                [(name, to_infix(session.store.get(name))) for name in session.store.names()],
            )
            continue
        _guarded(lambda: _console().print(to_infix(session.interpreter.run_text(line))))


def main(argv: list[str] | None = None) -> int:
    settings = Settings()
    parser = argparse.ArgumentParser(
        prog="exprplot",
        description="ExprPlot - kalkulator wyrażeń: eval, simplify, plot",
    )
    parser.add_argument("--var", "-V", action="append", default=[], type=_parse_var,
                        metavar="NAME=EXPR", help="Powiązanie zmiennej (można powtarzać)")
    parser.add_argument("--backend", choices=["rich", "matplotlib"],
                        default=settings.plot_backend, help="Renderer wykresów")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("eval", help="Policz wyrażenie do wartości double")
    p.add_argument("expr")

    p = sub.add_parser("simplify", help="Uprość wyrażenie")
    p.add_argument("expr")

    p = sub.add_parser("plot", help="Narysuj wyrażenie po jednej zmiennej")
    p.add_argument("expr")
    p.add_argument("var_name")
    p.add_argument("var_min", type=float)
    p.add_argument("var_max", type=float)
    p.add_argument("step", type=float)

    p = sub.add_parser("run", help="Wykonaj instrukcje na wspólnym magazynie zmiennych")
    p.add_argument("--statement", "-s", dest="statements", action="append",
                   required=True, metavar="STMT")

    sub.add_parser("repl", help="Interaktywna pętla poleceń")

    args = parser.parse_args(argv)
    logging.basicConfig(level=settings.log_level.upper())

    session = _Session(args.backend, settings)
    status = _guarded(lambda: session.bind(args.var))
    if status:
        return status

    if args.command == "repl":
        return _repl(args, session)

    commands = {
        "eval":     _eval,
        "simplify": _simplify,
        "plot":     _plot,
        "run":      _run,
    }
    return _guarded(lambda: commands[args.command](args, session))


if __name__ == "__main__":
    sys.exit(main())
