"""
Adapter: InfixExpressionParser
Implementuje port ExpressionParser - tekst kalkulatora → drzewo wyrażenia.

Gramatyka (precedence climbing):
  statement = IDENT ':=' expr | expr
  expr      = term (('+'|'-') term)*
  term      = unary (('*'|'/') unary)*
  unary     = '-' unary | power
  power     = atom ('^' unary)?            -- prawostronnie łączny
  atom      = NUMBER | IDENT | IDENT '(' args ')' | '(' expr ')'

Minus jednoargumentowy → negate(...), wywołanie f(a, b) → OperationNode("f", (a, b)),
przypisanie x := e → OperationNode(":=", (Variable x, e)).
"""
from __future__ import annotations

import re
from typing import NamedTuple

from contracts import (
    ASSIGN,
    ExprNode,
    ExpressionSyntaxError,
    NumberNode,
    OperationNode,
    VariableNode,
)

# ──────────────────────────────────────────────────────────────────────────────
# Tokenizer
# ──────────────────────────────────────────────────────────────────────────────

_TOKEN_RE = re.compile(
    r'(?P<num>\d+(?:\.\d*)?(?:[eE][+\-]?\d+)?|\.\d+(?:[eE][+\-]?\d+)?)'  # liczba
    r'|(?P<ident>[A-Za-z_]\w*)'            # zmienna / nazwa funkcji
    r'|(?P<op>:=|[+\-*/^(),])'             # operator, nawias, przecinek
    r'|(?P<ws>\s+)'                        # białe znaki (pominięte)
)


class _Token(NamedTuple):
    kind: str   # "num" | "ident" | "op"
    text: str
    pos: int


def _tokenize(text: str) -> list[_Token]:
    tokens: list[_Token] = []
    pos = 0
    while pos < len(text):
        m = _TOKEN_RE.match(text, pos)
        if m is None:
            raise ExpressionSyntaxError(f"Unexpected character {text[pos]!r}", pos)
        kind = m.lastgroup
        if kind != "ws":
            tokens.append(_Token(kind, m.group(), pos))
        pos = m.end()
    return tokens


# ──────────────────────────────────────────────────────────────────────────────
# Precedence climbing parser
# ──────────────────────────────────────────────────────────────────────────────

# Lewy binding power operatorów binarnych ('^' obsługiwany osobno w _power)
_LEFT_BP: dict[str, int] = {"+": 10, "-": 10, "*": 20, "/": 20}


class _Parser:
    def __init__(self, tokens: list[_Token], text: str) -> None:
        self._tokens = tokens
        self._text = text
        self._pos = 0

    def _peek(self, offset: int = 0) -> _Token | None:
        i = self._pos + offset
        return self._tokens[i] if i < len(self._tokens) else None

    def _peek_op(self) -> str | None:
        tok = self._peek()
        return tok.text if tok is not None and tok.kind == "op" else None

    def _consume(self) -> _Token:
        tok = self._peek()
        if tok is None:
            raise ExpressionSyntaxError("Unexpected end of expression", len(self._text))
        self._pos += 1
        return tok

    def _expect(self, text: str) -> None:
        tok = self._consume()
        if tok.text != text:
            raise ExpressionSyntaxError(f"Expected {text!r}, got {tok.text!r}", tok.pos)

    def parse(self) -> ExprNode:
        if not self._tokens:
            raise ExpressionSyntaxError("Empty expression", 0)
        node = self._statement()
        tok = self._peek()
        if tok is not None:
            raise ExpressionSyntaxError(f"Unexpected token: {tok.text!r}", tok.pos)
        return node

    def _statement(self) -> ExprNode:
        first, second = self._peek(), self._peek(1)
        if (
            first is not None and first.kind == "ident"
            and second is not None and second.text == ASSIGN
        ):
            self._pos += 2
            value = self._expr(0)
            return OperationNode(name=ASSIGN, children=(VariableNode(name=first.text), value))
        return self._expr(0)

    def _expr(self, min_bp: int) -> ExprNode:
        left = self._unary()
        while True:
            op = self._peek_op()
            if op is None or op not in _LEFT_BP:
                break
            bp = _LEFT_BP[op]
            if bp <= min_bp:
                break
            self._consume()
            # Lewostronne wiązanie: right_bp = bp (nie bp+1) dla left-assoc
            right = self._expr(bp)
            left = OperationNode(name=op, children=(left, right))
        return left

    def _unary(self) -> ExprNode:
        if self._peek_op() == "-":
            self._consume()
            return OperationNode(name="negate", children=(self._unary(),))
        return self._power()

    def _power(self) -> ExprNode:
        base = self._atom()
        if self._peek_op() == "^":
            self._consume()
            return OperationNode(name="^", children=(base, self._unary()))
        return base

    def _atom(self) -> ExprNode:
        tok = self._consume()
        if tok.kind == "num":
            return NumberNode(value=float(tok.text))
        if tok.kind == "ident":
            if self._peek_op() == "(":
                self._consume()
                return OperationNode(name=tok.text, children=tuple(self._args()))
            return VariableNode(name=tok.text)
        if tok.text == "(":
            node = self._expr(0)
            self._expect(")")
            return node
        raise ExpressionSyntaxError(f"Unexpected token: {tok.text!r}", tok.pos)

    def _args(self) -> list[ExprNode]:
        args: list[ExprNode] = []
        if self._peek_op() == ")":
            self._consume()
            return args
        while True:
            args.append(self._expr(0))
            tok = self._consume()
            if tok.text == ")":
                return args
            if tok.text != ",":
                raise ExpressionSyntaxError(f"Expected ',' or ')', got {tok.text!r}", tok.pos)


# ──────────────────────────────────────────────────────────────────────────────
# Adapter
# ──────────────────────────────────────────────────────────────────────────────

class InfixExpressionParser:
    """Parsuje pojedynczą instrukcję kalkulatora. Błędy → ExpressionSyntaxError."""

    def parse(self, text: str) -> ExprNode:
        text_stripped = text.strip()
        return _Parser(_tokenize(text_stripped), text_stripped).parse()
