"""
Recursive descent evaluator for tinycalc expressions.

Each grammar rule parses its production and returns the integer it denotes
directly; no syntax tree is built.

Grammar (precedence low to high):
    addsub     → muldiv (("+" | "-") muldiv)*
    muldiv     → unary (("*" | "/" | "%") unary)*
    unary      → ("+" | "-")* postfix
    postfix    → primary ("(" arguments? ")")?
    arguments  → addsub ("," addsub)*
    primary    → "(" addsub ")" | integer | identifier
    identifier → [a-zA-Z] [a-zA-Z0-9]*

An identifier that names a variable is resolved as soon as ``primary`` reads
it. Any other identifier is left pending for ``postfix``, which resolves it as
a function only when a "(" follows.
"""

from __future__ import annotations

from typing import NoReturn

from tinycalc.core.errors import ErrorKind, ParseFailure
from tinycalc.core.literals import parse_int
from tinycalc.core.result import EvalResult
from tinycalc.core.scanner import Cursor, is_alnum, is_alpha, is_digit
from tinycalc.core.symbols import SymbolTable


def _trunc_div(lhs: int, rhs: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(lhs) // abs(rhs)
    return -q if (lhs < 0) != (rhs < 0) else q


def _trunc_mod(lhs: int, rhs: int) -> int:
    """Remainder matching ``_trunc_div``; takes the sign of the dividend."""
    return lhs - rhs * _trunc_div(lhs, rhs)


class _Evaluator:
    """Per-call parser state: cursor, symbol tables, and the pending identifier."""

    def __init__(self, text: str, symbols: SymbolTable) -> None:
        self.cursor = Cursor(text)
        self.symbols = symbols
        # (name, offset) of an identifier that did not resolve as a variable
        self.pending: tuple[str, int] | None = None

    def fail(self, kind: ErrorKind = ErrorKind.SYNTAX_ERROR, pos: int | None = None) -> NoReturn:
        raise ParseFailure(kind, self.cursor.pos if pos is None else pos)

    # -- Grammar rules --

    def eval_addsub(self) -> int:
        """muldiv (('+' | '-') muldiv)*"""
        res = self.eval_muldiv()
        while self.cursor.skip_ws():
            op = self.cursor.consume_any("+-")
            if not op:
                break
            rhs = self.eval_muldiv()
            res = res + rhs if op == "+" else res - rhs
        return res

    def eval_muldiv(self) -> int:
        """unary (('*' | '/' | '%') unary)*"""
        res = self.eval_unary()
        while self.cursor.skip_ws():
            op_pos = self.cursor.pos
            op = self.cursor.consume_any("*/%")
            if not op:
                break
            rhs = self.eval_unary()
            if op == "*":
                res *= rhs
                continue
            if rhs == 0:
                self.fail(ErrorKind.DIVIDE_BY_ZERO, op_pos)
            res = _trunc_div(res, rhs) if op == "/" else _trunc_mod(res, rhs)
        return res

    def eval_unary(self) -> int:
        """('+' | '-')* postfix"""
        negate = False
        while True:
            if not self.cursor.skip_ws():
                self.fail()
            op = self.cursor.consume_any("+-")
            if not op:
                break
            if op == "-":
                negate = not negate
        res = self.eval_postfix()
        return -res if negate else res

    def eval_postfix(self) -> int:
        """primary ('(' arguments? ')')?"""
        res = self.eval_primary()
        pending, self.pending = self.pending, None
        self.cursor.skip_ws()

        if pending is None:
            # A resolved value cannot be called
            if self.cursor.peek() == "(":
                self.fail()
            return res

        name, name_pos = pending
        func = self.symbols.get_fn(name)
        if not self.cursor.consume_ch("("):
            if func is not None:
                self.fail(ErrorKind.SYNTAX_ERROR, name_pos)
            self.fail(ErrorKind.UNKNOWN_IDENTIFIER, name_pos)
        if func is None:
            self.fail(ErrorKind.UNKNOWN_IDENTIFIER, name_pos)

        args = self._eval_arguments()
        if len(args) != func.arity:
            self.fail(ErrorKind.ARG_NUM_MISMATCH, name_pos)
        return func(args, name_pos)

    def _eval_arguments(self) -> list[int]:
        """(addsub (',' addsub)*)? ')' with the opening '(' already consumed."""
        args: list[int] = []
        if not self.cursor.skip_ws():
            self.fail()
        if self.cursor.consume_ch(")"):
            return args

        while True:
            args.append(self.eval_addsub())
            if not self.cursor.skip_ws():
                self.fail()
            if self.cursor.consume_ch(","):
                continue
            if self.cursor.consume_ch(")"):
                return args
            self.fail()

    def eval_primary(self) -> int:
        """'(' addsub ')' | integer | identifier"""
        if not self.cursor.skip_ws():
            self.fail()
        c = self.cursor.peek()

        if self.cursor.consume_ch("("):
            res = self.eval_addsub()
            if not self.cursor.skip_ws():
                self.fail()
            if not self.cursor.consume_ch(")"):
                self.fail()
            return res

        if is_digit(c):
            return parse_int(self.cursor)

        if is_alpha(c):
            start = self.cursor.pos
            name = self.cursor.consume_while(is_alnum)
            value = self.symbols.get_var(name)
            if value is not None:
                return value
            self.pending = (name, start)
            return 0

        self.fail()


def evaluate_expression(text: str, symbols: SymbolTable) -> EvalResult:
    """Evaluate ``text`` against ``symbols``.

    The whole input must be consumed; anything but trailing blanks after a
    complete expression is a syntax error. Expression failures come back as
    an error result carrying the most specific kind encountered. Exceptions
    raised by bound functions, including ``EvaluationError`` from a nested
    evaluation, propagate to the caller unchanged.
    """
    if not isinstance(text, str):
        raise TypeError(f"Expression must be a str, got {type(text).__name__}")

    ev = _Evaluator(text, symbols)
    try:
        res = ev.eval_addsub()
        if ev.cursor.skip_ws():
            ev.fail()
    except ParseFailure as e:
        return EvalResult.failure(e.kind, e.position)
    return EvalResult.success(res)
