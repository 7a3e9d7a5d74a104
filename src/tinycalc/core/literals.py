"""
Integer literal parsing.

    integer := [0-9]+
             | ("0x" | "0X") [0-9a-fA-F]+
             | ("0b" | "0B") [01]+
"""

from __future__ import annotations

from tinycalc.core.errors import ErrorKind, ParseFailure
from tinycalc.core.scanner import Cursor, is_alnum

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_BIN_DIGITS = frozenset("01")
_DEC_DIGITS = frozenset("0123456789")

_PREFIXES: list[tuple[str, int, frozenset[str]]] = [
    ("0x", 16, _HEX_DIGITS),
    ("0X", 16, _HEX_DIGITS),
    ("0b", 2, _BIN_DIGITS),
    ("0B", 2, _BIN_DIGITS),
]


def parse_int(cursor: Cursor) -> int:
    """Parse an integer literal at the cursor.

    The literal must not run directly into another letter or digit, so
    ``0a``, ``0x8FG`` and ``0b2`` are rejected rather than truncated.

    Raises:
        ParseFailure: ``invalid_literal`` if the literal is malformed.
    """
    start = cursor.pos
    base, digits = 10, _DEC_DIGITS
    for prefix, prefix_base, prefix_digits in _PREFIXES:
        if cursor.consume_str(prefix):
            base, digits = prefix_base, prefix_digits
            break

    body = cursor.consume_while(digits.__contains__)
    if not body or is_alnum(cursor.peek()):
        raise ParseFailure(ErrorKind.INVALID_LITERAL, start)
    return int(body, base)
