"""
Character cursor for the single-pass scanner-parser.

Every consume primitive either advances past an exact match or leaves the
position untouched, so grammar rules can try alternatives from the same spot
without saving and restoring state.
"""

from __future__ import annotations

from collections.abc import Callable

_WHITESPACE = " \t"


def is_digit(c: str) -> bool:
    return len(c) == 1 and "0" <= c <= "9"


def is_alpha(c: str) -> bool:
    """ASCII letters only."""
    return len(c) == 1 and ("a" <= c <= "z" or "A" <= c <= "Z")


def is_alnum(c: str) -> bool:
    return is_digit(c) or is_alpha(c)


class Cursor:
    """Read position over an expression string."""

    __slots__ = ("text", "pos")

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def __repr__(self) -> str:
        return f"Cursor({self.text!r}, pos={self.pos})"

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> str:
        """Current character, or "" at end of input."""
        if self.at_end:
            return ""
        return self.text[self.pos]

    def skip_ws(self) -> bool:
        """Skip spaces and tabs; return True if any input remains."""
        n = len(self.text)
        while self.pos < n and self.text[self.pos] in _WHITESPACE:
            self.pos += 1
        return self.pos < n

    def consume_str(self, s: str) -> bool:
        if self.text.startswith(s, self.pos):
            self.pos += len(s)
            return True
        return False

    def consume_ch(self, ch: str) -> bool:
        if self.peek() == ch:
            self.pos += 1
            return True
        return False

    def consume_any(self, chars: str) -> str:
        """Consume one character from ``chars`` and return it, or "" if none matches."""
        c = self.peek()
        if c and c in chars:
            self.pos += 1
            return c
        return ""

    def consume_while(self, pred: Callable[[str], bool]) -> str:
        """Consume the longest run of characters satisfying ``pred``."""
        start = self.pos
        n = len(self.text)
        while self.pos < n and pred(self.text[self.pos]):
            self.pos += 1
        return self.text[start : self.pos]
