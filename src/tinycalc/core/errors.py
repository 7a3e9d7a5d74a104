"""
Error types for tinycalc evaluation, binding, and configuration.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    """Closed set of reasons an expression can fail to evaluate."""

    SYNTAX_ERROR = "syntax_error"
    INVALID_LITERAL = "invalid_literal"
    UNKNOWN_IDENTIFIER = "unknown_identifier"
    ARG_NUM_MISMATCH = "arg_num_mismatch"
    DIVIDE_BY_ZERO = "divide_by_zero"

    @property
    def message(self) -> str:
        """Canonical human-readable message for this kind."""
        return _MESSAGES[self]


_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.SYNTAX_ERROR: "Syntax error",
    ErrorKind.INVALID_LITERAL: "Invalid literal",
    ErrorKind.UNKNOWN_IDENTIFIER: "Unknown identifier",
    ErrorKind.ARG_NUM_MISMATCH: "Argument number mismatch",
    ErrorKind.DIVIDE_BY_ZERO: "Divide by zero",
}


class TinycalcError(Exception):
    """Base exception for all tinycalc errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class EvaluationError(TinycalcError):
    """
    Raised when an expression cannot be evaluated.

    Examples:
    - Malformed syntax or trailing input
    - Malformed integer literals
    - Unknown identifiers
    - Calling a function with the wrong number of arguments
    - Division or modulo by zero
    """

    def __init__(self, kind: ErrorKind, position: int | None = None) -> None:
        self.kind = kind
        self.position = position
        super().__init__(kind.message)

    def __repr__(self) -> str:
        return f"EvaluationError({self.kind!s}, position={self.position})"


class ParseFailure(Exception):
    """Internal signal from the grammar rules to the evaluation entry point.

    Kept apart from ``EvaluationError`` so an error raised by a bound host
    function is never mistaken for a failure of the outer expression.
    """

    def __init__(self, kind: ErrorKind, position: int) -> None:
        super().__init__(kind.message)
        self.kind = kind
        self.position = position


class BindingError(TinycalcError, ValueError):
    """
    Raised when a variable or function cannot be registered.

    Examples:
    - Name that is not a valid identifier
    - Variable value that is not an integer
    - Function arity outside the configured range
    """

    pass


class ConfigError(TinycalcError):
    """Raised when a configuration file is malformed."""

    pass
