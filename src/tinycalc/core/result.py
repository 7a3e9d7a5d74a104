"""
Outcome of evaluating one expression.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from tinycalc.core.errors import ErrorKind, EvaluationError


class EvalResult(BaseModel):
    """
    Either a value or an error classification, never both.

    Examples:
        - EvalResult(value=10) → success
        - EvalResult(error=ErrorKind.DIVIDE_BY_ZERO, position=2) → failure
    """

    value: int | None = Field(default=None, description="Result on success")
    error: ErrorKind | None = Field(default=None, description="Failure classification")
    position: int | None = Field(
        default=None, description="Offset into the expression where the failure was detected"
    )

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def check_exactly_one_outcome(self) -> EvalResult:
        if (self.value is None) == (self.error is None):
            raise ValueError("EvalResult needs exactly one of value or error")
        return self

    @classmethod
    def success(cls, value: int) -> EvalResult:
        return cls(value=value)

    @classmethod
    def failure(cls, kind: ErrorKind, position: int) -> EvalResult:
        return cls(error=kind, position=position)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def message(self) -> str | None:
        """Canonical error message, or None on success."""
        return self.error.message if self.error is not None else None

    def unwrap(self) -> int:
        """Return the value, raising ``EvaluationError`` on failure."""
        if self.error is not None:
            raise EvaluationError(self.error, self.position)
        assert self.value is not None
        return self.value

    def __bool__(self) -> bool:
        return self.ok

    def __str__(self) -> str:
        if self.error is not None:
            return f"{self.error.message} (at {self.position})"
        return str(self.value)
