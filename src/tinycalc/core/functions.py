"""
Fixed-arity callables for the function table.

A ``Function`` pairs a Python callable with the exact number of integer
arguments it accepts. The arity is validated when the expression calls it.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from tinycalc.core.errors import BindingError, ErrorKind, EvaluationError

DEFAULT_MAX_ARG_NUM = 4

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


@dataclass(frozen=True, slots=True)
class Function:
    """A callable bound under a name, taking exactly ``arity`` integers."""

    fn: Callable[..., int]
    arity: int

    def __call__(self, args: Sequence[int], position: int | None = None) -> int:
        if len(args) != self.arity:
            raise EvaluationError(ErrorKind.ARG_NUM_MISMATCH, position)
        result = self.fn(*args)
        if isinstance(result, bool) or not isinstance(result, int):
            raise TypeError(
                f"{getattr(self.fn, '__name__', self.fn)!r} returned "
                f"{type(result).__name__}, expected int"
            )
        return result


def infer_arity(fn: Callable[..., int]) -> int:
    """Count the required positional parameters of ``fn``.

    Raises:
        BindingError: If the signature cannot be inspected, takes ``*args``,
            or requires keyword-only arguments.
    """
    try:
        sig = inspect.signature(fn)
    except (TypeError, ValueError) as e:
        raise BindingError(f"Cannot infer arity of {fn!r}; pass it explicitly") from e

    arity = 0
    for param in sig.parameters.values():
        if param.kind == inspect.Parameter.VAR_POSITIONAL:
            raise BindingError(f"{fn!r} takes *args; pass its arity explicitly")
        if param.kind == inspect.Parameter.KEYWORD_ONLY and param.default is param.empty:
            raise BindingError(f"{fn!r} requires keyword-only argument {param.name!r}")
        if param.kind in _POSITIONAL and param.default is param.empty:
            arity += 1
    return arity


def make_function(
    fn: Callable[..., int] | Function,
    arity: int | None = None,
    max_arg_num: int = DEFAULT_MAX_ARG_NUM,
) -> Function:
    """Wrap ``fn`` as a ``Function``, inferring the arity when not given."""
    if isinstance(fn, Function):
        if arity is not None and arity != fn.arity:
            raise BindingError(f"Arity {arity} conflicts with declared arity {fn.arity}")
        func = fn
    else:
        if not callable(fn):
            raise BindingError(f"{fn!r} is not callable")
        func = Function(fn=fn, arity=infer_arity(fn) if arity is None else arity)

    if not 0 <= func.arity <= max_arg_num:
        raise BindingError(f"Arity {func.arity} outside supported range 0..{max_arg_num}")
    return func
