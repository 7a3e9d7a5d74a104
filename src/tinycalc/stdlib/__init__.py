"""
Opt-in standard functions for tinycalc.

Nothing here is bound by default; call ``install`` to add all or some of
these to a calculator.
"""

from __future__ import annotations

from collections.abc import Iterable

from tinycalc.core.calculator import Calculator
from tinycalc.core.errors import BindingError
from tinycalc.core.functions import Function


def _abs(x: int) -> int:
    return -x if x < 0 else x


def _sign(x: int) -> int:
    return (x > 0) - (x < 0)


def _min(a: int, b: int) -> int:
    return a if a < b else b


def _max(a: int, b: int) -> int:
    return a if a > b else b


def _clamp(x: int, lo: int, hi: int) -> int:
    return _max(lo, _min(x, hi))


MAX_POW_EXPONENT = 4096


def _pow(base: int, exp: int) -> int:
    """Integer power with a bounded exponent.

    Formulas may be untrusted, so ``base ** exp`` is only computed for
    ``exp <= MAX_POW_EXPONENT`` when ``|base| >= 2``; larger exponents raise
    ``OverflowError`` to the host instead of stalling it.
    """
    if base in (0, 1, -1):
        if base == 0:
            return 1 if exp == 0 else 0
        return -1 if base == -1 and exp % 2 else 1
    # Negative exponents truncate toward zero
    if exp < 0:
        return 0
    if exp > MAX_POW_EXPONENT:
        raise OverflowError(f"pow exponent {exp} exceeds {MAX_POW_EXPONENT}")
    return base**exp


STANDARD_FUNCTIONS: dict[str, Function] = {
    "abs": Function(_abs, 1),
    "sign": Function(_sign, 1),
    "min": Function(_min, 2),
    "max": Function(_max, 2),
    "clamp": Function(_clamp, 3),
    "pow": Function(_pow, 2),
}


def install(calc: Calculator, names: Iterable[str] | None = None) -> Calculator:
    """Bind standard functions into ``calc`` and return it."""
    selected = list(STANDARD_FUNCTIONS) if names is None else list(names)
    unknown = [n for n in selected if n not in STANDARD_FUNCTIONS]
    if unknown:
        raise BindingError(f"Unknown standard function(s): {', '.join(unknown)}")
    too_wide = [n for n in selected if STANDARD_FUNCTIONS[n].arity > calc.max_arg_num]
    if too_wide:
        raise BindingError(
            f"Arity exceeds max_arg_num={calc.max_arg_num}: {', '.join(too_wide)}"
        )
    for name in selected:
        calc.bind_fn(name, STANDARD_FUNCTIONS[name])
    return calc


__all__ = ["MAX_POW_EXPONENT", "STANDARD_FUNCTIONS", "install"]
