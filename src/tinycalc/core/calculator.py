"""
Embeddable integer calculator.

Usage:
    calc = Calculator().bind_var("A", 2).bind_var("B", 4)
    calc.evaluate("(1 + A) * B - 2")   # 10

    result = calc.eval("1 / 0")
    result.error                       # ErrorKind.DIVIDE_BY_ZERO
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from pathlib import Path

from tinycalc.core.config import CalculatorConfig, load_config
from tinycalc.core.evaluator import evaluate_expression
from tinycalc.core.functions import Function
from tinycalc.core.result import EvalResult
from tinycalc.core.symbols import SymbolTable

logger = logging.getLogger(__name__)


class Calculator:
    """Evaluates integer expressions against its variable and function tables.

    Instances are not thread-safe: binding and evaluating on the same
    calculator from several threads must be serialized by the caller.
    Evaluation itself keeps no state on the instance and may be re-entered
    from inside a bound function.
    """

    def __init__(self, config: CalculatorConfig | None = None) -> None:
        self.config = config or CalculatorConfig()
        self._symbols = SymbolTable(max_arg_num=self.config.max_arg_num)
        for name, value in self.config.variables.items():
            self._symbols.set_var(name, value)

    @classmethod
    def from_config(cls, path: Path | str) -> Calculator:
        return cls(load_config(Path(path)))

    def __repr__(self) -> str:
        return (
            f"Calculator(variables={len(self._symbols.variables)}, "
            f"functions={len(self._symbols.functions)})"
        )

    def __contains__(self, name: object) -> bool:
        return name in self._symbols

    @property
    def max_arg_num(self) -> int:
        return self._symbols.max_arg_num

    @property
    def variables(self) -> Mapping[str, int]:
        """Read-only view of the bound variables."""
        return self._symbols.variables

    @property
    def functions(self) -> Mapping[str, Function]:
        """Read-only view of the bound functions."""
        return self._symbols.functions

    # -- Binding --

    def bind_var(self, name: str, value: int) -> Calculator:
        """Bind ``name`` to ``value``, replacing any function of that name."""
        self._symbols.set_var(name, value)
        return self

    def bind_fn(
        self, name: str, fn: Callable[..., int] | Function, arity: int | None = None
    ) -> Calculator:
        """Bind ``name`` to a callable, replacing any variable of that name.

        Args:
            name: Identifier the expression calls the function by.
            fn: Callable taking ``arity`` ints and returning an int.
            arity: Number of arguments; inferred from the signature if omitted.

        Raises:
            BindingError: If the name is invalid, the arity cannot be inferred,
                or it exceeds ``max_arg_num``.
        """
        self._symbols.set_fn(name, fn, arity)
        return self

    def set(self, name: str, value: int) -> int | None:
        """Bind a variable and return its previous value (None if new)."""
        return self._symbols.set_var(name, value)

    def unbind(self, name: str) -> bool:
        """Remove a variable or function; return False if it was not bound."""
        return self._symbols.remove(name)

    # -- Evaluation --

    def eval(self, expr: str) -> EvalResult:
        """Evaluate ``expr`` without raising on expression errors.

        Exceptions raised by bound functions are not expression errors and
        propagate unchanged.
        """
        result = evaluate_expression(expr, self._symbols)
        if result.error is not None:
            logger.debug(
                "Evaluation failed: %s at %s in %r", result.error, result.position, expr
            )
        return result

    def evaluate(self, expr: str) -> int:
        """Evaluate ``expr`` and return its value.

        Raises:
            EvaluationError: If the expression is invalid.
        """
        return self.eval(expr).unwrap()


def evaluate(
    expr: str,
    variables: Mapping[str, int] | None = None,
    functions: Mapping[str, Callable[..., int] | Function] | None = None,
) -> int:
    """One-shot evaluation with a throwaway calculator."""
    calc = Calculator()
    for name, value in (variables or {}).items():
        calc.bind_var(name, value)
    for name, fn in (functions or {}).items():
        calc.bind_fn(name, fn)
    return calc.evaluate(expr)
