"""
tinycalc core: scanner, evaluator, symbol tables, and calculator.

Usage:
    from tinycalc.core import Calculator

    calc = Calculator().bind_var("x", 3)
    calc.evaluate("x * 2")  # 6
"""

from tinycalc.core.calculator import Calculator, evaluate
from tinycalc.core.config import CalculatorConfig, load_config
from tinycalc.core.errors import (
    BindingError,
    ConfigError,
    ErrorKind,
    EvaluationError,
    TinycalcError,
)
from tinycalc.core.functions import Function
from tinycalc.core.result import EvalResult

__all__ = [
    "BindingError",
    "Calculator",
    "CalculatorConfig",
    "ConfigError",
    "ErrorKind",
    "EvalResult",
    "EvaluationError",
    "Function",
    "TinycalcError",
    "evaluate",
    "load_config",
]
