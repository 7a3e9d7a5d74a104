"""
tinycalc - tiny embeddable integer expression evaluator.

Evaluates user-supplied formulas such as ``(1 + A) * B - 2`` or
``abs(min(-A, -B))`` against host-provided variables and functions.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from .core import (
    BindingError,
    Calculator,
    CalculatorConfig,
    ConfigError,
    ErrorKind,
    EvalResult,
    EvaluationError,
    Function,
    TinycalcError,
    evaluate,
    load_config,
)

try:
    __version__ = version("tinycalc")
except PackageNotFoundError:
    # Running from a source checkout without installing
    __version__ = "0.0.0"

__all__ = [
    "__version__",
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
