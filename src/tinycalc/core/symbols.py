"""
Variable and function tables sharing one namespace.

Binding a name in one table evicts it from the other, so a name always
denotes exactly one kind of symbol.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Mapping
from types import MappingProxyType

from tinycalc.core.errors import BindingError
from tinycalc.core.functions import DEFAULT_MAX_ARG_NUM, Function, make_function

logger = logging.getLogger(__name__)

# Same shape the scanner accepts: ASCII letter, then ASCII letters/digits
_IDENT_RE = re.compile(r"[a-zA-Z][a-zA-Z0-9]*\Z")


def check_name(name: str) -> str:
    if not isinstance(name, str) or not _IDENT_RE.match(name):
        raise BindingError(f"Invalid identifier: {name!r}")
    return name


def check_value(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise BindingError(
            f"Variable {name!r} must be an int, got {type(value).__name__}"
        )
    return value


class SymbolTable:
    """Name → value and name → function mappings with mutual eviction."""

    def __init__(self, max_arg_num: int = DEFAULT_MAX_ARG_NUM) -> None:
        self.max_arg_num = max_arg_num
        self._vars: dict[str, int] = {}
        self._funcs: dict[str, Function] = {}

    @property
    def variables(self) -> Mapping[str, int]:
        return MappingProxyType(self._vars)

    @property
    def functions(self) -> Mapping[str, Function]:
        return MappingProxyType(self._funcs)

    def __contains__(self, name: object) -> bool:
        return name in self._vars or name in self._funcs

    def __len__(self) -> int:
        return len(self._vars) + len(self._funcs)

    def get_var(self, name: str) -> int | None:
        return self._vars.get(name)

    def get_fn(self, name: str) -> Function | None:
        return self._funcs.get(name)

    def set_var(self, name: str, value: int) -> int | None:
        """Bind a variable; return its previous value, or None if it is new."""
        check_name(name)
        check_value(name, value)
        if self._funcs.pop(name, None) is not None:
            logger.debug("Variable %s replaces function of the same name", name)
        previous = self._vars.get(name)
        self._vars[name] = value
        logger.debug("Bound variable %s = %d", name, value)
        return previous

    def set_fn(
        self, name: str, fn: Callable[..., int] | Function, arity: int | None = None
    ) -> Function:
        check_name(name)
        func = make_function(fn, arity, self.max_arg_num)
        if self._vars.pop(name, None) is not None:
            logger.debug("Function %s replaces variable of the same name", name)
        self._funcs[name] = func
        logger.debug("Bound function %s/%d", name, func.arity)
        return func

    def remove(self, name: str) -> bool:
        """Remove ``name`` from whichever table holds it."""
        if self._vars.pop(name, None) is None and self._funcs.pop(name, None) is None:
            return False
        logger.debug("Unbound %s", name)
        return True
