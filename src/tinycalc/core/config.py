import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from tinycalc.core.errors import BindingError, ConfigError
from tinycalc.core.functions import DEFAULT_MAX_ARG_NUM
from tinycalc.core.symbols import check_name

logger = logging.getLogger(__name__)


@dataclass
class CalculatorConfig:
    """Calculator settings and initial variable bindings."""

    max_arg_num: int = DEFAULT_MAX_ARG_NUM  # Largest function arity accepted by bind_fn
    variables: dict[str, int] = field(default_factory=dict)


def _table(data: dict[str, Any], key: str) -> dict[str, Any]:
    section = data.get(key, {})
    if not isinstance(section, dict):
        raise ConfigError(f"[{key}] must be a table")
    return section


def parse_config(data: dict[str, Any]) -> CalculatorConfig:
    calc_data = _table(data, "calculator")
    vars_data = _table(data, "variables")

    max_arg_num = calc_data.get("max_arg_num", DEFAULT_MAX_ARG_NUM)
    if isinstance(max_arg_num, bool) or not isinstance(max_arg_num, int) or max_arg_num < 0:
        raise ConfigError(f"max_arg_num must be a non-negative integer, got {max_arg_num!r}")

    for name, value in vars_data.items():
        try:
            check_name(name)
        except BindingError as e:
            raise ConfigError(f"[variables]: {e.message}") from e
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigError(f"Variable {name!r} must be an integer, got {value!r}")

    return CalculatorConfig(max_arg_num=max_arg_num, variables=dict(vars_data))


def load_config(path: Path) -> CalculatorConfig:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"{path}: {e}") from e

    config = parse_config(data)
    logger.info(
        "Loaded calculator config from %s (max_arg_num=%d, %d variables)",
        path,
        config.max_arg_num,
        len(config.variables),
    )
    return config
