"""Tests for calculator bindings, results, and configuration."""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

import pytest
from pydantic import ValidationError

import tinycalc
from tinycalc import (
    BindingError,
    Calculator,
    CalculatorConfig,
    ConfigError,
    ErrorKind,
    EvalResult,
    EvaluationError,
    Function,
    load_config,
)
from tinycalc.core.config import parse_config


class TestBinding:
    """bind_var / bind_fn / set / unbind."""

    def test_bind_var_is_chainable(self, calc: Calculator) -> None:
        assert calc.bind_var("x", 1).bind_var("y", 2) is calc
        assert dict(calc.variables) == {"x": 1, "y": 2}

    def test_set_returns_previous(self, calc: Calculator) -> None:
        assert calc.set("x", 1) is None
        assert calc.set("y", 2) is None
        assert calc.set("x", 3) == 1

    def test_rebinding_keeps_last_value(self, calc: Calculator) -> None:
        calc.bind_var("n", 1).bind_var("n", 2)
        assert calc.evaluate("n") == 2

    def test_bind_fn_infers_arity(self, calc: Calculator) -> None:
        calc.bind_fn("add", lambda a, b: a + b)
        assert calc.functions["add"].arity == 2

    def test_bind_fn_explicit_arity_for_varargs(self, calc: Calculator) -> None:
        calc.bind_fn("total", lambda *xs: sum(xs), arity=3)
        assert calc.evaluate("total(1, 2, 3)") == 6
        assert calc.eval("total(1, 2)").error == ErrorKind.ARG_NUM_MISMATCH

    def test_bind_fn_accepts_function(self, calc: Calculator) -> None:
        calc.bind_fn("seven", Function(lambda: 7, 0))
        assert calc.evaluate("seven()") == 7

    def test_unbind(self, calc_ab: Calculator) -> None:
        assert calc_ab.unbind("A") is True
        assert calc_ab.unbind("abs") is True
        assert calc_ab.unbind("missing") is False
        assert "A" not in calc_ab
        assert calc_ab.eval("A").error == ErrorKind.UNKNOWN_IDENTIFIER
        assert calc_ab.eval("abs(1)").error == ErrorKind.UNKNOWN_IDENTIFIER

    def test_views_are_read_only(self, calc_ab: Calculator) -> None:
        with pytest.raises(TypeError):
            calc_ab.variables["A"] = 3  # type: ignore[index]
        with pytest.raises(TypeError):
            calc_ab.functions["x"] = Function(lambda: 0, 0)  # type: ignore[index]

    @pytest.mark.parametrize("name", ["", "1x", "a_b", "x-y", "é", "a b", "x\n"])
    def test_invalid_names(self, calc: Calculator, name: str) -> None:
        with pytest.raises(BindingError, match="Invalid identifier"):
            calc.bind_var(name, 1)
        with pytest.raises(BindingError, match="Invalid identifier"):
            calc.bind_fn(name, lambda: 1)

    @pytest.mark.parametrize("value", [1.5, "3", True, None])
    def test_invalid_values(self, calc: Calculator, value: object) -> None:
        with pytest.raises(BindingError, match="must be an int"):
            calc.bind_var("x", value)  # type: ignore[arg-type]

    def test_binding_error_is_value_error(self, calc: Calculator) -> None:
        with pytest.raises(ValueError):
            calc.bind_var("_", 1)

    def test_arity_above_max(self) -> None:
        calc = Calculator(CalculatorConfig(max_arg_num=1))
        calc.bind_fn("one", lambda a: a)
        with pytest.raises(BindingError, match="outside supported range"):
            calc.bind_fn("two", lambda a, b: a)


class TestNamespace:
    """A name is a variable or a function, never both."""

    def test_bind_fn_evicts_variable(self, calc: Calculator) -> None:
        calc.bind_var("n", 5).bind_fn("n", lambda: 1)
        assert "n" not in calc.variables
        assert calc.eval("n").error == ErrorKind.SYNTAX_ERROR
        assert calc.evaluate("n()") == 1

    def test_bind_var_evicts_function(self, calc: Calculator) -> None:
        calc.bind_fn("n", lambda: 1).bind_var("n", 5)
        assert "n" not in calc.functions
        assert calc.evaluate("n") == 5
        assert calc.eval("n()").error == ErrorKind.SYNTAX_ERROR

    def test_set_over_function_counts_as_new(self, calc: Calculator) -> None:
        calc.bind_fn("n", lambda: 1)
        assert calc.set("n", 2) is None

    def test_failed_bind_leaves_tables_untouched(self, calc: Calculator) -> None:
        calc.bind_var("n", 5)
        with pytest.raises(BindingError):
            calc.bind_fn("n", lambda *xs: 0)
        assert calc.evaluate("n") == 5


class TestEvalResult:
    """Non-throwing results."""

    def test_success(self, calc: Calculator) -> None:
        result = calc.eval("6 * 7")
        assert result.ok and result
        assert result.value == 42
        assert result.error is None
        assert result.message is None
        assert result.unwrap() == 42
        assert str(result) == "42"

    def test_zero_is_still_ok(self, calc: Calculator) -> None:
        assert calc.eval("0")

    def test_failure(self, calc: Calculator) -> None:
        result = calc.eval("1 / 0")
        assert not result
        assert result.value is None
        assert result.error == ErrorKind.DIVIDE_BY_ZERO
        assert result.message == "Divide by zero"
        assert str(result) == "Divide by zero (at 2)"
        with pytest.raises(EvaluationError) as exc_info:
            result.unwrap()
        assert exc_info.value.kind == ErrorKind.DIVIDE_BY_ZERO
        assert exc_info.value.position == 2

    def test_requires_exactly_one_outcome(self) -> None:
        with pytest.raises(ValidationError):
            EvalResult()
        with pytest.raises(ValidationError):
            EvalResult(value=1, error=ErrorKind.SYNTAX_ERROR)

    def test_frozen(self) -> None:
        result = EvalResult.success(1)
        with pytest.raises(ValidationError):
            result.value = 2  # type: ignore[misc]

    def test_state_does_not_leak_between_calls(self, calc_ab: Calculator) -> None:
        assert calc_ab.eval("zzz").error == ErrorKind.UNKNOWN_IDENTIFIER
        assert calc_ab.evaluate("A") == 2
        assert calc_ab.eval("(1").error == ErrorKind.SYNTAX_ERROR
        assert calc_ab.evaluate("B") == 4

    def test_failure_is_logged(self, calc: Calculator, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="tinycalc"):
            calc.eval("1 2")
        assert any("syntax_error" in r.getMessage() for r in caplog.records)


class TestErrorKind:
    """Canonical message vocabulary."""

    def test_messages(self) -> None:
        assert {k.value: k.message for k in ErrorKind} == {
            "syntax_error": "Syntax error",
            "invalid_literal": "Invalid literal",
            "unknown_identifier": "Unknown identifier",
            "arg_num_mismatch": "Argument number mismatch",
            "divide_by_zero": "Divide by zero",
        }


class TestModuleEvaluate:
    """tinycalc.evaluate one-shot helper."""

    def test_with_tables(self) -> None:
        assert tinycalc.evaluate(
            "f(x, 3)", variables={"x": 4}, functions={"f": lambda a, b: a * b}
        ) == 12

    def test_raises(self) -> None:
        with pytest.raises(EvaluationError):
            tinycalc.evaluate("x")

    def test_version_from_metadata(self) -> None:
        try:
            expected = version("tinycalc")
        except PackageNotFoundError:
            expected = "0.0.0"
        assert tinycalc.__version__ == expected


class TestConfig:
    """TOML configuration."""

    def test_load(self, config_file: Path) -> None:
        config = load_config(config_file)
        assert config.max_arg_num == 2
        assert config.variables == {"A": 2, "B": 16}

    def test_from_config(self, config_file: Path) -> None:
        calc = Calculator.from_config(config_file)
        assert calc.max_arg_num == 2
        assert calc.evaluate("A * B") == 32
        with pytest.raises(BindingError):
            calc.bind_fn("f", lambda a, b, c: a)

    def test_defaults(self) -> None:
        config = parse_config({})
        assert config.max_arg_num == 4
        assert config.variables == {}

    @pytest.mark.parametrize(
        "data",
        [
            {"calculator": {"max_arg_num": -1}},
            {"calculator": {"max_arg_num": "4"}},
            {"calculator": {"max_arg_num": True}},
            {"calculator": 3},
            {"variables": {"x": 1.5}},
            {"variables": {"x": False}},
            {"variables": []},
        ],
    )
    def test_invalid(self, data: dict) -> None:
        with pytest.raises(ConfigError):
            parse_config(data)

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.toml"
        path.write_text("[calculator\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_invalid_variable_name(self) -> None:
        with pytest.raises(BindingError):
            Calculator(CalculatorConfig(variables={"not valid": 1}))

    @pytest.mark.parametrize("name", ["not valid", "a_b", "1x", ""])
    def test_invalid_variable_name_in_table(self, name: str) -> None:
        with pytest.raises(ConfigError, match="Invalid identifier"):
            parse_config({"variables": {name: 1}})

    def test_invalid_variable_name_in_file(self, tmp_path: Path) -> None:
        path = tmp_path / "bad_name.toml"
        path.write_text('[variables]\n"a_b" = 1\n', encoding="utf-8")
        with pytest.raises(ConfigError, match="a_b"):
            Calculator.from_config(path)
