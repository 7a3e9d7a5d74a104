"""Shared pytest fixtures for tinycalc tests."""

from pathlib import Path

import pytest

from tinycalc import Calculator


@pytest.fixture
def calc() -> Calculator:
    """Return an empty calculator."""
    return Calculator()


@pytest.fixture
def calc_ab() -> Calculator:
    """Return a calculator with A=2, B=4 and a few functions bound."""
    return (
        Calculator()
        .bind_var("A", 2)
        .bind_var("B", 4)
        .bind_fn("nop", lambda: 0)
        .bind_fn("abs", lambda x: -x if x < 0 else x)
        .bind_fn("min", lambda a, b: a if a < b else b)
    )


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Return path to a calculator config file."""
    path = tmp_path / "tinycalc.toml"
    path.write_text(
        "[calculator]\nmax_arg_num = 2\n\n[variables]\nA = 2\nB = 0x10\n",
        encoding="utf-8",
    )
    return path
