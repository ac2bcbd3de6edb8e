"""Shared pytest fixtures for astcalc tests."""

from collections.abc import Callable
from pathlib import Path

import pytest

from astcalc.core.ir import AstNode, Function, Literal


@pytest.fixture
def num() -> Callable[[float], Literal]:
    """Build a Literal node."""
    return lambda value: Literal(value=value)


@pytest.fixture
def call() -> Callable[..., Function]:
    """Build a Function node: call("+", left, right)."""

    def build(name: str, *arguments: AstNode) -> Function:
        return Function(name=name, arguments=list(arguments))

    return build


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str], Path]:
    """Write an astcalc.toml with the given body and return its path."""

    def write(body: str) -> Path:
        path = tmp_path / "astcalc.toml"
        path.write_text(body, encoding="utf-8")
        return path

    return write
