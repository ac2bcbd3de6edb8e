"""
Error types for astcalc parsing, evaluation, and configuration.

Parse failures travel as ``Err`` values through the combinator core; the
exceptions below are raised only at the edges (convenience helpers, CLI)
and for evaluation defects, which are never expected for a tree the
grammar produced.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from astcalc.core.results import Err


class AstCalcError(Exception):
    """Base exception for all astcalc errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ExpressionParseError(AstCalcError):
    """
    Raised when an expression does not match the grammar.

    Carries the failing ``Err`` so callers can inspect the attempted
    alternatives instead of parsing the message.
    """

    def __init__(self, failure: Err) -> None:
        self.failure = failure
        super().__init__(failure.message)


class EvaluationError(AstCalcError):
    """
    Raised when the evaluator meets a tree it cannot interpret.

    This is a programming defect (a malformed tree), not an input error.
    """


class UnsupportedOperatorError(EvaluationError):
    """A ``Function`` node names an operator or function with no implementation."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unsupported operator: {name}")


class UnknownNodeTypeError(EvaluationError):
    """The evaluator was handed something that is not an AST node."""

    def __init__(self, node: object) -> None:
        self.node = node
        super().__init__(f"Unknown node type: {type(node).__name__}")


class NestingTooDeepError(EvaluationError):
    """The tree is nested deeper than the interpreter stack allows."""

    def __init__(self) -> None:
        super().__init__("Expression nested too deeply")


class ConfigError(AstCalcError):
    """Raised when a configuration file is missing, malformed, or has bad values."""
