"""Intermediate representation: the calculator's abstract syntax tree."""

from astcalc.core.ir.nodes import (
    FUNCTION_NAMES,
    OPERATOR_SYMBOLS,
    AstNode,
    BinaryOperator,
    Function,
    Literal,
    UnaryFunction,
    arity,
)

__all__ = [
    "FUNCTION_NAMES",
    "OPERATOR_SYMBOLS",
    "AstNode",
    "BinaryOperator",
    "Function",
    "Literal",
    "UnaryFunction",
    "arity",
]
