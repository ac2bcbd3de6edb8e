"""
Tree-walking evaluator for calculator ASTs.

Pure structural recursion over the two node types. Arithmetic follows
IEEE-754 double semantics: dividing by zero gives an infinity (or nan),
and out-of-domain inverse trigonometry gives nan rather than raising.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable

from astcalc.core.calc_lang.grammar import parse
from astcalc.core.errors import (
    ExpressionParseError,
    NestingTooDeepError,
    UnknownNodeTypeError,
    UnsupportedOperatorError,
)
from astcalc.core.ir import AstNode, BinaryOperator, Function, Literal, UnaryFunction
from astcalc.core.results import Err

logger = logging.getLogger(__name__)


def _divide(left: float, right: float) -> float:
    if right == 0:
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


def _remainder(left: float, right: float) -> float:
    """Remainder with the sign of the dividend; nan where undefined."""
    if right == 0 or math.isinf(left) or math.isnan(left) or math.isnan(right):
        return math.nan
    return math.fmod(left, right)


def _inverse(fn: Callable[[float], float]) -> Callable[[float], float]:
    """Wrap an inverse trig function: radians → degrees, nan outside [-1, 1]."""

    def apply(value: float) -> float:
        if not -1.0 <= value <= 1.0:
            return math.nan
        return math.degrees(fn(value))

    return apply


def _tangent(degrees: float) -> float:
    if math.isinf(degrees):
        return math.nan
    return math.tan(math.radians(degrees))


BINARY_OPERATIONS: dict[str, Callable[[float, float], float]] = {
    BinaryOperator.ADD: lambda a, b: a + b,
    BinaryOperator.SUB: lambda a, b: a - b,
    BinaryOperator.MUL: lambda a, b: a * b,
    BinaryOperator.DIV: _divide,
    BinaryOperator.MOD: _remainder,
}

UNARY_FUNCTIONS: dict[str, Callable[[float], float]] = {
    UnaryFunction.SEN: lambda deg: math.nan if math.isinf(deg) else math.sin(math.radians(deg)),
    UnaryFunction.COS: lambda deg: math.nan if math.isinf(deg) else math.cos(math.radians(deg)),
    UnaryFunction.TANG: _tangent,
    UnaryFunction.ARCSEN: _inverse(math.asin),
    UnaryFunction.ARCCOS: _inverse(math.acos),
    # atan is defined everywhere
    UnaryFunction.ARCTANG: lambda value: math.degrees(math.atan(value)),
}


def evaluate(node: AstNode) -> float:
    """Evaluate an AST to a number.

    Args:
        node: Tree produced by ``parse``.

    Returns:
        The computed value as a float.

    Raises:
        UnsupportedOperatorError: A function node names nothing the
            evaluator implements.
        UnknownNodeTypeError: ``node`` is not an AST node.
        NestingTooDeepError: The tree is too deep to walk recursively.
    """
    try:
        value = _interpret(node)
    except RecursionError as e:
        raise NestingTooDeepError() from e
    logger.debug("Evaluated %s = %r", node, value)
    return value


def _interpret(node: AstNode) -> float:
    """Dispatch evaluation to the appropriate handler."""
    if isinstance(node, Literal):
        return node.value

    if isinstance(node, Function):
        return _interpret_function(node)

    raise UnknownNodeTypeError(node)


def _interpret_function(node: Function) -> float:
    """Evaluate arguments left to right, then apply the named operation.

    Arity is not checked here; the grammar never builds a malformed node.
    """
    args = [_interpret(arg) for arg in node.arguments]

    operation = BINARY_OPERATIONS.get(node.name)
    if operation is not None:
        return operation(args[0], args[1])

    function = UNARY_FUNCTIONS.get(node.name)
    if function is not None:
        return function(args[0])

    raise UnsupportedOperatorError(node.name)


def calculate(source: str, *, strict: bool = False) -> float:
    """Parse and evaluate in one step.

    Raises:
        ExpressionParseError: If ``source`` does not parse.
    """
    result = parse(source, strict=strict)
    if isinstance(result, Err):
        raise ExpressionParseError(result)
    return evaluate(result.value)
