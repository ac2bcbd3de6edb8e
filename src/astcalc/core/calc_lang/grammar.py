"""
Recursive descent grammar for calculator expressions, built from combinators.

Grammar (precedence low to high):
    expression  → term (("+" | "-") term)?
    term        → factor (("*" | "/" | "%") factor)?
    factor      → number | constant | "(" expression ")" | unary_call
    unary_call  → function_name "(" expression ")"
    number      → /[+-]?\\d+(\\.\\d+)?/
    constant    → "pi" | "PI" | "e"

Each level applies its operator at most once: "2*3*4" parses as
(2 * 3) and leaves "*4" unconsumed. There is no lexer stage and no
whitespace skipping; rules work directly on the remaining text.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Collection

from astcalc.core.ir import AstNode, BinaryOperator, Function, Literal, UnaryFunction
from astcalc.core.parsing import Parser, lazy, literal, one_of, regex, succeed
from astcalc.core.results import Err, Result

logger = logging.getLogger(__name__)

NUMBER_PATTERN = r"[+-]?\d+(\.\d+)?"

NESTING_FAILURE = "Expression nested too deeply"

MULTIPLICATIVE_OPERATORS = frozenset({BinaryOperator.MUL, BinaryOperator.DIV, BinaryOperator.MOD})
ADDITIVE_OPERATORS = frozenset({BinaryOperator.ADD, BinaryOperator.SUB})

# Forward reference; resolved on first use once EXPRESSION exists
_expression: Parser[AstNode] = lazy(lambda: EXPRESSION)


def _between_parens(inner: Parser[AstNode]) -> Parser[AstNode]:
    """'(' inner ')' → inner's value."""
    return literal("(").and_then(
        lambda _: inner.and_then(lambda value: literal(")").map(lambda _: value))
    )


def _single_application(
    operand: Parser[AstNode],
    operators: Collection[str],
    message: str,
) -> Parser[AstNode]:
    """operand (op operand)? where op is restricted to ``operators``.

    When no allowed operator follows, the left operand is returned with
    the remaining input untouched.
    """
    return operand.and_then(
        lambda first: BINARY_OPERATOR.filter(lambda op: op in operators, message)
        .and_then(
            lambda op: operand.map(
                lambda second: Function(name=op, arguments=[first, second])
            )
        )
        .or_else(succeed(first))
    )


# -- Grammar rules --

NUMBER: Parser[AstNode] = regex(NUMBER_PATTERN).map(lambda text: Literal(value=float(text)))

CONSTANT: Parser[AstNode] = one_of(
    literal("pi").or_else(literal("PI")).map(lambda _: Literal(value=math.pi)),
    literal("e").map(lambda _: Literal(value=math.e)),
)

BINARY_OPERATOR: Parser[str] = one_of(*(literal(op.value) for op in BinaryOperator))

# The six names are mutually non-prefixing, so declaration order is safe.
# A name that prefixes another must be listed after it.
FUNCTION_NAME: Parser[str] = one_of(*(literal(fn.value) for fn in UnaryFunction))

UNARY_FUNCTION: Parser[AstNode] = FUNCTION_NAME.and_then(
    lambda name: _between_parens(_expression).map(
        lambda arg: Function(name=name, arguments=[arg])
    )
)

PARENTHESIZED: Parser[AstNode] = _between_parens(_expression)

FACTOR: Parser[AstNode] = (
    NUMBER.or_else(CONSTANT).or_else(PARENTHESIZED).or_else(UNARY_FUNCTION)
)

TERM: Parser[AstNode] = _single_application(
    FACTOR, MULTIPLICATIVE_OPERATORS, "Expected operator: *, /, or %"
)

EXPRESSION: Parser[AstNode] = _single_application(
    TERM, ADDITIVE_OPERATORS, "Expected operator: + or -"
)


def parse(source: str, *, strict: bool = False) -> Result[AstNode]:
    """Parse an expression string into an AST.

    Args:
        source: Expression text (e.g., "sen(54)", "(1+2)*3").
        strict: If True, input left over after the expression is an
            error. By default it is ignored and returned in ``rest``.

    Returns:
        ``Ok`` with the AST root and unconsumed input, or ``Err``. Input nested
        deeper than the interpreter stack allows is an ``Err`` too.
    """
    try:
        result = EXPRESSION.parse(source)
    except RecursionError:
        logger.debug("Parse of %d chars exceeded the recursion limit", len(source))
        return Err(NESTING_FAILURE, remaining=source)

    if isinstance(result, Err):
        logger.debug("Parse of %r failed: %s", source, result.describe())
        return result

    if strict and result.rest:
        logger.debug("Parse of %r left trailing input %r", source, result.rest)
        return Err(
            f"Unexpected trailing input: {result.rest!r}",
            expected=("end of input",),
            remaining=result.rest,
        )

    logger.debug("Parsed %r as %s (rest=%r)", source, result.value, result.rest)
    return result
