"""
Primitive parser builders: literals, anchored regexes, and ordered choice.

Usage:
    from astcalc.core.parsing.primitives import literal, one_of, regex

    sign = one_of(literal("+"), literal("-"))
    digits = regex(r"\\d+")
    digits.parse("42abc")  # Ok(value="42", rest="abc")
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import TypeVar

from astcalc.core.parsing.parser import Parser
from astcalc.core.results import Err, Ok, Result

T = TypeVar("T")

ONE_OF_FAILURE = "No parser matched in oneOf."


def literal(expected: str) -> Parser[str]:
    """Match ``expected`` as a prefix of the input, consuming exactly its length."""
    length = len(expected)
    failure = f"Expected literal: {expected}"
    expectation = repr(expected)

    def run(text: str) -> Result[str]:
        if text.startswith(expected):
            return Ok(expected, text[length:])
        return Err(failure, expected=(expectation,), remaining=text)

    return Parser(run)


def regex(pattern: str) -> Parser[str]:
    """Match ``pattern`` at the start of the input and return the matched text.

    The pattern is compiled once; the returned parser can be shared
    between threads.
    """
    compiled = re.compile(pattern)
    failure = f"No match for regex: {pattern}"
    expectation = f"/{pattern}/"

    def run(text: str) -> Result[str]:
        match = compiled.match(text)
        if match is None:
            return Err(failure, expected=(expectation,), remaining=text)
        return Ok(match.group(), text[match.end() :])

    return Parser(run)


def one_of(*parsers: Parser[T]) -> Parser[T]:
    """Try each parser on the original input, in order; first success wins.

    When every alternative fails the result keeps the plain
    "No parser matched in oneOf." message, and also records every
    attempted alternative and the furthest point any of them reached.
    """

    def run(text: str) -> Result[T]:
        failures: list[Err] = []
        for parser in parsers:
            result = parser.parse(text)
            if isinstance(result, Ok):
                return result
            failures.append(result)
        return _merge_failures(failures, text)

    return Parser(run)


def succeed(value: T) -> Parser[T]:
    """Consume nothing and return ``value``."""
    return Parser(lambda text: Ok(value, text))


def lazy(factory: Callable[[], Parser[T]]) -> Parser[T]:
    """Defer building a parser until its first use.

    Lets a grammar rule refer to a rule defined later in the module, so
    recursive rules are built once instead of on every call.
    """
    resolved: list[Parser[T]] = []

    def run(text: str) -> Result[T]:
        if not resolved:
            resolved.append(factory())
        return resolved[0].parse(text)

    return Parser(run)


def _merge_failures(failures: list[Err], text: str) -> Err:
    expected: list[str] = []
    for failure in failures:
        for item in failure.expected:
            if item not in expected:
                expected.append(item)

    positions = [f.remaining for f in failures if f.remaining is not None]
    furthest = min(positions, key=len) if positions else text
    return Err(ONE_OF_FAILURE, expected=tuple(expected), remaining=furthest)
