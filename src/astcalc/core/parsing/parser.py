"""
Composable parser values.

A ``Parser[T]`` is a pure function from input text to ``Result[T]``.
Combinators never mutate a parser; they return new ones that close over
their operands.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic, TypeVar

from astcalc.core.results import Err, Ok, Result

T = TypeVar("T")
U = TypeVar("U")


class Parser(Generic[T]):
    """A function from input text to ``Result[T]`` with combinator methods."""

    __slots__ = ("_run",)

    def __init__(self, run: Callable[[str], Result[T]]) -> None:
        self._run = run

    def parse(self, text: str) -> Result[T]:
        return self._run(text)

    def __call__(self, text: str) -> Result[T]:
        return self._run(text)

    def and_then(self, next_parser: Callable[[T], Parser[U]]) -> Parser[U]:
        """Sequence: run this parser, then the parser chosen from its value on the rest.

        A failure of this parser is returned as-is; ``next_parser`` is not called.
        """

        def run(text: str) -> Result[U]:
            result = self._run(text)
            if isinstance(result, Err):
                return result
            return next_parser(result.value).parse(result.rest)

        return Parser(run)

    def or_else(self, alternative: Parser[U]) -> Parser[T | U]:
        """Ordered choice: on failure, run ``alternative`` on the original input."""

        def run(text: str) -> Result[T | U]:
            result = self._run(text)
            if isinstance(result, Err):
                return alternative.parse(text)
            return result

        return Parser(run)

    def map(self, fn: Callable[[T], U]) -> Parser[U]:
        """Transform the value of a success, leaving ``rest`` untouched."""

        def run(text: str) -> Result[U]:
            result = self._run(text)
            if isinstance(result, Err):
                return result
            return Ok(fn(result.value), result.rest)

        return Parser(run)

    def filter(self, predicate: Callable[[T], bool], message: str) -> Parser[T]:
        """Reject a success whose value fails ``predicate``.

        The rejection is a plain ``Err(message)``: the position the
        receiver reached is dropped, so any ``or_else`` above restarts
        from its own input.
        """

        def run(text: str) -> Result[T]:
            result = self._run(text)
            if isinstance(result, Ok) and not predicate(result.value):
                return Err(message, remaining=text)
            return result

        return Parser(run)
