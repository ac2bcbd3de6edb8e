"""
Outcome of a single parsing step.

A step either succeeds with a value and the unconsumed suffix of its
input (``Ok``) or fails with a message (``Err``). Both are immutable;
every combinator builds a new one.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar, Union

T = TypeVar("T")

# Characters of remaining input shown by Err.describe()
_SNIPPET_LENGTH = 20


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful parse: ``value`` plus the ``rest`` of the input."""

    value: T
    rest: str

    def is_success(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    """
    Failed parse.

    Attributes:
        message: Human-readable diagnostic, the default rendering.
        expected: Alternatives that were attempted at the failure point,
            e.g. ``("'sen'", "'cos'")``.
        remaining: The input the failing step was looking at, if known.
            Shorter means the parse got further before failing.
    """

    message: str
    expected: tuple[str, ...] = ()
    remaining: str | None = None

    def is_success(self) -> bool:
        return False

    def __str__(self) -> str:
        return self.message

    def describe(self) -> str:
        """Render the message with the attempted alternatives and position."""
        parts = [self.message]
        if self.expected:
            parts.append(f"expected one of: {', '.join(self.expected)}")
        if self.remaining is not None:
            if not self.remaining:
                parts.append("at end of input")
            else:
                snippet = self.remaining[:_SNIPPET_LENGTH]
                if len(self.remaining) > _SNIPPET_LENGTH:
                    snippet += "..."
                parts.append(f"at {snippet!r}")
        return "; ".join(parts)


Result: TypeAlias = Union[Ok[T], Err]
