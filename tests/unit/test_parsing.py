"""Tests for the parser combinators and primitive parser builders.

Covers:
- Primitives: literal, regex, one_of, succeed, lazy
- Combinators: and_then, or_else, map, filter
- Composition laws: sequencing is associative
- Sharing parsers between threads
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from astcalc.core.calc_lang import parse
from astcalc.core.parsing import Parser, lazy, literal, one_of, regex, succeed
from astcalc.core.parsing.primitives import ONE_OF_FAILURE
from astcalc.core.results import Err, Ok

# ============================================================================
# Primitive tests
# ============================================================================


class TestLiteral:
    def test_matches_prefix(self) -> None:
        assert literal("abc").parse("abcdef") == Ok("abc", "def")

    def test_consumes_whole_input(self) -> None:
        assert literal("pi").parse("pi") == Ok("pi", "")

    def test_mismatch(self) -> None:
        result = literal("abc").parse("abx")
        assert isinstance(result, Err)
        assert result.message == "Expected literal: abc"
        assert result.expected == ("'abc'",)
        assert result.remaining == "abx"

    def test_input_shorter_than_literal(self) -> None:
        result = literal("abc").parse("ab")
        assert isinstance(result, Err)
        assert result.message == "Expected literal: abc"

    def test_empty_input(self) -> None:
        assert isinstance(literal("(").parse(""), Err)

    def test_call_is_parse(self) -> None:
        parser = literal("a")
        assert parser("ab") == parser.parse("ab")


class TestRegex:
    def test_match_at_start(self) -> None:
        assert regex(r"\d+").parse("42x") == Ok("42", "x")

    def test_anchored_to_start(self) -> None:
        result = regex(r"\d+").parse("x42")
        assert isinstance(result, Err)
        assert result.message == r"No match for regex: \d+"
        assert result.expected == (r"/\d+/",)

    def test_optional_groups(self) -> None:
        number = regex(r"[+-]?\d+(\.\d+)?")
        assert number.parse("-12.5*2") == Ok("-12.5", "*2")
        assert number.parse("7.") == Ok("7", ".")


class TestOneOf:
    def test_first_success_wins(self) -> None:
        parser = one_of(literal("a"), literal("ab"))
        assert parser.parse("abc") == Ok("a", "bc")

    def test_each_alternative_sees_original_input(self) -> None:
        parser = one_of(literal("ax"), literal("ab"))
        assert parser.parse("abc") == Ok("ab", "c")

    def test_all_fail_generic_message(self) -> None:
        result = one_of(literal("a"), literal("b")).parse("cde")
        assert isinstance(result, Err)
        assert result.message == ONE_OF_FAILURE
        assert str(result) == "No parser matched in oneOf."
        assert result.expected == ("'a'", "'b'")
        assert result.remaining == "cde"

    def test_failure_keeps_furthest_progress(self) -> None:
        deep = literal("a").and_then(lambda _: literal("x"))
        result = one_of(deep, literal("b")).parse("ab")
        assert isinstance(result, Err)
        assert result.message == ONE_OF_FAILURE
        assert result.remaining == "b"
        assert result.expected == ("'x'", "'b'")

    def test_no_alternatives(self) -> None:
        result = one_of().parse("x")
        assert isinstance(result, Err)
        assert result.message == ONE_OF_FAILURE


class TestSucceed:
    def test_zero_width(self) -> None:
        assert succeed(5).parse("rest") == Ok(5, "rest")
        assert succeed(None).parse("") == Ok(None, "")


class TestLazy:
    def test_factory_runs_once(self) -> None:
        calls: list[int] = []

        def factory() -> Parser[str]:
            calls.append(1)
            return literal("a")

        parser = lazy(factory)
        assert calls == []
        assert parser.parse("ab") == Ok("a", "b")
        assert parser.parse("a") == Ok("a", "")
        assert len(calls) == 1

    def test_recursive_rule(self) -> None:
        # nested := "(" nested ")" | "x"
        nested: Parser[str] = lazy(lambda: rule)
        rule = literal("(").and_then(
            lambda _: nested.and_then(lambda inner: literal(")").map(lambda _: inner))
        ).or_else(literal("x"))
        assert rule.parse("((x))!") == Ok("x", "!")


# ============================================================================
# Combinator tests
# ============================================================================


class TestAndThen:
    def test_runs_next_on_rest(self) -> None:
        parser = literal("a").and_then(lambda _: literal("b"))
        assert parser.parse("abc") == Ok("b", "c")

    def test_next_parser_depends_on_value(self) -> None:
        # Second token must repeat the first
        parser = one_of(literal("x"), literal("y")).and_then(literal)
        assert parser.parse("xx") == Ok("x", "")
        assert isinstance(parser.parse("xy"), Err)

    def test_failure_passes_through_without_calling_next(self) -> None:
        called: list[str] = []

        def next_parser(value: str) -> Parser[str]:
            called.append(value)
            return literal("b")

        result = literal("a").and_then(next_parser).parse("zzz")
        assert isinstance(result, Err)
        assert result.message == "Expected literal: a"
        assert called == []

    def test_second_failure_reported(self) -> None:
        result = literal("a").and_then(lambda _: literal("b")).parse("ac")
        assert isinstance(result, Err)
        assert result.message == "Expected literal: b"


class TestOrElse:
    def test_alternative_runs_on_original_input(self) -> None:
        parser = literal("ab").or_else(literal("a"))
        assert parser.parse("ac") == Ok("a", "c")

    def test_alternative_not_invoked_on_success(self) -> None:
        called: list[str] = []

        def spy(text: str) -> Ok[str]:
            called.append(text)
            return Ok("alt", text)

        assert literal("a").or_else(Parser(spy)).parse("ab") == Ok("a", "b")
        assert called == []

    def test_alternative_failure_is_reported(self) -> None:
        result = literal("a").or_else(literal("b")).parse("c")
        assert isinstance(result, Err)
        assert result.message == "Expected literal: b"

    def test_consumed_prefix_is_not_kept(self) -> None:
        # First branch consumes "a" before failing; the second restarts at "a"
        first = literal("a").and_then(lambda _: literal("x"))
        parser = first.or_else(literal("ab"))
        assert parser.parse("abc") == Ok("ab", "c")


class TestMap:
    def test_transforms_value_keeps_rest(self) -> None:
        parser = regex(r"\d+").map(int)
        assert parser.parse("12+3") == Ok(12, "+3")

    def test_failure_passes_through(self) -> None:
        result = regex(r"\d+").map(int).parse("x")
        assert isinstance(result, Err)
        assert result.message == r"No match for regex: \d+"


class TestFilter:
    def test_accepted_value_passes(self) -> None:
        parser = one_of(literal("+"), literal("*")).filter(lambda op: op == "+", "want +")
        assert parser.parse("+1") == Ok("+", "1")

    def test_rejected_value_becomes_failure(self) -> None:
        parser = one_of(literal("+"), literal("*")).filter(lambda op: op == "+", "want +")
        result = parser.parse("*1")
        assert isinstance(result, Err)
        assert result.message == "want +"

    def test_rejection_falls_back_from_original_input(self) -> None:
        parser = literal("*").filter(lambda _: False, "nope").or_else(succeed("none"))
        assert parser.parse("*1") == Ok("none", "*1")

    def test_failure_passes_through(self) -> None:
        result = literal("a").filter(lambda _: True, "unused").parse("b")
        assert isinstance(result, Err)
        assert result.message == "Expected literal: a"


# ============================================================================
# Composition laws
# ============================================================================


class TestAssociativity:
    """(a andThen b) andThen c behaves like a andThen (b andThen c)."""

    @pytest.mark.parametrize("text", ["abcd", "abc", "abx", "axc", "x", ""])
    def test_and_then_is_associative(self, text: str) -> None:
        a, b, c = literal("a"), literal("b"), literal("c")
        left = a.and_then(lambda _: b).and_then(lambda _: c)
        right = a.and_then(lambda _: b.and_then(lambda _: c))
        assert left.parse(text) == right.parse(text)

    def test_rest_is_suffix_of_input(self) -> None:
        parser = literal("a").and_then(lambda _: regex(r"\d+")).map(int)
        text = "a123tail"
        result = parser.parse(text)
        assert isinstance(result, Ok)
        assert text.endswith(result.rest)
        assert result.rest == "tail"


# ============================================================================
# Concurrency
# ============================================================================


class TestConcurrentParsing:
    SOURCES = ["1+2", "(1+2)*3", "sen(54)", "2*3*4", "foo(1)", "", "sen(30", "10-4"]

    def test_threads_agree_with_sequential_parse(self) -> None:
        expected = [parse(source) for source in self.SOURCES] * 50
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(parse, self.SOURCES * 50))
        assert results == expected

    def test_unresolved_lazy_rule_shared_between_threads(self) -> None:
        parser = lazy(lambda: literal("a").and_then(lambda _: regex(r"\d+")))
        texts = ["a1", "a22x", "b", "a"] * 100
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(parser.parse, texts))
        assert results == [parser.parse(text) for text in texts]
        assert results[:2] == [Ok("1", ""), Ok("22", "x")]
        assert isinstance(results[2], Err)
