"""Check-function factories: totality, messages, and factory argument errors."""

from __future__ import annotations

import datetime
from typing import Annotated

from hypothesis import given, settings
from hypothesis import strategies as st
from pydantic import Field
import pytest

from fieldstate import CheckError, Failure, Invalid, Success, Valid, checks, validate

pytestmark = pytest.mark.unit


class TestRequired:
    @pytest.mark.parametrize("raw", ["", "   ", "\t\n"])
    def test_blank_input_fails(self, raw: str) -> None:
        assert checks.required()(raw) == Failure("Required")

    def test_custom_message(self) -> None:
        assert checks.required("Name is required")("") == Failure("Name is required")

    def test_strips_surrounding_whitespace(self) -> None:
        assert checks.required()("  Ann ") == Success("Ann")


class TestNumbers:
    def test_as_int_parses_with_whitespace(self) -> None:
        assert checks.as_int()(" 42 ") == Success(42)

    @pytest.mark.parametrize("raw", ["", "4.5", "abc", "12abc"])
    def test_as_int_rejects(self, raw: str) -> None:
        assert checks.as_int("Must be a number")(raw) == Failure("Must be a number")

    def test_as_int_accepts_sign(self) -> None:
        assert checks.as_int()("-7") == Success(-7)
        assert checks.as_int()("+7") == Success(7)

    @pytest.mark.parametrize("raw", ["1_000", "\u0661\u0662", "1e3", "0x10"])
    def test_as_int_rejects_non_plain_digits(self, raw: str) -> None:
        assert checks.as_int("Must be a number")(raw) == Failure("Must be a number")

    def test_as_float(self) -> None:
        assert checks.as_float()("2.5") == Success(2.5)
        assert checks.as_float()("two") == Failure("Must be a number")

    @pytest.mark.parametrize(
        "raw", ["nan", "inf", "-Infinity", "1e999", "1_000.5", "\u0661.5"]
    )
    def test_as_float_rejects_non_finite_and_separators(self, raw: str) -> None:
        assert checks.as_float()(raw) == Failure("Must be a number")

    def test_as_float_accepts_exponent(self) -> None:
        assert checks.as_float()(" 1.5e2 ") == Success(150.0)

    @given(raw=st.text(max_size=20))
    @settings(max_examples=50, deadline=None, derandomize=True)
    def test_as_int_is_total(self, raw: str) -> None:
        """Property: numeric checks never raise for any string input."""
        outcome = checks.as_int()(raw)
        assert isinstance(outcome, Success | Failure)


class TestLengthAndPattern:
    def test_min_length(self) -> None:
        check = checks.min_length(3)
        assert check("abc") == Success("abc")
        assert check("ab") == Failure("Must be at least 3 characters")

    def test_max_length(self) -> None:
        check = checks.max_length(2, "Too long")
        assert check("ab") == Success("ab")
        assert check("abc") == Failure("Too long")

    @pytest.mark.parametrize("factory", [checks.min_length, checks.max_length])
    def test_negative_bound_is_rejected(self, factory) -> None:
        with pytest.raises(CheckError) as exc:
            factory(-1)
        assert exc.value.hint is not None

    def test_matches_requires_full_match(self) -> None:
        check = checks.matches(r"\d{5}", "Must be a 5-digit ZIP")
        assert check("12345") == Success("12345")
        assert check("123456") == Failure("Must be a 5-digit ZIP")

    def test_matches_rejects_broken_pattern(self) -> None:
        with pytest.raises(CheckError, match="invalid pattern"):
            checks.matches("(", "never")

    def test_one_of(self) -> None:
        check = checks.one_of(["red", "green"])
        assert check("red") == Success("red")
        assert check("blue") == Failure("Must be one of: green, red")

    @pytest.mark.parametrize(
        "check",
        [
            checks.min_length(3, ""),
            checks.max_length(0, ""),
            checks.one_of(["red"], ""),
        ],
    )
    def test_explicit_empty_message_is_kept(self, check) -> None:
        assert check("ab") == Failure("")

    def test_one_of_requires_choices(self) -> None:
        with pytest.raises(CheckError):
            checks.one_of([])


class TestCatching:
    def test_uses_exception_text_by_default(self) -> None:
        def parse(raw: str) -> int:
            raise ValueError(f"cannot parse {raw!r}")

        assert checks.catching(parse)("x") == Failure("cannot parse 'x'")

    def test_unlisted_exceptions_propagate(self) -> None:
        def parse(raw: str) -> int:
            raise KeyError(raw)

        with pytest.raises(KeyError):
            checks.catching(parse, "bad")("x")

    def test_custom_exception_set(self) -> None:
        check = checks.catching(lambda raw: {"a": 1}[raw], "Unknown", (KeyError,))
        assert check("a") == Success(1)
        assert check("b") == Failure("Unknown")


class TestParseAs:
    def test_lax_int(self) -> None:
        assert checks.parse_as(int)("42") == Success(42)

    def test_date(self) -> None:
        assert checks.parse_as(datetime.date)("2024-01-31") == Success(
            datetime.date(2024, 1, 31)
        )

    def test_reports_first_pydantic_message(self) -> None:
        outcome = checks.parse_as(int)("abc")
        assert isinstance(outcome, Failure)
        assert "integer" in outcome.error

    def test_constrained_type_with_custom_message(self) -> None:
        check = checks.parse_as(Annotated[int, Field(ge=18)], "Must be 18 or older")
        assert check("30") == Success(30)
        assert check("12") == Failure("Must be 18 or older")

    def test_feeds_validate(self) -> None:
        result = validate(checks.parse_as(int, "Must be a number"), "x")
        assert result == Invalid("Must be a number", "x")


class TestChain:
    def test_threads_success_values(self) -> None:
        check = checks.chain(
            checks.required("Age is required"),
            checks.as_int("Must be a number"),
            lambda n: Success(n) if n >= 0 else Failure("Must be positive"),
        )
        assert validate(check, " 7 ") == Valid(7)
        assert validate(check, "-1") == Invalid("Must be positive", "-1")

    def test_first_failure_short_circuits(self) -> None:
        calls: list[object] = []

        def spy(value: object):
            calls.append(value)
            return Success(value)

        check = checks.chain(checks.required(), spy)
        assert check("") == Failure("Required")
        assert calls == []

    def test_single_step(self) -> None:
        assert checks.chain(checks.as_int())("3") == Success(3)
