"""Tests for the predicate catalog."""

import re

import pytest

from dataknobs_validators import UNDEFINED, ConfigurationError, predicates
from dataknobs_validators.predicates import PREDICATES


class TestPresence:
    """Test required, not_null and not_undefined."""

    def test_required(self):
        """Test blank and absent values fail."""
        assert predicates.required("") is False
        assert predicates.required("   ") is False
        assert predicates.required("\t\n") is False
        assert predicates.required(None) is False
        assert predicates.required(UNDEFINED) is False
        assert predicates.required("a") is True
        assert predicates.required(" a ") is True

    def test_required_whitespace_set(self):
        """Test which characters count as blank."""
        assert predicates.required("\ufeff") is False
        assert predicates.required("\u00a0\u3000\u2028") is False
        assert predicates.required(" \ufeff ") is False
        assert predicates.required("\x1c") is True
        assert predicates.required("\x1f") is True
        assert predicates.required("\x85") is True

    def test_required_non_text(self):
        """Test non-text values pass unconditionally."""
        assert predicates.required(0) is True
        assert predicates.required(False) is True
        assert predicates.required([]) is True
        assert predicates.required({}) is True

    def test_not_null(self):
        """Test that only None fails."""
        assert predicates.not_null(None) is False
        assert predicates.not_null(UNDEFINED) is True
        assert predicates.not_null("") is True

    def test_not_undefined(self):
        """Test that only UNDEFINED fails."""
        assert predicates.not_undefined(UNDEFINED) is False
        assert predicates.not_undefined(None) is True
        assert predicates.not_undefined(0) is True


class TestValueBounds:
    """Test max_value and min_value."""

    def test_max_value(self):
        """Test inclusive maximum."""
        at_most_five = predicates.max_value(5)
        assert at_most_five(4) is True
        assert at_most_five(5) is True
        assert at_most_five(6) is False
        assert at_most_five(5.5) is False

    def test_min_value(self):
        """Test inclusive minimum."""
        at_least_one = predicates.min_value(1)
        assert at_least_one(1) is True
        assert at_least_one(0) is False
        assert at_least_one(2.5) is True

    def test_mixed_types_do_not_raise(self):
        """Test comparisons Python cannot order fall back to numbers."""
        at_most_five = predicates.max_value(5)
        assert at_most_five("3") is True
        assert at_most_five("7") is False
        assert at_most_five("abc") is False
        assert at_most_five(None) is True
        assert at_most_five(UNDEFINED) is False
        assert at_most_five(float("nan")) is False
        assert at_most_five({"a": 1}) is False

    def test_strings_compare_as_strings(self):
        """Test two strings are ordered lexically."""
        assert predicates.max_value("m")("a") is True
        assert predicates.max_value("m")("z") is False


class TestLengthBounds:
    """Test max_length and min_length."""

    def test_max_length(self):
        """Test inclusive maximum length."""
        at_most_three = predicates.max_length(3)
        assert at_most_three("ab") is True
        assert at_most_three("abc") is True
        assert at_most_three("abcd") is False
        assert at_most_three([1, 2, 3, 4]) is False

    def test_min_length(self):
        """Test inclusive minimum length."""
        at_least_four = predicates.min_length(4)
        assert at_least_four("abcd") is True
        assert at_least_four("abc") is False
        assert at_least_four([1, 2, 3, 4]) is True

    def test_falsy_values_pass(self):
        """Test empty values pass both bounds."""
        for value in (None, UNDEFINED, "", 0, False):
            assert predicates.max_length(3)(value) is True, value
            assert predicates.min_length(4)(value) is True, value

    def test_empty_sequence_is_checked(self):
        """Test empty sequences are truthy and their length applies."""
        assert predicates.max_length(3)([]) is True
        assert predicates.min_length(4)([]) is False

    def test_values_without_length_fail(self):
        """Test truthy values that have no length."""
        assert predicates.max_length(3)(12345) is False
        assert predicates.min_length(1)(True) is False
        assert predicates.max_length(3)({"a": 1}) is False


class TestMembership:
    """Test is_value_of."""

    def test_membership(self):
        """Test exact membership."""
        one_of = predicates.is_value_of(["a", "b"])
        assert one_of("a") is True
        assert one_of("b") is True
        assert one_of("c") is False
        assert one_of("A") is False
        assert one_of(None) is False

    def test_strict_equality(self):
        """Test booleans and numbers are not interchangeable."""
        numbers = predicates.is_value_of([1, 2])
        assert numbers(1) is True
        assert numbers(1.0) is True
        assert numbers(True) is False
        assert numbers("1") is False
        assert predicates.is_value_of([float("nan")])(float("nan")) is False

    def test_values_are_copied(self):
        """Test that later changes to the list do not leak in."""
        values = ["a"]
        one_of = predicates.is_value_of(values)
        values.append("b")
        assert one_of("b") is False

    def test_allowed_values_must_be_a_collection(self):
        """Test text and scalars are rejected at binding."""
        for values in ("low", b"low", 5, None):
            with pytest.raises(ConfigurationError):
                predicates.is_value_of(values)

    def test_any_iterable_of_values(self):
        """Test sets, tuples and generators are accepted."""
        assert predicates.is_value_of({"a"})("a") is True
        assert predicates.is_value_of(("a", "b"))("b") is True
        assert predicates.is_value_of(v for v in ["a"])("a") is True


class TestFormats:
    """Test the pattern-based predicates."""

    def test_is_email(self):
        """Test minimal local@domain.tld shape."""
        assert predicates.is_email("user@example.com") is True
        assert predicates.is_email("first.last+tag@sub.example.co") is True
        assert predicates.is_email("not-an-email") is False
        assert predicates.is_email("user@example") is False
        assert predicates.is_email("us er@example.com") is False
        assert predicates.is_email("user@@example.com") is False
        assert predicates.is_email("user@example.com\n") is False
        assert predicates.is_email(None) is False
        assert predicates.is_email(42) is False

    def test_is_time(self):
        """Test HH:MM with optional leading zero."""
        assert predicates.is_time("00:00") is True
        assert predicates.is_time("23:59") is True
        assert predicates.is_time("9:05") is True
        assert predicates.is_time("24:00") is False
        assert predicates.is_time("12:60") is False
        assert predicates.is_time("12:5") is False
        assert predicates.is_time("12:30:00") is False
        assert predicates.is_time(None) is False

    def test_is_date(self):
        """Test DD.MM.YYYY. with trailing dot."""
        assert predicates.is_date("31.12.2024.") is True
        assert predicates.is_date("1.1.2024.") is True
        assert predicates.is_date("31/12/2024.") is True
        assert predicates.is_date("31-12-2024.") is True
        assert predicates.is_date("2024-12-31") is False
        assert predicates.is_date("31.12.2024") is False
        assert predicates.is_date("32.12.2024.") is False
        assert predicates.is_date("31.13.2024.") is False
        assert predicates.is_date("31.12.24.") is False

    def test_is_date_mixed_separators(self):
        """Test each separator position is matched independently."""
        assert predicates.is_date("31/12-2024.") is True
        assert predicates.is_date("31.12/2024.") is True

    def test_is_url(self):
        """Test the broad URL shape."""
        assert predicates.is_url("https://example.com") is True
        assert predicates.is_url("http://www.example.com/path/to?q=1&x=y#top") is True
        assert predicates.is_url("example.com") is True
        assert predicates.is_url("EXAMPLE.COM/Path") is True
        assert predicates.is_url("http://192.168.0.1:8080/status") is True
        assert predicates.is_url("sub-domain.example.org:443") is True
        assert predicates.is_url("not a url") is False
        assert predicates.is_url("localhost") is False
        assert predicates.is_url("ftp://example.com") is False
        assert predicates.is_url("example.c") is False
        assert predicates.is_url(None) is False

    def test_is_url_long_invalid_input(self):
        """Test long near-miss hosts fail without pathological backtracking."""
        assert predicates.is_url("a" * 5000 + "!") is False


class TestNumeric:
    """Test is_numeric."""

    def test_numeric(self):
        """Test numbers and numeric strings."""
        assert predicates.is_numeric(5) is True
        assert predicates.is_numeric(-2.5) is True
        assert predicates.is_numeric("12") is True
        assert predicates.is_numeric("12.5") is True
        assert predicates.is_numeric("0") is True
        assert predicates.is_numeric(" 7 ") is True

    def test_not_numeric(self):
        """Test falsy and non-numeric values."""
        assert predicates.is_numeric(0) is False
        assert predicates.is_numeric("") is False
        assert predicates.is_numeric(None) is False
        assert predicates.is_numeric(UNDEFINED) is False
        assert predicates.is_numeric("abc") is False
        assert predicates.is_numeric("12abc") is False
        assert predicates.is_numeric(float("nan")) is False
        assert predicates.is_numeric({"a": 1}) is False


class TestArrays:
    """Test is_array and is_not_empty_array."""

    def test_is_array(self):
        """Test lists and tuples are arrays."""
        assert predicates.is_array([]) is True
        assert predicates.is_array((1,)) is True
        assert predicates.is_array("abc") is False
        assert predicates.is_array({"a": 1}) is False
        assert predicates.is_array(None) is False

    def test_is_not_empty_array(self):
        """Test at least one element is required."""
        assert predicates.is_not_empty_array([1]) is True
        assert predicates.is_not_empty_array([]) is False
        assert predicates.is_not_empty_array("abc") is False
        assert predicates.is_not_empty_array(UNDEFINED) is False


class TestCustomRegex:
    """Test custom_regex."""

    def test_case_insensitive_search(self):
        """Test the pattern is searched ignoring case."""
        letters_only = predicates.custom_regex("^[a-z]+$")
        assert letters_only("abc") is True
        assert letters_only("ABC") is True
        assert letters_only("abc1") is False
        assert predicates.custom_regex(r"\d+")("abc123") is True

    def test_falsy_values_fail(self):
        """Test empty values never match."""
        anything = predicates.custom_regex(".*")
        assert anything("") is False
        assert anything(None) is False
        assert anything(0) is False

    def test_non_text_values(self):
        """Test values are matched through their text form."""
        assert predicates.custom_regex(r"^\d+$")(12345) is True

    def test_compiled_pattern(self):
        """Test precompiled patterns keep their flags and ignore case."""
        pattern = re.compile(r"^abc$", re.MULTILINE)
        assert predicates.custom_regex(pattern)("ABC") is True

    def test_invalid_pattern(self):
        """Test a bad pattern fails at binding time."""
        with pytest.raises(ConfigurationError) as exc_info:
            predicates.custom_regex("[unclosed")
        assert exc_info.value.context["pattern"] == "[unclosed"

    def test_non_text_pattern(self):
        """Test patterns must be text."""
        with pytest.raises(ConfigurationError):
            predicates.custom_regex(42)  # type: ignore[arg-type]
        with pytest.raises(ConfigurationError):
            predicates.custom_regex(re.compile(b"abc"))  # type: ignore[arg-type]


class TestPredicateTable:
    """Test the PREDICATES mapping."""

    def test_names(self):
        """Test membership kind is exposed as isValueOf."""
        assert len(PREDICATES) == 16
        assert PREDICATES["isValueOf"] is predicates.is_value_of
        assert "isValue" not in PREDICATES
        assert PREDICATES["required"] is predicates.required
