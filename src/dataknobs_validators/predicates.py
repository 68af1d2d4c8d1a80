"""Predicate catalog: the acceptance test behind each validator kind.

Every predicate is pure and total. It returns ``False`` for values it cannot
judge instead of raising, so a form with unexpected input types still
validates. Parameterized kinds are predicate factories: ``max_length(64)``
returns a predicate bound to 64.

The only error raised here is ``ConfigurationError`` from ``custom_regex``
when its pattern does not compile, and it is raised at binding time.
"""

from __future__ import annotations

import math
import operator
import re
from collections.abc import Callable, Iterable
from types import MappingProxyType
from typing import Any

from .exceptions import ConfigurationError
from .values import (
    UNDEFINED,
    ValueKind,
    is_truthy,
    kind_of,
    length_of,
    to_number,
    to_text,
    trim_text,
)

Predicate = Callable[[Any], bool]

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
TIME_PATTERN = re.compile(r"(2[0-3]|[0-1]?[0-9]):[0-5][0-9]")
# Each separator is matched on its own, so "31/12-2024." is accepted
DATE_PATTERN = re.compile(
    r"(0?[1-9]|[12][0-9]|3[01])[/\-.](0?[1-9]|1[012])[/\-.][0-9]{4}\."
)
URL_PATTERN = re.compile(
    r"(https?://)?"
    r"((([a-z\d]([a-z\d-]*[a-z\d])?)\.)+[a-z]{2,}"
    r"|((\d{1,3}\.){3}\d{1,3}))"
    r"(:\d+)?"
    r"(/[-a-z\d%_.~+]*)*"
    r"(\?[;&a-z\d%_.~+=-]*)?"
    r"(\#[-a-z\d_]*)?",
    re.IGNORECASE | re.ASCII,
)


def _compare(left: Any, right: Any, op: Callable[[Any, Any], Any]) -> bool:
    """Order two values, falling back to numeric coercion.

    NaN on either side compares false.
    """
    try:
        return bool(op(left, right))
    except (TypeError, ValueError):
        pass
    return bool(op(to_number(left), to_number(right)))


def _matches(pattern: re.Pattern[str], value: Any) -> bool:
    return pattern.fullmatch(to_text(value)) is not None


def required(value: Any) -> bool:
    if value is None or value is UNDEFINED:
        return False
    if isinstance(value, str):
        return bool(len(value) and len(trim_text(value)))
    return True


def not_null(value: Any) -> bool:
    return value is not None


def not_undefined(value: Any) -> bool:
    return value is not UNDEFINED


def max_value(maximum: Any) -> Predicate:
    def predicate(value: Any) -> bool:
        return _compare(value, maximum, operator.le)

    return predicate


def min_value(minimum: Any) -> Predicate:
    def predicate(value: Any) -> bool:
        return _compare(value, minimum, operator.ge)

    return predicate


def max_length(maximum_characters: int) -> Predicate:
    """Falsy values pass; truthy values without a length fail."""

    def predicate(value: Any) -> bool:
        if not is_truthy(value):
            return True
        length = length_of(value)
        return length is not None and _compare(length, maximum_characters, operator.le)

    return predicate


def min_length(minimum_characters: int) -> Predicate:
    """Falsy values pass; truthy values without a length fail."""

    def predicate(value: Any) -> bool:
        if not is_truthy(value):
            return True
        length = length_of(value)
        return length is not None and _compare(length, minimum_characters, operator.ge)

    return predicate


def _strictly_equal(left: Any, right: Any) -> bool:
    if kind_of(left) is not kind_of(right):
        return False
    try:
        return bool(left == right)
    except (TypeError, ValueError):
        return False


def allowed_values(values: Iterable[Any]) -> tuple[Any, ...]:
    """Collect the allowed values of an ``isValue`` binding.

    Raises:
        ConfigurationError: If ``values`` is text or not iterable
    """
    if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
        raise ConfigurationError(
            f"Allowed values must be a list of values, got {type(values).__name__}: {values!r}",
            context={"kind": "isValue", "values": values},
        )
    return tuple(values)


def is_value_of(values: Iterable[Any]) -> Predicate:
    """Membership by exact equality: ``1`` matches ``1.0`` but not ``True``.

    Raises:
        ConfigurationError: If ``values`` is text or not iterable
    """
    allowed = allowed_values(values)

    def predicate(value: Any) -> bool:
        return any(_strictly_equal(item, value) for item in allowed)

    return predicate


def is_email(value: Any) -> bool:
    return _matches(EMAIL_PATTERN, value)


def is_numeric(value: Any) -> bool:
    return is_truthy(value) and not math.isnan(to_number(value))


def is_time(value: Any) -> bool:
    return _matches(TIME_PATTERN, value)


def is_date(value: Any) -> bool:
    return _matches(DATE_PATTERN, value)


def is_url(value: Any) -> bool:
    return _matches(URL_PATTERN, value)


def is_array(value: Any) -> bool:
    return kind_of(value) is ValueKind.SEQUENCE


def is_not_empty_array(value: Any) -> bool:
    return kind_of(value) is ValueKind.SEQUENCE and len(value) > 0


def compile_pattern(pattern: str | re.Pattern[str]) -> re.Pattern[str]:
    """Compile a pattern case-insensitively.

    Raises:
        ConfigurationError: If the pattern is not text or does not compile
    """
    if isinstance(pattern, re.Pattern):
        source, flags = pattern.pattern, pattern.flags
    else:
        source, flags = pattern, 0

    if not isinstance(source, str):
        raise ConfigurationError(
            f"Pattern must be a string, got {type(source).__name__}",
            context={"kind": "customRegex", "pattern": source},
        )

    try:
        return re.compile(source, flags | re.IGNORECASE)
    except re.error as e:
        raise ConfigurationError(
            f"Invalid pattern '{source}': {e}",
            context={"kind": "customRegex", "pattern": source},
        ) from e


def custom_regex(pattern: str | re.Pattern[str]) -> Predicate:
    """Truthy values whose text contains a match for ``pattern``."""
    regex = compile_pattern(pattern)

    def predicate(value: Any) -> bool:
        return is_truthy(value) and regex.search(to_text(value)) is not None

    return predicate


PREDICATES: MappingProxyType[str, Callable[..., Any]] = MappingProxyType({
    "required": required,
    "notNull": not_null,
    "notUndefined": not_undefined,
    "maxValue": max_value,
    "minValue": min_value,
    "maxLength": max_length,
    "minLength": min_length,
    "isValueOf": is_value_of,
    "isEmail": is_email,
    "isNumeric": is_numeric,
    "isTime": is_time,
    "isDate": is_date,
    "isUrl": is_url,
    "isArray": is_array,
    "isNotEmptyArray": is_not_empty_array,
    "customRegex": custom_regex,
})
