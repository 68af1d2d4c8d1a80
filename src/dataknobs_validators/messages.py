"""Message catalog: the fixed explanation paired with each validator kind.

A message describes the rule, not the failing value, so it depends only on
the validator kind and its bound parameter. Parameters are rendered with
``to_text`` so ``True`` reads ``true`` and ``2.0`` reads ``2``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from types import MappingProxyType
from typing import Any

from .values import join_text, to_text


def required() -> str:
    return "Field is required."


def not_null() -> str:
    return "Field cannot be null."


def not_undefined() -> str:
    return "Field cannot be undefined."


def max_value(maximum: Any) -> str:
    return f"Value cannot be greater than {to_text(maximum)}."


def min_value(minimum: Any) -> str:
    return f"Value must be greater than {to_text(minimum)}."


def max_length(maximum_characters: int) -> str:
    return f"Maximum length is {to_text(maximum_characters)} characters."


def min_length(minimum_characters: int) -> str:
    return f"Minimum length is {to_text(minimum_characters)} characters."


def is_value(values: Iterable[Any]) -> str:
    return f"Value must be one of the following: {join_text(values, ', ')}."


def is_email() -> str:
    return "Value must be an e-mail address."


def is_numeric() -> str:
    return "Value must be numeric."


def is_time() -> str:
    return "Time must be in a valid format: [hh:mm]."


def is_date() -> str:
    return "Date must be in a valid format: [dd.mm.yyyy.]."


def is_url() -> str:
    return "Value must be a valid URL."


def is_array() -> str:
    return "Value must be an array."


def is_not_empty_array() -> str:
    return "Value must not be an empty array."


def custom_regex() -> str:
    return "Invalid format."


MESSAGES: MappingProxyType[str, Callable[..., str]] = MappingProxyType({
    "required": required,
    "notNull": not_null,
    "notUndefined": not_undefined,
    "maxValue": max_value,
    "minValue": min_value,
    "maxLength": max_length,
    "minLength": min_length,
    "isValue": is_value,
    "isEmail": is_email,
    "isNumeric": is_numeric,
    "isTime": is_time,
    "isDate": is_date,
    "isUrl": is_url,
    "isArray": is_array,
    "isNotEmptyArray": is_not_empty_array,
    "customRegex": custom_regex,
})
