"""Validators pairing each predicate with its message.

Zero-parameter kinds are ready-made ``Validator`` instances. Parameterized
kinds are binding functions: configure once, then reuse the returned
validator for any number of values.

Example:
    ```python
    from dataknobs_validators import max_length, required

    title_length = max_length(64)

    for title in titles:
        for validator in (required, title_length):
            result = validator(title)
            if not result.is_valid:
                print(result.message)
    ```
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass, replace
from typing import Any

from . import messages, predicates
from .result import ValidationResult


@dataclass(frozen=True)
class Validator:
    """A predicate and its message bound under a validator kind name.

    Attributes:
        name: Validator kind, e.g. ``"maxLength"``
        predicate: Callable deciding acceptance of a value
        message: Fixed explanation of the rule
        parameter: Bound configuration for parameterized kinds
    """

    name: str
    predicate: Callable[[Any], bool]
    message: str
    parameter: Any = None

    def __call__(self, value: Any) -> ValidationResult:
        """Validate a value.

        Args:
            value: Value to validate

        Returns:
            ValidationResult with the predicate outcome and this message
        """
        return ValidationResult(
            is_valid=bool(self.predicate(value)),
            message=self.message,
        )

    def with_message(self, message: str) -> Validator:
        """Return a copy of this validator with a different message."""
        return replace(self, message=message)

    def __repr__(self) -> str:
        if self.parameter is None:
            return f"Validator({self.name})"
        return f"Validator({self.name}={self.parameter!r})"


def make_validator(
    name: str,
    predicate: Callable[[Any], bool],
    message: str,
    parameter: Any = None,
) -> Validator:
    """Build a custom validator from any predicate and message.

    Useful to reuse a catalog predicate under a different message:

        >>> short_code = make_validator(
        ...     "shortCode", predicates.max_length(8), "Codes are 8 characters at most."
        ... )
    """
    return Validator(name=name, predicate=predicate, message=message, parameter=parameter)


required = Validator("required", predicates.required, messages.required())
not_null = Validator("notNull", predicates.not_null, messages.not_null())
not_undefined = Validator("notUndefined", predicates.not_undefined, messages.not_undefined())
is_email = Validator("isEmail", predicates.is_email, messages.is_email())
is_numeric = Validator("isNumeric", predicates.is_numeric, messages.is_numeric())
is_time = Validator("isTime", predicates.is_time, messages.is_time())
is_date = Validator("isDate", predicates.is_date, messages.is_date())
is_url = Validator("isUrl", predicates.is_url, messages.is_url())
is_array = Validator("isArray", predicates.is_array, messages.is_array())
is_not_empty_array = Validator(
    "isNotEmptyArray", predicates.is_not_empty_array, messages.is_not_empty_array()
)


def max_value(maximum: Any) -> Validator:
    """Value must not be greater than ``maximum``."""
    return Validator("maxValue", predicates.max_value(maximum), messages.max_value(maximum), maximum)


def min_value(minimum: Any) -> Validator:
    """Value must not be lower than ``minimum``."""
    return Validator("minValue", predicates.min_value(minimum), messages.min_value(minimum), minimum)


def max_length(maximum_characters: int) -> Validator:
    """Length must not exceed ``maximum_characters``; empty values pass."""
    return Validator(
        "maxLength",
        predicates.max_length(maximum_characters),
        messages.max_length(maximum_characters),
        maximum_characters,
    )


def min_length(minimum_characters: int) -> Validator:
    """Length must reach ``minimum_characters``; empty values pass."""
    return Validator(
        "minLength",
        predicates.min_length(minimum_characters),
        messages.min_length(minimum_characters),
        minimum_characters,
    )


def is_value(values: Iterable[Any]) -> Validator:
    """Value must be one of ``values``.

    Raises:
        ConfigurationError: If ``values`` is text or not iterable
    """
    allowed = predicates.allowed_values(values)
    return Validator("isValue", predicates.is_value_of(allowed), messages.is_value(allowed), allowed)


def custom_regex(pattern: str | re.Pattern[str]) -> Validator:
    """Value must contain a match for ``pattern``, ignoring case.

    Raises:
        ConfigurationError: If the pattern does not compile
    """
    return Validator("customRegex", predicates.custom_regex(pattern), messages.custom_regex(), pattern)
