"""Value kinds and coercion rules shared by the predicates.

Form values arrive loosely typed. Predicates inspect them through the helpers
in this module so that every rule treats an absent field, an explicit null,
strings, numbers, booleans and sequences consistently.

Two absence states are kept apart:

- ``None`` is an explicit null (the field was sent empty).
- ``UNDEFINED`` means the field was never provided at all.

``not_null`` and ``not_undefined`` tell these apart, so they must never be
collapsed into one.
"""

from __future__ import annotations

import math
import re
from enum import Enum
from numbers import Number
from typing import Any


class _Undefined:
    """Singleton marking a value that was never provided."""

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED = _Undefined()


class ValueKind(Enum):
    """Kinds of input values distinguished by the predicates."""

    ABSENT = "absent"
    NULL = "null"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    SEQUENCE = "sequence"
    OTHER = "other"


_DECIMAL_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_RADIX_PREFIXES = {"0x": 16, "0o": 8, "0b": 2}

# Stripped by trim_text. Includes the byte order mark but not the ASCII
# separators \x1c-\x1f.
WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)

# Numbers at or above this magnitude render in exponent form
_EXPONENT_THRESHOLD = 1e21


def kind_of(value: Any) -> ValueKind:
    """Classify a value.

    ``bool`` is checked before numbers since it subclasses ``int``.
    """
    if value is UNDEFINED:
        return ValueKind.ABSENT
    if value is None:
        return ValueKind.NULL
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, Number):
        return ValueKind.NUMBER
    if isinstance(value, (list, tuple)):
        return ValueKind.SEQUENCE
    return ValueKind.OTHER


def is_truthy(value: Any) -> bool:
    """Truthiness as form values are judged.

    ``None``, ``UNDEFINED``, ``False``, zero, NaN and the empty string are
    falsy. Every other value is truthy, including empty sequences.
    """
    kind = kind_of(value)
    if kind in (ValueKind.ABSENT, ValueKind.NULL):
        return False
    if kind is ValueKind.STRING:
        return len(value) > 0
    if kind is ValueKind.BOOLEAN:
        return bool(value)
    if kind is ValueKind.NUMBER:
        number = to_number(value)
        return not math.isnan(number) and number != 0
    return True


def length_of(value: Any) -> int | None:
    """Return the length of strings and sequences, ``None`` for anything else."""
    if kind_of(value) in (ValueKind.STRING, ValueKind.SEQUENCE):
        return len(value)
    return None


def to_number(value: Any) -> float:
    """Coerce a value to a float following form-input number rules.

    Returns NaN when the value has no numeric reading.

    Examples:
        >>> to_number(" 12 ")
        12.0
        >>> to_number(None)
        0.0
        >>> to_number("12abc")
        nan
    """
    kind = kind_of(value)
    if kind is ValueKind.ABSENT:
        return math.nan
    if kind is ValueKind.NULL:
        return 0.0
    if kind is ValueKind.BOOLEAN:
        return 1.0 if value else 0.0
    if kind is ValueKind.NUMBER:
        try:
            return float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf
        except (TypeError, ValueError):
            # Complex numbers and exotic Number subclasses
            return math.nan
    if kind is ValueKind.STRING:
        return _parse_number(value)
    if kind is ValueKind.SEQUENCE:
        return _parse_number(to_text(value))
    return math.nan


def trim_text(text: str) -> str:
    return text.strip(WHITESPACE)


def _parse_number(text: str) -> float:
    text = trim_text(text)
    if not text:
        return 0.0
    if text in ("Infinity", "+Infinity"):
        return math.inf
    if text == "-Infinity":
        return -math.inf
    prefix = text[:2].lower()
    if prefix in _RADIX_PREFIXES:
        digits = text[2:]
        # int() tolerates underscores, the radix grammar does not
        if not digits or "_" in digits:
            return math.nan
        try:
            return float(int(digits, _RADIX_PREFIXES[prefix]))
        except ValueError:
            return math.nan
    if _DECIMAL_RE.fullmatch(text):
        return float(text)
    return math.nan


def to_text(value: Any) -> str:
    """Render a value as text the way string concatenation renders it.

    Examples:
        >>> to_text(True)
        'true'
        >>> to_text(2.0)
        '2'
        >>> to_text(["a", None, 3])
        'a,,3'
    """
    kind = kind_of(value)
    if kind is ValueKind.ABSENT:
        return "undefined"
    if kind is ValueKind.NULL:
        return "null"
    if kind is ValueKind.STRING:
        return value
    if kind is ValueKind.BOOLEAN:
        return "true" if value else "false"
    if kind is ValueKind.NUMBER:
        return _number_text(value)
    if kind is ValueKind.SEQUENCE:
        return join_text(value, ",")
    return str(value)


def join_text(values: Any, separator: str) -> str:
    """Join values as text; ``None`` and ``UNDEFINED`` render empty."""
    return separator.join(
        "" if item is None or item is UNDEFINED else to_text(item)
        for item in values
    )


def _number_text(value: Any) -> str:
    if isinstance(value, int):
        return str(value)
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return str(value)
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "Infinity" if number > 0 else "-Infinity"
    if number.is_integer() and abs(number) < _EXPONENT_THRESHOLD:
        return str(int(number))
    return repr(number)
