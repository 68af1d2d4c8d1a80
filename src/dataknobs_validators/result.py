"""Validation result type.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of applying one validator to one value.

    The message is always populated and describes the rule, not the failing
    value. Callers ignore it when ``is_valid`` is true.
    """

    is_valid: bool
    message: str

    def __bool__(self) -> bool:
        """Allow 'if result:' usage to check validity."""
        return self.is_valid

    @property
    def failed(self) -> bool:
        """Check if validation failed."""
        return not self.is_valid

    def to_dict(self) -> dict[str, Any]:
        """Serialize using the ``isValid``/``message`` record shape.

        Returns:
            Dictionary with ``isValid`` and ``message`` keys
        """
        return {"isValid": self.is_valid, "message": self.message}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ValidationResult:
        """Rebuild a result from its ``to_dict`` form.

        Args:
            data: Dictionary with ``isValid`` and ``message`` keys

        Returns:
            ValidationResult instance
        """
        return cls(is_valid=bool(data["isValid"]), message=str(data["message"]))
