"""Exceptions for the dataknobs_validators package.

Validation failures are never raised: an invalid value produces a
``ValidationResult`` with ``is_valid=False``. The exceptions below signal
programmer error only, such as configuring a validator with a regex that
does not compile or asking for a domain type that was never registered.
They are the common exception framework from dataknobs_common.

Example:
    ```python
    from dataknobs_validators import ConfigurationError, custom_regex

    try:
        validator = custom_regex("[unclosed")
    except ConfigurationError as e:
        logger.error(f"Error: {e}")
        if e.context:
            logger.error(f"Context: {e.context}")
    ```
"""

from __future__ import annotations

from dataknobs_common import (
    ConfigurationError,
    DataknobsError,
    NotFoundError,
    OperationError,
)

# Root of every error raised by this package
ValidatorsError = DataknobsError

__all__ = [
    "ValidatorsError",
    "ConfigurationError",
    "NotFoundError",
    "OperationError",
]
