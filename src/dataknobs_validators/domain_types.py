"""Domain types: named validator bundles for common field kinds.

A bundle is an ordered tuple of bound validators. Nothing here aggregates
results on its own; the helpers at the bottom are for callers who want a
particular policy (all failures, first failure, or a single verdict).

Example:
    ```python
    from dataknobs_validators import domain_types, apply, failure_messages

    results = apply(domain_types["rating"], 6)
    failure_messages(results)
    # ['Value cannot be greater than 5.']
    ```
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from types import MappingProxyType
from typing import Any

from dataknobs_common.registry import Registry

from .exceptions import ConfigurationError
from .facade import is_email, max_length, max_value, min_length, min_value
from .result import ValidationResult

logger = logging.getLogger(__name__)

Bundle = tuple[Callable[[Any], ValidationResult], ...]

DEFAULT_DOMAIN_TYPES: MappingProxyType[str, Bundle] = MappingProxyType({
    "email": (is_email, max_length(64)),
    "password": (min_length(4), max_length(64)),
    "name": (min_length(4), max_length(64)),
    "rating": (min_value(1), max_value(5)),
})


class DomainTypeRegistry(Registry[Bundle]):
    """Registry of validator bundles keyed by domain type name.

    Args:
        name: Registry name
        include_defaults: Preload the email, password, name and rating bundles
    """

    def __init__(self, name: str = "domain_types", include_defaults: bool = True):
        super().__init__(name)
        if include_defaults:
            self.restore_defaults()

    def register(  # type: ignore[override]
        self,
        key: str,
        item: Iterable[Callable[[Any], ValidationResult]],
        metadata: dict[str, Any] | None = None,
        allow_overwrite: bool = False,
    ) -> None:
        """Register a bundle under a domain type name.

        Args:
            key: Domain type name
            item: Validators in the order they should be applied
            metadata: Optional metadata about the bundle
            allow_overwrite: Replace an existing bundle with the same name

        Raises:
            ConfigurationError: If the name is not a string or an entry of the
                bundle is not callable
            OperationError: If the name exists and allow_overwrite is False
        """
        if not isinstance(key, str):
            raise ConfigurationError(
                f"Domain type name must be a string, got {type(key).__name__}: {key!r}",
                context={"domain_type": key},
            )
        bundle = tuple(item)
        for validator in bundle:
            if not callable(validator):
                raise ConfigurationError(
                    f"Domain type '{key}' contains a non-callable validator: {validator!r}",
                    context={"domain_type": key},
                )
        super().register(key, bundle, metadata=metadata, allow_overwrite=allow_overwrite)
        logger.debug(f"Registered domain type '{key}' in {self.name}")

    def names(self) -> list[str]:
        return self.list_keys()

    def restore_defaults(self) -> None:
        """Re-register the default bundles, replacing any overrides."""
        for key, bundle in DEFAULT_DOMAIN_TYPES.items():
            self.register(key, bundle, allow_overwrite=True)

    def __getitem__(self, key: str) -> Bundle:
        return self.get(key)

    def __repr__(self) -> str:
        return f"DomainTypeRegistry(name='{self.name}', items={self.count()})"


def apply(bundle: Iterable[Callable[[Any], ValidationResult]], value: Any) -> list[ValidationResult]:
    """Apply every validator of a bundle to a value, in bundle order."""
    return [validator(value) for validator in bundle]


def first_failure(results: Iterable[ValidationResult]) -> ValidationResult | None:
    """Return the first failing result, or None if all passed."""
    for result in results:
        if not result.is_valid:
            return result
    return None


def all_valid(results: Iterable[ValidationResult]) -> bool:
    return all(result.is_valid for result in results)


def failure_messages(results: Sequence[ValidationResult]) -> list[str]:
    """Messages of the failing results, in order."""
    return [result.message for result in results if not result.is_valid]


domain_types = DomainTypeRegistry()
