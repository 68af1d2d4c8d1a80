"""Aggregate catalog of every validator and the domain type bundles.

The catalog gives namespaced access for callers that prefer one import:

    ```python
    from dataknobs_validators import validators

    validators.required("value")
    validators["maxLength"](64)("value")
    validators.domain_types["email"]
    ```

Entries are resolved by Python name (``max_length``) or by validator kind
name (``maxLength``).
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any

from . import facade
from .domain_types import DomainTypeRegistry, domain_types as default_domain_types
from .exceptions import NotFoundError

# Validator kind name -> facade attribute
KINDS: MappingProxyType[str, str] = MappingProxyType({
    "required": "required",
    "notNull": "not_null",
    "notUndefined": "not_undefined",
    "maxValue": "max_value",
    "minValue": "min_value",
    "maxLength": "max_length",
    "minLength": "min_length",
    "isValue": "is_value",
    "isEmail": "is_email",
    "isNumeric": "is_numeric",
    "isTime": "is_time",
    "isDate": "is_date",
    "isUrl": "is_url",
    "isArray": "is_array",
    "isNotEmptyArray": "is_not_empty_array",
    "customRegex": "custom_regex",
})

PARAMETERIZED_KINDS = frozenset(
    {"maxValue", "minValue", "maxLength", "minLength", "isValue", "customRegex"}
)


class ValidatorCatalog:
    """Namespaced access to every validator plus the domain types.

    Args:
        domain_types: Bundle registry exposed as ``domain_types``
    """

    required = facade.required
    not_null = facade.not_null
    not_undefined = facade.not_undefined
    is_email = facade.is_email
    is_numeric = facade.is_numeric
    is_time = facade.is_time
    is_date = facade.is_date
    is_url = facade.is_url
    is_array = facade.is_array
    is_not_empty_array = facade.is_not_empty_array
    max_value = staticmethod(facade.max_value)
    min_value = staticmethod(facade.min_value)
    max_length = staticmethod(facade.max_length)
    min_length = staticmethod(facade.min_length)
    is_value = staticmethod(facade.is_value)
    custom_regex = staticmethod(facade.custom_regex)

    def __init__(self, domain_types: DomainTypeRegistry | None = None):
        self.domain_types = domain_types if domain_types is not None else default_domain_types

    def __getitem__(self, name: str) -> Any:
        """Resolve a validator by kind name or Python name.

        Raises:
            NotFoundError: If no validator has that name
        """
        attribute = KINDS.get(name, name)
        if attribute not in KINDS.values():
            raise NotFoundError(
                f"Unknown validator kind: {name}",
                context={"kind": name, "available_kinds": list(KINDS)},
            )
        return getattr(self, attribute)

    def __contains__(self, name: str) -> bool:
        return name in KINDS or name in KINDS.values()

    @staticmethod
    def kinds() -> list[str]:
        return list(KINDS)

    @staticmethod
    def is_parameterized(kind: str) -> bool:
        """Whether a kind must be bound to a parameter before use."""
        return KINDS.get(kind, kind) in {KINDS[k] for k in PARAMETERIZED_KINDS}

    def __repr__(self) -> str:
        return f"ValidatorCatalog(kinds={len(KINDS)}, domain_types={self.domain_types.names()})"


validators = ValidatorCatalog()
