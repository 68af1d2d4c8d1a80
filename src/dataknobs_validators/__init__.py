"""DataKnobs Validators package - Form field validators with paired messages.

Each validator answers "is this value acceptable?" and returns a
``ValidationResult`` carrying the verdict and a fixed message describing
the rule.

Modules:
    facade: Ready-made and parameter-bound validators
    messages: Message catalog, one function per validator kind
    predicates: Predicate catalog, one acceptance test per validator kind
    domain_types: Named validator bundles (email, password, name, rating)
    catalog: Aggregate catalog for namespaced access
    factory: Build validators and domain types from configuration files
    values: Value kinds, the ``UNDEFINED`` sentinel and coercion rules

Quick Examples:

    ```python
    from dataknobs_validators import UNDEFINED, max_length, required, validators

    required("   ").is_valid
    # False
    required(UNDEFINED).message
    # 'Field is required.'

    short = max_length(3)
    short("abcd").to_dict()
    # {'isValid': False, 'message': 'Maximum length is 3 characters.'}

    results = [validator(0) for validator in validators.domain_types["rating"]]
    [r.is_valid for r in results]
    # [False, True]
    ```
"""

from . import messages, predicates
from .catalog import KINDS, ValidatorCatalog, validators
from .domain_types import (
    DEFAULT_DOMAIN_TYPES,
    DomainTypeRegistry,
    all_valid,
    apply,
    domain_types,
    failure_messages,
    first_failure,
)
from .exceptions import ConfigurationError, NotFoundError, OperationError, ValidatorsError
from .facade import (
    Validator,
    custom_regex,
    is_array,
    is_date,
    is_email,
    is_not_empty_array,
    is_numeric,
    is_time,
    is_url,
    is_value,
    make_validator,
    max_length,
    max_value,
    min_length,
    min_value,
    not_null,
    not_undefined,
    required,
)
from .factory import DomainTypeFactory, ValidatorFactory, load_domain_types
from .result import ValidationResult
from .values import UNDEFINED, ValueKind

__version__ = "1.0.0"

__all__ = [
    # Version
    "__version__",
    # Result types
    "ValidationResult",
    "Validator",
    "make_validator",
    # Validators
    "required",
    "not_null",
    "not_undefined",
    "max_value",
    "min_value",
    "max_length",
    "min_length",
    "is_value",
    "is_email",
    "is_numeric",
    "is_time",
    "is_date",
    "is_url",
    "is_array",
    "is_not_empty_array",
    "custom_regex",
    # Catalogs
    "messages",
    "predicates",
    "validators",
    "ValidatorCatalog",
    "KINDS",
    # Domain types
    "domain_types",
    "DomainTypeRegistry",
    "DEFAULT_DOMAIN_TYPES",
    "apply",
    "first_failure",
    "all_valid",
    "failure_messages",
    # Configuration
    "ValidatorFactory",
    "DomainTypeFactory",
    "load_domain_types",
    # Values
    "UNDEFINED",
    "ValueKind",
    # Exceptions
    "ValidatorsError",
    "ConfigurationError",
    "NotFoundError",
    "OperationError",
]
