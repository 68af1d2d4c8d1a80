"""Factories building validators and domain types from configuration.

Configuration Options (one validator):
    type (str): Validator kind, e.g. ``maxLength`` (``max_length`` also accepted)
    value (any): Parameter for parameterized kinds
    max / min / values / pattern: Kind-specific alias for ``value``
    message (str): Optional replacement for the default message

Example Configuration:
    domain_types:
      username:
        - required
        - type: minLength
          min: 3
        - type: customRegex
          pattern: "^[a-z0-9_]+$"
          message: Only letters, digits and underscores.
      priority:
        - type: isValue
          values: [low, medium, high]
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]
from dataknobs_config import FactoryBase

from .catalog import KINDS, PARAMETERIZED_KINDS, ValidatorCatalog, validators as default_catalog
from .domain_types import Bundle, DomainTypeRegistry, domain_types as default_domain_types
from .exceptions import ConfigurationError, NotFoundError
from .facade import Validator

logger = logging.getLogger(__name__)

PARAMETER_ALIASES: dict[str, str] = {
    "maxValue": "max",
    "minValue": "min",
    "maxLength": "max",
    "minLength": "min",
    "isValue": "values",
    "customRegex": "pattern",
}

_KIND_BY_ATTRIBUTE = {attribute: kind for kind, attribute in KINDS.items()}


class ValidatorFactory(FactoryBase):
    """Factory for creating validators from configuration.

    Args:
        catalog: Catalog used to resolve validator kinds
    """

    def __init__(self, catalog: ValidatorCatalog | None = None):
        self.catalog = catalog if catalog is not None else default_catalog

    def create(self, **config: Any) -> Validator:
        """Create a Validator instance from configuration.

        Args:
            **config: Validator configuration

        Returns:
            Validator instance

        Raises:
            ConfigurationError: If the kind is unknown, a parameter is missing,
                or the parameter is malformed
        """
        kind = self._resolve_kind(config.get("type"))

        if kind in PARAMETERIZED_KINDS:
            parameter = self._get_parameter(kind, config)
            validator = self.catalog[kind](parameter)
        else:
            validator = self.catalog[kind]

        message = config.get("message")
        if message:
            validator = validator.with_message(str(message))

        logger.debug(f"Created validator: {validator!r}")
        return validator

    def create_bundle(self, configs: list[Any]) -> Bundle:
        """Create an ordered bundle of validators.

        Args:
            configs: Validator configurations; a bare string is a zero-parameter kind

        Returns:
            Tuple of validators in configuration order
        """
        if not isinstance(configs, list):
            raise ConfigurationError(
                f"Bundle configuration must be a list, got {type(configs).__name__}",
                context={"config": configs},
            )

        bundle = []
        for config in configs:
            if isinstance(config, str):
                config = {"type": config}
            elif not isinstance(config, dict):
                raise ConfigurationError(
                    f"Validator configuration must be a mapping or a kind name: {config!r}",
                    context={"config": config},
                )
            if not all(isinstance(key, str) for key in config):
                raise ConfigurationError(
                    f"Validator configuration keys must be strings: {config!r}",
                    context={"config": config},
                )
            bundle.append(self.create(**config))
        return tuple(bundle)

    def _resolve_kind(self, kind: Any) -> str:
        if not kind or not isinstance(kind, str):
            logger.warning(f"Validator configuration missing 'type': {kind!r}")
            raise ConfigurationError(
                "Validator configuration missing 'type'",
                context={"type": kind},
            )
        try:
            self.catalog[kind]
        except NotFoundError as e:
            raise ConfigurationError(str(e), context=e.context) from e
        return _KIND_BY_ATTRIBUTE.get(kind, kind)

    def _get_parameter(self, kind: str, config: dict[str, Any]) -> Any:
        alias = PARAMETER_ALIASES[kind]
        if "value" in config:
            return config["value"]
        if alias in config:
            return config[alias]
        raise ConfigurationError(
            f"Validator '{kind}' requires a '{alias}' (or 'value') parameter",
            context={"kind": kind, "config": config},
        )


class DomainTypeFactory(FactoryBase):
    """Factory registering domain types from configuration.

    Args:
        registry: Registry receiving the bundles
        validator_factory: Factory used for each validator entry
    """

    def __init__(
        self,
        registry: DomainTypeRegistry | None = None,
        validator_factory: ValidatorFactory | None = None,
    ):
        self.registry = registry if registry is not None else default_domain_types
        self.validator_factory = validator_factory or ValidatorFactory()

    def create(  # type: ignore[override]
        self, config: dict[str, Any], allow_overwrite: bool = False
    ) -> list[str]:
        """Build and register every domain type in a configuration mapping.

        Args:
            config: Mapping of domain type name to list of validator configs
            allow_overwrite: Replace existing domain types with the same name

        Returns:
            Names of the registered domain types

        Raises:
            ConfigurationError: If the mapping, a name or a validator config is malformed
            OperationError: If a name exists and allow_overwrite is False
        """
        if not isinstance(config, dict):
            raise ConfigurationError(
                f"Domain types configuration must be a mapping, got {type(config).__name__}",
                context={"config": config},
            )

        for name in config:
            if not isinstance(name, str):
                raise ConfigurationError(
                    f"Domain type name must be a string, got {type(name).__name__}: {name!r}",
                    context={"domain_type": name},
                )

        names = []
        for name, configs in config.items():
            bundle = self.validator_factory.create_bundle(configs)
            self.registry.register(name, bundle, allow_overwrite=allow_overwrite)
            names.append(name)

        logger.info(f"Registered domain types: {', '.join(names)}")
        return names


def load_config_file(path: str | Path) -> dict[str, Any]:
    """Load a YAML or JSON configuration file.

    Raises:
        ConfigurationError: If the file is missing, unreadable, unsupported or malformed
    """
    path = Path(path).resolve()

    if not path.exists():
        raise ConfigurationError(
            f"Configuration file not found: {path}", context={"path": str(path)}
        )

    suffix = path.suffix.lower()
    if suffix not in [".yaml", ".yml", ".json"]:
        raise ConfigurationError(
            f"Unsupported file format: {suffix}", context={"path": str(path)}
        )

    try:
        with open(path, encoding="utf-8") as f:
            if suffix == ".json":
                data = json.load(f)
            else:
                data = yaml.safe_load(f) or {}
    except (yaml.YAMLError, json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ConfigurationError(
            f"Failed to parse configuration file {path}: {e}",
            context={"path": str(path)},
        ) from e
    except OSError as e:
        raise ConfigurationError(
            f"Failed to read configuration file {path}: {e}",
            context={"path": str(path)},
        ) from e

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Configuration file must contain a mapping: {path}",
            context={"path": str(path)},
        )
    return data


def load_domain_types(
    path: str | Path,
    registry: DomainTypeRegistry | None = None,
    allow_overwrite: bool = False,
) -> list[str]:
    """Register the domain types declared in a configuration file.

    The file holds a top-level ``domain_types`` mapping of name to a list of
    validator configurations.

    Args:
        path: Path to a ``.yaml``, ``.yml`` or ``.json`` file
        registry: Registry receiving the bundles (defaults to ``domain_types``)
        allow_overwrite: Replace existing domain types with the same name

    Returns:
        Names of the registered domain types
    """
    data = load_config_file(path)
    logger.info(f"Loading domain types from {path}")

    section = data.get("domain_types")
    if not isinstance(section, dict):
        raise ConfigurationError(
            f"Configuration file has no 'domain_types' mapping: {path}",
            context={"path": str(path)},
        )

    factory = DomainTypeFactory(registry)
    return factory.create(section, allow_overwrite=allow_overwrite)


# Create singleton instances for registration
validator_factory = ValidatorFactory()
domain_type_factory = DomainTypeFactory()
