"""Pytest configuration for dataknobs_validators tests."""

import sys
from pathlib import Path

import pytest

# Add the package source to path for testing
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from dataknobs_validators import DomainTypeRegistry, domain_types  # noqa: E402


@pytest.fixture
def registry():
    """A registry preloaded with the default domain types."""
    return DomainTypeRegistry(name="test_domain_types")


@pytest.fixture(autouse=True)
def restore_domain_types():
    """Undo registrations made against the shared registry."""
    yield
    for name in domain_types.names():
        domain_types.unregister(name)
    domain_types.restore_defaults()


@pytest.fixture
def write_config(tmp_path):
    """Write a configuration file and return its path."""

    def _write(filename: str, content: str) -> Path:
        path = tmp_path / filename
        path.write_text(content)
        return path

    return _write
