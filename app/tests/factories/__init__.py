"""Test data factories for deterministic test data generation."""

from tests.factories.templates import (
    add_duplicate_key_template,
    add_no_such_host_template,
    make_catalog_data,
    make_registry,
)

__all__ = [
    "add_duplicate_key_template",
    "add_no_such_host_template",
    "make_catalog_data",
    "make_registry",
]
