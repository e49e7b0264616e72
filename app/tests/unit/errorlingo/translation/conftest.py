"""Feature-level fixtures for error translation tests."""

import pytest
import yaml

from tests.factories.templates import (
    ENGLISH,
    NORWEGIAN,
    add_duplicate_key_template,
    add_no_such_host_template,
    make_catalog_data,
    make_registry,
)


@pytest.fixture
def registry():
    """Empty registry over ["English", "Norwegian Bokmål"]."""
    return make_registry()


@pytest.fixture
def populated_registry():
    """Registry with the DNS template followed by the unique-constraint template."""
    registry = make_registry()
    add_no_such_host_template(registry)
    add_duplicate_key_template(registry)
    return registry


@pytest.fixture
def catalog_dir(tmp_path):
    """Create a temporary directory with YAML template catalogs.

    Returns a directory structure like:
    - 10-network.yml
    - 20-postgres.yml
    - notes.txt (ignored)
    """
    network = {
        "templates": [
            {
                "pattern": "dial tcp: lookup port=: no such host",
                "translations": {
                    ENGLISH: "Unable to connect to external service.",
                    NORWEGIAN: "Kunne ikke koble til ekstern tjener.",
                },
            }
        ]
    }
    with open(tmp_path / "10-network.yml", "w", encoding="utf-8") as f:
        yaml.dump(network, f, allow_unicode=True)

    postgres = make_catalog_data(
        value_translations={NORWEGIAN: {"email": "eposten", "users": "brukere"}}
    )
    with open(tmp_path / "20-postgres.yml", "w", encoding="utf-8") as f:
        yaml.dump(postgres, f, allow_unicode=True)

    (tmp_path / "notes.txt").write_text("not a catalog", encoding="utf-8")

    return tmp_path
