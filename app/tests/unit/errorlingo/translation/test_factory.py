"""Tests for errorlingo.translation.factory module."""

import pytest

from errorlingo.configuration import MatchingSettings, Settings, TranslationSettings
from errorlingo.translation.factory import DEFAULT_CATALOG_DIR, create_registry
from tests.factories.templates import DUPLICATE_KEY_TEXT, ENGLISH, NORWEGIAN


def _settings(**translation):
    return Settings(
        translation=TranslationSettings(**translation),
        matching=MatchingSettings(ERRORLINGO_REQUIRE_FULL_MATCH=True),
    )


@pytest.mark.unit
class TestCreateRegistry:
    """Tests for create_registry()."""

    def test_bundled_catalogs(self):
        """Default registry loads the catalogs shipped with the package."""
        registry = create_registry(settings=_settings())
        assert len(registry) > 0
        assert registry.resolve(NORWEGIAN, DUPLICATE_KEY_TEXT) == (
            "Denne eposten eksisterer allerede i brukere."
        )

    def test_bundled_catalog_dir_exists(self):
        """The bundled catalog directory ships with the package."""
        assert DEFAULT_CATALOG_DIR.is_dir()

    def test_languages_from_settings(self):
        """Language order comes from settings."""
        registry = create_registry(
            settings=_settings(ERRORLINGO_LANGUAGES="nb, en"), preload=False
        )
        assert list(registry.languages) == ["nb", "en"]

    def test_matching_settings_applied(self):
        """REQUIRE_FULL_MATCH is passed to the registry."""
        registry = create_registry(settings=_settings(), preload=False)
        assert registry.require_full_match is True

    def test_explicit_languages_override_settings(self):
        """An explicit language list wins over settings."""
        registry = create_registry(settings=_settings(), languages=["en"], preload=False)
        assert list(registry.languages) == ["en"]

    def test_without_preload(self):
        """preload=False returns an empty registry."""
        registry = create_registry(settings=_settings(), preload=False)
        assert len(registry) == 0

    def test_custom_catalog_dir(self, catalog_dir):
        """An explicit catalog directory replaces the bundled one."""
        registry = create_registry(settings=_settings(), catalog_dir=catalog_dir)
        assert len(registry) == 2
        assert registry.resolve(ENGLISH, DUPLICATE_KEY_TEXT) == (
            "This email already exists in users."
        )

    def test_catalog_dir_from_settings(self, catalog_dir):
        """ERRORLINGO_CATALOG_DIR selects the catalog directory."""
        registry = create_registry(settings=_settings(ERRORLINGO_CATALOG_DIR=catalog_dir))
        assert len(registry) == 2

    def test_missing_catalog_dir(self, tmp_path):
        """A missing catalog directory raises ValueError."""
        with pytest.raises(ValueError):
            create_registry(settings=_settings(), catalog_dir=tmp_path / "missing")
