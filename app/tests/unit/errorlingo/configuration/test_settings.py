"""Tests for errorlingo.configuration settings classes."""

import pytest
from pydantic import ValidationError

from errorlingo.configuration import MatchingSettings, Settings, TranslationSettings
from errorlingo.configuration.base import ComponentSettings


@pytest.mark.unit
class TestTranslationSettings:
    """Tests for TranslationSettings."""

    def test_defaults(self, monkeypatch):
        """Default languages are English then Norwegian Bokmål."""
        monkeypatch.delenv("ERRORLINGO_LANGUAGES", raising=False)
        monkeypatch.delenv("ERRORLINGO_DEFAULT_LANGUAGE", raising=False)
        settings = TranslationSettings()
        assert settings.languages == ("English", "Norwegian Bokmål")
        assert settings.default_language == "English"
        assert settings.CATALOG_DIR is None

    def test_languages_from_env(self, monkeypatch):
        """ERRORLINGO_LANGUAGES is split on commas and trimmed."""
        monkeypatch.setenv("ERRORLINGO_LANGUAGES", " nb , en ,, sv ")
        assert TranslationSettings().languages == ("nb", "en", "sv")

    def test_default_language_override(self, monkeypatch):
        """ERRORLINGO_DEFAULT_LANGUAGE overrides the first language."""
        monkeypatch.setenv("ERRORLINGO_DEFAULT_LANGUAGE", "Norwegian Bokmål")
        assert TranslationSettings().default_language == "Norwegian Bokmål"

    def test_empty_languages_rejected(self):
        """A language list without codes fails validation."""
        with pytest.raises(ValidationError):
            TranslationSettings(ERRORLINGO_LANGUAGES=" , ")


@pytest.mark.unit
class TestMatchingSettings:
    """Tests for MatchingSettings."""

    def test_default_is_prefix_matching(self, monkeypatch):
        """Full-match mode is off by default."""
        monkeypatch.delenv("ERRORLINGO_REQUIRE_FULL_MATCH", raising=False)
        assert MatchingSettings().REQUIRE_FULL_MATCH is False

    def test_from_env(self, monkeypatch):
        """ERRORLINGO_REQUIRE_FULL_MATCH enables full-match mode."""
        monkeypatch.setenv("ERRORLINGO_REQUIRE_FULL_MATCH", "true")
        assert MatchingSettings().REQUIRE_FULL_MATCH is True


@pytest.mark.unit
class TestSettings:
    """Tests for the Settings aggregator."""

    def test_sections_instantiated(self):
        """Component sections are created automatically."""
        settings = Settings()
        assert isinstance(settings.translation, TranslationSettings)
        assert isinstance(settings.matching, MatchingSettings)

    def test_sections_share_base(self):
        """Component settings derive from ComponentSettings."""
        assert issubclass(TranslationSettings, ComponentSettings)
        assert issubclass(MatchingSettings, ComponentSettings)

    def test_section_override(self):
        """Explicit sections are used as given."""
        matching = MatchingSettings(ERRORLINGO_REQUIRE_FULL_MATCH=True)
        assert Settings(matching=matching).matching.REQUIRE_FULL_MATCH is True

    @pytest.mark.parametrize(
        "environment,expected",
        [("production", True), ("Production", True), ("development", False), ("staging", False)],
    )
    def test_is_production(self, environment, expected):
        """is_production follows ENVIRONMENT."""
        assert Settings(ENVIRONMENT=environment).is_production is expected
