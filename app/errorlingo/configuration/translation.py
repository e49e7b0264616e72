"""Translation and matching settings."""

from pathlib import Path
from typing import Tuple

from pydantic import Field, field_validator

from errorlingo.configuration.base import ComponentSettings


class TranslationSettings(ComponentSettings):
    """Language set and template catalog configuration.

    Environment Variables:
        ERRORLINGO_LANGUAGES: Comma-separated, ordered language codes
            (default: "English,Norwegian Bokmål"). The order fixes each
            code's index for the lifetime of a registry.
        ERRORLINGO_DEFAULT_LANGUAGE: Language used when a caller does not
            name one (default: first configured language).
        ERRORLINGO_CATALOG_DIR: Directory of YAML template catalogs
            (default: the catalogs bundled with the package).

    Example:
        ```python
        from errorlingo.providers import get_settings

        settings = get_settings()
        languages = settings.translation.languages
        ```
    """

    LANGUAGES: str = Field(
        default="English,Norwegian Bokmål",
        alias="ERRORLINGO_LANGUAGES",
        description="Comma-separated, ordered language codes",
    )
    DEFAULT_LANGUAGE: str | None = Field(
        default=None,
        alias="ERRORLINGO_DEFAULT_LANGUAGE",
    )
    CATALOG_DIR: Path | None = Field(
        default=None,
        alias="ERRORLINGO_CATALOG_DIR",
        description="Directory containing *.yml template catalogs",
    )

    @field_validator("LANGUAGES")
    @classmethod
    def validate_languages(cls, v: str) -> str:
        """Reject a language list with no usable codes."""
        if not [code for code in v.split(",") if code.strip()]:
            raise ValueError("ERRORLINGO_LANGUAGES must name at least one language")
        return v

    @property
    def languages(self) -> Tuple[str, ...]:
        """Ordered language codes with surrounding whitespace removed."""
        return tuple(code.strip() for code in self.LANGUAGES.split(",") if code.strip())

    @property
    def default_language(self) -> str:
        """Configured default language, or the first configured language."""
        return self.DEFAULT_LANGUAGE or self.languages[0]


class MatchingSettings(ComponentSettings):
    """Template matching behavior.

    Environment Variables:
        ERRORLINGO_REQUIRE_FULL_MATCH: Only accept a template whose pattern
            ends exactly where the error text ends (default: False). When
            disabled, trailing text after a fully matched pattern is ignored.
    """

    REQUIRE_FULL_MATCH: bool = Field(
        default=False,
        alias="ERRORLINGO_REQUIRE_FULL_MATCH",
    )
