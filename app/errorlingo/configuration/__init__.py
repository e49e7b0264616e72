"""Configuration module - public API.

Centralized configuration management using Pydantic BaseSettings with
component-based organization.

Exports:
    Settings: Main settings class
    TranslationSettings: Language set and catalog settings
    MatchingSettings: Template matching settings
"""

from errorlingo.configuration.settings import Settings
from errorlingo.configuration.translation import MatchingSettings, TranslationSettings

__all__ = ["Settings", "TranslationSettings", "MatchingSettings"]
