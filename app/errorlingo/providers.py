"""
Factory functions for dependency injection.

Provides application-scoped singleton providers.
"""

from functools import lru_cache

from errorlingo.configuration import Settings
from errorlingo.translation.factory import create_registry
from errorlingo.translation.registry import TemplateRegistry
from errorlingo.translation.service import ErrorTranslationService


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_registry() -> TemplateRegistry:
    """
    Get application-scoped template registry singleton.

    The registry is fully loaded before it is returned, so callers only
    ever see settled state and may resolve concurrently.

    Returns:
        TemplateRegistry: Registry loaded from the configured catalogs.
    """
    return create_registry(settings=get_settings())


@lru_cache
def get_translation_service() -> ErrorTranslationService:
    """
    Get application-scoped error translation service singleton.

    Returns:
        ErrorTranslationService: Service over get_registry() using the
        configured default language.
    """
    return ErrorTranslationService(
        get_registry(),
        default_language=get_settings().translation.default_language,
    )
