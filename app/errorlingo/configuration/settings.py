"""errorlingo configuration settings - main aggregator."""

from pydantic_settings import BaseSettings

from errorlingo.configuration.translation import MatchingSettings, TranslationSettings


class Settings(BaseSettings):
    """errorlingo configuration settings - main aggregator.

    Aggregates the component settings into a single configuration object.

    Environment Variables:
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        ENVIRONMENT: Deployment environment name (default: development)
        GIT_SHA: Git commit SHA for deployment tracking

    Example:
        ```python
        from errorlingo.providers import get_settings

        settings = get_settings()

        languages = settings.translation.languages
        if settings.matching.REQUIRE_FULL_MATCH:
            ...
        ```
    """

    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: str = "development"
    GIT_SHA: str = "Unknown"

    translation: TranslationSettings
    matching: MatchingSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production.

        Returns:
            True if ENVIRONMENT is "production", False otherwise.
        """
        return self.ENVIRONMENT.lower() == "production"

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            "translation": TranslationSettings,
            "matching": MatchingSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)
