"""Error translation service for dependency injection.

Provides a class-based interface to the registry with the caller-side
fallback policy: a failed resolution yields the raw error text.
"""

from typing import Optional, Union

from errorlingo.logging import get_module_logger
from errorlingo.translation.errors import ErrorTranslationError
from errorlingo.translation.registry import TemplateRegistry

logger = get_module_logger()


class ErrorTranslationService:
    """Class-based error translation service.

    Thin facade over a TemplateRegistry. translate() propagates every
    failure; localize() never raises for translation failures and returns
    the raw text instead.

    Usage:
        service = ErrorTranslationService(registry, default_language="English")

        try:
            db.insert(user)
        except Exception as exc:
            return {"error": service.localize(exc, language=user.language)}
    """

    def __init__(self, registry: TemplateRegistry, default_language: Optional[str] = None):
        """Initialize error translation service.

        Args:
            registry: Settled TemplateRegistry.
            default_language: Language used when a call names none
                (default: first language of the registry).

        Raises:
            UnknownLanguage: If default_language is not configured.
        """
        self._registry = registry
        self.default_language = default_language or registry.languages.codes[0]
        registry.language_index(self.default_language)

    def translate(
        self,
        error: Union[BaseException, str],
        language: Optional[str] = None,
    ) -> str:
        """Translate an exception or raw error text.

        Raises:
            UnknownLanguage: If language is not configured.
            NoMatchingTemplate: If no template matches.
            MissingTranslation: If the template lacks this language.
        """
        return self._registry.resolve(language or self.default_language, str(error))

    def localize(
        self,
        error: Union[BaseException, str],
        language: Optional[str] = None,
    ) -> str:
        """Translate an exception or raw error text, falling back to the raw text.

        Returns:
            The localized message, or ``str(error)`` if translation fails.
        """
        text = str(error)
        language = language or self.default_language
        try:
            return self._registry.resolve(language, text)
        except ErrorTranslationError as e:
            logger.warning(
                "error_translation_fallback",
                language=language,
                reason=type(e).__name__,
                text=text,
            )
            return text

    @property
    def registry(self) -> TemplateRegistry:
        """Access the underlying TemplateRegistry."""
        return self._registry
