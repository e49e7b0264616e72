"""Exceptions raised while registering and resolving error templates.

All failures are local and synchronous. Callers that only want a best-effort
message catch ErrorTranslationError and fall back to the raw error text.
"""


class ErrorTranslationError(Exception):
    """Base exception for all error translation failures.

    Example:
        try:
            message = registry.resolve("English", str(exc))
        except ErrorTranslationError:
            message = str(exc)
    """

    pass


class UnknownLanguage(ErrorTranslationError, ValueError):
    """Raised when a language code is not part of the configured language set.

    Example:
        >>> registry.language_index("Klingon")
        Traceback (most recent call last):
        ...
        UnknownLanguage: Unknown language code: 'Klingon'
    """

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Unknown language code: {code!r}")


class NoMatchingTemplate(ErrorTranslationError, LookupError):
    """Raised when no registered pattern matches the given error text."""

    def __init__(self, text: str):
        self.text = text
        super().__init__("No matching error template found")


class MissingTranslation(ErrorTranslationError, LookupError):
    """Raised when the matched template has no translation for a language.

    Example:
        >>> template = registry.register("timeout")
        >>> registry.resolve("English", "timeout")
        Traceback (most recent call last):
        ...
        MissingTranslation: No 'English' translation for template 'timeout'
    """

    def __init__(self, pattern: str, language: str):
        self.pattern = pattern
        self.language = language
        super().__init__(f"No {language!r} translation for template {pattern!r}")


class CatalogError(ErrorTranslationError, ValueError):
    """Raised when a template catalog file cannot be read or parsed."""

    pass
