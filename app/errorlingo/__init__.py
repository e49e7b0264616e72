"""errorlingo - turn machine-generated error text into localized messages.

Example:
    from errorlingo import TemplateRegistry

    registry = TemplateRegistry(["English", "Norwegian Bokmål"])
    template = registry.register(
        'pq: duplicate key value violates unique constraint "{{ table }}_{{ column }}_key"'
    )
    template.set("English", "This {{ column }} already exists in {{ table }}.")

    registry.resolve(
        "English",
        'pq: duplicate key value violates unique constraint "users_email_key"',
    )
    # "This email already exists in users."
"""

from errorlingo.translation import (
    CatalogError,
    ErrorTranslationError,
    ErrorTranslationService,
    LanguageSet,
    MissingTranslation,
    NoMatchingTemplate,
    Template,
    TemplateRegistry,
    Translation,
    UnknownLanguage,
    YAMLTemplateLoader,
    value_synonyms,
)
from errorlingo.translation.factory import create_registry

__all__ = [
    "CatalogError",
    "ErrorTranslationError",
    "ErrorTranslationService",
    "LanguageSet",
    "MissingTranslation",
    "NoMatchingTemplate",
    "Template",
    "TemplateRegistry",
    "Translation",
    "UnknownLanguage",
    "YAMLTemplateLoader",
    "value_synonyms",
    "create_registry",
]
