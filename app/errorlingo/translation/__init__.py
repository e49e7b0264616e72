"""Error translation - localized messages for machine-generated error text.

Templates are patterns of literal text and ``{{ name }}`` placeholders. Raw
error text is matched against every registered template in one anchored
pass; the values covering each placeholder are extracted and substituted
into the translation for the requested language.

Main components:
- models: LanguageSet, Template, Translation
- matcher / extractor / composer: the matching, extraction and substitution engine
- registry: TemplateRegistry (registration and resolve())
- transforms: value_synonyms() transform hook
- loader: TemplateLoader and YAMLTemplateLoader
- service: ErrorTranslationService with raw-text fallback
"""

from errorlingo.translation.errors import (
    CatalogError,
    ErrorTranslationError,
    MissingTranslation,
    NoMatchingTemplate,
    UnknownLanguage,
)
from errorlingo.translation.loader import TemplateLoader, YAMLTemplateLoader
from errorlingo.translation.models import LanguageSet, Template, TransformHook, Translation
from errorlingo.translation.registry import TemplateRegistry
from errorlingo.translation.service import ErrorTranslationService
from errorlingo.translation.transforms import value_synonyms

__all__ = [
    "CatalogError",
    "ErrorTranslationError",
    "MissingTranslation",
    "NoMatchingTemplate",
    "UnknownLanguage",
    "LanguageSet",
    "Template",
    "TransformHook",
    "Translation",
    "TemplateRegistry",
    "TemplateLoader",
    "YAMLTemplateLoader",
    "ErrorTranslationService",
    "value_synonyms",
]
