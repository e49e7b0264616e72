"""Transform hooks for rewriting extracted values before composition."""

from typing import Dict, Mapping

from errorlingo.logging import get_module_logger
from errorlingo.translation.models import TransformHook

logger = get_module_logger()


def value_synonyms(table: Mapping[str, Mapping[str, str]]) -> TransformHook:
    """Build a hook that replaces extracted values with per-language synonyms.

    Useful when a value embedded in the error text is itself a word that
    needs translating, such as a table or column name.

    Args:
        table: ``{language: {extracted_value: replacement}}``. Languages
            without an entry leave bindings untouched.

    Returns:
        A TransformHook. Failures inside the hook are logged and the
        affected binding is left unchanged.

    Example:
        hook = value_synonyms({"Norwegian Bokmål": {"users": "brukere"}})
        template.set_with_transform(
            "Norwegian Bokmål", "Finnes allerede i {{ table }}.", hook
        )
    """

    def transform(language: str, bindings: Dict[str, str]) -> None:
        synonyms = table.get(language)
        if not synonyms:
            return

        for name, value in list(bindings.items()):
            try:
                replacement = synonyms.get(value)
            except (AttributeError, TypeError) as e:
                logger.warning(
                    "value_synonym_lookup_failed",
                    language=language,
                    placeholder=name,
                    error=str(e),
                )
                continue

            if replacement is not None:
                bindings[name] = replacement
                logger.debug(
                    "translated_value",
                    language=language,
                    placeholder=name,
                    value=replacement,
                )

    return transform
