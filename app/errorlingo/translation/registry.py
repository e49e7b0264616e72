"""Template registry and error text resolution.

Registration is expected to finish before the registry is shared: register()
and the set_translation*() methods mutate state without locking. Once
settled, resolve() only reads shared state and allocates its own scan
states and bindings, so concurrent resolution is safe.
"""

from typing import Dict, Iterable, Optional, Tuple

from errorlingo.logging import get_module_logger
from errorlingo.translation.composer import compose
from errorlingo.translation.errors import MissingTranslation, NoMatchingTemplate
from errorlingo.translation.extractor import extract_bindings
from errorlingo.translation.matcher import find_template
from errorlingo.translation.models import (
    LanguageSet,
    Template,
    TransformHook,
    Translation,
)

logger = get_module_logger()


class TemplateRegistry:
    """Ordered collection of error templates keyed by a fixed language set.

    Registration order is match priority: when several patterns match the
    same text, the first registered wins.

    Attributes:
        languages: The fixed LanguageSet.
        require_full_match: Only accept patterns that end where the text ends.

    Example:
        registry = TemplateRegistry(["English", "Norwegian Bokmål"])
        registry.register("dial tcp: lookup {{ host }}: no such host").set(
            "English", "Unable to resolve {{ host }}."
        )
        registry.resolve("English", "dial tcp: lookup db: no such host")
        # "Unable to resolve db."
    """

    def __init__(self, languages: Iterable[str], require_full_match: bool = False):
        """Initialize TemplateRegistry.

        Args:
            languages: Ordered language codes. The order is fixed for the
                lifetime of the registry.
            require_full_match: See MatchingSettings.REQUIRE_FULL_MATCH.

        Raises:
            ValueError: If languages is empty.
        """
        self.languages = LanguageSet(languages)
        self.require_full_match = require_full_match
        self._templates: list[Template] = []
        logger.info(
            "initialized_template_registry",
            languages=list(self.languages),
            require_full_match=require_full_match,
        )

    @property
    def templates(self) -> Tuple[Template, ...]:
        """Registered templates in registration order."""
        return tuple(self._templates)

    def __len__(self) -> int:
        return len(self._templates)

    def language_index(self, code: str) -> int:
        """Return the index of a language code.

        Raises:
            UnknownLanguage: If code is not configured.
        """
        return self.languages.index(code)

    def register(self, pattern: str) -> Template:
        """Append a template with every translation slot empty.

        The pattern is not validated; unbalanced markers are kept as
        literal text.

        Args:
            pattern: Error text pattern with ``{{ name }}`` placeholders.

        Returns:
            The new Template, used as the handle for attaching translations.
        """
        template = Template(pattern=pattern, registry=self)
        self._templates.append(template)
        logger.debug(
            "template_registered",
            pattern=pattern,
            placeholders=list(template.placeholder_names),
            priority=len(self._templates) - 1,
        )
        return template

    def set_translation(self, handle: Template, language: str, text: str) -> None:
        """Store a translation for language, replacing any previous one.

        Raises:
            UnknownLanguage: If language is not configured.
            ValueError: If handle was registered with another registry.
        """
        self._store(handle, language, Translation(text=text))

    def set_translation_with_transform(
        self,
        handle: Template,
        language: str,
        text: str,
        transform: TransformHook,
    ) -> None:
        """Store a translation whose bindings are rewritten by transform.

        The hook is called with (language, bindings) right before
        composition. It must absorb its own failures.

        Raises:
            UnknownLanguage: If language is not configured.
            ValueError: If handle was registered with another registry.
        """
        self._store(handle, language, Translation(text=text, transform=transform))

    def _store(self, handle: Template, language: str, translation: Translation) -> None:
        if handle.registry is not self:
            raise ValueError("Template is not registered with this registry")
        index = self.language_index(language)
        handle._assign(index, translation)  # pylint: disable=protected-access
        logger.debug(
            "translation_set",
            pattern=handle.pattern,
            language=language,
            has_transform=translation.transform is not None,
        )

    def match(self, text: str) -> Optional[Template]:
        """Return the first-registered template matching text, or None."""
        return find_template(self._templates, text, self.require_full_match)

    def extract(self, text: str) -> Tuple[Template, Dict[str, str]]:
        """Match text and extract its placeholder bindings.

        Raises:
            NoMatchingTemplate: If no registered pattern matches.
        """
        template = self.match(text)
        if template is None:
            logger.debug("no_matching_template", text=text, template_count=len(self))
            raise NoMatchingTemplate(text)
        return template, extract_bindings(template, text)

    def resolve(self, language: str, text: str) -> str:
        """Translate raw error text into language.

        Args:
            language: Target language code.
            text: Raw error text.

        Returns:
            The matched template's translation with extracted values
            substituted.

        Raises:
            UnknownLanguage: If language is not configured.
            NoMatchingTemplate: If no registered pattern matches text.
            MissingTranslation: If the matched template has no translation
                for language.
        """
        index = self.language_index(language)
        template, bindings = self.extract(text)

        translation = template.translation(index)
        if translation is None:
            logger.warning(
                "translation_missing",
                pattern=template.pattern,
                language=language,
            )
            raise MissingTranslation(template.pattern, language)

        if translation.transform is not None:
            translation.transform(language, bindings)

        message = compose(translation.text, bindings)
        logger.debug(
            "resolved_error_message",
            pattern=template.pattern,
            language=language,
            bindings=bindings,
        )
        return message

    def resolve_error(self, language: str, error: BaseException) -> str:
        """Translate an exception's message into language.

        Same as resolve() applied to ``str(error)``.
        """
        return self.resolve(language, str(error))
