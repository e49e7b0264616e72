"""Data structures for error templates and their translations."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Dict, Iterable, Iterator, Optional, Tuple

from errorlingo.translation.errors import UnknownLanguage
from errorlingo.translation.placeholders import (
    Placeholder,
    placeholder_names,
    placeholders_by_start,
)

if TYPE_CHECKING:
    from errorlingo.translation.registry import TemplateRegistry

# Called with (language_code, bindings) before composition; rewrites values in place.
TransformHook = Callable[[str, Dict[str, str]], None]


@dataclass(frozen=True)
class LanguageSet:
    """Ordered, immutable language codes.

    A code's position is its identity for every slot lookup. Codes are
    opaque and compared by exact equality.

    Attributes:
        codes: Language codes in configured order.
    """

    codes: Tuple[str, ...]

    def __init__(self, codes: Iterable[str]):
        """Initialize LanguageSet.

        Raises:
            ValueError: If codes is empty.
        """
        codes = tuple(codes)
        if not codes:
            raise ValueError("At least one language code is required")
        object.__setattr__(self, "codes", codes)

    def index(self, code: str) -> int:
        """Return the index of code.

        Raises:
            UnknownLanguage: If code is not in the set.
        """
        for i, candidate in enumerate(self.codes):
            if candidate == code:
                return i
        raise UnknownLanguage(code)

    def __len__(self) -> int:
        return len(self.codes)

    def __iter__(self) -> Iterator[str]:
        return iter(self.codes)

    def __contains__(self, code: object) -> bool:
        return code in self.codes


@dataclass(frozen=True)
class Translation:
    """A language-specific rendering of a template.

    Attributes:
        text: Rendering with ``{{ name }}`` placeholders.
        transform: Optional hook that rewrites bindings before composition.
    """

    text: str
    transform: Optional[TransformHook] = None


@dataclass(eq=False)
class Template:
    """A registered error pattern and its per-language translation slots.

    Templates are created by TemplateRegistry.register() and serve as the
    handle for attaching translations. The slot list always has one entry
    per configured language; ``None`` marks an unset slot.

    Attributes:
        pattern: Literal text with ``{{ name }}`` placeholders.
        registry: Owning registry.
    """

    pattern: str
    registry: "TemplateRegistry" = field(repr=False)
    _slots: list = field(init=False, repr=False)
    _placeholders: Dict[int, Placeholder] = field(init=False, repr=False)

    def __post_init__(self):
        self._slots = [None] * len(self.registry.languages)
        self._placeholders = placeholders_by_start(self.pattern)

    def placeholder_at(self, pos: int) -> Optional[Placeholder]:
        """Return the placeholder whose open marker starts at pos, if any."""
        return self._placeholders.get(pos)

    @property
    def placeholder_names(self) -> Tuple[str, ...]:
        return placeholder_names(self.pattern)

    @property
    def ends_with_placeholder(self) -> bool:
        return any(p.end == len(self.pattern) for p in self._placeholders.values())

    @property
    def translations(self) -> Tuple[Optional[Translation], ...]:
        """Translation slots in language-set order."""
        return tuple(self._slots)

    def _assign(self, index: int, translation: Translation) -> None:
        self._slots[index] = translation

    def translation(self, index: int) -> Optional[Translation]:
        return self._slots[index]

    def has_translation(self, language: str) -> bool:
        """Check whether language has a translation.

        Raises:
            UnknownLanguage: If language is not configured.
        """
        return self._slots[self.registry.language_index(language)] is not None

    def set(self, language: str, text: str) -> "Template":
        """Attach a translation for language. Returns self for chaining."""
        self.registry.set_translation(self, language, text)
        return self

    def set_with_transform(
        self, language: str, text: str, transform: TransformHook
    ) -> "Template":
        """Attach a translation whose bindings pass through transform first."""
        self.registry.set_translation_with_transform(self, language, text, transform)
        return self
