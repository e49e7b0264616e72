"""Tokenizer for the ``{{ name }}`` placeholder grammar.

Patterns and renderings share one grammar: a placeholder opens with ``{{``,
closes with the next ``}}`` and its name is the enclosed text with
surrounding whitespace trimmed. There is no escaping. An open marker without
a matching close marker is literal text.
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, Tuple, Union

OPEN_MARKER = "{{"
CLOSE_MARKER = "}}"


@dataclass(frozen=True)
class Literal:
    """Verbatim text between placeholders."""

    text: str
    start: int
    end: int


@dataclass(frozen=True)
class Placeholder:
    """A named variable region.

    Attributes:
        name: Enclosed text with surrounding whitespace trimmed.
        start: Index of the open marker.
        end: Index just past the close marker.
    """

    name: str
    start: int
    end: int


Segment = Union[Literal, Placeholder]


@lru_cache(maxsize=1024)
def tokenize(source: str) -> Tuple[Segment, ...]:
    """Split source into literal and placeholder segments, in order.

    Markers are detected up to the very end of the source, so a placeholder
    closing on the last two characters is still recognized.

    Args:
        source: Pattern or rendering string.

    Returns:
        Tuple of Literal and Placeholder segments covering source.
    """
    segments: list[Segment] = []
    literal_start = 0

    while True:
        open_at = source.find(OPEN_MARKER, literal_start)
        if open_at == -1:
            break
        close_at = source.find(CLOSE_MARKER, open_at + len(OPEN_MARKER))
        if close_at == -1:
            break

        if open_at > literal_start:
            segments.append(Literal(source[literal_start:open_at], literal_start, open_at))

        end = close_at + len(CLOSE_MARKER)
        name = source[open_at + len(OPEN_MARKER) : close_at].strip()
        segments.append(Placeholder(name, open_at, end))
        literal_start = end

    if literal_start < len(source):
        segments.append(Literal(source[literal_start:], literal_start, len(source)))

    return tuple(segments)


def placeholders_by_start(source: str) -> Dict[int, Placeholder]:
    """Map each placeholder's open-marker index to the placeholder."""
    return {
        segment.start: segment
        for segment in tokenize(source)
        if isinstance(segment, Placeholder)
    }


def placeholder_names(source: str) -> Tuple[str, ...]:
    """Placeholder names in order of appearance, duplicates removed."""
    names: list[str] = []
    for segment in tokenize(source):
        if isinstance(segment, Placeholder) and segment.name not in names:
            names.append(segment.name)
    return tuple(names)
