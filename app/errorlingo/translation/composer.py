"""Placeholder substitution into translated renderings."""

from typing import Any, Mapping

from errorlingo.translation.placeholders import Placeholder, tokenize


def compose(rendering: str, bindings: Mapping[str, Any]) -> str:
    """Fill the placeholders of rendering from bindings.

    Literal spans are copied verbatim. A placeholder is replaced by the
    value bound to its trimmed name, or by an empty string when the name is
    unbound.

    Args:
        rendering: Translated text with ``{{ name }}`` placeholders.
        bindings: Placeholder name to value.

    Returns:
        The composed message.
    """
    parts = []
    for segment in tokenize(rendering):
        if isinstance(segment, Placeholder):
            value = bindings.get(segment.name)
            parts.append("" if value is None else str(value))
        else:
            parts.append(segment.text)
    return "".join(parts)
