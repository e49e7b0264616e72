"""Placeholder value extraction from matched error text."""

from typing import Dict

from errorlingo.translation.models import Template


def extract_bindings(template: Template, text: str) -> Dict[str, str]:
    """Bind each placeholder of template to the text it covers.

    Walks the pattern and the text side by side. Literal characters advance
    both cursors. A placeholder's value starts at the current text position
    and runs up to, not including, the next occurrence of its anchor (the
    pattern character following the placeholder) after that position,
    mirroring the matcher's skipping rule. A placeholder ending the pattern
    takes the rest of the text.

    A name appearing more than once keeps the value of its last occurrence.

    Args:
        template: Template previously matched against text.
        text: Raw error text.

    Returns:
        Fresh mapping of trimmed placeholder name to extracted value.
    """
    pattern = template.pattern
    bindings: Dict[str, str] = {}
    pos = 0
    cursor = 0

    while pos < len(pattern):
        placeholder = template.placeholder_at(pos)
        if placeholder is None:
            pos += 1
            cursor += 1
            continue

        if placeholder.end == len(pattern):
            value_end = len(text)
        else:
            anchor = pattern[placeholder.end]
            value_end = text.find(anchor, cursor + 1)
            if value_end == -1:
                value_end = len(text)

        bindings[placeholder.name] = text[cursor:value_end]
        cursor = value_end
        pos = placeholder.end

    return bindings
