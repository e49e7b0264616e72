"""Simultaneous multi-template scan over raw error text.

All templates are compared against the text in one left-to-right pass with
a single shared text cursor. Each template carries its own scan state:

- ``Matching(pos)``: comparing pattern characters literally.
- ``Skipping(pos, anchor)``: inside a placeholder, consuming text until the
  anchor (the pattern character right after the placeholder) reappears.
- ``DEAD``: diverged on a literal character; never revived.

The scan is anchored at text position 0 and never restarts at a later
offset, so a pattern only matches text that begins with its literal
structure. Placeholder content is non-greedy: it ends at the first later
occurrence of the anchor, and always spans at least one character.
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Union

from errorlingo.translation.models import Template


@dataclass(frozen=True)
class Matching:
    pos: int


@dataclass(frozen=True)
class Skipping:
    pos: int
    anchor: str


@dataclass(frozen=True)
class Dead:
    pass


DEAD = Dead()

ScanState = Union[Matching, Skipping, Dead]


def initial_state(template: Template) -> ScanState:
    """Scan state before the first text character; empty patterns never match."""
    return Matching(0) if template.pattern else DEAD


def advance(template: Template, state: ScanState, char: str) -> ScanState:
    """Feed one text character to a template's scan state.

    Args:
        template: Template being scanned.
        state: Its state before char.
        char: Current text character.

    Returns:
        The state after char. A returned state whose ``pos`` equals
        ``len(template.pattern)`` means the pattern is fully consumed.
    """
    if isinstance(state, Dead):
        return state

    pattern = template.pattern

    # The anchor ends the placeholder content and is consumed as a literal.
    if isinstance(state, Skipping) and char == state.anchor:
        return Matching(state.pos + 1)

    if isinstance(state, Matching) and pattern[state.pos] == char:
        return Matching(state.pos + 1)

    placeholder = template.placeholder_at(state.pos)
    if placeholder is not None:
        if placeholder.end == len(pattern):
            # Trailing placeholder: no anchor, the rest of the text is its value.
            return Matching(placeholder.end)
        return Skipping(placeholder.end, pattern[placeholder.end])

    if isinstance(state, Skipping):
        return state

    return DEAD


def find_template(
    templates: Sequence[Template],
    text: str,
    require_full_match: bool = False,
) -> Optional[Template]:
    """Find the first-registered template whose pattern matches text.

    Every live template is advanced once per text character, in
    registration order, so when two templates complete on the same
    character the earlier one wins. The scan stops as soon as a template
    completes, when every template is dead, or at the end of the text.

    Args:
        templates: Templates in registration order.
        text: Raw error text.
        require_full_match: When True, a template only matches if its
            pattern completes on the last text character (or ends with a
            placeholder, which absorbs the remaining text). Templates that
            complete earlier are dropped.

    Returns:
        The matching Template, or None.
    """
    states = [initial_state(template) for template in templates]
    alive = sum(1 for state in states if not isinstance(state, Dead))
    last = len(text) - 1

    for i, char in enumerate(text):
        if alive == 0:
            break

        for j, template in enumerate(templates):
            state = states[j]
            if isinstance(state, Dead):
                continue

            state = advance(template, state, char)
            if isinstance(state, Dead):
                alive -= 1
            elif state.pos == len(template.pattern):
                if not require_full_match or i == last or template.ends_with_placeholder:
                    return template
                state = DEAD
                alive -= 1

            states[j] = state

    return None
