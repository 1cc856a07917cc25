"""Event-name parsing helpers shared by the registry and the event map.

Event expressions use three separators:

- ``:`` narrows an event to a scope (``pointer:left``)
- a space chains steps into a sequence (``up up down down``)
- ``-`` joins keys into a combo, ``->`` orders combo stages (``ctrl-alt->a``)

Separators inside double-quoted substrings are literal.
"""

from __future__ import annotations

from collections.abc import Iterable
import re

SCOPE_SEPARATOR = ":"
SEQUENCE_SEPARATOR = " "
COMBO_OPERATOR = "->"

# Modifiers always lead a combo stage, in this order.
MODIFIER_ORDER: tuple[str, ...] = (
    "ctrl",
    "control",
    "shift",
    "alt",
    "altgr",
    "option",
    "meta",
    "os",
    "super",
    "command",
)

_COMBO_KEY_SPLIT = re.compile(r"-(?=.)")

# A comma only delimits a batch between two names; "," and "ctrl-," are keys.
_BATCH_SPLIT = re.compile(
    r"(?:(?<=[^,\s-])|(?<=-,))\s*,\s*(?=[^,\s])"
    r'(?=(?:(?:[^"]*"){2})*[^"]*$)'
)


def split_unquoted(expression: str, separator: str) -> list[str]:
    """Split *expression* on *separator*, ignoring separators inside quotes.

    A separator only counts when an even number of double quotes follows it.
    """
    pattern = re.escape(separator) + r'(?=(?:(?:[^"]*"){2})*[^"]*$)'
    return re.split(pattern, expression)


def norm_events(events: str | Iterable[str] | None) -> list[str]:
    """Turn "one or many" event expressions into a flat list of names.

    Strings are treated as a comma-delimited batch; any other iterable is
    flattened the same way item by item. A comma without a name on both
    sides is part of a name, not a delimiter. Blank entries are dropped.
    """
    if events is None:
        return []
    if isinstance(events, str):
        candidates: Iterable[str] = [events]
    else:
        candidates = events

    names: list[str] = []
    for candidate in candidates:
        for piece in _BATCH_SPLIT.split(candidate):
            name = piece.strip()
            if name:
                names.append(name)
    return names


def shift_shorthand(event: str) -> str:
    """Rewrite a single uppercase character to its ``shift-`` form."""
    if len(event) == 1 and event.isupper():
        return f"shift-{event}"
    return event


def _combo_sort_key(key: str) -> tuple[int, str]:
    if key in MODIFIER_ORDER:
        return (MODIFIER_ORDER.index(key), key)
    return (len(MODIFIER_ORDER), key)


def norm_combo(event: str) -> str:
    """Put the keys of every unordered combo stage into canonical order.

    Stages joined by ``->`` keep their order; keys inside a stage do not
    matter, so ``alt-ctrl->a`` becomes ``ctrl-alt->a``.
    """
    steps = []
    for step in split_unquoted(event, SEQUENCE_SEPARATOR):
        stages = []
        for stage in step.split(COMBO_OPERATOR):
            keys = _COMBO_KEY_SPLIT.split(stage)
            stages.append("-".join(sorted(keys, key=_combo_sort_key)))
        steps.append(COMBO_OPERATOR.join(stages))
    return SEQUENCE_SEPARATOR.join(steps)


def separator_for(event: str) -> str | None:
    """Return the separator an expression must be split on, if any."""
    if SCOPE_SEPARATOR in event:
        return SCOPE_SEPARATOR
    if SEQUENCE_SEPARATOR in event:
        return SEQUENCE_SEPARATOR
    return None
