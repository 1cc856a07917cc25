"""Event subscription and dispatch."""

from .aliases import BUILTIN_ALIASES
from .names import norm_combo, norm_events, split_unquoted
from .registry import EventRegistry, ListenerRecord

__all__ = [
    "BUILTIN_ALIASES",
    "EventRegistry",
    "ListenerRecord",
    "norm_combo",
    "norm_events",
    "split_unquoted",
]
