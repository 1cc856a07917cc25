"""Top-level package for humaninput."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .config import load_config
    from .event_map import EventMap
    from .events import EventRegistry, ListenerRecord
    from .exceptions import ConfigValidationError, HumanInputError
    from .recorder import EventRecorder

__all__ = [
    "ConfigValidationError",
    "EventMap",
    "EventRecorder",
    "EventRegistry",
    "HumanInputError",
    "ListenerRecord",
    "load_config",
]


def __getattr__(name: str) -> Any:
    """Lazily import symbols so importing the package stays cheap."""
    if name in {"EventRegistry", "ListenerRecord"}:
        from .events import EventRegistry, ListenerRecord

        return {"EventRegistry": EventRegistry, "ListenerRecord": ListenerRecord}[name]
    if name == "EventMap":
        from .event_map import EventMap

        return EventMap
    if name == "EventRecorder":
        from .recorder import EventRecorder

        return EventRecorder
    if name == "load_config":
        from .config import load_config

        return load_config
    if name in {"ConfigValidationError", "HumanInputError"}:
        from .exceptions import ConfigValidationError, HumanInputError

        return {
            "ConfigValidationError": ConfigValidationError,
            "HumanInputError": HumanInputError,
        }[name]
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
