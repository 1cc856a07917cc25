"""Event remapping table consulted by the registry at trigger time."""

from __future__ import annotations

from collections.abc import Callable, Mapping
import logging

LOGGER = logging.getLogger(__name__)


def _lowercase(event: str) -> str:
    return event.lower()


class EventMap:
    """Translate one event name into another before dispatch.

    ``forward`` maps the name an input source emits to the name listeners
    subscribe to; ``reverse`` is kept in step so callers can answer "what
    produces this event?".
    """

    def __init__(self) -> None:
        self.forward: dict[str, str] = {}
        self.reverse: dict[str, str] = {}

    def add(
        self,
        mapping: Mapping[str, str],
        normalize: Callable[[str], str] | None = None,
    ) -> EventMap:
        """Register remaps, normalizing both sides with *normalize*."""
        norm = normalize or _lowercase
        for source, target in mapping.items():
            source_name = norm(source)
            target_name = norm(target)
            stale_target = self.forward.get(source_name)
            if stale_target is not None:
                self._drop_reverse(stale_target, source_name)
            self.forward[source_name] = target_name
            self.reverse[target_name] = source_name
            LOGGER.debug("Mapped event %s -> %s", source_name, target_name)
        return self

    def remove(self, event: str, normalize: Callable[[str], str] | None = None) -> None:
        """Drop the remap whose source is *event*; unknown names are ignored."""
        source_name = (normalize or _lowercase)(event)
        target_name = self.forward.pop(source_name, None)
        if target_name is not None:
            self._drop_reverse(target_name, source_name)

    def _drop_reverse(self, target_name: str, source_name: str) -> None:
        # Several sources may share a target; reverse only holds the latest.
        if self.reverse.get(target_name) == source_name:
            del self.reverse[target_name]

    def clear(self) -> None:
        self.forward.clear()
        self.reverse.clear()

    def __len__(self) -> int:
        return len(self.forward)
