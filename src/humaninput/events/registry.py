"""Event registry for input listeners.

Usage:
    registry = EventRegistry()

    # Subscribe to events (aliases, combos and sequences are normalized)
    def on_save(event):
        print(f"Saving after {event}")

    registry.on("ctrl-s", on_save)
    registry.once("konami", lambda: "cheat unlocked")

    # Trigger events; return values are collected in listener order
    results = registry.trigger("ctrl-s", "keydown")
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, MutableMapping
from dataclasses import dataclass
import logging
from types import MappingProxyType, SimpleNamespace
from typing import Any

from ..event_map import EventMap
from ..recorder import EventRecorder
from .aliases import BUILTIN_ALIASES
from .names import (
    COMBO_OPERATOR,
    norm_combo,
    norm_events,
    separator_for,
    shift_shorthand,
    split_unquoted,
)

LOGGER = logging.getLogger(__name__)

# Attribute (or key) set on a listener's context before it is invoked.
EVENT_ATTRIBUTE = "hi_event"

Events = str | Iterable[str]

_UNSET: Any = object()


@dataclass
class ListenerRecord:
    """A subscribed callback and its dispatch bookkeeping."""

    callback: Callable[..., Any]
    context: Any
    times: int | None = None
    explicit_context: bool = True


class EventRegistry:
    """Map normalized event names to ordered listener lists.

    Collaborators owned by the surrounding input system are injected: a
    logger exposing ``debug``, an :class:`EventMap` whose ``forward`` table
    remaps names at trigger time, an :class:`EventRecorder`, and the global
    context object that must never receive the ``hi_event`` attribute.
    """

    def __init__(
        self,
        logger: Any = None,
        *,
        aliases: Mapping[str, str] | None = None,
        event_map: EventMap | None = None,
        recorder: EventRecorder | None = None,
        global_context: Any = None,
    ) -> None:
        table = dict(BUILTIN_ALIASES)
        if aliases:
            table.update(aliases)
        self._aliases: Mapping[str, str] = MappingProxyType(table)
        self._events: dict[str, list[ListenerRecord]] = {}
        self.log = logger or LOGGER
        self.event_map = event_map if event_map is not None else EventMap()
        self.recorder = recorder if recorder is not None else EventRecorder()
        self.global_context = global_context

    @classmethod
    def from_config(cls, config: Mapping[str, Any], **kwargs: Any) -> EventRegistry:
        """Build a registry from a loaded configuration dictionary."""
        registry_config = config.get("registry", {})
        registry = cls(aliases=registry_config.get("aliases") or None, **kwargs)
        event_map = registry_config.get("event_map") or {}
        if event_map:
            registry.event_map.add(event_map, normalize=registry.normalize_event_name)
        return registry

    @property
    def aliases(self) -> Mapping[str, str]:
        return self._aliases

    @property
    def event_count(self) -> int:
        """Number of distinct events with at least one listener."""
        return len(self._events)

    def listeners(self, event: str) -> list[ListenerRecord]:
        """Return a copy of the listener records stored for *event*."""
        return list(self._events.get(self.normalize_event_name(event), []))

    def _handle_aliases(self, event: str) -> str:
        return shift_shorthand(self._aliases.get(event, event))

    def normalize_event_name(self, event: str) -> str:
        """Resolve aliases and reduce *event* to its stored form."""
        separator = separator_for(event)
        if separator:
            pieces = [
                self._handle_aliases(piece)
                for piece in split_unquoted(event, separator)
            ]
            event = separator.join(pieces).rstrip(separator)
        else:
            event = self._handle_aliases(event)
        event = event.lower()
        if COMBO_OPERATOR in event:
            event = norm_combo(event)
        return event

    def subscribe(
        self,
        events: Events,
        callback: Callable[..., Any],
        context: Any = None,
        times: int | None = None,
    ) -> EventRegistry:
        """Register *callback* for each event in *events*.

        Args:
            events: A name, a comma-delimited batch or a sequence of names.
            callback: Called with the trigger arguments.
            context: Object bound to the listener; receives ``hi_event``.
            times: Fire this many times, then unsubscribe. ``None`` is unlimited.
        """
        explicit_context = context is not None
        for name in norm_events(events):
            event = self.normalize_event_name(name)
            record = ListenerRecord(
                callback=callback,
                context=context if explicit_context else SimpleNamespace(),
                times=times,
                explicit_context=explicit_context,
            )
            self._events.setdefault(event, []).append(record)
        return self

    def subscribe_once(
        self, events: Events, callback: Callable[..., Any], context: Any = None
    ) -> EventRegistry:
        return self.subscribe(events, callback, context, times=1)

    def unsubscribe(
        self,
        events: Events | None = _UNSET,
        callback: Callable[..., Any] | None = None,
        context: Any = None,
    ) -> EventRegistry:
        """Remove listeners.

        - no arguments: remove every listener
        - events only: remove those events entirely
        - events and callback: remove matching callbacks, narrowed by context
        - events and context: remove listeners bound to that context

        Passing ``events=None`` with a callback or context filters every event.
        """
        if events is _UNSET and callback is None and context is None:
            self._events = {}
            return self

        if events is _UNSET or events is None:
            names = list(self._events)
        else:
            names = [self.normalize_event_name(name) for name in norm_events(events)]

        for event in names:
            records = self._events.get(event)
            if records is None:
                continue
            if callback is None and context is None:
                del self._events[event]
                continue
            kept = [
                record
                for record in records
                if self._keeps(record, callback, context)
            ]
            if kept:
                self._events[event] = kept
            else:
                del self._events[event]
        return self

    @staticmethod
    def _keeps(record: ListenerRecord, callback: Any, context: Any) -> bool:
        if callback is None:
            return record.context is not context
        if record.callback != callback:
            return True
        if context is None:
            return record.explicit_context
        return record.context != context

    def _discard(self, event: str, record: ListenerRecord) -> None:
        records = self._events.get(event)
        if records is None:
            return
        kept = [item for item in records if item is not record]
        if kept:
            self._events[event] = kept
        else:
            del self._events[event]

    def _mark_context(self, context: Any, event: str) -> None:
        if context is self.global_context:
            return
        if isinstance(context, MutableMapping):
            context[EVENT_ATTRIBUTE] = event
            return
        try:
            setattr(context, EVENT_ATTRIBUTE, event)
        except (AttributeError, TypeError):
            self.log.debug("Context %r does not accept %s", context, EVENT_ATTRIBUTE)

    def trigger(self, events: Events, *args: Any) -> list[Any]:
        """Invoke the listeners of each event and collect their return values."""
        results: list[Any] = []
        for name in norm_events(events):
            event = self.normalize_event_name(name)
            event = self.event_map.forward.get(event, event)
            self.log.debug("Triggering: %s (%d args)", event, len(args))
            self.recorder.record(event)
            for record in list(self._events.get(event, ())):
                self._mark_context(record.context, event)
                if record.times:
                    record.times -= 1
                    if record.times == 0:
                        self._discard(event, record)
                results.append(record.callback(*args))
        return results

    on = subscribe
    once = subscribe_once
    one = subscribe_once
    off = unsubscribe
    emit = trigger
