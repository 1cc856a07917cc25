"""Recording of triggered event names."""

from __future__ import annotations

from fnmatch import fnmatchcase
import logging

LOGGER = logging.getLogger(__name__)


class EventRecorder:
    """Hold the "is recording" flag and the log of recorded event names."""

    def __init__(self) -> None:
        self.recording = False
        self._events: list[str] = []

    @property
    def events(self) -> list[str]:
        """Return a copy of the recorded names."""
        return list(self._events)

    def start(self) -> None:
        """Clear the log and begin recording."""
        self._events.clear()
        self.recording = True
        LOGGER.debug("Event recording started")

    def stop(self, pattern: str | None = None) -> list[str]:
        """Stop recording and return what was recorded.

        Args:
            pattern: Optional shell-style glob (e.g. ``"pointer:*"``) used to
                keep only matching event names.
        """
        self.recording = False
        recorded = self.events
        LOGGER.debug("Event recording stopped after %d events", len(recorded))
        if pattern is None:
            return recorded
        return [event for event in recorded if fnmatchcase(event, pattern)]

    def record(self, event: str) -> None:
        if self.recording:
            self._events.append(event)
