"""Tests for triggered-event recording."""

from __future__ import annotations

import unittest

from humaninput.recorder import EventRecorder


class EventRecorderTests(unittest.TestCase):
    """Validate the recording flag and log."""

    def test_records_only_while_recording(self) -> None:
        recorder = EventRecorder()
        recorder.record("before")
        recorder.start()
        self.assertTrue(recorder.recording)
        recorder.record("keydown")
        recorder.record("keyup")
        self.assertEqual(recorder.stop(), ["keydown", "keyup"])
        self.assertFalse(recorder.recording)
        recorder.record("after")
        self.assertEqual(recorder.events, ["keydown", "keyup"])

    def test_start_clears_previous_log(self) -> None:
        recorder = EventRecorder()
        recorder.start()
        recorder.record("old")
        recorder.start()
        recorder.record("new")
        self.assertEqual(recorder.stop(), ["new"])

    def test_stop_filters_with_glob(self) -> None:
        recorder = EventRecorder()
        recorder.start()
        for name in ("pointer:left", "keydown", "pointer:right"):
            recorder.record(name)
        self.assertEqual(recorder.stop("pointer:*"), ["pointer:left", "pointer:right"])

    def test_events_returns_copy(self) -> None:
        recorder = EventRecorder()
        recorder.start()
        recorder.record("a")
        recorder.events.append("tampered")
        self.assertEqual(recorder.events, ["a"])


if __name__ == "__main__":
    unittest.main()
