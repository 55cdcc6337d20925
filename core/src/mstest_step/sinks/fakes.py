from __future__ import annotations

import threading
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SinkCall:
    """Record of a sink call for assertions in tests."""

    name: str
    message: str


class RecordingSink:
    """
    In-memory OutputSink for unit tests.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._calls: list[SinkCall] = []

    @property
    def calls(self) -> list[SinkCall]:
        """Return the recorded calls in order."""
        with self._lock:
            return list(self._calls)

    @property
    def messages(self) -> list[str]:
        return [call.message for call in self.calls if call.name == "log"]

    @property
    def errors(self) -> list[str]:
        return [call.message for call in self.calls if call.name == "fatal_error"]

    @property
    def output(self) -> list[str]:
        return [call.message for call in self.calls if call.name == "write"]

    def log(self, message: str) -> None:
        self._record("log", message)

    def fatal_error(self, message: str) -> None:
        self._record("fatal_error", message)

    def write(self, line: str) -> None:
        self._record("write", line)

    def _record(self, name: str, message: str) -> None:
        with self._lock:
            self._calls.append(SinkCall(name=name, message=message))
