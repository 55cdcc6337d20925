from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class OutputSink(Protocol):
    """
    Facade contract for the build log of a single step run.
    """

    def log(self, message: str) -> None:
        """Write an informational line."""
        ...

    def fatal_error(self, message: str) -> None:
        """Write a line explaining why the run is aborting."""
        ...

    def write(self, line: str) -> None:
        """Forward one line of raw runner output."""
        ...
