from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Protocol, runtime_checkable

from mstest_step.contracts.tool_contracts.installation import ToolInstallation


class InstallationNotFoundError(KeyError):
    pass


@runtime_checkable
class InstallationRegistry(Protocol):
    def get(self, name: str) -> ToolInstallation:
        """Return installation for name or raise InstallationNotFoundError."""
        ...

    def list(self) -> Iterable[ToolInstallation]:
        """List registered installations (for UI / debugging)."""
        ...

    def snapshot(self) -> Sequence[ToolInstallation]:
        """Return an immutable view of the installations registered right now."""
        ...
