from __future__ import annotations

import threading
from collections.abc import Iterable, Sequence

from mstest_step.configuration import ConfigError
from mstest_step.contracts import InstallationNotFoundError, InstallationRegistry, ToolInstallation


class SnapshotInstallationRegistry(InstallationRegistry):
    """
    Process-wide installation list, replaced wholesale by administrative actions.

    Readers always see either the previous or the new tuple, never a mix.
    """

    def __init__(self, installations: Iterable[ToolInstallation] = ()) -> None:
        self._lock = threading.Lock()
        self._installations: tuple[ToolInstallation, ...] = _checked(installations)

    def replace(self, installations: Iterable[ToolInstallation]) -> None:
        snapshot = _checked(installations)
        with self._lock:
            self._installations = snapshot

    def snapshot(self) -> Sequence[ToolInstallation]:
        with self._lock:
            return self._installations

    def get(self, name: str) -> ToolInstallation:
        for installation in self.snapshot():
            if installation.name == name:
                return installation
        raise InstallationNotFoundError(name)

    def list(self) -> Iterable[ToolInstallation]:
        return list(self.snapshot())


def _checked(installations: Iterable[ToolInstallation]) -> tuple[ToolInstallation, ...]:
    snapshot = tuple(installations)
    seen: set[str] = set()
    for installation in snapshot:
        if installation.name in seen:
            raise ConfigError(f"Duplicate installation name '{installation.name}'")
        seen.add(installation.name)
    return snapshot
