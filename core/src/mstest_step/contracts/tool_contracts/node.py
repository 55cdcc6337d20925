from __future__ import annotations

from typing import Protocol, runtime_checkable

from mstest_step.contracts.tool_contracts.installation import ToolInstallation


@runtime_checkable
class ExecutionNode(Protocol):
    """
    The machine a step runs on, as seen by the installation resolver.
    """

    @property
    def name(self) -> str: ...

    def tool_home(self, installation: ToolInstallation) -> str:
        """Return the installation home as laid out on this node."""
        ...

    def path_exists(self, path: str) -> bool:
        """Check a path on this node. May raise OSError when the check itself fails."""
        ...
