from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from mstest_step.contracts import ToolInstallation


@dataclass(frozen=True, slots=True)
class LocalNode:
    """
    The machine this process runs on.

    `tool_locations` maps installation names to homes that differ on this node.
    """

    name: str = "local"
    tool_locations: Mapping[str, str] = field(default_factory=dict)

    def tool_home(self, installation: ToolInstallation) -> str:
        return self.tool_locations.get(installation.name, installation.home)

    def path_exists(self, path: str) -> bool:
        return Path(path).exists()
