from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True, slots=True)
class CommandInvocation:
    args: tuple[str, ...]
    env: Mapping[str, str] = field(default_factory=dict)
    cwd: Path = field(default_factory=Path.cwd)

    @property
    def executable(self) -> str:
        return self.args[0]

    def display(self) -> str:
        """Human-friendly command line for logs."""
        return " ".join(self.args)
