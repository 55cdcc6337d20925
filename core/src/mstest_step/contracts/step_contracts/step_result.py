from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Literal

StepStatus = Literal["ok", "failed"]


@dataclass(frozen=True, slots=True)
class StepResult:
    """
    Public step outcome contract.

    `status` is the pass/fail signal handed back to the build.
    """

    status: StepStatus

    started_at_utc: str
    ended_at_utc: str
    duration_s: float

    # None when the runner never exited normally
    exit_code: int | None = None
    command: Sequence[str] = field(default_factory=tuple)

    message: str | None = None

    @property
    def success(self) -> bool:
        return self.status == "ok"
