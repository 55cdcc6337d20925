from __future__ import annotations

import threading
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from mstest_step.contracts.output_sink import OutputSink
from mstest_step.contracts.tool_contracts.node import ExecutionNode


@dataclass(frozen=True, slots=True)
class ExecutionContext:
    """
    Caller-provided runtime context for a single step run.

    Built fresh per run and never persisted.
    """

    env: Mapping[str, str]
    build_variables: Mapping[str, str]
    workspace: Path
    node: ExecutionNode
    sink: OutputSink
    cancel_event: threading.Event | None = field(default=None, compare=False)
