from __future__ import annotations

import sys
from collections.abc import Sequence
from pathlib import Path

from mstest_step.contracts import ToolInstallation

ARGV_RECORD = "fake_mstest_argv.json"

_SCRIPT_TEMPLATE = """\
import json
import os
import sys
import time

with open({record!r}, "w", encoding="utf-8") as handle:
    json.dump({{"argv": sys.argv[1:], "cwd": os.getcwd()}}, handle)
for line in {lines!r}:
    print(line, flush=True)
time.sleep({sleep_s!r})
sys.exit({exit_code!r})
"""


def write_fake_runner(
    directory: Path,
    *,
    exit_code: int = 0,
    output_lines: Sequence[str] = ("Loading tests...", "Passed  FakeTest"),
    sleep_s: float = 0.0,
) -> Path:
    """Write a Python script that behaves like a minimal MSTest.exe."""
    script = directory / "fake_mstest.py"
    script.write_text(
        _SCRIPT_TEMPLATE.format(
            record=ARGV_RECORD,
            lines=list(output_lines),
            sleep_s=sleep_s,
            exit_code=exit_code,
        ),
        encoding="utf-8",
    )
    return script


def fake_runner_installation(
    script: Path,
    *,
    name: str = "fake",
    omit_no_isolation: bool = False,
) -> ToolInstallation:
    """Installation that launches `script` with the current interpreter."""
    return ToolInstallation(
        name=name,
        home=sys.executable,
        default_args=f'"{script}"',
        omit_no_isolation=omit_no_isolation,
    )
