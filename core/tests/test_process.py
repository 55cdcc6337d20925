from __future__ import annotations

import json
import os
import sys
import threading
import time

import pytest

from mstest_step.contracts import CommandInvocation, ExecutionCancelledError, LaunchError
from mstest_step.runtime.process import run_invocation
from mstest_step.sinks.fakes import RecordingSink
from mstest_step.testkit.dummies import ARGV_RECORD, write_fake_runner


def _invocation(tmp_path, *args: str) -> CommandInvocation:
    return CommandInvocation(args=(sys.executable, *args), env=dict(os.environ), cwd=tmp_path)


def test_run_invocation_streams_output_and_returns_exit_code(tmp_path):
    script = write_fake_runner(tmp_path, exit_code=0, output_lines=["Loading", "Passed  Test1"])
    sink = RecordingSink()

    exit_code = run_invocation(
        _invocation(tmp_path, str(script), "/resultsfile:out.trx"),
        sink,
    )

    assert exit_code == 0
    assert sink.output == ["Loading", "Passed  Test1"]
    assert sink.messages[0].startswith(f"$ {sys.executable}")
    record = json.loads((tmp_path / ARGV_RECORD).read_text(encoding="utf-8"))
    assert record["argv"] == ["/resultsfile:out.trx"]
    assert os.path.samefile(record["cwd"], tmp_path)


def test_run_invocation_returns_nonzero_exit_code(tmp_path):
    script = write_fake_runner(tmp_path, exit_code=3, output_lines=[])

    assert run_invocation(_invocation(tmp_path, str(script)), RecordingSink()) == 3


def test_run_invocation_merges_stderr_into_output(tmp_path):
    code = "import sys; print('to stdout', flush=True); sys.stderr.write('to stderr\\n')"
    sink = RecordingSink()

    run_invocation(_invocation(tmp_path, "-c", code), sink)

    assert sorted(sink.output) == ["to stderr", "to stdout"]


def test_run_invocation_missing_executable_is_launch_error(tmp_path):
    invocation = CommandInvocation(
        args=("definitely-not-mstest.exe", "/noisolation"),
        env={"PATH": str(tmp_path)},
        cwd=tmp_path,
    )

    with pytest.raises(LaunchError, match="MSTest command execution failed"):
        run_invocation(invocation, RecordingSink())


def test_run_invocation_missing_working_directory_is_launch_error(tmp_path):
    invocation = _invocation(tmp_path / "gone", "-c", "pass")

    with pytest.raises(LaunchError):
        run_invocation(invocation, RecordingSink())


def test_run_invocation_cancel_event_stops_the_runner(tmp_path):
    script = write_fake_runner(tmp_path, sleep_s=60, output_lines=["started"])
    cancel = threading.Event()
    timer = threading.Timer(0.5, cancel.set)
    timer.start()
    started = time.monotonic()

    try:
        with pytest.raises(ExecutionCancelledError, match="cancelled"):
            run_invocation(_invocation(tmp_path, str(script)), RecordingSink(), cancel_event=cancel)
    finally:
        timer.cancel()

    assert time.monotonic() - started < 30
