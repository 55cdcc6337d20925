from __future__ import annotations

import logging
import subprocess
import threading
from typing import IO, cast

from mstest_step.contracts import (
    CommandInvocation,
    ExecutionCancelledError,
    LaunchError,
    OutputSink,
)

logger = logging.getLogger("mstest_step.process")

_POLL_INTERVAL_S = 0.1
_TERMINATE_GRACE_S = 5.0


def run_invocation(
    invocation: CommandInvocation,
    sink: OutputSink,
    *,
    cancel_event: threading.Event | None = None,
) -> int:
    """
    Run the command, streaming merged stdout/stderr to `sink`, and return its exit code.

    Raises LaunchError when the process cannot be started and
    ExecutionCancelledError when `cancel_event` fires or the wait is interrupted;
    in both cancellation cases the child is stopped first.
    """
    sink.log(f"$ {invocation.display()}")
    try:
        proc = subprocess.Popen(  # noqa: S603
            list(invocation.args),
            cwd=str(invocation.cwd),
            env=dict(invocation.env),
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            encoding="utf-8",
            errors="replace",
        )
    except (OSError, ValueError) as exc:
        raise LaunchError("MSTest command execution failed") from exc

    stdout = cast(IO[str], proc.stdout)
    pump = threading.Thread(
        target=_pump_output,
        args=(stdout, sink),
        name="mstest-output",
        daemon=True,
    )
    pump.start()

    try:
        while True:
            try:
                exit_code = proc.wait(timeout=_POLL_INTERVAL_S)
                break
            except subprocess.TimeoutExpired:
                if cancel_event is not None and cancel_event.is_set():
                    _stop(proc)
                    raise ExecutionCancelledError("MSTest run was cancelled") from None
    except KeyboardInterrupt as exc:
        _stop(proc)
        raise ExecutionCancelledError("MSTest run was interrupted") from exc
    finally:
        pump.join(timeout=_TERMINATE_GRACE_S)

    logger.debug("%s exited with code %s", invocation.executable, exit_code)
    return exit_code


def _pump_output(stream: IO[str], sink: OutputSink) -> None:
    with stream:
        for line in stream:
            try:
                sink.write(line.rstrip("\r\n"))
            except Exception:
                logger.warning("Failed to forward runner output line", exc_info=True)


def _stop(proc: subprocess.Popen[str]) -> None:
    proc.terminate()
    try:
        proc.wait(timeout=_TERMINATE_GRACE_S)
    except subprocess.TimeoutExpired:
        proc.kill()
        proc.wait()
