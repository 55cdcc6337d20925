from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from datetime import UTC, datetime
from pathlib import Path

from mstest_step.configuration import load_job
from mstest_step.contracts import (
    ExecutionContext,
    ExecutionError,
    InstallationRegistry,
    ResolvedInstallation,
    StepConfig,
    StepError,
    StepResult,
    StepStatus,
    ToolInstallation,
)
from mstest_step.orchestration.command import build_invocation, validate_result_file
from mstest_step.orchestration.outcome import decide_outcome
from mstest_step.orchestration.registry import SnapshotInstallationRegistry
from mstest_step.orchestration.resolver import resolve_installation
from mstest_step.runtime.artifacts import prepare_result_file
from mstest_step.runtime.process import run_invocation

logger = logging.getLogger("mstest_step.api")


def run_step(
    config: StepConfig,
    *,
    registry: InstallationRegistry,
    context: ExecutionContext,
) -> StepResult:
    """
    Run MSTest once for a step: resolve, clean up, build, execute, decide.

    Every pre-launch failure is reported to the sink and returned as a failed
    result without starting a process.
    """
    sink = context.sink
    start = datetime.now(UTC)

    try:
        resolved = resolve_installation(
            config.tool_name,
            registry,
            node=context.node,
            env=context.env,
        )
        if resolved is None:
            resolved = ResolvedInstallation.fallback()
        sink.log(f"Path To MSTest.exe: {resolved.home}")

        result_file = validate_result_file(config.result_file)
        prepare_result_file(context.workspace, result_file, sink=sink)
        invocation = build_invocation(resolved, config, context)
    except StepError as exc:
        message = _describe(exc)
        sink.fatal_error(message)
        return _result(start, status="failed", message=message)

    try:
        outcome: int | ExecutionError = run_invocation(
            invocation,
            sink,
            cancel_event=context.cancel_event,
        )
    except ExecutionError as exc:
        outcome = exc
        sink.fatal_error(_describe(exc))

    success = decide_outcome(config.continue_on_fail, outcome)
    status: StepStatus = "ok" if success else "failed"
    if isinstance(outcome, ExecutionError):
        return _result(
            start,
            status=status,
            command=invocation.args,
            message=_describe(outcome),
        )

    if outcome == 0:
        message = "MSTest completed successfully"
    elif success:
        message = f"MSTest exited with code {outcome}; ignored because continueOnFail is set"
    else:
        message = f"MSTest exited with code {outcome}"
    logger.info(message)
    return _result(
        start,
        status=status,
        exit_code=outcome,
        command=invocation.args,
        message=message,
    )


def perform(
    config: StepConfig,
    *,
    registry: InstallationRegistry,
    context: ExecutionContext,
) -> bool:
    """Run the step and return only the build pass/fail signal."""
    return run_step(config, registry=registry, context=context).success


def run_from_yaml(
    job_yaml: str | Path,
    *,
    context: ExecutionContext,
    extra_installations: Iterable[ToolInstallation] = (),
) -> StepResult:
    job = load_job(job_yaml)
    registry = SnapshotInstallationRegistry([*job.installations, *extra_installations])
    return run_step(job.step, registry=registry, context=context)


def _describe(exc: BaseException) -> str:
    cause = exc.__cause__
    if cause is None or isinstance(cause, KeyboardInterrupt):
        return str(exc)
    return f"{exc} ({cause})"


def _result(
    start: datetime,
    *,
    status: StepStatus,
    exit_code: int | None = None,
    command: Sequence[str] = (),
    message: str | None = None,
) -> StepResult:
    end = datetime.now(UTC)
    return StepResult(
        status=status,
        started_at_utc=start.isoformat(),
        ended_at_utc=end.isoformat(),
        duration_s=(end - start).total_seconds(),
        exit_code=exit_code,
        command=tuple(command),
        message=message,
    )
