from __future__ import annotations

import shutil
from pathlib import Path

from mstest_step.contracts import ArtifactCleanupError, OutputSink


def prepare_result_file(workspace: Path, result_file: str, *, sink: OutputSink) -> Path:
    """Remove a result file left by an earlier run so it cannot pass for this run's."""
    path = workspace / result_file
    try:
        uri = path.resolve().as_uri()
        exists = path.exists()
    except (OSError, ValueError) as exc:
        raise ArtifactCleanupError(f"Failed checking for old result file {path}") from exc

    if not exists:
        sink.log(f"Result file was not found so no action has been taken. {uri}")
        return path

    sink.log(f"Delete old result file {uri}")
    try:
        if path.is_dir():
            shutil.rmtree(path)
        else:
            path.unlink()
    except OSError as exc:
        raise ArtifactCleanupError("Fail to delete old result file") from exc
    return path
