from pathlib import Path

import pytest

from mstest_step.contracts import ArtifactCleanupError
from mstest_step.runtime.artifacts import prepare_result_file
from mstest_step.sinks.fakes import RecordingSink


def test_prepare_result_file_is_noop_when_missing(tmp_path):
    sink = RecordingSink()

    first = prepare_result_file(tmp_path, "out.trx", sink=sink)
    second = prepare_result_file(tmp_path, "out.trx", sink=sink)

    assert first == second == tmp_path / "out.trx"
    assert not first.exists()
    assert len(sink.messages) == 2
    assert all(
        message.startswith("Result file was not found so no action has been taken.")
        for message in sink.messages
    )
    assert sink.errors == []


def test_prepare_result_file_deletes_stale_file(tmp_path):
    stale = tmp_path / "results" / "out.trx"
    stale.parent.mkdir()
    stale.write_text("<TestRun/>", encoding="utf-8")
    sink = RecordingSink()

    path = prepare_result_file(tmp_path, "results/out.trx", sink=sink)

    assert path == stale
    assert not stale.exists()
    assert sink.messages == [f"Delete old result file {stale.resolve().as_uri()}"]


def test_prepare_result_file_removes_directory_in_the_way(tmp_path):
    blocking = tmp_path / "out.trx"
    blocking.mkdir()
    (blocking / "leftover.txt").write_text("x", encoding="utf-8")

    prepare_result_file(tmp_path, "out.trx", sink=RecordingSink())

    assert not blocking.exists()


def test_prepare_result_file_delete_failure_is_fatal(tmp_path, monkeypatch):
    stale = tmp_path / "out.trx"
    stale.write_text("<TestRun/>", encoding="utf-8")

    def _refuse(self, missing_ok=False):
        raise PermissionError("locked by another process")

    monkeypatch.setattr(Path, "unlink", _refuse)

    with pytest.raises(ArtifactCleanupError, match="Fail to delete old result file") as excinfo:
        prepare_result_file(tmp_path, "out.trx", sink=RecordingSink())

    assert isinstance(excinfo.value.__cause__, PermissionError)
    assert stale.exists()


@pytest.mark.parametrize("method", ["exists", "resolve"])
def test_prepare_result_file_failed_lookup_is_fatal(tmp_path, monkeypatch, method):
    def _denied(self, *args, **kwargs):
        raise PermissionError("denied")

    monkeypatch.setattr(Path, method, _denied)
    sink = RecordingSink()

    with pytest.raises(ArtifactCleanupError, match="Failed checking for old result file") as excinfo:
        prepare_result_file(tmp_path, "out.trx", sink=sink)

    assert isinstance(excinfo.value.__cause__, PermissionError)
    assert sink.messages == []
