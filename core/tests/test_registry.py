import threading

import pytest

from mstest_step.configuration import ConfigError
from mstest_step.contracts import InstallationNotFoundError, InstallationRegistry, ToolInstallation
from mstest_step.orchestration.registry import SnapshotInstallationRegistry


def _installation(name: str, home: str = r"C:\VS\MSTest.exe") -> ToolInstallation:
    return ToolInstallation(name=name, home=home)


def test_registry_get_matches_exact_name():
    vs2019 = _installation("VS2019")
    registry = SnapshotInstallationRegistry([_installation("VS2017"), vs2019])

    assert registry.get("VS2019") is vs2019
    assert isinstance(registry, InstallationRegistry)


def test_registry_get_missing_raises_not_found():
    registry = SnapshotInstallationRegistry([_installation("VS2019")])

    with pytest.raises(InstallationNotFoundError):
        registry.get("vs2019")
    with pytest.raises(KeyError):
        registry.get("")


def test_registry_replace_swaps_whole_snapshot():
    registry = SnapshotInstallationRegistry([_installation("old")])
    before = registry.snapshot()

    registry.replace([_installation("new-a"), _installation("new-b")])

    assert [i.name for i in before] == ["old"]
    assert [i.name for i in registry.snapshot()] == ["new-a", "new-b"]
    assert [i.name for i in registry.list()] == ["new-a", "new-b"]


def test_registry_rejects_duplicate_names_and_keeps_previous_snapshot():
    registry = SnapshotInstallationRegistry([_installation("keep")])

    with pytest.raises(ConfigError, match="Duplicate installation name 'dup'"):
        registry.replace([_installation("dup"), _installation("dup")])

    assert [i.name for i in registry.snapshot()] == ["keep"]


def test_registry_readers_never_observe_partial_replace():
    old = [_installation(f"old-{i}") for i in range(20)]
    new = [_installation(f"new-{i}") for i in range(20)]
    registry = SnapshotInstallationRegistry(old)
    observed: list[set[str]] = []
    stop = threading.Event()

    def read() -> None:
        while True:
            observed.append({i.name.split("-")[0] for i in registry.snapshot()})
            if stop.is_set():
                return

    readers = [threading.Thread(target=read) for _ in range(4)]
    for reader in readers:
        reader.start()
    for round_ in range(200):
        registry.replace(new if round_ % 2 == 0 else old)
    stop.set()
    for reader in readers:
        reader.join()

    assert observed
    assert all(kinds in ({"old"}, {"new"}) for kinds in observed)
