from __future__ import annotations

from mstest_step.contracts import ExecutionError


def decide_outcome(continue_on_fail: bool, result: int | ExecutionError) -> bool:
    if isinstance(result, ExecutionError):
        return False
    if result == 0:
        return True
    return continue_on_fail
