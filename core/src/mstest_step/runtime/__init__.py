"""Side-effecting helpers of a step run: files, nodes and the runner process."""

from mstest_step.runtime.artifacts import prepare_result_file
from mstest_step.runtime.nodes import LocalNode
from mstest_step.runtime.process import run_invocation

__all__ = ["LocalNode", "prepare_result_file", "run_invocation"]
