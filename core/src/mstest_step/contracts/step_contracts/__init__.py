from .execution_context import ExecutionContext
from .invocation import CommandInvocation
from .job_config import JobConfig
from .step_config import StepConfig
from .step_result import StepResult, StepStatus

__all__ = [
    "CommandInvocation",
    "ExecutionContext",
    "JobConfig",
    "StepConfig",
    "StepResult",
    "StepStatus",
]
