from .errors import (
    ArtifactCleanupError,
    ConfigurationError,
    ExecutionCancelledError,
    ExecutionError,
    InstallationPathMissingError,
    LaunchError,
    StepError,
)
from .output_sink import OutputSink
from .step_contracts import (
    CommandInvocation,
    ExecutionContext,
    JobConfig,
    StepConfig,
    StepResult,
    StepStatus,
)
from .tool_contracts import (
    DEFAULT_EXECUTABLE,
    ExecutionNode,
    InstallationNotFoundError,
    InstallationRegistry,
    ResolvedInstallation,
    ToolInstallation,
)

__all__ = [
    "StepConfig",
    "ExecutionContext",
    "JobConfig",
    "CommandInvocation",
    "StepResult",
    "StepStatus",
    "ToolInstallation",
    "ResolvedInstallation",
    "DEFAULT_EXECUTABLE",
    "ExecutionNode",
    "InstallationRegistry",
    "InstallationNotFoundError",
    "OutputSink",
    "StepError",
    "ConfigurationError",
    "InstallationPathMissingError",
    "ArtifactCleanupError",
    "ExecutionError",
    "LaunchError",
    "ExecutionCancelledError",
]
