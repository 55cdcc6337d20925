from __future__ import annotations


class StepError(Exception):
    """Base class for failures raised while executing an MSTest build step."""


class ConfigurationError(StepError):
    pass


class InstallationPathMissingError(StepError):
    pass


class ArtifactCleanupError(StepError):
    pass


class ExecutionError(StepError):
    """The runner process never ran or its output cannot be trusted."""


class LaunchError(ExecutionError):
    pass


class ExecutionCancelledError(ExecutionError):
    pass
