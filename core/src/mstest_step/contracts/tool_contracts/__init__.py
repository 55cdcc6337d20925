from .installation import DEFAULT_EXECUTABLE, ResolvedInstallation, ToolInstallation
from .node import ExecutionNode
from .registry import InstallationNotFoundError, InstallationRegistry

__all__ = [
    "DEFAULT_EXECUTABLE",
    "ExecutionNode",
    "InstallationNotFoundError",
    "InstallationRegistry",
    "ResolvedInstallation",
    "ToolInstallation",
]
