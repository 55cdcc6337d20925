from __future__ import annotations

import logging
from collections.abc import Mapping

from mstest_step.contracts import (
    ExecutionNode,
    InstallationNotFoundError,
    InstallationPathMissingError,
    InstallationRegistry,
    ResolvedInstallation,
    ToolInstallation,
)
from mstest_step.macros import expand

logger = logging.getLogger("mstest_step.resolver")


def for_node(installation: ToolInstallation, node: ExecutionNode) -> ToolInstallation:
    """Derive a copy whose home is the one configured for `node`."""
    return installation.model_copy(update={"home": node.tool_home(installation)})


def for_environment(installation: ToolInstallation, env: Mapping[str, str]) -> ToolInstallation:
    """Derive a copy whose home has environment macros expanded."""
    return installation.model_copy(update={"home": expand(installation.home, env)})


def resolve_installation(
    tool_name: str | None,
    registry: InstallationRegistry,
    *,
    node: ExecutionNode,
    env: Mapping[str, str],
) -> ResolvedInstallation | None:
    """
    Find the named installation and adjust it for the node and environment.

    Returns None when no name is configured or nothing matches; callers fall
    back to the bare executable. Raises InstallationPathMissingError when the
    adjusted home cannot be confirmed on the node.
    """
    if not tool_name:
        return None
    try:
        installation = registry.get(tool_name)
    except InstallationNotFoundError:
        logger.info("No MSTest installation named '%s'; using PATH lookup", tool_name)
        return None

    installation = for_environment(for_node(installation, node), env)
    home = installation.home
    try:
        exists = node.path_exists(home)
    except OSError as exc:
        raise InstallationPathMissingError(f"Failed checking for existence of {home}") from exc
    if not exists:
        raise InstallationPathMissingError(f"{home} doesn't exist")
    return ResolvedInstallation.from_installation(installation)
