from __future__ import annotations

from mstest_step.contracts import (
    CommandInvocation,
    ConfigurationError,
    ExecutionContext,
    ResolvedInstallation,
    StepConfig,
)
from mstest_step.macros import expand, normalize_whitespace, split_lines, tokenize


def validate_result_file(result_file: str | None) -> str:
    if result_file is None or not result_file.strip():
        raise ConfigurationError("Result file name was not specified")
    return result_file


def build_invocation(
    resolved: ResolvedInstallation | None,
    config: StepConfig,
    context: ExecutionContext,
) -> CommandInvocation:
    """Assemble the MSTest command line for one run, in the order the runner expects."""
    installation = resolved if resolved is not None else ResolvedInstallation.fallback()
    args: list[str] = [installation.home]

    if installation.default_args is not None:
        args.extend(tokenize(installation.default_args))

    result_file = validate_result_file(config.result_file)
    args.append(f"/resultsfile:{result_file}")

    # The bare-executable fallback has no preference, so it gets the flag too.
    if not installation.omit_no_isolation:
        args.append("/noisolation")

    extra_args = expand(
        normalize_whitespace(config.cmd_line_args),
        context.env,
        context.build_variables,
    )
    if extra_args.strip():
        args.extend(tokenize(extra_args))

    if config.categories is not None and config.categories.strip():
        args.append(f'/category:"{config.categories.strip()}"')

    args.extend(_test_container_args(config.test_files, context))

    return CommandInvocation(args=tuple(args), env=dict(context.env), cwd=context.workspace)


def _test_container_args(test_files: str, context: ExecutionContext) -> list[str]:
    if not test_files.strip():
        raise ConfigurationError("No test files are specified")

    containers: list[str] = []
    # Environment values may carry line breaks, so expand before splitting.
    for line in split_lines(expand(test_files, context.env)):
        container = expand(line, context.env, context.build_variables).strip()
        if container:
            containers.append(f"/testcontainer:{container}")

    if not containers:
        raise ConfigurationError(
            f"No test files are specified after macro expansion of '{test_files.strip()}'"
        )
    return containers
