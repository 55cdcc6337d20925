from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Sequence
from pathlib import Path

from mstest_step.api import run_from_yaml
from mstest_step.configuration import ConfigError, load_installations, parse_variables
from mstest_step.contracts import ExecutionContext
from mstest_step.runtime.nodes import LocalNode
from mstest_step.sinks import LoggerSink


def _resolve_node_name() -> str:
    return os.environ.get("NODE_NAME", "local")


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run MSTest as a build step from a YAML job.")
    parser.add_argument("job_yaml", type=Path, help="Path to the job YAML (step + installations)")
    parser.add_argument(
        "--workspace",
        type=Path,
        default=None,
        help="Workspace root; defaults to the current directory",
    )
    parser.add_argument(
        "--installations",
        dest="installations_yaml",
        type=Path,
        default=None,
        help="Optional YAML with additional MSTest installations",
    )
    parser.add_argument(
        "--var",
        dest="variables",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Build variable available to macros (repeatable)",
    )
    parser.add_argument(
        "--tool-location",
        dest="tool_locations",
        action="append",
        default=[],
        metavar="NAME=PATH",
        help="Installation home to use on this node instead of the configured one",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    args = parse_args(argv)

    try:
        extra = load_installations(args.installations_yaml) if args.installations_yaml else []
        context = ExecutionContext(
            env=dict(os.environ),
            build_variables=parse_variables(args.variables),
            workspace=(args.workspace or Path.cwd()).resolve(),
            node=LocalNode(
                name=_resolve_node_name(),
                tool_locations=parse_variables(args.tool_locations),
            ),
            sink=LoggerSink(),
        )
        result = run_from_yaml(args.job_yaml, context=context, extra_installations=extra)
    except ConfigError as exc:
        logging.getLogger("mstest_step.cli").error("Invalid configuration: %s", exc)
        return 1

    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())
