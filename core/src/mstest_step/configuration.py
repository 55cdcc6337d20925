from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml
from pydantic import TypeAdapter, ValidationError

from mstest_step.contracts import JobConfig, StepConfig, ToolInstallation

_INSTALLATIONS = TypeAdapter(list[ToolInstallation])


class ConfigError(ValueError):
    pass


def load_yaml(path: str | Path) -> dict[str, Any]:
    with Path(path).open("r", encoding="utf-8") as handle:
        payload = yaml.safe_load(handle) or {}
    if not isinstance(payload, dict):
        raise ConfigError(f"YAML root must be a mapping: {path}")
    return payload


def load_job(path: str | Path) -> JobConfig:
    # Macros stay unexpanded here: they are resolved per run against the execution context.
    payload = load_yaml(path)
    try:
        return JobConfig.model_validate(payload)
    except ValidationError as exc:
        raise ConfigError(_format_validation_error("job", exc)) from exc


def load_step_config(path: str | Path) -> StepConfig:
    payload = load_yaml(path)
    if "step" in payload:
        payload = payload["step"] or {}
    try:
        return StepConfig.model_validate(payload)
    except ValidationError as exc:
        raise ConfigError(_format_validation_error("step", exc)) from exc


def load_installations(path: str | Path) -> list[ToolInstallation]:
    payload = load_yaml(path).get("installations") or []
    try:
        return _INSTALLATIONS.validate_python(payload)
    except ValidationError as exc:
        raise ConfigError(_format_validation_error("installations", exc)) from exc


def parse_variables(pairs: Iterable[str]) -> dict[str, str]:
    """Parse `KEY=VALUE` strings; later keys win."""
    variables: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key.strip():
            raise ConfigError(f"Expected KEY=VALUE, got '{pair}'")
        variables[key.strip()] = value
    return variables


def _format_validation_error(prefix: str, exc: ValidationError) -> str:
    details: list[str] = []
    for error in exc.errors(include_url=False):
        loc = ".".join(str(part) for part in error["loc"])
        details.append(f"{prefix}.{loc}: {error['msg']}")
    return "; ".join(details)
