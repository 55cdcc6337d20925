from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from mstest_step.contracts.step_contracts.step_config import StepConfig
from mstest_step.contracts.tool_contracts.installation import ToolInstallation


class JobConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    step: StepConfig
    installations: list[ToolInstallation] = Field(default_factory=list)

    @field_validator("installations", mode="before")
    @classmethod
    def _coerce_installations(cls, value: Any) -> Any:
        if value is None:
            return []
        return value
