from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class StepConfig(BaseModel):
    """
    Declarative settings of one MSTest build step.

    Result file and test containers are validated when the step runs, because
    macro expansion depends on the environment of that run.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    tool_name: str | None = Field(default=None, alias="toolName")
    test_files: str = Field(default="", alias="testFiles")
    categories: str | None = None
    result_file: str | None = Field(default=None, alias="resultFile")
    cmd_line_args: str = Field(default="", alias="cmdLineArgs")
    continue_on_fail: bool = Field(default=False, alias="continueOnFail")

    @field_validator("test_files", "cmd_line_args", mode="before")
    @classmethod
    def _coerce_missing_text(cls, value: Any) -> Any:
        if value is None:
            return ""
        return value
