from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_EXECUTABLE = "mstest.exe"


class ToolInstallation(BaseModel):
    """
    One administrator-configured MSTest installation.

    Registered records are never mutated; node and environment adjustments
    produce derived copies.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    name: str = Field(min_length=1)
    home: str = Field(min_length=1)
    default_args: str | None = Field(default=None, alias="defaultArgs")
    omit_no_isolation: bool = Field(default=False, alias="omitNoIsolation")


@dataclass(frozen=True, slots=True)
class ResolvedInstallation:
    home: str
    default_args: str | None = None
    omit_no_isolation: bool = False

    @classmethod
    def fallback(cls) -> ResolvedInstallation:
        """Bare executable looked up on PATH when no installation matches."""
        return cls(home=DEFAULT_EXECUTABLE)

    @classmethod
    def from_installation(cls, installation: ToolInstallation) -> ResolvedInstallation:
        return cls(
            home=installation.home,
            default_args=installation.default_args,
            omit_no_isolation=installation.omit_no_isolation,
        )
