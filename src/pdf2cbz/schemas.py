"""Pydantic schemas for runtime validation of conversion inputs."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_DPI = 150
TRUTHY_FLAGS = frozenset({"true", "1", "yes", "on"})


class ConversionSettings(BaseModel):
    """Validated batch-wide settings."""

    model_config = ConfigDict(extra="forbid")

    dpi: int = Field(default=DEFAULT_DPI, gt=0)
    force: bool = False

    @field_validator("force", mode="before")
    @classmethod
    def _coerce_force(cls, value: object) -> object:
        if isinstance(value, str):
            return parse_force_flag(value)
        return value


def parse_force_flag(value: str | None) -> bool:
    """Interpret an environment-style force flag ("true"/"1" enable it)."""
    if value is None:
        return False
    return value.strip().lower() in TRUTHY_FLAGS
