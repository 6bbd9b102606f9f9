"""Pydantic schemas for runtime validation of run configuration."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator

from debom.constants import DEFAULT_PATTERN


class RunConfig(BaseModel):
    """Validated command/API input for a BOM-stripping run."""

    model_config = ConfigDict(extra="forbid")

    path: str
    copy_files: bool = False
    recursive: bool = False
    pattern: str = DEFAULT_PATTERN

    @field_validator("path", mode="before")
    @classmethod
    def _validate_path(cls, value: object) -> str:
        raw = str(value).strip() if value is not None else ""
        if not raw:
            raise ValueError("Path cannot be empty.")
        if "\x00" in raw:
            raise ValueError("Path contains invalid characters.")
        if not Path(raw).exists():
            raise ValueError(f"Path '{raw}' does not exist.")
        return raw

    @field_validator("pattern")
    @classmethod
    def _validate_pattern(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Pattern cannot be empty.")
        if Path(value).anchor:
            raise ValueError(f"Pattern '{value}' must be relative to the path.")
        return value
