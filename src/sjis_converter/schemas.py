"""Pydantic schemas for runtime validation of conversion inputs."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from sjis_converter.types import (
    DEFAULT_CODEC,
    DEFAULT_EXTENSIONS,
    DEFAULT_SAMPLE_SIZE,
    ShiftJisCodec,
)


class ConversionConfig(BaseModel):
    """Validated input for a directory conversion run."""

    model_config = ConfigDict(extra="forbid")

    root: Path
    max_depth: int = Field(default=0, ge=0)
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS
    sample_size: int | None = Field(default=DEFAULT_SAMPLE_SIZE, ge=1)
    codec: ShiftJisCodec = DEFAULT_CODEC

    @field_validator("extensions")
    @classmethod
    def _validate_extensions(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if not value:
            raise ValueError("extensions must contain at least one entry.")
        for ext in value:
            if not ext.startswith(".") or len(ext) < 2:
                raise ValueError(f"extension '{ext}' must look like '.csv'.")
            if "/" in ext or "\\" in ext:
                raise ValueError(f"extension '{ext}' cannot contain path separators.")
        # Keep first-seen order, drop duplicates.
        return tuple(dict.fromkeys(value))
