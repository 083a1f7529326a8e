"""Pydantic schemas for runtime validation of invocation options."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from silk_rau.types import FileFormat


class ConvertConfig(BaseModel):
    """Validated input for a file conversion."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    input_file: Path
    output_file: Path | None = None
    file_type: str
    input_format: FileFormat
    output_format: FileFormat
    force: bool = False

    @field_validator("file_type")
    @classmethod
    def _validate_file_type(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("file_type cannot be empty.")
        if value != value.strip():
            raise ValueError("file_type cannot have leading or trailing whitespace.")
        return value

    @field_validator("input_file", "output_file", mode="before")
    @classmethod
    def _validate_path(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            raise ValueError("file paths cannot be empty.")
        return value


class PrintConfig(BaseModel):
    """Validated input for a ``print`` listing."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    file_types: bool = False
    conversions: bool = False

    @model_validator(mode="after")
    def _exactly_one_listing(self) -> PrintConfig:
        if self.file_types == self.conversions:
            raise ValueError("Select exactly one of file_types or conversions.")
        return self
