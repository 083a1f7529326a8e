"""Shared value types for file formats and conversions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FileFormat(Enum):
    """On-disk representation of a game-data file."""

    SLB = "slb"
    YAML = "yaml"

    @classmethod
    def _missing_(cls, value: object) -> FileFormat | None:
        if isinstance(value, str):
            for member in cls:
                if member.value == value.lower():
                    return member
        return None

    @property
    def display_name(self) -> str:
        """Name used in user-facing descriptions."""
        return _DISPLAY_NAMES[self]

    def __str__(self) -> str:
        return self.display_name


_DISPLAY_NAMES: dict[FileFormat, str] = {
    FileFormat.SLB: "SLB",
    FileFormat.YAML: "Yaml",
}


class ConversionDirection(Enum):
    """Direction a converter runs in."""

    SLB_TO_YAML = "slb_to_yaml"
    YAML_TO_SLB = "yaml_to_slb"


@dataclass(frozen=True)
class FileConversion:
    """Declared (input format, output format) pair."""

    input_format: FileFormat
    output_format: FileFormat

    def __str__(self) -> str:
        return f"{self.input_format} to {self.output_format}"
