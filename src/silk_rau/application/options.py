"""Typed option objects describing one CLI/API invocation."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from silk_rau.types import FileFormat


@dataclass(frozen=True)
class ConvertOptions:
    """Options of a ``convert`` invocation."""

    input_file: Path
    file_type: str
    input_format: FileFormat
    output_format: FileFormat
    output_file: Path | None = None
    force: bool = False

    def __str__(self) -> str:
        parts = [
            "convert",
            f"--input {self.input_file}",
            f"--type {self.file_type}",
            f"--input-format {self.input_format.value}",
            f"--output-format {self.output_format.value}",
        ]
        if self.output_file is not None:
            parts.append(f"--output {self.output_file}")
        if self.force:
            parts.append("--force")
        return " ".join(parts)


@dataclass(frozen=True)
class PrintOptions:
    """Options of a ``print`` invocation."""

    file_types: bool = False
    conversions: bool = False

    def __str__(self) -> str:
        parts = ["print"]
        if self.file_types:
            parts.append("--file-types")
        if self.conversions:
            parts.append("--conversions")
        return " ".join(parts)
