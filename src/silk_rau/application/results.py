"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from silk_rau.types import FileConversion


@dataclass(frozen=True)
class ConversionResult:
    """Structured conversion outcome."""

    input_path: Path
    output_path: Path
    file_type: str
    conversion: FileConversion
