"""Public file-based conversion API (delegates to application use-cases)."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable
from typing import Optional

from silk_rau.application.options import ConvertOptions
from silk_rau.application.use_cases import build_default_factory
from silk_rau.application.use_cases import run_convert
from silk_rau.registry import create_default_registry
from silk_rau.types import FileFormat


def convert_file(
    input_file: Path,
    output_file: Optional[Path] = None,
    *,
    file_type: str,
    input_format: FileFormat | str,
    output_format: FileFormat | str,
    force: bool = False,
    codec_modules: Optional[Iterable[str]] = None,
) -> Path:
    """Convert a game-data file between SLB and YAML and return the output path."""
    options = ConvertOptions(
        input_file=Path(input_file),
        output_file=Path(output_file) if output_file is not None else None,
        file_type=file_type,
        input_format=FileFormat(input_format),
        output_format=FileFormat(output_format),
        force=force,
    )
    factory = build_default_factory(create_default_registry(extra_modules=codec_modules))
    result = run_convert(options, factory=factory)
    return result.output_path


def supported_file_types(codec_modules: Optional[Iterable[str]] = None) -> list[str]:
    """Return registered file type names in registration order."""
    return list(create_default_registry(extra_modules=codec_modules).supported_file_types)


def valid_conversions() -> list[str]:
    """Return supported conversions as ``"<input> to <output>"`` strings."""
    return [str(conversion) for conversion in build_default_factory().valid_conversions]
