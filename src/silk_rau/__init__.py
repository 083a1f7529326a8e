"""Top-level API for SLB <-> YAML game-data conversion."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from silk_rau.errors import (
    BadFormatError,
    PathConflictError,
    SilkRauError,
    UnknownFileTypeError,
    UnsupportedConversionError,
)
from silk_rau.types import FileConversion, FileFormat

__version__ = "0.1.0"


def convert_file(
    input_file: Path,
    output_file: Path | None = None,
    *,
    file_type: str,
    input_format: FileFormat | str,
    output_format: FileFormat | str,
    force: bool = False,
    codec_modules: Iterable[str] | None = None,
) -> Path:
    """Convert a game-data file between SLB and YAML.

    Parameters
    ----------
    input_file : Path
        File to convert.
    output_file : Path | None, default=None
        Destination path. When omitted, the input path with the output
        format's extension (``.slb`` or ``.yaml``) is used.
    file_type : str
        Registered file type, e.g. ``"creature"``.
    input_format, output_format : FileFormat | str
        Declared formats (``"slb"`` or ``"yaml"``).
    force : bool, default=False
        Overwrite an existing output file.
    codec_modules : Iterable[str] | None, optional
        Extra modules registering file types.

    Returns
    -------
    Path
        Path of the written file.
    """
    from .api import convert_file as _impl

    return _impl(
        input_file=input_file,
        output_file=output_file,
        file_type=file_type,
        input_format=input_format,
        output_format=output_format,
        force=force,
        codec_modules=codec_modules,
    )


def supported_file_types(codec_modules: Iterable[str] | None = None) -> list[str]:
    """Return registered file type names in registration order."""
    from .api import supported_file_types as _impl

    return _impl(codec_modules=codec_modules)


def valid_conversions() -> list[str]:
    """Return supported conversions, e.g. ``["SLB to Yaml", "Yaml to SLB"]``."""
    from .api import valid_conversions as _impl

    return _impl()


__all__ = [
    "BadFormatError",
    "FileConversion",
    "FileFormat",
    "PathConflictError",
    "SilkRauError",
    "UnknownFileTypeError",
    "UnsupportedConversionError",
    "convert_file",
    "supported_file_types",
    "valid_conversions",
]
