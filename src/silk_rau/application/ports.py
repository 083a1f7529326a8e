"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import BinaryIO, Protocol, TypeVar

T = TypeVar("T")


class BinaryCodec(Protocol):
    """Read and write one file type's typed value from/to an SLB stream."""

    value_type: type

    def read(self, stream: BinaryIO) -> object:
        """Decode a value from the stream."""

    def write(self, stream: BinaryIO, value: object) -> None:
        """Encode the value into the stream."""


class TextCodec(Protocol):
    """Serialize typed values to text and back."""

    def serialize(self, value: object) -> str:
        """Render value as text."""

    def deserialize(self, text: str, value_type: type) -> object:
        """Parse text into an instance of ``value_type``."""


class FileIO(Protocol):
    """Scoped file access used by converters."""

    def read_binary_from_file(
        self, file_path: Path, function: Callable[[BinaryIO], T]
    ) -> T:
        """Open file for binary reading and apply function to the stream."""

    def write_binary_to_file(
        self, file_path: Path, function: Callable[[BinaryIO], None]
    ) -> None:
        """Write bytes produced by function into file."""

    def read_text_from_file(self, file_path: Path) -> str:
        """Return the full text content of file."""

    def write_text_to_file(self, file_path: Path, contents: str) -> None:
        """Write text content to file."""


class PathValidator(Protocol):
    """Check output paths before anything is written."""

    def validate_file_does_not_exist(self, file_path: Path) -> None:
        """Raise ``PathConflictError`` if file_path exists."""
