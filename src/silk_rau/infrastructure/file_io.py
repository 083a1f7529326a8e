"""Local filesystem adapter implementing the ``FileIO`` port."""

from __future__ import annotations

import io
from collections.abc import Callable
from pathlib import Path
from typing import BinaryIO, TypeVar

from silk_rau.errors import PathConflictError

T = TypeVar("T")


class LocalFileIO:
    """Read and write files on the local filesystem.

    Output files are opened only once their full content is available, so a
    failure while producing content never leaves a partial file behind.
    """

    encoding = "utf-8"

    def read_binary_from_file(
        self, file_path: Path, function: Callable[[BinaryIO], T]
    ) -> T:
        with Path(file_path).open("rb") as handle:
            return function(handle)

    def write_binary_to_file(
        self, file_path: Path, function: Callable[[BinaryIO], None]
    ) -> None:
        buffer = io.BytesIO()
        function(buffer)
        Path(file_path).write_bytes(buffer.getvalue())

    def read_text_from_file(self, file_path: Path) -> str:
        return Path(file_path).read_text(encoding=self.encoding)

    def write_text_to_file(self, file_path: Path, contents: str) -> None:
        Path(file_path).write_text(contents, encoding=self.encoding)


class LocalPathValidator:
    """Guard against overwriting existing files."""

    def validate_file_does_not_exist(self, file_path: Path) -> None:
        if Path(file_path).exists():
            raise PathConflictError(Path(file_path))
