"""File converter composing a binary codec with the text codec."""

from __future__ import annotations

import logging
import struct
from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

import yaml

from silk_rau.application.ports import BinaryCodec, FileIO, TextCodec
from silk_rau.errors import BadFormatError
from silk_rau.infrastructure.file_io import LocalFileIO
from silk_rau.types import ConversionDirection, FileFormat

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Failures that mean "this payload is not valid data". ``OSError`` is not
# listed, so filesystem problems propagate unwrapped. ``RecursionError`` comes
# from PyYAML composing deeply nested documents.
PARSE_FAILURES: tuple[type[BaseException], ...] = (
    EOFError,
    ValueError,
    RecursionError,
    struct.error,
    yaml.YAMLError,
)


def _summarize(exc: BaseException) -> str:
    """Return a one-line description of a parse failure."""
    lines = str(exc).strip().splitlines()
    if not lines:
        return type(exc).__name__
    return f"{type(exc).__name__}: {lines[0].strip()}"


class FileConverter:
    """Convert one file between SLB and YAML.

    Parameters
    ----------
    file_type : str
        Registered file type name, used for error context.
    binary_codec : BinaryCodec
        Codec for the file type's SLB layout.
    text_codec : TextCodec
        Codec for the textual representation.
    direction : ConversionDirection
        Which way the conversion runs.
    io : FileIO | None, default=None
        File access adapter; defaults to ``LocalFileIO``.
    """

    def __init__(
        self,
        *,
        file_type: str,
        binary_codec: BinaryCodec,
        text_codec: TextCodec,
        direction: ConversionDirection,
        io: FileIO | None = None,
    ) -> None:
        self.file_type = file_type
        self.binary_codec = binary_codec
        self.text_codec = text_codec
        self.direction = direction
        self.io = io or LocalFileIO()

    def convert(self, input_file_path: Path, output_file_path: Path) -> None:
        """Convert ``input_file_path`` and write the result to ``output_file_path``.

        Raises
        ------
        BadFormatError
            If the input cannot be parsed. The output file is left untouched.
        """
        logger.debug(
            "converting %s file %s -> %s (%s)",
            self.file_type,
            input_file_path,
            output_file_path,
            self.direction.value,
        )
        if self.direction is ConversionDirection.SLB_TO_YAML:
            self._slb_to_yaml(Path(input_file_path), Path(output_file_path))
        else:
            self._yaml_to_slb(Path(input_file_path), Path(output_file_path))

    def _slb_to_yaml(self, input_file_path: Path, output_file_path: Path) -> None:
        value = self._parse(
            input_file_path,
            FileFormat.SLB,
            lambda: self.io.read_binary_from_file(
                input_file_path, self.binary_codec.read
            ),
        )
        contents = self.text_codec.serialize(value)
        self.io.write_text_to_file(output_file_path, contents)

    def _yaml_to_slb(self, input_file_path: Path, output_file_path: Path) -> None:
        value = self._parse(
            input_file_path,
            FileFormat.YAML,
            lambda: self.text_codec.deserialize(
                self.io.read_text_from_file(input_file_path),
                self.binary_codec.value_type,
            ),
        )
        self.io.write_binary_to_file(
            output_file_path, lambda stream: self.binary_codec.write(stream, value)
        )

    def _parse(
        self, input_file_path: Path, file_format: FileFormat, parse: Callable[[], T]
    ) -> T:
        try:
            return parse()
        except PARSE_FAILURES as exc:
            raise BadFormatError(
                f"File {input_file_path} is not a valid {file_format} "
                f"'{self.file_type}' file: {_summarize(exc)}",
                path=input_file_path,
                file_type=self.file_type,
                cause=exc,
            ) from exc
