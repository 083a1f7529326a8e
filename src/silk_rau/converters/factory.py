"""Factory building correctly-directed file converters."""

from __future__ import annotations

import logging

from silk_rau.application.ports import FileIO, TextCodec
from silk_rau.converters.converter import FileConverter
from silk_rau.errors import UnsupportedConversionError
from silk_rau.registry import FileTypeRegistry
from silk_rau.types import ConversionDirection, FileConversion, FileFormat

logger = logging.getLogger(__name__)

_DIRECTIONS: dict[FileConversion, ConversionDirection] = {
    FileConversion(FileFormat.SLB, FileFormat.YAML): ConversionDirection.SLB_TO_YAML,
    FileConversion(FileFormat.YAML, FileFormat.SLB): ConversionDirection.YAML_TO_SLB,
}


class FileConverterFactory:
    """Build converters from a file type and a declared format pair.

    Parameters
    ----------
    registry : FileTypeRegistry
        Registry used to resolve binary codecs.
    text_codec : TextCodec
        Text codec shared by every converter.
    io : FileIO | None, default=None
        File access adapter handed to converters.
    """

    def __init__(
        self,
        registry: FileTypeRegistry,
        text_codec: TextCodec,
        io: FileIO | None = None,
    ) -> None:
        self.registry = registry
        self.text_codec = text_codec
        self.io = io

    @property
    def valid_conversions(self) -> tuple[FileConversion, ...]:
        """Supported conversions: SLB to Yaml, then Yaml to SLB."""
        return tuple(_DIRECTIONS)

    def build_file_converter(
        self, file_type: str, file_conversion: FileConversion
    ) -> FileConverter:
        """Build a converter for one invocation.

        Raises
        ------
        UnsupportedConversionError
            If the format pair is not supported. Raised before any codec
            lookup.
        UnknownFileTypeError
            If the file type is not registered.
        """
        direction = _DIRECTIONS.get(file_conversion)
        if direction is None:
            valid = ", ".join(str(conversion) for conversion in _DIRECTIONS)
            raise UnsupportedConversionError(
                f"Cannot convert from {file_conversion}. Valid conversions: {valid}"
            )

        codec = self.registry.get_codec_for_type(file_type)
        logger.debug("built %s converter for %s", direction.value, file_type)
        return FileConverter(
            file_type=file_type,
            binary_codec=codec,
            text_codec=self.text_codec,
            direction=direction,
            io=self.io,
        )
