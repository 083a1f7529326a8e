"""Unit tests for converter factory dispatch."""

from __future__ import annotations

import pytest

from silk_rau.codecs.yaml_codec import YamlCodec
from silk_rau.converters.factory import FileConverterFactory
from silk_rau.errors import UnknownFileTypeError, UnsupportedConversionError
from silk_rau.registry import FileTypeRegistry
from silk_rau.types import ConversionDirection, FileConversion, FileFormat

SLB_TO_YAML = FileConversion(FileFormat.SLB, FileFormat.YAML)
YAML_TO_SLB = FileConversion(FileFormat.YAML, FileFormat.SLB)


class _Codec:
    value_type = dict

    def read(self, stream: object) -> object:
        raise AssertionError("codec must not be used while building")

    def write(self, stream: object, value: object) -> None:
        raise AssertionError("codec must not be used while building")


class _RecordingRegistry(FileTypeRegistry):
    """Registry counting lookups."""

    def __init__(self) -> None:
        super().__init__([("creature", _Codec())])
        self.lookups: list[str] = []

    def get_codec_for_type(self, file_type: str) -> object:
        self.lookups.append(file_type)
        return super().get_codec_for_type(file_type)


class _UntouchableTextCodec:
    def serialize(self, value: object) -> str:
        raise AssertionError("text codec must not be used while building")

    def deserialize(self, text: str, value_type: type) -> object:
        raise AssertionError("text codec must not be used while building")


def _factory(registry: FileTypeRegistry | None = None) -> FileConverterFactory:
    return FileConverterFactory(
        registry or _RecordingRegistry(), _UntouchableTextCodec()
    )


def test_valid_conversions_order() -> None:
    """Supported conversions are listed SLB to Yaml first."""
    conversions = _factory().valid_conversions
    assert conversions == (SLB_TO_YAML, YAML_TO_SLB)
    assert [str(c) for c in conversions] == ["SLB to Yaml", "Yaml to SLB"]


@pytest.mark.parametrize(
    ("conversion", "direction"),
    [
        (SLB_TO_YAML, ConversionDirection.SLB_TO_YAML),
        (YAML_TO_SLB, ConversionDirection.YAML_TO_SLB),
    ],
)
def test_build_converter_binds_codecs_and_direction(
    conversion: FileConversion, direction: ConversionDirection
) -> None:
    """Bind the resolved codec, the shared text codec and the direction."""
    registry = _RecordingRegistry()
    text_codec = YamlCodec()
    factory = FileConverterFactory(registry, text_codec)

    converter = factory.build_file_converter("creature", conversion)

    assert converter.binary_codec is registry.get_codec_for_type("creature")
    assert converter.text_codec is text_codec
    assert converter.direction is direction
    assert converter.file_type == "creature"


def test_each_build_returns_a_fresh_converter() -> None:
    """Converters are not shared across invocations."""
    factory = _factory()
    first = factory.build_file_converter("creature", SLB_TO_YAML)
    second = factory.build_file_converter("creature", SLB_TO_YAML)
    assert first is not second


def test_unknown_file_type_raises() -> None:
    """Building for an unregistered type raises UnknownFileTypeError."""
    with pytest.raises(UnknownFileTypeError, match="widget"):
        _factory().build_file_converter("widget", SLB_TO_YAML)


@pytest.mark.parametrize(
    "conversion",
    [
        FileConversion(FileFormat.SLB, FileFormat.SLB),
        FileConversion(FileFormat.YAML, FileFormat.YAML),
    ],
)
def test_unsupported_conversion_raises_before_lookup(conversion: FileConversion) -> None:
    """Same-to-same pairs fail before the registry is consulted."""
    registry = _RecordingRegistry()
    with pytest.raises(UnsupportedConversionError, match="Valid conversions"):
        _factory(registry).build_file_converter("creature", conversion)
    assert registry.lookups == []


def test_unsupported_conversion_wins_over_unknown_type() -> None:
    """Format validation runs before file type lookup."""
    with pytest.raises(UnsupportedConversionError):
        _factory().build_file_converter(
            "widget", FileConversion(FileFormat.SLB, FileFormat.SLB)
        )


def test_package_exports_converter_and_factory() -> None:
    """The converters package exposes only the public classes."""
    import silk_rau.converters as converters

    assert converters.__all__ == ["FileConverter", "FileConverterFactory"]
    assert converters.FileConverterFactory is FileConverterFactory
