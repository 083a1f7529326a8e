"""Application use-cases orchestrating conversion runs."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from pydantic import ValidationError

from silk_rau.application.options import ConvertOptions, PrintOptions
from silk_rau.application.ports import PathValidator
from silk_rau.application.results import ConversionResult
from silk_rau.codecs.yaml_codec import YamlCodec
from silk_rau.converters.factory import FileConverterFactory
from silk_rau.errors import InvalidOptionsError
from silk_rau.infrastructure.file_io import LocalPathValidator
from silk_rau.registry import FileTypeRegistry, create_default_registry
from silk_rau.schemas import ConvertConfig, PrintConfig
from silk_rau.types import FileConversion, FileFormat

_EXTENSIONS: dict[FileFormat, str] = {
    FileFormat.SLB: ".slb",
    FileFormat.YAML: ".yaml",
}


def extension_for_format(file_format: FileFormat) -> str:
    """Return the file extension associated with a format."""
    try:
        return _EXTENSIONS[file_format]
    except KeyError:
        raise NotImplementedError(f"No extension for format {file_format!r}") from None


def resolve_output_path(
    input_file: Path, output_file: Path | None, output_format: FileFormat
) -> Path:
    """Use the explicit output path, or swap the input extension for the output one."""
    if output_file is not None:
        return Path(output_file)
    return Path(input_file).with_suffix(extension_for_format(output_format))


def build_default_factory(registry: FileTypeRegistry | None = None) -> FileConverterFactory:
    """Build a factory over the default registry and the YAML codec."""
    return FileConverterFactory(registry or create_default_registry(), YamlCodec())


def run_convert(
    options: ConvertOptions,
    *,
    factory: FileConverterFactory | None = None,
    path_validator: PathValidator | None = None,
) -> ConversionResult:
    """Use-case: convert one file.

    Raises
    ------
    InvalidOptionsError
        If the options do not validate.
    PathConflictError
        If the output exists and ``force`` is not set.
    UnsupportedConversionError, UnknownFileTypeError, BadFormatError
        Propagated from the factory and the converter.
    """
    try:
        config = ConvertConfig(
            input_file=options.input_file,
            output_file=options.output_file,
            file_type=options.file_type,
            input_format=options.input_format,
            output_format=options.output_format,
            force=options.force,
        )
    except ValidationError as exc:
        raise InvalidOptionsError(f"Invalid conversion parameters: {exc}") from exc

    factory = factory or build_default_factory()
    path_validator = path_validator or LocalPathValidator()

    output_path = resolve_output_path(
        config.input_file, config.output_file, config.output_format
    )
    if not config.force:
        path_validator.validate_file_does_not_exist(output_path)

    conversion = FileConversion(config.input_format, config.output_format)
    converter = factory.build_file_converter(config.file_type, conversion)
    converter.convert(config.input_file, output_path)

    return ConversionResult(
        input_path=config.input_file,
        output_path=output_path,
        file_type=config.file_type,
        conversion=conversion,
    )


def run_print(
    options: PrintOptions,
    *,
    factory: FileConverterFactory | None = None,
    echo: Callable[[str], None] = print,
) -> list[str]:
    """Use-case: list supported file types or valid conversions, one per line."""
    try:
        config = PrintConfig(file_types=options.file_types, conversions=options.conversions)
    except ValidationError as exc:
        raise InvalidOptionsError(f"Invalid print parameters: {exc}") from exc

    factory = factory or build_default_factory()
    if config.file_types:
        lines = list(factory.registry.supported_file_types)
    else:
        lines = [str(conversion) for conversion in factory.valid_conversions]

    for line in lines:
        echo(line)
    return lines
