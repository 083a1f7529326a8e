#!/usr/bin/env python3
"""
silk_rau.cli.cli

Typer-based CLI converting game-data files between SLB and YAML.

Examples
--------
Convert a creature table to YAML (writes ``creatures.yaml``):

    silkrau convert -i creatures.slb -t creature --input-format slb --output-format yaml

List the supported file types:

    silkrau print --file-types
"""

from __future__ import annotations

import logging
import traceback
from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING

import typer

from silk_rau.errors import BadFormatError, SilkRauError
from silk_rau.types import FileFormat

if TYPE_CHECKING:
    from silk_rau.converters.factory import FileConverterFactory

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="silkrau",
    help="Convert game-data files between SLB and YAML.",
    no_args_is_help=True,
)

FAILURE_EXIT_CODE = -1
CODEC_MODULE_HELP = "Python module or file path registering extra file types (repeatable)."


def _dump(invocation: object, exc: BaseException) -> None:
    """Write a dump file and tell the user where it is."""
    from silk_rau.infrastructure.dump import dump_exception

    path = dump_exception(invocation, exc)
    typer.echo(f"Created dump file {path.name}", err=True)


def _handle_errors(invocation: object, action: Callable[[], object]) -> int:
    """Run action and map failures to an exit code.

    Parameters
    ----------
    invocation : object
        Options describing the invocation, used in dump files.
    action : Callable[[], object]
        Work to run.

    Returns
    -------
    int
        ``0`` on success, ``-1`` on any failure.
    """
    try:
        action()
        return 0
    except SilkRauError as exc:
        typer.echo(str(exc), err=True)
        if isinstance(exc, BadFormatError):
            _dump(invocation, exc)
    except Exception as exc:
        logger.debug("unexpected error while running %s", invocation, exc_info=True)
        typer.echo(f"Fatal, unexpected error: {exc}", err=True)
        typer.echo(
            "".join(traceback.format_exception(type(exc), exc, exc.__traceback__)),
            err=True,
        )
        _dump(invocation, exc)
    return FAILURE_EXIT_CODE


def _build_factory(codec_modules: list[str] | None) -> FileConverterFactory:
    """Build the converter factory, loading extra codec modules first."""
    from silk_rau.application.use_cases import build_default_factory
    from silk_rau.registry import create_default_registry

    return build_default_factory(create_default_registry(extra_modules=codec_modules))


# -----------------------------
# Global options
# -----------------------------
@app.callback()
def _main(
    debug: bool = typer.Option(False, "--debug", help="Log debug output to stderr."),
) -> None:
    """Initialize shared CLI state.

    Parameters
    ----------
    debug : bool, default=False
        Whether to enable debug logging.
    """
    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


# -----------------------------
# Commands
# -----------------------------
@app.command("convert")
def convert_cmd(
    input_file: Path = typer.Option(
        ..., "--input", "-i", help="File to convert."
    ),
    output_file: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file. Defaults to the input path with the output format's extension.",
    ),
    file_type: str = typer.Option(
        ..., "--type", "-t", help="File type of the input (see `print --file-types`)."
    ),
    input_format: FileFormat = typer.Option(
        ..., "--input-format", case_sensitive=False, help="Format of the input file."
    ),
    output_format: FileFormat = typer.Option(
        ..., "--output-format", case_sensitive=False, help="Format of the output file."
    ),
    force: bool = typer.Option(
        False, "--force", "-f", help="Overwrite the output file if it exists."
    ),
    codec_module: list[str] | None = typer.Option(
        None, "--codec-module", help=CODEC_MODULE_HELP
    ),
) -> None:
    """Convert a file between SLB and YAML."""
    from silk_rau.application.options import ConvertOptions
    from silk_rau.application.use_cases import run_convert

    options = ConvertOptions(
        input_file=input_file,
        output_file=output_file,
        file_type=file_type,
        input_format=input_format,
        output_format=output_format,
        force=force,
    )
    code = _handle_errors(
        options,
        lambda: run_convert(options, factory=_build_factory(codec_module)),
    )
    if code != 0:
        raise typer.Exit(code=code)


@app.command("print")
def print_cmd(
    file_types: bool = typer.Option(
        False, "--file-types", help="List the supported file types."
    ),
    conversions: bool = typer.Option(
        False, "--conversions", help="List the valid conversions."
    ),
    codec_module: list[str] | None = typer.Option(
        None, "--codec-module", help=CODEC_MODULE_HELP
    ),
) -> None:
    """Print supported file types or valid conversions, one per line."""
    if file_types == conversions:
        raise typer.BadParameter("Pass exactly one of --file-types or --conversions.")

    from silk_rau.application.options import PrintOptions
    from silk_rau.application.use_cases import run_print

    options = PrintOptions(file_types=file_types, conversions=conversions)
    code = _handle_errors(
        options,
        lambda: run_print(options, factory=_build_factory(codec_module), echo=typer.echo),
    )
    if code != 0:
        raise typer.Exit(code=code)


@app.command("version")
def version_cmd() -> None:
    """Print the package version."""
    from silk_rau import __version__

    typer.echo(__version__)


if __name__ == "__main__":
    app()
