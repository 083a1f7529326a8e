"""Domain errors raised by the conversion pipeline."""

from __future__ import annotations

from pathlib import Path


class SilkRauError(Exception):
    """Base class for user-facing conversion failures."""

    exit_code: int = -1


class UnknownFileTypeError(SilkRauError):
    """Requested file type is not registered."""

    def __init__(self, file_type: str, supported: tuple[str, ...] = ()) -> None:
        self.file_type = file_type
        self.supported = supported
        message = f"Unknown file type '{file_type}'."
        if supported:
            message += f" Supported file types: {', '.join(supported)}"
        super().__init__(message)


class UnsupportedConversionError(SilkRauError):
    """Requested (input, output) format pair cannot be converted."""


class PathConflictError(SilkRauError):
    """Output path already exists and overwriting was not forced."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(
            f"File {path} already exists. Use --force to overwrite it."
        )


class BadFormatError(SilkRauError):
    """Input payload could not be parsed under the selected schema.

    Parameters
    ----------
    message : str
        Human-readable description.
    path : Path
        File that failed to parse.
    file_type : str
        File type the payload was parsed as.
    cause : BaseException
        Original low-level failure. Also attached as ``__cause__`` when the
        error is raised with ``raise ... from cause``.
    """

    def __init__(
        self,
        message: str,
        *,
        path: Path,
        file_type: str,
        cause: BaseException,
    ) -> None:
        super().__init__(message)
        self.path = path
        self.file_type = file_type
        self.cause = cause


class FileTypeRegistrationError(SilkRauError):
    """A codec could not be registered for a file type."""


class InvalidOptionsError(SilkRauError):
    """Invocation options failed validation."""
