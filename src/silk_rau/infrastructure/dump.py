"""Diagnostic dump files written when a conversion fails."""

from __future__ import annotations

import traceback
from datetime import datetime
from pathlib import Path

DUMP_PREFIX = "SilkRau.dump."


def dump_file_name(now: datetime) -> str:
    """Return ``SilkRau.dump.<YYYY-MM-DDTHH-MM-SS-mmm>`` for a timestamp."""
    return f"{DUMP_PREFIX}{now:%Y-%m-%dT%H-%M-%S}-{now.microsecond // 1000:03d}"


def dump_exception(
    invocation: object,
    exception: BaseException,
    *,
    directory: Path | None = None,
    now: datetime | None = None,
) -> Path:
    """Write a three-line dump describing a failed invocation.

    Parameters
    ----------
    invocation : object
        Invocation options; rendered with ``str``.
    exception : BaseException
        Failure to describe.
    directory : Path | None, default=None
        Target directory. Defaults to the current working directory.
    now : datetime | None, default=None
        Timestamp used for the file name.

    Returns
    -------
    Path
        Path of the written dump file.
    """
    path = (directory or Path.cwd()) / dump_file_name(now or datetime.now())
    trace = "".join(
        traceback.format_exception(type(exception), exception, exception.__traceback__)
    )
    contents = [
        f"Failed to execute: {invocation}",
        f"With message: {exception}",
        trace.rstrip("\n"),
    ]
    path.write_text("\n".join(contents) + "\n", encoding="utf-8")
    return path
