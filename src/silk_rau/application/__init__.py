"""Application-layer option objects, ports and results.

Use-cases live in :mod:`silk_rau.application.use_cases`; they are not
imported here because they depend on the registry and converters.
"""

from __future__ import annotations

from silk_rau.application.options import ConvertOptions, PrintOptions
from silk_rau.application.ports import (
    BinaryCodec,
    FileIO,
    PathValidator,
    TextCodec,
)
from silk_rau.application.results import ConversionResult

__all__ = [
    "BinaryCodec",
    "ConversionResult",
    "ConvertOptions",
    "FileIO",
    "PathValidator",
    "PrintOptions",
    "TextCodec",
]
