"""Converter and converter factory."""

from .converter import FileConverter
from .factory import FileConverterFactory

__all__ = ["FileConverter", "FileConverterFactory"]
