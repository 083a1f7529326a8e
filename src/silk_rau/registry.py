"""File type registry and codec discovery helpers."""

from __future__ import annotations

import importlib
import importlib.util
import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from types import MappingProxyType, ModuleType

from silk_rau.application.ports import BinaryCodec
from silk_rau.codecs.slb import BUILTIN_FILE_TYPES
from silk_rau.errors import FileTypeRegistrationError, UnknownFileTypeError

logger = logging.getLogger(__name__)


class FileTypeRegistry:
    """Read-only mapping of file type names to binary codecs.

    Parameters
    ----------
    entries : Iterable[tuple[str, BinaryCodec]]
        ``(file type, codec)`` pairs. Their order is kept for enumeration.
    """

    def __init__(self, entries: Iterable[tuple[str, BinaryCodec]]) -> None:
        codecs: dict[str, BinaryCodec] = {}
        for name, codec in entries:
            if name in codecs:
                raise FileTypeRegistrationError(
                    f"File type '{name}' is registered more than once."
                )
            codecs[name] = codec
        self._codecs: Mapping[str, BinaryCodec] = MappingProxyType(codecs)

    @property
    def supported_file_types(self) -> tuple[str, ...]:
        """Registered file type names, in registration order."""
        return tuple(self._codecs)

    def get_codec_for_type(self, file_type: str) -> BinaryCodec:
        """Get the binary codec registered for a file type.

        Parameters
        ----------
        file_type : str
            File type name, e.g. ``"creature"``.

        Returns
        -------
        BinaryCodec
            Registered codec instance.

        Raises
        ------
        UnknownFileTypeError
            If the file type is not registered.
        """
        try:
            return self._codecs[file_type]
        except KeyError:
            raise UnknownFileTypeError(file_type, self.supported_file_types) from None

    def __contains__(self, file_type: object) -> bool:
        return file_type in self._codecs

    def __len__(self) -> int:
        return len(self._codecs)


class FileTypeRegistryBuilder:
    """Collect codec registrations before freezing them into a registry."""

    def __init__(self) -> None:
        self._entries: dict[str, BinaryCodec] = {}

    def register(self, file_type: str, codec: BinaryCodec) -> None:
        """Register codec under a unique, non-empty file type name.

        Raises
        ------
        FileTypeRegistrationError
            If the name is empty or already taken.
        """
        name = (file_type or "").strip()
        if not name:
            raise FileTypeRegistrationError("File type name must be non-empty.")
        if name in self._entries:
            raise FileTypeRegistrationError(
                f"File type '{name}' is already registered."
            )
        logger.debug("registering file type %s -> %r", name, codec)
        self._entries[name] = codec

    def load_module(self, module_or_path: str) -> None:
        """Register codecs exposed by a module name or file path.

        .. warning::
            This executes code from the specified module. Only load codec
            modules from trusted sources.
        """
        module = _import_module_or_path(module_or_path)
        _register_from_module(module, self)

    def build(self) -> FileTypeRegistry:
        """Freeze the collected registrations."""
        return FileTypeRegistry(self._entries.items())


def _import_module_or_path(module_or_path: str) -> ModuleType:
    """Import module by import path or filesystem path.

    Raises
    ------
    FileTypeRegistrationError
        If import cannot be completed.
    """
    candidate = Path(module_or_path)
    if candidate.exists():
        spec = importlib.util.spec_from_file_location(candidate.stem, candidate)
        if spec is None or spec.loader is None:
            raise FileTypeRegistrationError(
                f"Unable to load codec module from {candidate}."
            )
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
        return module

    try:
        return importlib.import_module(module_or_path)
    except Exception as exc:
        raise FileTypeRegistrationError(
            f"Unable to import codec module '{module_or_path}': {exc}"
        ) from exc


def _register_from_module(module: ModuleType, builder: FileTypeRegistryBuilder) -> None:
    """Register codec definitions found in module."""
    if hasattr(module, "register_file_types"):
        module.register_file_types(builder)
        return

    file_types = getattr(module, "FILE_TYPES", None)
    if file_types is not None:
        for name, codec in file_types.items():
            builder.register(name, codec)
        return

    raise FileTypeRegistrationError(
        "Codec module must expose register_file_types(builder) or FILE_TYPES."
    )


def create_default_registry(
    extra_modules: Iterable[str] | None = None,
) -> FileTypeRegistry:
    """Create the registry of built-in file types plus optional extra modules.

    Parameters
    ----------
    extra_modules : Iterable[str] | None, optional
        Additional codec modules to load, after the built-in ones.

    Returns
    -------
    FileTypeRegistry
        Frozen registry.
    """
    builder = FileTypeRegistryBuilder()
    for name, codec in BUILTIN_FILE_TYPES.items():
        builder.register(name, codec)
    for module in extra_modules or []:
        builder.load_module(module)
    return builder.build()
