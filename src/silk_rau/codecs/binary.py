"""Little-endian primitive readers/writers for SLB streams."""

from __future__ import annotations

import struct
from typing import BinaryIO

MAX_STRING_LENGTH = 1 << 20
MAX_ENTRY_COUNT = 1 << 16

_UINT8 = struct.Struct("<B")
_UINT16 = struct.Struct("<H")
_INT32 = struct.Struct("<i")
_UINT32 = struct.Struct("<I")
_FLOAT32 = struct.Struct("<f")


class SLBFormatError(ValueError):
    """Stream content does not follow the expected SLB layout."""


class BinaryReader:
    """Read SLB primitives from a binary stream.

    Truncated input raises ``EOFError``; structurally invalid input (bad tag,
    out-of-range length, trailing bytes) raises ``SLBFormatError``.
    """

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream

    def read_bytes(self, count: int) -> bytes:
        data = self._stream.read(count)
        if len(data) != count:
            raise EOFError(
                f"Unexpected end of stream: wanted {count} bytes, got {len(data)}."
            )
        return data

    def read_uint8(self) -> int:
        return _UINT8.unpack(self.read_bytes(_UINT8.size))[0]

    def read_uint16(self) -> int:
        return _UINT16.unpack(self.read_bytes(_UINT16.size))[0]

    def read_int32(self) -> int:
        return _INT32.unpack(self.read_bytes(_INT32.size))[0]

    def read_uint32(self) -> int:
        return _UINT32.unpack(self.read_bytes(_UINT32.size))[0]

    def read_float32(self) -> float:
        return _FLOAT32.unpack(self.read_bytes(_FLOAT32.size))[0]

    def read_bool(self) -> bool:
        raw = self.read_uint8()
        if raw not in (0, 1):
            raise SLBFormatError(f"Invalid boolean byte 0x{raw:02x}.")
        return raw == 1

    def read_string(self) -> str:
        length = self.read_uint32()
        if length > MAX_STRING_LENGTH:
            raise SLBFormatError(
                f"String length {length} exceeds limit of {MAX_STRING_LENGTH} bytes."
            )
        return self.read_bytes(length).decode("utf-8")

    def read_count(self) -> int:
        count = self.read_uint32()
        if count > MAX_ENTRY_COUNT:
            raise SLBFormatError(
                f"Entry count {count} exceeds limit of {MAX_ENTRY_COUNT}."
            )
        return count

    def expect_tag(self, tag: bytes) -> None:
        found = self.read_bytes(len(tag))
        if found != tag:
            raise SLBFormatError(f"Invalid tag {found!r}, expected {tag!r}.")

    def expect_end(self) -> None:
        if self._stream.read(1):
            raise SLBFormatError("Trailing data after last entry.")

    def read(self, kind: str) -> object:
        """Read a primitive by kind name (``int32``, ``string``...)."""
        return getattr(self, f"read_{kind}")()


class BinaryWriter:
    """Write SLB primitives into a binary stream."""

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream

    def write_bytes(self, data: bytes) -> None:
        self._stream.write(data)

    def write_uint8(self, value: int) -> None:
        self.write_bytes(_UINT8.pack(value))

    def write_uint16(self, value: int) -> None:
        self.write_bytes(_UINT16.pack(value))

    def write_int32(self, value: int) -> None:
        self.write_bytes(_INT32.pack(value))

    def write_uint32(self, value: int) -> None:
        self.write_bytes(_UINT32.pack(value))

    def write_float32(self, value: float) -> None:
        self.write_bytes(_FLOAT32.pack(value))

    def write_bool(self, value: bool) -> None:
        self.write_uint8(1 if value else 0)

    def write_string(self, value: str) -> None:
        encoded = value.encode("utf-8")
        if len(encoded) > MAX_STRING_LENGTH:
            raise SLBFormatError(
                f"String of {len(encoded)} bytes exceeds limit of {MAX_STRING_LENGTH}."
            )
        self.write_uint32(len(encoded))
        self.write_bytes(encoded)

    def write_count(self, count: int) -> None:
        if count > MAX_ENTRY_COUNT:
            raise SLBFormatError(
                f"Entry count {count} exceeds limit of {MAX_ENTRY_COUNT}."
            )
        self.write_uint32(count)

    def write(self, kind: str, value: object) -> None:
        """Write a primitive by kind name."""
        getattr(self, f"write_{kind}")(value)
