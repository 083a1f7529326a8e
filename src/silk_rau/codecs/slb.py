"""Built-in SLB table codecs.

Every built-in file type shares one layout::

    tag      4 bytes, file-type discriminator
    count    uint32, number of entries
    entries  fields of each entry, in declaration order

Strings are a ``uint32`` byte length followed by UTF-8 bytes. All integers and
floats are little-endian.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import BinaryIO

from pydantic import BaseModel

from silk_rau.codecs.binary import BinaryReader, BinaryWriter
from silk_rau.codecs.records import (
    Creature,
    CreatureTable,
    Item,
    ItemTable,
    Skill,
    SkillTable,
)

FieldLayout = Sequence[tuple[str, str]]


class TableCodec:
    """Binary codec for a tagged table of fixed-layout records.

    Parameters
    ----------
    tag : bytes
        Four-byte discriminator written at the start of the file.
    value_type : type[BaseModel]
        Table model with an ``entries`` list.
    record_type : type[BaseModel]
        Model of one entry.
    fields : Sequence[tuple[str, str]]
        ``(field name, primitive kind)`` pairs in on-disk order.
    """

    def __init__(
        self,
        tag: bytes,
        value_type: type[BaseModel],
        record_type: type[BaseModel],
        fields: FieldLayout,
    ) -> None:
        if len(tag) != 4:
            raise ValueError("SLB tags must be exactly four bytes.")
        self.tag = tag
        self.value_type = value_type
        self.record_type = record_type
        self.fields = tuple(fields)

    def read(self, stream: BinaryIO) -> BaseModel:
        reader = BinaryReader(stream)
        reader.expect_tag(self.tag)
        count = reader.read_count()
        entries = [self._read_entry(reader) for _ in range(count)]
        reader.expect_end()
        return self.value_type(entries=entries)

    def write(self, stream: BinaryIO, value: BaseModel) -> None:
        writer = BinaryWriter(stream)
        entries = value.entries
        writer.write_bytes(self.tag)
        writer.write_count(len(entries))
        for entry in entries:
            for name, kind in self.fields:
                writer.write(kind, getattr(entry, name))

    def _read_entry(self, reader: BinaryReader) -> BaseModel:
        return self.record_type(**{name: reader.read(kind) for name, kind in self.fields})

    def __repr__(self) -> str:
        return f"TableCodec(tag={self.tag!r}, value_type={self.value_type.__name__})"


CREATURE_CODEC = TableCodec(
    tag=b"CRTR",
    value_type=CreatureTable,
    record_type=Creature,
    fields=(
        ("name", "string"),
        ("level", "uint16"),
        ("hit_points", "int32"),
        ("speed", "float32"),
        ("hostile", "bool"),
    ),
)

ITEM_CODEC = TableCodec(
    tag=b"ITEM",
    value_type=ItemTable,
    record_type=Item,
    fields=(
        ("name", "string"),
        ("value", "uint32"),
        ("weight", "float32"),
        ("stackable", "bool"),
    ),
)

SKILL_CODEC = TableCodec(
    tag=b"SKIL",
    value_type=SkillTable,
    record_type=Skill,
    fields=(
        ("name", "string"),
        ("description", "string"),
        ("cost", "uint16"),
        ("cooldown", "float32"),
    ),
)

# Registration order is the order reported by ``print --file-types``.
BUILTIN_FILE_TYPES: dict[str, TableCodec] = {
    "creature": CREATURE_CODEC,
    "item": ITEM_CODEC,
    "skill": SKILL_CODEC,
}
