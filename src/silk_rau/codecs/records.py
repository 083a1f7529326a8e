"""Pydantic value models decoded from SLB tables."""

from __future__ import annotations

from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field

from silk_rau.codecs.binary import MAX_ENTRY_COUNT, MAX_STRING_LENGTH

FLOAT32_MAX = 3.4028234663852886e38


def _check_encoded_length(value: str) -> str:
    size = len(value.encode("utf-8"))
    if size > MAX_STRING_LENGTH:
        raise ValueError(
            f"String of {size} bytes exceeds limit of {MAX_STRING_LENGTH}."
        )
    return value


# Same byte limit as BinaryReader.read_string.
SLBString = Annotated[str, AfterValidator(_check_encoded_length)]
UInt16 = Annotated[int, Field(ge=0, le=0xFFFF)]
Int32 = Annotated[int, Field(ge=-(2**31), le=2**31 - 1)]
UInt32 = Annotated[int, Field(ge=0, le=2**32 - 1)]
Float32 = Annotated[float, Field(ge=-FLOAT32_MAX, le=FLOAT32_MAX)]


class _Record(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class Creature(_Record):
    """One creature definition."""

    name: SLBString
    level: UInt16
    hit_points: Int32
    speed: Float32
    hostile: bool


class Item(_Record):
    """One inventory item definition."""

    name: SLBString
    value: UInt32
    weight: Float32
    stackable: bool


class Skill(_Record):
    """One learnable skill."""

    name: SLBString
    description: SLBString
    cost: UInt16
    cooldown: Float32


class CreatureTable(_Record):
    entries: list[Creature] = Field(default_factory=list, max_length=MAX_ENTRY_COUNT)


class ItemTable(_Record):
    entries: list[Item] = Field(default_factory=list, max_length=MAX_ENTRY_COUNT)


class SkillTable(_Record):
    entries: list[Skill] = Field(default_factory=list, max_length=MAX_ENTRY_COUNT)
