"""Shared pytest configuration, marker assignment and sample payloads."""

from __future__ import annotations

import struct
from pathlib import Path

import pytest

from silk_rau.codecs.records import Creature, CreatureTable


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        path = Path(str(item.fspath))
        parts = set(path.parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


def _slb_string(value: str) -> bytes:
    encoded = value.encode("utf-8")
    return struct.pack("<I", len(encoded)) + encoded


@pytest.fixture
def creature_table() -> CreatureTable:
    """Two-entry creature table whose floats are exact in float32."""
    return CreatureTable(
        entries=[
            Creature(name="Goblin", level=3, hit_points=25, speed=1.5, hostile=True),
            Creature(name="Villager", level=1, hit_points=10, speed=0.75, hostile=False),
        ]
    )


@pytest.fixture
def creature_slb() -> bytes:
    """SLB encoding of ``creature_table``, built by hand."""
    return (
        b"CRTR"
        + struct.pack("<I", 2)
        + _slb_string("Goblin")
        + struct.pack("<Hifb", 3, 25, 1.5, 1)
        + _slb_string("Villager")
        + struct.pack("<Hifb", 1, 10, 0.75, 0)
    )


@pytest.fixture
def creature_yaml() -> str:
    """YAML rendering of ``creature_table``."""
    return (
        "entries:\n"
        "- name: Goblin\n"
        "  level: 3\n"
        "  hit_points: 25\n"
        "  speed: 1.5\n"
        "  hostile: true\n"
        "- name: Villager\n"
        "  level: 1\n"
        "  hit_points: 10\n"
        "  speed: 0.75\n"
        "  hostile: false\n"
    )
