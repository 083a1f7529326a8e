"""CLI conversions against real files in a temporary working directory."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from silk_rau.cli import cli as cli_module

pytestmark = pytest.mark.integration
runner = CliRunner()


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run each test from an empty working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


def _convert(*args: str) -> object:
    return runner.invoke(cli_module.app, ["convert", *args])


def test_slb_to_yaml_with_default_output(
    workdir: Path, creature_slb: bytes, creature_yaml: str
) -> None:
    """Write ``<input>.yaml`` next to the input and print nothing."""
    (workdir / "creatures.slb").write_bytes(creature_slb)

    result = _convert(
        "-i", "creatures.slb", "-t", "creature", "--input-format", "slb", "--output-format", "yaml"
    )

    assert result.exit_code == 0, result.output
    assert result.output == ""
    assert (workdir / "creatures.yaml").read_text(encoding="utf-8") == creature_yaml
    assert list(workdir.glob("SilkRau.dump.*")) == []


def test_yaml_to_slb_with_explicit_output(
    workdir: Path, creature_slb: bytes, creature_yaml: str
) -> None:
    """Honor ``--output`` for the reverse direction."""
    (workdir / "creatures.yaml").write_text(creature_yaml, encoding="utf-8")

    result = _convert(
        "-i",
        "creatures.yaml",
        "-o",
        "rebuilt.slb",
        "-t",
        "creature",
        "--input-format",
        "yaml",
        "--output-format",
        "slb",
    )

    assert result.exit_code == 0, result.output
    assert (workdir / "rebuilt.slb").read_bytes() == creature_slb


def test_existing_output_requires_force(
    workdir: Path, creature_slb: bytes, creature_yaml: str
) -> None:
    """Refuse to overwrite without ``--force``; overwrite with it."""
    (workdir / "creatures.slb").write_bytes(creature_slb)
    (workdir / "creatures.yaml").write_text("old\n", encoding="utf-8")
    args = ["-i", "creatures.slb", "-t", "creature", "--input-format", "slb", "--output-format", "yaml"]

    refused = _convert(*args)
    assert refused.exit_code == -1
    assert "already exists" in refused.output
    assert (workdir / "creatures.yaml").read_text(encoding="utf-8") == "old\n"
    assert list(workdir.glob("SilkRau.dump.*")) == []

    forced = _convert(*args, "--force")
    assert forced.exit_code == 0, forced.output
    assert (workdir / "creatures.yaml").read_text(encoding="utf-8") == creature_yaml


def test_unknown_file_type(workdir: Path, creature_slb: bytes) -> None:
    """Unknown types exit -1 without output file or dump."""
    (workdir / "widgets.slb").write_bytes(creature_slb)

    result = _convert(
        "-i", "widgets.slb", "-t", "widget", "--input-format", "slb", "--output-format", "yaml"
    )

    assert result.exit_code == -1
    assert "Unknown file type 'widget'" in result.output
    assert not (workdir / "widgets.yaml").exists()
    assert list(workdir.glob("SilkRau.dump.*")) == []


def test_same_format_conversion_is_rejected(workdir: Path, creature_slb: bytes) -> None:
    """SLB to SLB is not a supported conversion."""
    (workdir / "creatures.slb").write_bytes(creature_slb)

    result = _convert(
        "-i", "creatures.slb", "-o", "copy.slb", "-t", "creature",
        "--input-format", "slb", "--output-format", "slb",
    )

    assert result.exit_code == -1
    assert "Cannot convert from SLB to SLB" in result.output
    assert not (workdir / "copy.slb").exists()


def test_corrupt_input_writes_dump_and_no_output(workdir: Path, creature_slb: bytes) -> None:
    """Truncated SLB exits -1, leaves no output and writes a three-part dump."""
    (workdir / "creatures.slb").write_bytes(creature_slb[:-3])

    result = _convert(
        "-i", "creatures.slb", "-t", "creature", "--input-format", "slb", "--output-format", "yaml"
    )

    assert result.exit_code == -1
    assert "is not a valid SLB 'creature' file" in result.output
    assert not (workdir / "creatures.yaml").exists()

    dumps = list(workdir.glob("SilkRau.dump.*"))
    assert len(dumps) == 1
    lines = dumps[0].read_text(encoding="utf-8").splitlines()
    assert lines[0] == (
        "Failed to execute: convert --input creatures.slb --type creature "
        "--input-format slb --output-format yaml"
    )
    assert lines[1].startswith("With message: File creatures.slb is not a valid SLB")
    assert lines[2] == "Traceback (most recent call last):"
    assert any("EOFError" in line for line in lines)
    assert "BadFormatError" in lines[-1]


def test_codec_module_adds_file_type(workdir: Path) -> None:
    """Extra codec modules show up in the file type listing."""
    module_file = workdir / "extra_codecs.py"
    module_file.write_text(
        "from silk_rau.codecs.records import ItemTable, Item\n"
        "from silk_rau.codecs.slb import TableCodec\n"
        "FILE_TYPES = {\n"
        "    'loot': TableCodec(\n"
        "        tag=b'LOOT', value_type=ItemTable, record_type=Item,\n"
        "        fields=(('name', 'string'), ('value', 'uint32'),\n"
        "                ('weight', 'float32'), ('stackable', 'bool')),\n"
        "    ),\n"
        "}\n",
        encoding="utf-8",
    )

    result = runner.invoke(
        cli_module.app, ["print", "--file-types", "--codec-module", str(module_file)]
    )

    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == ["creature", "item", "skill", "loot"]


def test_malformed_yaml_reports_one_line_and_keeps_dump_layout(workdir: Path) -> None:
    """Multi-line YAML parser errors still print a single message line."""
    (workdir / "creatures.yaml").write_text("entries: [\n", encoding="utf-8")

    result = _convert(
        "-i", "creatures.yaml", "-t", "creature", "--input-format", "yaml", "--output-format", "slb"
    )

    assert result.exit_code == -1
    dumps = list(workdir.glob("SilkRau.dump.*"))
    assert len(dumps) == 1
    output_lines = result.output.splitlines()
    assert len(output_lines) == 2
    assert output_lines[0].startswith(
        "File creatures.yaml is not a valid Yaml 'creature' file: ParserError: "
    )
    assert output_lines[1] == f"Created dump file {dumps[0].name}"
    assert not (workdir / "creatures.slb").exists()

    lines = dumps[0].read_text(encoding="utf-8").splitlines()
    assert lines[0].startswith("Failed to execute: convert --input creatures.yaml")
    assert lines[1].startswith("With message: File creatures.yaml is not a valid Yaml")
    assert lines[2] == "Traceback (most recent call last):"
