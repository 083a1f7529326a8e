#!/usr/bin/env python3
"""Architecture boundary checks."""

from __future__ import annotations

from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
PACKAGE = ROOT / "src/silk_rau"

# Layer -> imports it must never contain.
BOUNDARIES: dict[str, list[str]] = {
    "cli": ["import yaml", "import struct", "from silk_rau.codecs"],
    "application": ["import typer", "from typer"],
    "converters": ["import typer", "from silk_rau.codecs", "from silk_rau.cli"],
    "codecs": ["import typer", "from silk_rau.application.use_cases", "from silk_rau.cli"],
}


def _violations(path: Path, banned: list[str]) -> list[str]:
    text = path.read_text(encoding="utf-8")
    return [token for token in banned if token in text]


def main() -> None:
    """Run repository architecture boundary checks."""
    problems: list[str] = []
    for layer, banned in BOUNDARIES.items():
        for path in sorted((PACKAGE / layer).glob("*.py")):
            for token in _violations(path, banned):
                problems.append(f"{path.relative_to(ROOT)}: found '{token}'")

    if problems:
        raise SystemExit("Architecture violations:\n" + "\n".join(problems))
    print("Architecture checks passed.")


if __name__ == "__main__":
    main()
