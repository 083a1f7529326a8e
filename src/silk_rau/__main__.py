"""Allow ``python -m silk_rau``."""

from silk_rau.cli.cli import app

app(prog_name="silkrau")
