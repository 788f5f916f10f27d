"""Project metadata in ``pyproject.toml``."""

from __future__ import annotations

import tomllib
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]


def test_declared_files_exist() -> None:
    project = tomllib.loads((ROOT / "pyproject.toml").read_text())["project"]

    readme = project.get("readme")
    if readme is not None:
        assert (ROOT / readme).is_file()
    assert project["scripts"]["tilepuzzle"] == "main:app"
    assert (ROOT / "python" / "main.py").is_file()
