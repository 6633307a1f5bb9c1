from pathlib import Path

import pytest

tomllib = pytest.importorskip("tomllib")

PYPROJECT = Path(__file__).resolve().parent.parent / "pyproject.toml"

def test_backend_modules_are_not_installed_top_level():
    with PYPROJECT.open("rb") as f:
        setuptools_config = tomllib.load(f)["tool"]["setuptools"]
    assert setuptools_config["py-modules"] == []
    assert setuptools_config["packages"] == []
