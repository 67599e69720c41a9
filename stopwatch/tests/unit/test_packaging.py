from pathlib import Path

import pytest

tomllib = pytest.importorskip("tomllib")

PYPROJECT = Path(__file__).resolve().parents[3] / "pyproject.toml"


def test_tests_are_not_packaged():
    with PYPROJECT.open("rb") as pyproject_file:
        pyproject = tomllib.load(pyproject_file)
    find = pyproject["tool"]["setuptools"]["packages"]["find"]
    assert "stopwatch*" in find["include"]
    assert "stopwatch.tests*" in find["exclude"]
