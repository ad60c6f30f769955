"""Tests for packaging metadata."""

from __future__ import annotations

import importlib
import tomllib
from pathlib import Path
from typing import Any, cast


def _load_pyproject() -> dict[str, Any]:
    path = Path(__file__).resolve().parents[1] / "pyproject.toml"
    with path.open("rb") as fh:
        return tomllib.load(fh)


def test_runtime_dependencies() -> None:
    deps = cast(list[str], _load_pyproject()["project"]["dependencies"])
    names = {d.split(">")[0].split("=")[0].strip().lower() for d in deps}
    assert {"pydantic", "pyyaml", "typer", "reportlab"} <= names


def test_dev_extra_has_pytest() -> None:
    extras = _load_pyproject()["project"]["optional-dependencies"]
    assert any(dep.startswith("pytest") for dep in extras["dev"])


def test_console_script_entrypoint() -> None:
    scripts = _load_pyproject().get("project", {}).get("scripts", {})
    assert scripts.get("mdview") == "mdview.cli:app"


def test_defaults_shipped_as_package_data() -> None:
    data = _load_pyproject()["tool"]["setuptools"]["package-data"]
    assert "defaults.yml" in data["mdview.config"]


def test_import_smoke() -> None:
    importlib.import_module("mdview")
    importlib.import_module("mdview.cli")
