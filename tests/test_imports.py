"""Smoke tests for package import and version."""

import mdview


def test_import_package() -> None:
    assert isinstance(mdview, object)


def test_version() -> None:
    assert mdview.__version__ == "0.1.0"
