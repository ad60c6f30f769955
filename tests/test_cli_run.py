from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
from pypdf import PdfReader
from typer.testing import CliRunner

from mdview.cli import app
from mdview.storage import JsonFileStore, RecentFiles


@pytest.fixture(autouse=True)
def _no_state_env(monkeypatch: Any) -> None:
    monkeypatch.delenv("MDVIEW_STATE", raising=False)


@pytest.fixture
def readme(tmp_path: Path) -> Path:
    path = tmp_path / "README.md"
    path.write_text("# Project\n\nSome *notes*.\n- one\n- two\n", encoding="utf-8")
    return path


def test_render_defaults(tmp_path: Path, readme: Path) -> None:
    out = tmp_path / "out" / "readme.html"
    runner = CliRunner()
    result = runner.invoke(app, ["render", "--in", str(readme), "--out", str(out)])
    assert result.exit_code == 0
    html = out.read_text(encoding="utf-8")
    assert "<h1>Project</h1>" in html
    assert "<ul><li>one</li><li>two</li></ul>" in html
    assert "#ffffff" in html
    assert "font-size: 14px;" in html


def test_render_overrides(tmp_path: Path, readme: Path) -> None:
    out = tmp_path / "readme.html"
    runner = CliRunner()
    result = runner.invoke(
        app,
        ["render", "--in", str(readme), "--out", str(out), "--dark", "--font-size", "20"],
    )
    assert result.exit_code == 0
    html = out.read_text(encoding="utf-8")
    assert "#1e1e1e" in html
    assert "font-size: 20px;" in html


def test_export_markdown(tmp_path: Path, readme: Path) -> None:
    out = tmp_path / "readme.pdf"
    runner = CliRunner()
    result = runner.invoke(app, ["-v", "export", "--in", str(readme), "--out", str(out)])
    assert result.exit_code == 0
    assert "1 page(s)" in result.output
    text = PdfReader(str(out)).pages[0].extract_text()
    assert "Some notes." in text
    assert "Page 1" in text


def test_export_plain_with_config(tmp_path: Path) -> None:
    in_path = tmp_path / "notes.txt"
    in_path.write_text("\n".join(f"line {i}" for i in range(100)), encoding="utf-8")
    cfg = tmp_path / "cfg.yml"
    cfg.write_text("page:\n  height: 880\n", encoding="utf-8")
    out = tmp_path / "notes.pdf"
    runner = CliRunner()
    result = runner.invoke(
        app, ["export", "--in", str(in_path), "--out", str(out), "--config", str(cfg)]
    )
    assert result.exit_code == 0
    assert len(PdfReader(str(out)).pages) == 3


def test_state_records_recent_and_preferences(tmp_path: Path, readme: Path) -> None:
    state = tmp_path / "state.json"
    runner = CliRunner()

    result = runner.invoke(
        app, ["settings", "--state", str(state), "--dark", "--font-size", "18"]
    )
    assert result.exit_code == 0
    assert "font_size=18" in result.output
    assert "dark_mode=true" in result.output

    out = tmp_path / "readme.html"
    result = runner.invoke(
        app, ["render", "--in", str(readme), "--out", str(out), "--state", str(state)]
    )
    assert result.exit_code == 0
    html = out.read_text(encoding="utf-8")
    assert "#1e1e1e" in html
    assert "font-size: 18px;" in html

    entries = RecentFiles(JsonFileStore(state)).list()
    assert [e.name for e in entries] == ["README.md"]

    result = runner.invoke(app, ["recent", "--state", str(state)])
    assert result.exit_code == 0
    assert "README.md" in result.output

    result = runner.invoke(app, ["recent", "--state", str(state), "--clear"])
    assert result.exit_code == 0
    result = runner.invoke(app, ["recent", "--state", str(state)])
    assert "No recent files." in result.output


def test_state_from_environment(tmp_path: Path, readme: Path, monkeypatch: Any) -> None:
    state = tmp_path / "env-state.json"
    monkeypatch.setenv("MDVIEW_STATE", str(state))
    runner = CliRunner()
    result = runner.invoke(
        app, ["export", "--in", str(readme), "--out", str(tmp_path / "r.pdf")]
    )
    assert result.exit_code == 0
    assert RecentFiles(JsonFileStore(state)).list()[0].path == str(readme.resolve())
