"""Typer-based command line front end for the markdown viewer core.

The CLI stands in for a GUI: ``render`` writes the themed HTML a web view
would display, ``export`` produces the PDF a share action would hand out, and
``recent``/``settings`` inspect the persisted viewer state.  The state file is
taken from ``--state``, the configuration or the ``MDVIEW_STATE`` environment
variable, in that order; without one nothing is persisted.

Exit codes
----------
0 success
3 I/O error (missing file, unsupported extension, unreadable state file)
4 configuration error
5 render or export failure (including empty content)
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from time import perf_counter
from types import TracebackType
from typing import NoReturn, Optional

import typer
import yaml
from pydantic import ValidationError

from .config import ConfigModel, load_config
from .export import PageGeometry, export_to_pdf, resolve_mode
from .io import read_file, write_file
from .render import RenderConfig, render
from .storage import JsonFileStore, RecentFiles, ViewerPreferences
from .utils.errors import StorageError, UnsupportedFormatError
from .utils.logging import configure_logging, get_logger

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")
    os.environ.setdefault("RICH_DISABLE_NO_COLOR", "1")

logger = get_logger(__name__)

app = typer.Typer(
    name="mdview",
    help="Render markdown to themed HTML and export documents to PDF.",
)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> NoReturn:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


class Timing:
    """Context manager measuring elapsed milliseconds."""

    def __init__(self) -> None:
        self._start = 0.0
        self._end = 0.0

    def __enter__(self) -> "Timing":
        self._start = perf_counter()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self._end = perf_counter()

    @property
    def ms(self) -> float:
        return (self._end - self._start) * 1000.0


def _load_config(config_path: Path | None) -> ConfigModel:
    try:
        return load_config(config_path)
    except (ValidationError, OSError, yaml.YAMLError) as exc:
        _safe_exit(4, (str(exc).splitlines() or [type(exc).__name__])[0])


def _open_store(cfg: ConfigModel, state_path: Path | None) -> JsonFileStore | None:
    path = state_path if state_path is not None else cfg.storage.path
    if not path:
        return None
    return JsonFileStore(path)


def _read_input(in_path: Path) -> str:
    try:
        return read_file(in_path)
    except (FileNotFoundError, UnsupportedFormatError, OSError, UnicodeDecodeError) as exc:
        _safe_exit(3, str(exc))


def _remember(store: JsonFileStore | None, cfg: ConfigModel, in_path: Path) -> None:
    if store is None:
        return
    try:
        RecentFiles(store, cfg.recent.max_entries).add(in_path.resolve(), name=in_path.name)
    except StorageError as exc:
        logger.warning("could not update recent files: %s", exc)


def _preferences(store: JsonFileStore | None, cfg: ConfigModel) -> ViewerPreferences | None:
    if store is None:
        return None
    return ViewerPreferences(
        store,
        default_font_size=cfg.render.font_size,
        default_dark_mode=cfg.render.dark_mode,
    )


@app.callback()
def main(
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Emit progress messages to stderr"
    ),
) -> None:
    """Entry point for the mdview command group."""

    configure_logging(verbose)


@app.command("render")
def render_cmd(  # noqa: PLR0913
    in_path: Path = typer.Option(  # noqa: B008
        ..., "--in", "--input", help="Markdown or text file to render"
    ),
    out_path: Path = typer.Option(..., "--out", help="Output file (.html)"),  # noqa: B008
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    state_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--state", help="JSON state file with preferences and recent files"
    ),
    dark: bool | None = typer.Option(  # noqa: B008
        None, "--dark/--light", help="Override the colour theme"
    ),
    font_size: Optional[float] = typer.Option(  # noqa: B008
        None, "--font-size", min=10.0, max=32.0, help="Override the base font size"
    ),
) -> None:
    """Render a markdown file to a themed, self-contained HTML document."""

    cfg = _load_config(config_path)
    store = _open_store(cfg, state_path)
    text = _read_input(in_path)

    prefs = _preferences(store, cfg)
    try:
        base = prefs.render_config() if prefs is not None else None
    except StorageError as exc:
        _safe_exit(3, str(exc))
    dark_mode = dark if dark is not None else (base.dark_mode if base else cfg.render.dark_mode)
    size = font_size if font_size is not None else (base.font_size if base else cfg.render.font_size)

    with Timing() as t_render:
        document = render(text, RenderConfig(dark_mode=dark_mode, font_size=size))
    logger.info("rendered %d chars in %.1f ms", len(text), t_render.ms)

    try:
        write_file(out_path, document)
    except (UnsupportedFormatError, OSError) as exc:
        _safe_exit(3, str(exc))

    _remember(store, cfg, in_path)
    typer.echo(str(out_path))


@app.command("export")
def export_cmd(
    in_path: Path = typer.Option(  # noqa: B008
        ..., "--in", "--input", help="Markdown or text file to export"
    ),
    out_path: Path = typer.Option(..., "--out", help="Output file (.pdf)"),  # noqa: B008
    mode: Optional[str] = typer.Option(  # noqa: B008
        None, "--mode", help="Line preparation [auto|plain|markdown]"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    state_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--state", help="JSON state file with preferences and recent files"
    ),
) -> None:
    """Export a markdown or text file to a paginated PDF."""

    cfg = _load_config(config_path)
    mode_setting = mode if mode is not None else cfg.export.mode
    if mode_setting not in ("auto", "plain", "markdown"):
        _safe_exit(4, f"Unknown mode: {mode_setting!r}")
    store = _open_store(cfg, state_path)
    text = _read_input(in_path)

    with Timing() as t_export:
        result = export_to_pdf(
            text,
            out_path,
            resolve_mode(in_path, mode_setting),
            geometry=PageGeometry.from_settings(cfg.page),
            wrap_width=cfg.export.wrap_width,
            fallback_chars=cfg.export.fallback_chars,
        )
    if not result.ok:
        _safe_exit(5, result.error)
    logger.info("exported %d page(s) in %.1f ms", result.page_count, t_export.ms)

    _remember(store, cfg, in_path)
    typer.echo(f"{result.path} ({result.page_count} page(s))")


@app.command("recent")
def recent_cmd(
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    state_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--state", help="JSON state file with preferences and recent files"
    ),
    clear: bool = typer.Option(False, "--clear", help="Forget all recent files"),  # noqa: B008
) -> None:
    """List recently opened files, newest first."""

    cfg = _load_config(config_path)
    store = _open_store(cfg, state_path)
    if store is None:
        _safe_exit(4, "No state file configured; pass --state or set MDVIEW_STATE")
    recent = RecentFiles(store, cfg.recent.max_entries)
    try:
        if clear:
            recent.clear()
            return
        entries = recent.list()
    except StorageError as exc:
        _safe_exit(3, str(exc))
    if not entries:
        typer.echo("No recent files.")
    for entry in entries:
        typer.echo(f"{entry.name}\t{entry.path}")


@app.command("settings")
def settings_cmd(
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    state_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--state", help="JSON state file with preferences and recent files"
    ),
    dark: bool | None = typer.Option(  # noqa: B008
        None, "--dark/--light", help="Store the colour theme"
    ),
    font_size: Optional[float] = typer.Option(  # noqa: B008
        None, "--font-size", min=10.0, max=32.0, help="Store the base font size"
    ),
) -> None:
    """Show, and optionally update, the stored viewer preferences."""

    cfg = _load_config(config_path)
    prefs = _preferences(_open_store(cfg, state_path), cfg)
    if prefs is None:
        _safe_exit(4, "No state file configured; pass --state or set MDVIEW_STATE")
    try:
        if dark is not None:
            prefs.dark_mode = dark
        if font_size is not None:
            prefs.font_size = font_size
        current = prefs.render_config()
    except StorageError as exc:
        _safe_exit(3, str(exc))
    typer.echo(f"font_size={current.font_size:g}")
    typer.echo(f"dark_mode={str(current.dark_mode).lower()}")
