"""Typed configuration schema and loader for the mdview package."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, confloat, conint, field_validator, model_validator

from ..export.paginate import font_available

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class RenderSettings(BaseModel):
    """Defaults for the HTML renderer."""

    dark_mode: bool
    font_size: confloat(ge=10.0, le=32.0)

    model_config = ConfigDict(extra="forbid")


class ExportSettings(BaseModel):
    """Line preparation settings for PDF export."""

    mode: Literal["auto", "plain", "markdown"]
    wrap_width: conint(ge=1)
    fallback_chars: conint(ge=0) = 1000

    model_config = ConfigDict(extra="forbid")


class PageSettings(BaseModel):
    """PDF page geometry in points."""

    width: confloat(gt=0)
    height: confloat(gt=0)
    margin: confloat(ge=0)
    line_height: confloat(gt=0)
    font_size: confloat(gt=0)
    font_name: str

    model_config = ConfigDict(extra="forbid")

    @field_validator("font_name")
    @classmethod
    def _check_font_name(cls, value: str) -> str:
        if not font_available(value):
            raise ValueError(f"unknown font: {value!r}")
        return value

    @model_validator(mode="after")
    def _check_printable_area(self) -> "PageSettings":
        if self.height - 2 * self.margin < self.line_height:
            raise ValueError("page height leaves no room for a single line")
        return self


class RecentSettings(BaseModel):
    """Most-recently-used file list settings."""

    max_entries: conint(ge=1)

    model_config = ConfigDict(extra="forbid")


class StorageSettings(BaseModel):
    """Location of the persisted preferences/recent-files state."""

    path: str | None = None
    path_env: str

    model_config = ConfigDict(extra="forbid")


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)
    render: RenderSettings
    export: ExportSettings
    page: PageSettings
    recent: RecentSettings
    storage: StorageSettings

    model_config = ConfigDict(extra="forbid")


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def deep_merge_dicts(a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge mapping ``b`` onto ``a`` returning a new dict."""

    result: dict[str, Any] = dict(a)
    for key, b_val in b.items():
        if key in result and isinstance(result[key], dict) and isinstance(b_val, dict):
            result[key] = deep_merge_dicts(result[key], b_val)
        else:
            result[key] = b_val
    return result


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> ConfigModel:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML <
    environment variable for the state file path.
    """

    with (
        importlib_resources.files("mdview.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        merged = deep_merge_dicts(defaults, overrides)
    else:
        merged = defaults

    cfg = ConfigModel.model_validate(merged)

    environ = env if env is not None else os.environ
    path_env = cfg.storage.path_env
    if environ.get(path_env):
        cfg.storage.path = environ[path_env]

    return cfg


__all__ = [
    "ConfigModel",
    "RenderSettings",
    "ExportSettings",
    "PageSettings",
    "RecentSettings",
    "StorageSettings",
    "deep_merge_dicts",
    "load_config",
]
