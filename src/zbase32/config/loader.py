#!/usr/bin/env python3
# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from ..encoding.zbase32 import FormatOptions
from .installer import resolve_config_path


@dataclass(frozen=True)
class EncodeDefaults:
    format: FormatOptions = FormatOptions.INCLUDE_SEPARATORS

    @property
    def with_separators(self) -> bool:
        return self.format is FormatOptions.INCLUDE_SEPARATORS


@dataclass(frozen=True)
class UiDefaults:
    quiet: bool = False
    no_color: bool = False


@dataclass(frozen=True)
class AppConfig:
    path: Path
    encode: EncodeDefaults = field(default_factory=EncodeDefaults)
    ui: UiDefaults = field(default_factory=UiDefaults)


def load_app_config(path: str | Path | None = None) -> AppConfig:
    config_path = resolve_config_path(path)
    data = _load_toml(config_path)
    return AppConfig(
        path=config_path,
        encode=_parse_encode_defaults(_get_dict(data, "encode")),
        ui=_parse_ui_defaults(_get_dict(data, "ui")),
    )


def _parse_encode_defaults(cfg: dict[str, object]) -> EncodeDefaults:
    return EncodeDefaults(
        format=_parse_format(cfg.get("format"), field="encode.format"),
    )


def _parse_ui_defaults(cfg: dict[str, object]) -> UiDefaults:
    return UiDefaults(
        quiet=_parse_bool(cfg.get("quiet"), field="ui.quiet", default=False),
        no_color=_parse_bool(cfg.get("no_color"), field="ui.no_color", default=False),
    )


def _load_toml(path: Path) -> dict[str, object]:
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ValueError(f"invalid TOML in {path}: {exc}") from exc


def _get_dict(data: dict[str, object], key: str) -> dict[str, object]:
    value = data.get(key)
    if isinstance(value, dict):
        return value
    return {}


def _parse_format(value: object, *, field: str) -> FormatOptions:
    if value is None:
        return FormatOptions.INCLUDE_SEPARATORS
    if isinstance(value, bool):
        return FormatOptions.INCLUDE_SEPARATORS if value else FormatOptions.NONE
    if not isinstance(value, str):
        raise ValueError(f"{field} must be 'separators' or 'none'")
    try:
        return FormatOptions.parse(value)
    except ValueError as exc:
        raise ValueError(f"{field} must be 'separators' or 'none'") from exc


def _parse_bool(value: object, *, field: str, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        if value in (0, 1):
            return bool(value)
        raise ValueError(f"{field} must be a boolean")
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
        raise ValueError(f"{field} must be a boolean")
    raise ValueError(f"{field} must be a boolean")
