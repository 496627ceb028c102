#!/usr/bin/env python3
from __future__ import annotations

from pathlib import Path

import typer


def _is_stdin(raw: str | None) -> bool:
    return raw is None or raw == "-"


def _read_input_bytes(raw: str | None) -> bytes:
    if _is_stdin(raw):
        return typer.get_binary_stream("stdin").read()
    path = Path(raw).expanduser()
    if not path.is_file():
        raise FileNotFoundError(f"input file not found: {path}")
    return path.read_bytes()


def _read_input_lines(raw: str | None) -> list[str]:
    if _is_stdin(raw):
        content = typer.get_text_stream("stdin").read()
    else:
        path = Path(raw).expanduser()
        if not path.is_file():
            raise FileNotFoundError(f"input file not found: {path}")
        content = path.read_text(encoding="utf-8")
    return [line for line in content.splitlines() if line.strip()]
