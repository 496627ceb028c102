#!/usr/bin/env python3
from __future__ import annotations

import typer

from ..core.log import _note


def _write_output(path: str | None, data: bytes, *, quiet: bool) -> None:
    if path:
        with open(path, "wb") as handle:
            handle.write(data)
        _note(f"- wrote {path}", quiet=quiet)
    else:
        stdout = typer.get_binary_stream("stdout")
        stdout.write(data)
        stdout.flush()


def _write_text_output(path: str | None, text: str, *, quiet: bool) -> None:
    if path:
        _write_output(path, f"{text}\n".encode("utf-8"), quiet=quiet)
    else:
        typer.echo(text)
