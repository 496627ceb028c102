#!/usr/bin/env python3
from __future__ import annotations

from rich.markup import escape

from ..ui import console_err


def _warn(message: str, *, quiet: bool) -> None:
    if quiet:
        return
    console_err.print(f"[warning]Warning:[/warning] {escape(message)}")


def _note(message: str, *, quiet: bool) -> None:
    if quiet:
        return
    console_err.print(f"[muted]{escape(message)}[/muted]")
