#!/usr/bin/env python3
from __future__ import annotations

import typer

from ...encoding.tables import SEPARATOR, TRANSCRIPTION_CORRECTIONS, ZBASE32_ALPHABET
from ..core.common import _ctx_quiet
from ..ui import build_alphabet_table, console


def register(app: typer.Typer) -> None:
    app.command(help="Show the z-base-32 alphabet and accepted substitutions.")(alphabet)


def alphabet(ctx: typer.Context) -> None:
    console.print(build_alphabet_table(ZBASE32_ALPHABET))
    if _ctx_quiet(ctx):
        return
    corrections = ", ".join(
        f"{misread} -> {canonical}" for misread, canonical in TRANSCRIPTION_CORRECTIONS.items()
    )
    console.print(f"[muted]Also accepted:[/muted] {corrections}, uppercase letters")
    console.print(f"[muted]Separator:[/muted] '{SEPARATOR}' after every 8 characters")
