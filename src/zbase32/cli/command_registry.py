#!/usr/bin/env python3
from __future__ import annotations

import typer

from .commands import (
    alphabet as alphabet_command,
    decode as decode_command,
    encode as encode_command,
    validate as validate_command,
)


def register(app: typer.Typer) -> None:
    encode_command.register(app)
    decode_command.register(app)
    validate_command.register(app)
    alphabet_command.register(app)
