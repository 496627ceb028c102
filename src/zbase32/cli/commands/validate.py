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

import typer
from rich.markup import escape
from rich.text import Text

from ...core.errors import InvalidCharacterError
from ...core.validation import validate as validate_text
from ..core.common import _ctx_debug, _ctx_quiet, _run_cli
from ..io.inputs import _read_input_lines
from ..ui import console, console_err, highlight_position

_VALIDATE_HELP = (
    "Check that text only contains z-base-32 characters.\n\n"
    "Exits with code 2 and marks the first offending character when the text is invalid.\n\n"
    "Examples:\n"
    "  zbase32 validate ybndrfg8\n"
    "  zbase32 validate --input backup.txt\n"
)


def register(app: typer.Typer) -> None:
    app.command(help=_VALIDATE_HELP)(validate)


def validate(
    ctx: typer.Context,
    text: str | None = typer.Argument(
        None,
        help="Text to validate.",
        show_default=False,
    ),
    input_path: str | None = typer.Option(
        None,
        "--input",
        "-i",
        help="Validate the contents of this file ('-' for stdin).",
        rich_help_panel="Input",
    ),
) -> None:
    if text is not None and input_path is not None:
        raise typer.BadParameter("use either TEXT or --input, not both")
    quiet = _ctx_quiet(ctx)

    def _run() -> int:
        if text is not None:
            candidate = text.strip()
        else:
            candidate = "".join(line.strip() for line in _read_input_lines(input_path))
        try:
            validate_text(candidate)
        except InvalidCharacterError as exc:
            console_err.print(
                f"[error]Error:[/error] invalid character {escape(repr(exc.character))} "
                f"at position {exc.position}"
            )
            console_err.print(Text("  ").append_text(highlight_position(exc.text, exc.position)))
            return 2
        if not quiet:
            console.print("[success]valid[/success]")
        return 0

    _run_cli(_run, debug=_ctx_debug(ctx))
