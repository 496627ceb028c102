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

from ...encoding.zbase32 import encode_zbase32
from ..core.common import _ctx_config, _ctx_debug, _ctx_quiet, _run_cli
from ..io.inputs import _read_input_bytes
from ..io.outputs import _write_text_output

_ENCODE_HELP = (
    "Encode binary data as z-base-32 text.\n\n"
    "Reads INPUT (or stdin when INPUT is '-' or omitted).\n\n"
    "Examples:\n"
    "  zbase32 encode secret.key\n"
    "  printf 'hello' | zbase32 encode --no-separators\n"
)


def register(app: typer.Typer) -> None:
    app.command(help=_ENCODE_HELP)(encode)


def encode(
    ctx: typer.Context,
    input_path: str | None = typer.Argument(
        None,
        metavar="INPUT",
        help="File to encode ('-' for stdin).",
        show_default=False,
    ),
    separators: bool | None = typer.Option(
        None,
        "--separators/--no-separators",
        help="Insert '-' after every 8 characters (default from config).",
        show_default=False,
        rich_help_panel="Format",
    ),
    output: str | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the encoded text to a file (default: stdout).",
        rich_help_panel="Output",
    ),
) -> None:
    quiet = _ctx_quiet(ctx)

    def _run() -> None:
        with_separators = separators
        if with_separators is None:
            with_separators = _ctx_config(ctx).encode.with_separators
        data = _read_input_bytes(input_path)
        text = encode_zbase32(data, with_separators)
        _write_text_output(output, text, quiet=quiet)

    _run_cli(_run, debug=_ctx_debug(ctx))
