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

from ...encoding.zbase32 import decode_zbase32, encoded_length, is_formatted
from ..core.common import _ctx_debug, _ctx_quiet, _run_cli
from ..core.log import _warn
from ..io.inputs import _read_input_lines
from ..io.outputs import _write_output

_DECODE_HELP = (
    "Decode z-base-32 text back to binary data.\n\n"
    "Text may be wrapped across lines; surrounding whitespace on each line is ignored.\n"
    "Uppercase letters and the usual misreadings (0/o, 2/z, l/1, |/1, v/u) are accepted.\n\n"
    "Examples:\n"
    "  zbase32 decode backup.txt -o secret.key\n"
    "  zbase32 decode --text 9h | xxd\n"
)


def register(app: typer.Typer) -> None:
    app.command(help=_DECODE_HELP)(decode)


def decode(
    ctx: typer.Context,
    input_path: str | None = typer.Argument(
        None,
        metavar="INPUT",
        help="Text file to decode ('-' for stdin).",
        show_default=False,
    ),
    text: str | None = typer.Option(
        None,
        "--text",
        "-t",
        help="Decode this text instead of reading INPUT.",
        rich_help_panel="Input",
    ),
    output: str | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the decoded bytes to a file (default: stdout).",
        rich_help_panel="Output",
    ),
) -> None:
    if text is not None and input_path is not None:
        raise typer.BadParameter("use either INPUT or --text, not both")
    quiet = _ctx_quiet(ctx)

    def _run() -> None:
        if text is not None:
            encoded = text.strip()
        else:
            encoded = "".join(line.strip() for line in _read_input_lines(input_path))
        data = decode_zbase32(encoded)
        expected = encoded_length(len(data), with_separators=is_formatted(encoded))
        if len(encoded) != expected:
            _warn(
                f"non-canonical length ({len(encoded)} chars); trailing bits were dropped",
                quiet=quiet,
            )
        _write_output(output, data, quiet=quiet)

    _run_cli(_run, debug=_ctx_debug(ctx))
