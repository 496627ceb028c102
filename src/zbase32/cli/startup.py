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

from rich.markup import escape
from rich.traceback import install as install_rich_traceback

from ..config import init_user_config
from .ui import configure_ui, console


def run_startup(
    *,
    no_color: bool,
    debug: bool,
    init_config: bool,
) -> bool:
    """Apply global UI settings; return True when the CLI should exit early."""
    configure_ui(no_color=no_color)
    if debug:
        install_rich_traceback(show_locals=True)
    if init_config:
        config_path = init_user_config()
        console.print(f"User config ready at {escape(str(config_path))}")
        return True
    return False
