#!/usr/bin/env python3
from __future__ import annotations

from collections.abc import Sequence

from rich import box
from rich.table import Table
from rich.text import Text

from .state import THEME, UIContext, get_context

DEFAULT_CONTEXT = get_context()
console = DEFAULT_CONTEXT.console
console_err = DEFAULT_CONTEXT.console_err


def _resolve_context(context: UIContext | None) -> UIContext:
    return context or DEFAULT_CONTEXT


def configure_ui(*, no_color: bool, context: UIContext | None = None) -> None:
    context = _resolve_context(context)
    context.console.no_color = no_color
    context.console_err.no_color = no_color


def highlight_position(text: str, position: int) -> Text:
    """Render text with the character at the 1-based position marked."""
    rendered = Text(text)
    if 1 <= position <= len(text):
        rendered.stylize("invalid", position - 1, position)
    return rendered


def build_alphabet_table(alphabet: Sequence[str], *, columns: int = 4) -> Table:
    table = Table(show_header=True, box=box.SIMPLE, header_style="title")
    for _ in range(columns):
        table.add_column("Value", justify="right", style="muted")
        table.add_column("Char", style="accent")
    rows = (len(alphabet) + columns - 1) // columns
    for row in range(rows):
        cells: list[str] = []
        for col in range(columns):
            index = col * rows + row
            if index < len(alphabet):
                cells.extend([str(index), alphabet[index]])
            else:
                cells.extend(["", ""])
        table.add_row(*cells)
    return table


__all__ = [
    "THEME",
    "build_alphabet_table",
    "configure_ui",
    "console",
    "console_err",
    "highlight_position",
]
