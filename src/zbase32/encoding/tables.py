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

"""Alphabet and reverse lookup table for z-base-32.

The alphabet order is the one published by Zimmermann in
"Human-oriented base-32 encoding". The decode table covers the full byte
range and additionally accepts uppercase input and a handful of common
transcription errors.
"""

from __future__ import annotations

ZBASE32_ALPHABET = "ybndrfg8ejkmcpqxot1uwisza345h769"
SEPARATOR = "-"

# Marker values stored in the decode table; both lie outside 0..31.
INVALID = 0xFF
IGNORABLE = 0xF0

TABLE_SIZE = 256

# Misread character -> alphabet character it stands for.
TRANSCRIPTION_CORRECTIONS = {
    "0": "o",
    "2": "z",
    "l": "1",
    "|": "1",
    "v": "u",
}


def build_decode_table() -> tuple[int, ...]:
    table = [INVALID] * TABLE_SIZE
    for value, char in enumerate(ZBASE32_ALPHABET):
        table[ord(char)] = value

    for misread, canonical in TRANSCRIPTION_CORRECTIONS.items():
        table[ord(misread)] = table[ord(canonical)]

    for char in (*ZBASE32_ALPHABET, *TRANSCRIPTION_CORRECTIONS):
        upper = char.upper()
        if upper != char:
            table[ord(upper)] = table[ord(char)]

    table[ord(SEPARATOR)] = IGNORABLE
    return tuple(table)


DECODE_TABLE = build_decode_table()


def lookup(char: str) -> int:
    """Return the decode table entry for a single character."""
    code = ord(char)
    if code >= TABLE_SIZE:
        return INVALID
    return DECODE_TABLE[code]


__all__ = [
    "DECODE_TABLE",
    "IGNORABLE",
    "INVALID",
    "SEPARATOR",
    "TABLE_SIZE",
    "TRANSCRIPTION_CORRECTIONS",
    "ZBASE32_ALPHABET",
    "build_decode_table",
    "lookup",
]
