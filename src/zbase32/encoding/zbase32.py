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

from collections.abc import Iterable
from enum import Enum

from ..core.validation import require_bytes_like, require_text, validate
from .tables import IGNORABLE, SEPARATOR, ZBASE32_ALPHABET, lookup

GROUP_BYTES = 5
GROUP_CHARS = 8
FORMATTED_STRIDE = GROUP_CHARS + 1

# Bit offset of each character inside a 40-bit group, MSB first.
_CHAR_SHIFTS = (35, 30, 25, 20, 15, 10, 5, 0)

# Characters emitted for a group holding 0..5 bytes: ceil(n * 8 / 5).
_CHARS_PER_GROUP = (0, 2, 4, 5, 7, 8)


class FormatOptions(Enum):
    NONE = "none"
    INCLUDE_SEPARATORS = "separators"

    @classmethod
    def parse(cls, value: str) -> FormatOptions:
        normalized = value.strip().lower()
        for option in cls:
            if option.value == normalized:
                return option
        raise ValueError(f"unknown format: {value!r} (expected 'separators' or 'none')")


def _include_separators(option: bool | FormatOptions) -> bool:
    if isinstance(option, FormatOptions):
        return option is FormatOptions.INCLUDE_SEPARATORS
    return bool(option)


def encoded_length(data_length: int, *, with_separators: bool | FormatOptions = True) -> int:
    """Number of characters encode() produces for data_length bytes."""
    if data_length < 0:
        raise ValueError("data_length must be non-negative")
    length = (data_length * 8 + 4) // 5
    if length and _include_separators(with_separators):
        length += (length - 1) // GROUP_CHARS
    return length


def decoded_length(text_length: int, *, formatted: bool) -> int:
    """Number of bytes decode() produces for text_length characters."""
    if formatted:
        return (text_length - text_length // FORMATTED_STRIDE) * 5 // 8
    return text_length * 5 // 8


def is_formatted(text: str) -> bool:
    """True when text carries a separator after its first 8-character group."""
    return len(text) >= FORMATTED_STRIDE and text[GROUP_CHARS] == SEPARATOR


def encode_zbase32(data: bytes, with_separators: bool | FormatOptions = True) -> str:
    """Encode bytes to z-base-32.

    Every 5 input bytes become 8 characters. A trailing group of 1-4 bytes
    becomes 2, 4, 5 or 7 characters with the unused low bits set to zero.
    With separators, a "-" follows every complete 8-character group that is
    not at the end of the output.
    """
    raw = require_bytes_like(data, label="data")
    if not raw:
        return ""

    groups: list[str] = []
    for start in range(0, len(raw), GROUP_BYTES):
        chunk = raw[start : start + GROUP_BYTES]
        value = int.from_bytes(chunk.ljust(GROUP_BYTES, b"\x00"), "big")
        shifts = _CHAR_SHIFTS[: _CHARS_PER_GROUP[len(chunk)]]
        groups.append("".join(ZBASE32_ALPHABET[(value >> shift) & 0x1F] for shift in shifts))

    joiner = SEPARATOR if _include_separators(with_separators) else ""
    return joiner.join(groups)


def decode_zbase32(text: str) -> bytes:
    """Decode z-base-32 text to bytes.

    Input is formatted when its ninth character is a separator; every ninth
    character is then skipped. Uppercase input and known transcription errors
    decode like their canonical characters. Bits left over after the last
    whole byte are dropped without being checked.
    """
    require_text(text, label="text")
    if not text:
        return b""
    validate(text)

    formatted = is_formatted(text)
    stride = FORMATTED_STRIDE if formatted else GROUP_CHARS
    out_len = decoded_length(len(text), formatted=formatted)

    out = bytearray()
    for start in range(0, len(text), stride):
        if len(out) >= out_len:
            break
        value = 0
        for shift, char in zip(_CHAR_SHIFTS, text[start : start + GROUP_CHARS]):
            digit = lookup(char)
            # A separator outside its slot carries no data.
            if digit == IGNORABLE:
                digit = 0
            value |= digit << shift
        out += value.to_bytes(GROUP_BYTES, "big")
    return bytes(out[:out_len])


def decode_lines(lines: Iterable[str]) -> bytes:
    text = "".join(line.strip() for line in lines)
    return decode_zbase32(text)


__all__ = [
    "FORMATTED_STRIDE",
    "FormatOptions",
    "GROUP_BYTES",
    "GROUP_CHARS",
    "decode_lines",
    "decode_zbase32",
    "decoded_length",
    "encode_zbase32",
    "encoded_length",
    "is_formatted",
]
