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

"""z-base-32 encoding and decoding."""

from __future__ import annotations

from .core.errors import InvalidCharacterError
from .core.validation import validate
from .encoding.tables import SEPARATOR, ZBASE32_ALPHABET as ALPHABET
from .encoding.zbase32 import (
    FormatOptions,
    decode_lines,
    decode_zbase32 as decode,
    decoded_length,
    encode_zbase32 as encode,
    encoded_length,
    is_formatted,
)

__all__ = [
    "ALPHABET",
    "FormatOptions",
    "InvalidCharacterError",
    "SEPARATOR",
    "decode",
    "decode_lines",
    "decoded_length",
    "encode",
    "encoded_length",
    "is_formatted",
    "validate",
]
