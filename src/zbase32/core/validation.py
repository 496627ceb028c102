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

from ..encoding.tables import INVALID, lookup
from .errors import InvalidCharacterError


def require_bytes_like(value: object, *, label: str) -> bytes:
    """Validate that value is bytes-like and return it as bytes."""
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise TypeError(f"{label} must be bytes-like, not {type(value).__name__}")
    return bytes(value)


def require_text(value: object, *, label: str) -> str:
    """Validate that value is a str."""
    if not isinstance(value, str):
        raise TypeError(f"{label} must be a string, not {type(value).__name__}")
    return value


def validate(text: str) -> None:
    """Check that every character of text can be decoded.

    Separators and the accepted case/transcription variants pass. The first
    character that maps to nothing raises InvalidCharacterError with its
    1-based position; later characters are not examined.
    """
    require_text(text, label="text")
    for index, char in enumerate(text):
        if lookup(char) == INVALID:
            raise InvalidCharacterError(text, char, index + 1)


__all__ = ["require_bytes_like", "require_text", "validate"]
