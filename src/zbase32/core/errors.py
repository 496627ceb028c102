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


class InvalidCharacterError(ValueError):
    """Raised when encoded text contains a character outside the decode table."""

    def __init__(self, text: str, character: str, position: int) -> None:
        self.text = text
        self.character = character
        self.position = position
        super().__init__(
            f"encoded value {text!r} contains invalid character "
            f"{character!r} at position {position}"
        )


__all__ = ["InvalidCharacterError"]
