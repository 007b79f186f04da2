# Copyright (C) 2025 Miguel Marina
# Author: Miguel Marina <karel.capek.robotics@gmail.com>
# LinkedIn: https://www.linkedin.com/in/progman32/
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.

"""Shared constants for the WordMem project."""

# Width of one stored word.
WORD_BYTES = 4
WORD_MASK = 0xFFFFFFFF

# Value returned by ``WordMemory.read`` when the access cannot be resolved.
# A word that legitimately holds this pattern is indistinguishable from a
# failed read; use ``WordMemory.load`` when that matters.
READ_SENTINEL = 0xDEADBEEF

DEFAULT_SIZE_WORDS = 256
DEFAULT_DISPLAY_WORDS = 16

__all__ = [
    "WORD_BYTES",
    "WORD_MASK",
    "READ_SENTINEL",
    "DEFAULT_SIZE_WORDS",
    "DEFAULT_DISPLAY_WORDS",
]
