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

from dataclasses import dataclass

from .constants import DEFAULT_SIZE_WORDS
from .hardware.addressing import AddressMode


@dataclass(frozen=True)
class MemoryConfig:
    size_words: int = DEFAULT_SIZE_WORDS
    default_mode: AddressMode = AddressMode.AUTO
    allow_unaligned_byte: bool = False

    def __post_init__(self):
        if int(self.size_words) < 1:
            raise ValueError(f"size_words must be at least 1, got {self.size_words}")
        # Frozen: normalise through object.__setattr__.
        object.__setattr__(self, "size_words", int(self.size_words))
        object.__setattr__(self, "default_mode", AddressMode.parse(self.default_mode))
        object.__setattr__(self, "allow_unaligned_byte", bool(self.allow_unaligned_byte))

cfg = MemoryConfig()
