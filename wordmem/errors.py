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

"""Exception types raised by the memory model."""

from __future__ import annotations


def format_addr(addr: int) -> str:
    """Render ``addr`` as hex, keeping the sign of negative probes visible."""
    return f"0x{addr:X}" if addr >= 0 else f"-0x{-addr:X}"


class MemoryModelError(Exception):
    """Base class for all WordMem errors."""


class MemoryAccessError(MemoryModelError, ValueError):
    """An address could not be resolved to a word index.

    ``mode`` is the interpretation that was attempted (``WORD`` or ``BYTE``).
    """

    def __init__(self, addr: int, mode, size_words: int, message: str):
        super().__init__(message)
        self.addr = addr
        self.mode = mode
        self.size_words = size_words


class OutOfBoundsError(MemoryAccessError):
    def __init__(self, addr: int, mode, size_words: int, index: int):
        super().__init__(
            addr,
            mode,
            size_words,
            f"Address {format_addr(addr)} as {mode.name} resolves to index "
            f"{index}, outside valid range 0..{size_words - 1}",
        )
        self.index = index


class UnalignedAddressError(MemoryAccessError):
    def __init__(self, addr: int, mode, size_words: int):
        super().__init__(
            addr,
            mode,
            size_words,
            f"Byte address {format_addr(addr)} is not word aligned "
            f"(valid byte range 0x0..0x{(size_words - 1) * 4:X} in steps of 4)",
        )


class HexFileNotFoundError(MemoryModelError, FileNotFoundError):
    """The hex source could not be opened."""

    def __init__(self, path):
        super().__init__(f"Cannot open hex file {path}")
        self.path = path
