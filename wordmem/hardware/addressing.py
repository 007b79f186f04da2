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

"""Address translation for the word memory.

The memory is indexed by word, but callers may hand it either a word index
or a byte address.  :func:`resolve_address` turns a raw address into a word
index under one of three interpretations:

``WORD``
    The address is the index.
``BYTE``
    The address is a byte offset and must be a multiple of four unless
    unaligned access is allowed, in which case it is floored to the word
    containing it.
``AUTO``
    Try ``WORD`` first and fall back to ``BYTE`` when the address is not a
    valid index.  An address small enough to be an index is therefore never
    treated as a byte address, even when it is also word aligned (e.g. ``8``
    in a 1024 word memory is index 8, not index 2).

Resolution is pure; reporting tolerated unaligned accesses is left to the
caller through :attr:`Resolution.unaligned`.
"""

from __future__ import annotations

import enum
from typing import NamedTuple, Optional, Union

from ..constants import WORD_BYTES
from ..errors import OutOfBoundsError, UnalignedAddressError


class AddressMode(enum.Enum):
    AUTO = "auto"
    WORD = "word"
    BYTE = "byte"

    @classmethod
    def parse(cls, value: Union["AddressMode", str]) -> "AddressMode":
        """Accept an ``AddressMode`` or its name in any case."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                pass
        raise ValueError(f"Unknown address mode {value!r}")


class Resolution(NamedTuple):
    index: int
    mode: AddressMode
    unaligned: bool = False


def effective_mode(
    override: Optional[AddressMode], default: AddressMode
) -> AddressMode:
    """Return ``override`` when given, otherwise the configured ``default``."""
    return default if override is None else AddressMode.parse(override)


def _check_bounds(addr: int, index: int, mode: AddressMode, size_words: int) -> None:
    if not 0 <= index < size_words:
        raise OutOfBoundsError(addr, mode, size_words, index)


def _resolve_byte(addr: int, size_words: int, allow_unaligned_byte: bool) -> Resolution:
    if addr < 0:
        raise OutOfBoundsError(addr, AddressMode.BYTE, size_words, addr // WORD_BYTES)
    unaligned = addr % WORD_BYTES != 0
    if unaligned and not allow_unaligned_byte:
        raise UnalignedAddressError(addr, AddressMode.BYTE, size_words)
    index = addr // WORD_BYTES
    _check_bounds(addr, index, AddressMode.BYTE, size_words)
    return Resolution(index, AddressMode.BYTE, unaligned)


def resolve_address(
    addr: int,
    mode: AddressMode,
    size_words: int,
    allow_unaligned_byte: bool = False,
) -> Resolution:
    """Translate ``addr`` into a word index.

    Raises :class:`~wordmem.errors.OutOfBoundsError` when the resulting index
    falls outside ``0..size_words-1`` (negative addresses included) and
    :class:`~wordmem.errors.UnalignedAddressError` for a byte address that is
    not a multiple of four while unaligned access is disallowed.
    """
    addr = int(addr)
    if mode is AddressMode.WORD:
        _check_bounds(addr, addr, AddressMode.WORD, size_words)
        return Resolution(addr, AddressMode.WORD)
    if mode is AddressMode.BYTE:
        return _resolve_byte(addr, size_words, allow_unaligned_byte)
    if mode is AddressMode.AUTO:
        if 0 <= addr < size_words:
            return Resolution(addr, AddressMode.WORD)
        return _resolve_byte(addr, size_words, allow_unaligned_byte)
    raise ValueError(f"Unknown address mode {mode!r}")


__all__ = ["AddressMode", "Resolution", "effective_mode", "resolve_address"]
