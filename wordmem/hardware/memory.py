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

"""Word-addressable memory model for simulation test benches."""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from ..config import MemoryConfig
from ..constants import (
    DEFAULT_DISPLAY_WORDS,
    DEFAULT_SIZE_WORDS,
    READ_SENTINEL,
    WORD_BYTES,
    WORD_MASK,
)
from ..display import display as show_words
from ..errors import MemoryAccessError, format_addr
from ..hexload import load_hex_file, save_hex_file
from .addressing import AddressMode, Resolution, effective_mode, resolve_address


logger = logging.getLogger(__name__)


class WordMemory:
    """Fixed-size array of 32-bit words.

    ``read`` and ``write`` never raise on a bad address: a failed write is
    logged and ignored, a failed read is logged and returns
    :data:`~wordmem.constants.READ_SENTINEL`.  ``load`` and ``store`` are the
    same accesses with the failure raised instead.

    Every access takes an optional ``mode``; ``None`` means the configured
    ``default_mode``.
    """

    def __init__(
        self,
        size_words: int = DEFAULT_SIZE_WORDS,
        default_mode: AddressMode = AddressMode.AUTO,
        allow_unaligned_byte: bool = False,
    ):
        self.config = MemoryConfig(size_words, default_mode, allow_unaligned_byte)
        self.mem = np.zeros(self.config.size_words, dtype=np.uint32)

    @classmethod
    def from_config(cls, config: MemoryConfig) -> "WordMemory":
        return cls(config.size_words, config.default_mode, config.allow_unaligned_byte)

    @property
    def size_words(self) -> int:
        return self.config.size_words

    @property
    def size_bytes(self) -> int:
        return self.config.size_words * WORD_BYTES

    @property
    def default_mode(self) -> AddressMode:
        return self.config.default_mode

    @property
    def allow_unaligned_byte(self) -> bool:
        return self.config.allow_unaligned_byte

    def __len__(self):
        return self.config.size_words

    def __repr__(self):
        return (
            f"WordMemory(size_words={self.size_words}, "
            f"default_mode={self.default_mode.name}, "
            f"allow_unaligned_byte={self.allow_unaligned_byte})"
        )

    # ------------------------------------------------------------------
    def resolve(self, addr: int, mode: Optional[AddressMode] = None) -> Resolution:
        """Translate ``addr`` the way an access with ``mode`` would."""
        return resolve_address(
            addr,
            effective_mode(mode, self.default_mode),
            self.size_words,
            self.allow_unaligned_byte,
        )

    def _resolve_for(self, op: str, addr: int, mode: Optional[AddressMode]) -> int:
        res = self.resolve(addr, mode)
        if res.unaligned:
            logger.warning(
                "%s: unaligned byte address %s accessed as word index %d",
                op,
                format_addr(addr),
                res.index,
            )
        return res.index

    # ------------------------------------------------------------------
    def load(self, addr: int, mode: Optional[AddressMode] = None) -> int:
        """Return the word at ``addr`` or raise :class:`MemoryAccessError`."""
        index = self._resolve_for("read", addr, mode)
        value = int(self.mem[index])
        logger.debug("read [%d] -> 0x%08X", index, value)
        return value

    def store(self, addr: int, data: int, mode: Optional[AddressMode] = None) -> None:
        """Store ``data`` at ``addr`` or raise :class:`MemoryAccessError`."""
        index = self._resolve_for("write", addr, mode)
        self.mem[index] = int(data) & WORD_MASK
        logger.debug("write [%d] <- 0x%08X", index, int(self.mem[index]))

    def read(self, addr: int, mode: Optional[AddressMode] = None) -> int:
        try:
            return self.load(addr, mode)
        except MemoryAccessError as exc:
            logger.error("read failed, returning 0x%08X: %s", READ_SENTINEL, exc)
            return READ_SENTINEL

    def write(self, addr: int, data: int, mode: Optional[AddressMode] = None) -> None:
        try:
            self.store(addr, data, mode)
        except MemoryAccessError as exc:
            logger.error("write of 0x%08X ignored: %s", int(data) & WORD_MASK, exc)

    # ------------------------------------------------------------------
    def snapshot(self) -> np.ndarray:
        """Copy of the backing array."""
        return self.mem.copy()

    def display(self, start_index: int = 0, num_words: int = DEFAULT_DISPLAY_WORDS) -> None:
        """Print words ``start_index`` onwards, truncated at the end of memory."""
        show_words(self, start_index, num_words)

    def load_from_hex_file(self, path) -> int:
        """Fill memory from a hex dump starting at index 0; see :mod:`wordmem.hexload`."""
        return load_hex_file(self, path)

    def save_hex_file(self, path, start_index: int = 0, num_words: Optional[int] = None) -> int:
        return save_hex_file(self, path, start_index, num_words)
