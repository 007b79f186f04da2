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

"""Hex dump loading and saving.

A hex dump is plain text with one word per line: an optional ``0x``/``0X``
prefix followed by one to eight hexadecimal digits.  Blank lines and lines
that do not match are skipped, so a stray comment or a malformed value does
not abort the load.  There is no address annotation; words always fill
memory from index 0.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable, Iterator, Optional, Tuple

from .constants import WORD_MASK
from .errors import HexFileNotFoundError


logger = logging.getLogger(__name__)

_HEX_WORD = re.compile(r"(?:0[xX])?([0-9a-fA-F]{1,8})")


def parse_hex_word(token: str) -> Optional[int]:
    """Return the word encoded by ``token`` or ``None`` if it is not one."""
    match = _HEX_WORD.fullmatch(token.strip())
    if match is None:
        return None
    return int(match.group(1), 16)


def iter_hex_words(lines: Iterable[str]) -> Iterator[Tuple[int, int]]:
    """Yield ``(line_number, word)`` for every parsable line."""
    for line_no, line in enumerate(lines, start=1):
        stripped = line.strip()
        if not stripped:
            continue
        value = parse_hex_word(stripped)
        if value is None:
            logger.debug("line %d: skipping unparsable token %r", line_no, stripped)
            continue
        yield line_no, value


def load_hex_file(memory, path) -> int:
    """Write the words in ``path`` to consecutive indices from 0.

    Loading stops at the end of the file or once memory is full; anything
    past the loaded prefix keeps its previous contents.  Returns the number
    of words written.  Raises :class:`HexFileNotFoundError` if ``path``
    cannot be opened, in which case nothing is written.
    """
    path = Path(path)
    try:
        f = open(path, "r", encoding="utf-8-sig", errors="replace")
    except OSError as exc:
        logger.error("load_from_hex_file: cannot open %s: %s", path, exc)
        raise HexFileNotFoundError(path) from exc

    count = 0
    with f:
        for line_no, value in iter_hex_words(f):
            if count >= memory.size_words:
                logger.debug(
                    "memory full after %d words, ignoring %s from line %d on",
                    count,
                    path,
                    line_no,
                )
                break
            memory.mem[count] = value & WORD_MASK
            count += 1
    logger.info("Loaded %d words from %s", count, path)
    return count


def save_hex_file(memory, path, start_index: int = 0, num_words: Optional[int] = None) -> int:
    """Write a window of ``memory`` to ``path`` in the format read by :func:`load_hex_file`.

    The window is clamped to the memory size.  Returns the number of words
    written.
    """
    start = max(0, int(start_index))
    end = memory.size_words if num_words is None else min(start + int(num_words), memory.size_words)
    words = memory.mem[start:end] if start < end else []
    with open(path, "w", encoding="utf-8") as f:
        for word in words:
            f.write(f"{int(word):08X}\n")
    return len(words)


__all__ = ["parse_hex_word", "iter_hex_words", "load_hex_file", "save_hex_file"]
