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

"""Read-only views of a :class:`~wordmem.hardware.memory.WordMemory`."""

from __future__ import annotations

import logging
from typing import Iterator, Optional

import matplotlib.pyplot as plt
import numpy as np

from .constants import DEFAULT_DISPLAY_WORDS, WORD_BYTES


logger = logging.getLogger(__name__)


def _window(memory, start_index: int, num_words: Optional[int]) -> range:
    start = int(start_index)
    if num_words is None:
        num_words = memory.size_words - start
    end = start + int(num_words)
    if start < 0 or end <= start:
        return range(0)
    if end > memory.size_words:
        logger.debug(
            "window %d..%d truncated to memory size %d", start, end - 1, memory.size_words
        )
        end = memory.size_words
    return range(start, end)


def dump_lines(
    memory, start_index: int = 0, num_words: int = DEFAULT_DISPLAY_WORDS
) -> Iterator[str]:
    """Yield one formatted line per in-range word of the window."""
    for index in _window(memory, start_index, num_words):
        yield f"[{index:6d}] 0x{index * WORD_BYTES:08X}: 0x{int(memory.mem[index]):08X}"


def display(memory, start_index: int = 0, num_words: int = DEFAULT_DISPLAY_WORDS) -> None:
    print(f"==== MEMORY DUMP ({memory.size_words} words) ====")
    for line in dump_lines(memory, start_index, num_words):
        print(line)


def plot_memory(memory, start_index: int = 0, num_words: Optional[int] = None, columns: int = 16):
    """Return a heatmap figure of a window of ``memory``.

    Words are laid out row by row, ``columns`` per row; cells past the end of
    the window are left blank.  The caller decides whether to show or save the
    figure.
    """
    window = _window(memory, start_index, num_words)
    columns = max(1, int(columns))
    rows = max(1, -(-len(window) // columns))
    grid = np.full(rows * columns, np.nan)
    if len(window):
        grid[: len(window)] = memory.mem[window.start : window.stop]
    grid = grid.reshape(rows, columns)

    fig, ax = plt.subplots(figsize=(max(4, columns * 0.5), max(2, rows * 0.4)))
    im = ax.imshow(grid, cmap="viridis", aspect="auto", interpolation="nearest")
    first = window.start if len(window) else int(start_index)
    ax.set_title(f"Words {first}..{first + len(window) - 1}" if len(window) else "Empty window")
    ax.set_xlabel("Column")
    ax.set_ylabel("Row start index")
    ax.set_yticks(range(rows))
    ax.set_yticklabels([str(first + r * columns) for r in range(rows)])
    fig.colorbar(im, ax=ax, label="Word value")
    fig.tight_layout()
    return fig


__all__ = ["dump_lines", "display", "plot_memory"]
