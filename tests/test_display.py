import os
import sys

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt

sys.path.append(os.getcwd())

from wordmem import WordMemory
from wordmem.display import dump_lines, plot_memory


def make_memory(size=8):
    memory = WordMemory(size)
    for i in range(size):
        memory.write(i, 0x100 + i)
    return memory


def test_dump_lines_format():
    lines = list(dump_lines(make_memory(), 1, 2))
    assert lines == [
        "[     1] 0x00000004: 0x00000101",
        "[     2] 0x00000008: 0x00000102",
    ]


def test_display_truncates_at_end_of_memory(capsys):
    memory = make_memory(8)
    memory.display(6, 10)
    out = capsys.readouterr().out.splitlines()
    assert out[0].startswith("==== MEMORY DUMP")
    assert len(out) == 3
    assert out[-1].endswith("0x00000107")


def test_display_defaults_show_sixteen_words(capsys):
    memory = WordMemory(32)
    memory.display()
    assert len(capsys.readouterr().out.splitlines()) == 17


def test_out_of_range_windows_are_empty():
    memory = make_memory(4)
    assert list(dump_lines(memory, 4, 4)) == []
    assert list(dump_lines(memory, -1, 4)) == []
    assert list(dump_lines(memory, 0, 0)) == []


def test_plot_memory_returns_figure():
    fig = plot_memory(make_memory(20), 0, None, columns=8)
    ax = fig.axes[0]
    assert ax.get_title() == "Words 0..19"
    assert [t.get_text() for t in ax.get_yticklabels()] == ["0", "8", "16"]
    plt.close(fig)
