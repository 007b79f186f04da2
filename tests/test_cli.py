import os
import sys

import matplotlib

matplotlib.use("Agg")

sys.path.append(os.getcwd())

from WordMem import main


def test_demo_runs(capsys):
    assert main(["demo"]) == 0
    out = capsys.readouterr().out
    assert "word 0      -> 0x11111111" in out
    assert "byte 0x8    -> 0x22222222" in out
    assert "last word   -> 0x44444444" in out
    assert "bad probe   -> 0xDEADBEEF" in out


def test_dump_loads_file(tmp_path, capsys):
    path = tmp_path / "mem.hex"
    path.write_text("0x1\n2\n", encoding="utf-8")
    assert main(["--size", "4", "dump", str(path), "--count", "8"]) == 0
    out = capsys.readouterr().out
    assert "Loaded 2 words" in out
    assert "0x00000002" in out


def test_dump_missing_file(tmp_path, capsys):
    assert main(["dump", str(tmp_path / "nope.hex")]) == 1
    assert "Cannot open hex file" in capsys.readouterr().out


def test_plot_writes_png(tmp_path):
    path = tmp_path / "mem.hex"
    path.write_text("1\n2\n3\n", encoding="utf-8")
    output = tmp_path / "mem.png"
    assert main(["plot", str(path), "--output", str(output)]) == 0
    assert output.exists()


def test_invalid_size(capsys):
    assert main(["--size", "0", "demo"]) == 2


def test_parser_defaults_come_from_config():
    from WordMem import build_parser
    from wordmem.config import cfg

    args = build_parser().parse_args(["demo"])
    assert args.size == cfg.size_words == 256
    assert args.mode == cfg.default_mode.value == "auto"
