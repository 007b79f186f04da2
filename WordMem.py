#!/usr/bin/env python3
"""Demonstration harness for the WordMem memory model.

Usage::

    python WordMem.py demo
    python WordMem.py dump path/to/image.hex --size 1024 --start 0 --count 32
    python WordMem.py plot path/to/image.hex --output memory.png
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

import matplotlib.pyplot as plt

from wordmem import AddressMode, HexFileNotFoundError, WordMemory
from wordmem.config import cfg
from wordmem.constants import DEFAULT_DISPLAY_WORDS
from wordmem.display import plot_memory


def run_demo(memory: WordMemory) -> None:
    """Walk through each addressing mode, including the failing cases."""
    print(f"Created {memory!r}")

    memory.write(0, 0x11111111, AddressMode.WORD)
    memory.write(8, 0x22222222, AddressMode.BYTE)
    memory.write(3, 0x33333333)
    # Too large for an index, so AUTO treats it as a byte address.
    memory.write(memory.size_words * 4 - 4, 0x44444444)

    print(f"word 0      -> 0x{memory.read(0, AddressMode.WORD):08X}")
    print(f"byte 0x8    -> 0x{memory.read(8, AddressMode.BYTE):08X}")
    print(f"auto 3      -> 0x{memory.read(3):08X}")
    print(f"last word   -> 0x{memory.read(memory.size_words - 1, AddressMode.WORD):08X}")

    memory.write(memory.size_words, 0xBAD0BAD0, AddressMode.WORD)
    memory.write(6, 0xBAD1BAD1, AddressMode.BYTE)
    print(f"bad probe   -> 0x{memory.read(memory.size_words * 8):08X}")

    memory.display(0, DEFAULT_DISPLAY_WORDS)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Behavioral word memory demo")
    parser.add_argument(
        "--mode",
        choices=[m.value for m in AddressMode],
        default=cfg.default_mode.value,
        help=f"Default address interpretation (default: {cfg.default_mode.value})",
    )
    parser.add_argument(
        "--allow-unaligned",
        action="store_true",
        help="Floor unaligned byte addresses instead of rejecting them",
    )
    parser.add_argument(
        "--size",
        type=int,
        default=cfg.size_words,
        help=f"Memory size in words (default: {cfg.size_words})",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every access")

    sub = parser.add_subparsers(dest="command")
    sub.add_parser("demo", help="Run the illustrative access sequence")

    dump = sub.add_parser("dump", help="Load a hex file and print a window")
    dump.add_argument("hexfile")
    dump.add_argument("--start", type=int, default=0)
    dump.add_argument("--count", type=int, default=DEFAULT_DISPLAY_WORDS)

    plot = sub.add_parser("plot", help="Load a hex file and save a heatmap")
    plot.add_argument("hexfile")
    plot.add_argument("--output", default="memory.png")
    plot.add_argument("--columns", type=int, default=16)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if not logging.getLogger().hasHandlers():
        logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        memory = WordMemory(args.size, AddressMode.parse(args.mode), args.allow_unaligned)
    except ValueError as exc:
        print(exc)
        return 2

    command = args.command or "demo"
    if command == "demo":
        run_demo(memory)
        return 0

    try:
        count = memory.load_from_hex_file(args.hexfile)
    except HexFileNotFoundError as exc:
        print(exc)
        return 1

    if command == "dump":
        print(f"Loaded {count} words")
        memory.display(args.start, args.count)
    else:
        fig = plot_memory(memory, 0, count or None, args.columns)
        fig.savefig(args.output, format="png")
        plt.close(fig)
        print(f"Saved heatmap of {count} words to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
