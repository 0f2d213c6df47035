"""Append the contents of one file to another."""

from __future__ import annotations

import os
import sys
from typing import BinaryIO, Iterator, Sequence, TextIO

StrPath = "str | os.PathLike[str]"


def _copy(source: BinaryIO, destination: BinaryIO) -> int:
    data = source.read()
    destination.write(data)
    return len(data)


def append_file(source: str | os.PathLike[str], destination: str | os.PathLike[str]) -> int:
    """Append the bytes of *source* to *destination* and return how many were written.

    The destination is created if it does not exist; a missing source raises
    before the destination is touched.
    """
    with open(source, "rb") as src:
        with open(destination, "ab") as dst:
            return _copy(src, dst)


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _ask(tokens: Iterator[str], prompt: str) -> str:
    sys.stdout.write(prompt)
    sys.stdout.flush()
    return next(tokens, "")


def main(argv: Sequence[str] | None = None) -> int:
    del argv
    tokens = _tokens(sys.stdin)
    first = _ask(tokens, "Enter the filename to open: \n")
    try:
        src = open(first, "rb")
    except OSError:
        print("Cannot open file")
        return 0
    with src:
        second = _ask(tokens, "Enter the file name to append\n")
        try:
            dst = open(second, "ab")
        except OSError:
            print("Cannot open file")
            return 0
        with dst:
            _copy(src, dst)
    print(f"\n Content in {first} append to {second}")
    return 0


if __name__ == "__main__":
    sys.exit(main())