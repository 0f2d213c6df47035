"""Start a program with one argument, wait for it, then report completion."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import Sequence


def run_program(program: str | os.PathLike[str], argument: str) -> int:
    """Run *program* (a path) with one argument; return its exit status."""
    sys.stdout.flush()
    path = os.fspath(program)
    return subprocess.run([path, argument], executable=os.path.abspath(path)).returncode


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        print(f"Usage: {os.path.basename(sys.argv[0])} <program> <arg1>", file=sys.stderr)
    else:
        try:
            run_program(args[0], args[1])
        except OSError as exc:
            print(f"execl failed: {exc.strerror or exc}", file=sys.stderr)
    print("Process creation completed.")
    return 0


if __name__ == "__main__":
    sys.exit(main())