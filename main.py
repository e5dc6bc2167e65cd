# main.py — print a freshly generated floor to the terminal
from __future__ import annotations
import sys

from config import CFG
from render import format_counts, render_terminal
from solver.placement import generate


def _use_color(mode: str, stream) -> bool:
    if mode == "always":
        return True
    if mode == "never":
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def main(stream=None) -> int:
    stream = stream or sys.stdout
    grid = generate(CFG.ROWS, CFG.COLUMNS, seed=CFG.SEED)

    for line in format_counts(grid.counts):
        stream.write(line + "\n")
    stream.write(render_terminal(grid, color=_use_color(CFG.COLOR, stream)) + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
