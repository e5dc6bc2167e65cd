# solver/placement.py
import random
from typing import List, Optional, Sequence

from config import CFG
from grid import Grid
from models import Direction, TileKind, TILE_KINDS
from run_log import log_run_started, record_run


def candidate_kinds(grid: Grid, row: int, col: int) -> List[TileKind]:
    """
    Tile kinds whose whole footprint is free with the origin at (row, col).

    Each kind is tested on its own; the result keeps ``TILE_KINDS`` order so a
    seeded generator always sees the same sequence.
    """
    return [
        kind
        for kind in TILE_KINDS
        if all(grid.can_place_at(r, c) for r, c in kind.cells(row, col))
    ]


def problematic_kinds(grid: Grid, candidates: Sequence[TileKind], row: int, col: int) -> List[TileKind]:
    # Only the left and above neighbours count; right/below are not laid yet.
    left = grid.neighbor_kind(row, col, Direction.LEFT)
    above = grid.neighbor_kind(row, col, Direction.ABOVE)
    return [k for k in candidates if k == left or k == above]


def remove_problematic(candidates: Sequence[TileKind], problematic: Sequence[TileKind]) -> List[TileKind]:
    blocked = set(problematic)
    return [k for k in candidates if k not in blocked]


def choose_kind(grid: Grid, row: int, col: int, rng) -> Optional[TileKind]:
    """Pick the tile to lay at (row, col), or ``None`` if the cell is already covered."""
    candidates = candidate_kinds(grid, row, col)
    if not candidates:
        return None

    problematic = problematic_kinds(grid, candidates, row, col)
    # With no safe option left we accept a repeat rather than fail.
    if len(candidates) > len(problematic):
        candidates = remove_problematic(candidates, problematic)

    return rng.choice(candidates)


def make_pattern(grid: Grid, rng=None) -> Grid:
    """
    Single greedy row-major pass over ``grid``.

    Visits every cell exactly once; cells covered by an earlier tile are
    skipped. Never backtracks and always leaves the grid fully laid.
    """
    if rng is None:
        rng = random.Random()

    for row in range(grid.R):
        for col in range(grid.C):
            kind = choose_kind(grid, row, col, rng)
            if kind is None:
                continue
            grid.place(row, col, kind)

    return grid


def generate(rows: Optional[int] = None, columns: Optional[int] = None,
             seed: Optional[int] = None, rng=None) -> Grid:
    """Build a fresh grid and fill it; ``seed`` is ignored when ``rng`` is given."""
    rows = CFG.ROWS if rows is None else rows
    columns = CFG.COLUMNS if columns is None else columns
    grid = Grid(rows, columns)
    if rng is None:
        rng = random.Random(seed)

    started = log_run_started(grid.R, grid.C, seed)
    make_pattern(grid, rng)
    record_run(
        grid.R,
        grid.C,
        seed,
        {k.name: n for k, n in grid.counts_in_order()},
        len(grid.placements),
        started,
    )
    return grid


__all__ = [
    "candidate_kinds",
    "problematic_kinds",
    "remove_problematic",
    "choose_kind",
    "make_pattern",
    "generate",
]
