"""Fixed-size floor grid the placement engine lays tiles onto."""

from __future__ import annotations

from typing import Dict, List, Tuple

from models import Cell, Direction, Placed, TileKind, TILE_KINDS


class PlacementError(RuntimeError):
    """Raised when a tile is committed over a laid or out-of-bounds cell."""


class Grid:
    """R×C array of cell kinds plus the placements committed onto it.

    Cells only ever go from ``UNLAID`` to a laid kind; ``place`` refuses to
    overwrite anything.
    """

    def __init__(self, rows: int, columns: int):
        if int(rows) <= 0 or int(columns) <= 0:
            raise ValueError(f"grid dimensions must be positive, got {rows}×{columns}")
        self.R = int(rows)
        self.C = int(columns)
        self._cells: List[List[TileKind]] = [
            [TileKind.UNLAID] * self.C for _ in range(self.R)
        ]
        self._counts: Dict[TileKind, int] = {}
        self._placements: List[Placed] = []

    def __repr__(self) -> str:
        return f"Grid({self.R}, {self.C}, placed={len(self._placements)})"

    # ------------------------------------------------------------------
    # Cell queries
    # ------------------------------------------------------------------

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.R and 0 <= col < self.C

    def kind_at(self, row: int, col: int) -> TileKind:
        if not self.in_bounds(row, col):
            raise IndexError(f"cell ({row},{col}) outside {self.R}×{self.C} grid")
        return self._cells[row][col]

    def is_occupied(self, row: int, col: int) -> bool:
        return self.kind_at(row, col) != TileKind.UNLAID

    def can_place_at(self, row: int, col: int) -> bool:
        return self.in_bounds(row, col) and not self.is_occupied(row, col)

    def neighbor_kind(self, row: int, col: int, direction: Direction) -> TileKind:
        # Missing neighbours read as UNLAID so edge tiles never "match" them.
        dr, dc = direction.offset
        r, c = row + dr, col + dc
        if not self.in_bounds(r, c):
            return TileKind.UNLAID
        return self._cells[r][c]

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def place(self, row: int, col: int, kind: TileKind) -> Placed:
        if kind == TileKind.UNLAID:
            raise PlacementError(f"cannot place an UNLAID tile at ({row},{col})")
        covered = list(kind.cells(row, col))
        for r, c in covered:
            if not self.in_bounds(r, c):
                raise PlacementError(
                    f"{kind.name} at ({row},{col}) extends outside the grid at ({r},{c})"
                )
            if self._cells[r][c] != TileKind.UNLAID:
                raise PlacementError(
                    f"{kind.name} at ({row},{col}) overlaps {self._cells[r][c].name} at ({r},{c})"
                )
        for r, c in covered:
            self._cells[r][c] = kind
        placed = Placed(row, col, kind)
        self._placements.append(placed)
        self._counts[kind] = self._counts.get(kind, 0) + 1
        return placed

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def counts(self) -> Dict[TileKind, int]:
        return dict(self._counts)

    @property
    def placements(self) -> Tuple[Placed, ...]:
        return tuple(self._placements)

    def rows(self) -> List[List[TileKind]]:
        return [list(r) for r in self._cells]

    def covered_cells(self) -> int:
        return sum(kind.area * n for kind, n in self._counts.items())

    def is_complete(self) -> bool:
        return all(k != TileKind.UNLAID for r in self._cells for k in r)

    def counts_in_order(self) -> List[Tuple[TileKind, int]]:
        return [(k, self._counts.get(k, 0)) for k in TILE_KINDS]


__all__ = ["Grid", "PlacementError", "Cell"]
