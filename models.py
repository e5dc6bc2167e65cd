from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Dict, Iterator, Tuple

Cell = Tuple[int, int]


class TileKind(IntEnum):
    UNLAID = 0
    SIZE_1X1 = 1
    SIZE_1X2_HORIZONTAL = 2
    SIZE_1X2_VERTICAL = 3
    SIZE_2X2 = 4

    @property
    def footprint(self) -> Tuple[int, int]:
        """(rows, cols) covered by the tile; UNLAID covers nothing."""
        return FOOTPRINTS[self]

    @property
    def area(self) -> int:
        h, w = FOOTPRINTS[self]
        return h * w

    def cells(self, row: int, col: int) -> Iterator[Cell]:
        h, w = FOOTPRINTS[self]
        for dr in range(h):
            for dc in range(w):
                yield (row + dr, col + dc)


FOOTPRINTS: Dict[TileKind, Tuple[int, int]] = {
    TileKind.UNLAID: (0, 0),
    TileKind.SIZE_1X1: (1, 1),
    TileKind.SIZE_1X2_HORIZONTAL: (1, 2),
    TileKind.SIZE_1X2_VERTICAL: (2, 1),
    TileKind.SIZE_2X2: (2, 2),
}

# Candidate order used by the placement engine.
TILE_KINDS: Tuple[TileKind, ...] = (
    TileKind.SIZE_1X1,
    TileKind.SIZE_1X2_HORIZONTAL,
    TileKind.SIZE_1X2_VERTICAL,
    TileKind.SIZE_2X2,
)


class Direction(Enum):
    LEFT = (0, -1)
    ABOVE = (-1, 0)

    @property
    def offset(self) -> Tuple[int, int]:
        return self.value


@dataclass(frozen=True)
class Placed:
    row: int
    col: int
    kind: TileKind

    def cells(self):
        return list(self.kind.cells(self.row, self.col))

    def to_tuple(self):
        h, w = self.kind.footprint
        return (self.row, self.col, h, w)
