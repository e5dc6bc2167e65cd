import random

import pytest

from grid import Grid
from models import Direction, TileKind, TILE_KINDS
from solver.placement import (
    candidate_kinds,
    choose_kind,
    generate,
    make_pattern,
    problematic_kinds,
    remove_problematic,
)


class _FirstChoice:
    def choice(self, seq):
        return seq[0]


class _LastChoice:
    def choice(self, seq):
        return seq[-1]


class _RecordingRandom(random.Random):
    """Seeded generator that remembers every sequence it was asked to pick from."""

    def __init__(self, seed):
        super().__init__(seed)
        self.offered = []

    def choice(self, seq):
        self.offered.append(list(seq))
        return super().choice(seq)


def _assert_valid_floor(grid: Grid) -> None:
    # Coverage
    assert grid.is_complete()

    # Disjoint, in-bounds footprints carrying their own kind
    seen = set()
    for p in grid.placements:
        cells = p.cells()
        for r, c in cells:
            assert grid.in_bounds(r, c)
            assert (r, c) not in seen
            seen.add((r, c))
            assert grid.kind_at(r, c) == p.kind
    assert len(seen) == grid.R * grid.C

    # Count accuracy
    counts = grid.counts
    assert sum(k.area * n for k, n in counts.items()) == grid.R * grid.C
    assert sum(counts.values()) == len(grid.placements)


def test_candidate_kinds_on_empty_grid_in_fixed_order():
    grid = Grid(3, 3)
    assert candidate_kinds(grid, 0, 0) == list(TILE_KINDS)


def test_candidate_kinds_at_last_column_and_row():
    grid = Grid(3, 3)
    assert candidate_kinds(grid, 0, 2) == [TileKind.SIZE_1X1, TileKind.SIZE_1X2_VERTICAL]
    assert candidate_kinds(grid, 2, 0) == [TileKind.SIZE_1X1, TileKind.SIZE_1X2_HORIZONTAL]
    assert candidate_kinds(grid, 2, 2) == [TileKind.SIZE_1X1]


def test_candidate_kinds_empty_for_covered_cell():
    grid = Grid(2, 2)
    grid.place(0, 0, TileKind.SIZE_1X2_HORIZONTAL)
    assert candidate_kinds(grid, 0, 1) == []


def test_candidate_kinds_blocked_by_laid_neighbours():
    grid = Grid(2, 3)
    grid.place(0, 1, TileKind.SIZE_1X1)
    grid.place(1, 0, TileKind.SIZE_1X1)
    assert candidate_kinds(grid, 0, 0) == [TileKind.SIZE_1X1]


def test_problematic_kinds_uses_left_and_above_only():
    grid = Grid(2, 3)
    grid.place(0, 0, TileKind.SIZE_1X1)
    grid.place(0, 1, TileKind.SIZE_1X2_VERTICAL)
    candidates = candidate_kinds(grid, 0, 2)
    assert candidates == [TileKind.SIZE_1X1, TileKind.SIZE_1X2_VERTICAL]
    assert problematic_kinds(grid, candidates, 0, 2) == [TileKind.SIZE_1X2_VERTICAL]

    # (1,0): above is SIZE_1X1, left is off-grid.
    candidates = candidate_kinds(grid, 1, 0)
    assert candidates == [TileKind.SIZE_1X1]
    assert problematic_kinds(grid, candidates, 1, 0) == [TileKind.SIZE_1X1]
    assert grid.neighbor_kind(1, 0, Direction.LEFT) == TileKind.UNLAID


def test_remove_problematic_preserves_order():
    candidates = list(TILE_KINDS)
    assert remove_problematic(candidates, [TileKind.SIZE_1X2_HORIZONTAL]) == [
        TileKind.SIZE_1X1,
        TileKind.SIZE_1X2_VERTICAL,
        TileKind.SIZE_2X2,
    ]
    assert remove_problematic(candidates, []) == candidates


def test_choose_kind_returns_none_for_covered_cell():
    grid = Grid(1, 2)
    grid.place(0, 0, TileKind.SIZE_1X2_HORIZONTAL)
    assert choose_kind(grid, 0, 1, _FirstChoice()) is None


def test_choose_kind_accepts_repeat_when_nothing_else_fits():
    grid = Grid(1, 2)
    grid.place(0, 0, TileKind.SIZE_1X1)
    assert choose_kind(grid, 0, 1, _FirstChoice()) == TileKind.SIZE_1X1


def test_first_choice_on_two_by_two_is_fully_determined():
    grid = make_pattern(Grid(2, 2), _FirstChoice())
    assert grid.rows() == [
        [TileKind.SIZE_1X1, TileKind.SIZE_1X2_VERTICAL],
        [TileKind.SIZE_1X1, TileKind.SIZE_1X2_VERTICAL],
    ]
    assert grid.counts == {TileKind.SIZE_1X1: 2, TileKind.SIZE_1X2_VERTICAL: 1}
    _assert_valid_floor(grid)


def test_last_choice_on_two_by_two_lays_a_single_square():
    grid = make_pattern(Grid(2, 2), _LastChoice())
    assert grid.counts == {TileKind.SIZE_2X2: 1}
    assert len(grid.placements) == 1
    _assert_valid_floor(grid)


@pytest.mark.parametrize("seed", range(25))
def test_two_by_two_always_ends_fully_laid(seed):
    grid = make_pattern(Grid(2, 2), random.Random(seed))
    _assert_valid_floor(grid)
    assert grid.placements[0].row == 0 and grid.placements[0].col == 0
    if grid.placements[0].kind == TileKind.SIZE_2X2:
        assert len(grid.placements) == 1
    else:
        assert len(grid.placements) > 1


@pytest.mark.parametrize("seed", range(25))
def test_single_row_never_uses_two_row_tiles(seed):
    grid = make_pattern(Grid(1, 5), random.Random(seed))
    _assert_valid_floor(grid)
    kinds = set(grid.counts)
    assert kinds <= {TileKind.SIZE_1X1, TileKind.SIZE_1X2_HORIZONTAL}


@pytest.mark.parametrize("seed", range(25))
def test_one_by_three_has_no_adjacent_repeats(seed):
    grid = make_pattern(Grid(1, 3), random.Random(seed))
    kinds = [p.kind for p in grid.placements]
    assert kinds in (
        [TileKind.SIZE_1X1, TileKind.SIZE_1X2_HORIZONTAL],
        [TileKind.SIZE_1X2_HORIZONTAL, TileKind.SIZE_1X1],
    )


def test_forced_repeat_when_no_alternative():
    grid = make_pattern(Grid(1, 2), _FirstChoice())
    assert [p.kind for p in grid.placements] == [TileKind.SIZE_1X1, TileKind.SIZE_1X1]


@pytest.mark.parametrize("seed", [0, 1, 7, 42])
def test_repeat_only_chosen_when_unavoidable(seed):
    rng = random.Random(seed)
    grid = Grid(8, 12)
    for row in range(grid.R):
        for col in range(grid.C):
            candidates = candidate_kinds(grid, row, col)
            if not candidates:
                continue
            problematic = problematic_kinds(grid, candidates, row, col)
            chosen = choose_kind(grid, row, col, rng)
            if len(candidates) > len(problematic):
                assert chosen not in problematic
                assert chosen != grid.neighbor_kind(row, col, Direction.LEFT)
                assert chosen != grid.neighbor_kind(row, col, Direction.ABOVE)
            else:
                assert chosen in candidates
            grid.place(row, col, chosen)
    _assert_valid_floor(grid)


def test_rng_is_only_offered_filtered_candidates():
    rng = _RecordingRandom(3)
    grid = make_pattern(Grid(6, 6), rng)
    assert len(rng.offered) == len(grid.placements)
    for offered in rng.offered:
        assert offered
        assert offered == sorted(offered, key=list(TILE_KINDS).index)


@pytest.mark.parametrize("rows, cols", [(1, 1), (2, 3), (5, 1), (15, 60), (9, 17)])
def test_generated_floors_are_valid(rows, cols):
    grid = generate(rows, cols, seed=rows * 100 + cols)
    assert (grid.R, grid.C) == (rows, cols)
    _assert_valid_floor(grid)


def test_same_seed_same_floor():
    a = generate(15, 60, seed=1234)
    b = generate(15, 60, seed=1234)
    assert a.rows() == b.rows()
    assert a.placements == b.placements
    assert a.counts == b.counts


def test_explicit_rng_wins_over_seed():
    a = generate(6, 6, seed=99, rng=random.Random(5))
    b = generate(6, 6, rng=random.Random(5))
    assert a.rows() == b.rows()


def test_generate_uses_configured_dimensions(monkeypatch):
    from config import CFG

    monkeypatch.setattr(CFG, "ROWS", 3)
    monkeypatch.setattr(CFG, "COLUMNS", 4)
    grid = generate(seed=0)
    assert (grid.R, grid.C) == (3, 4)


def test_generate_rejects_bad_dimensions():
    with pytest.raises(ValueError):
        generate(0, 10, seed=1)
