"""Shared fixtures and helpers for the maze test suite."""

from itertools import combinations

import pytest

from mazes.domain.grid import Grid
from mazes.domain.islands import islands
from mazes.domain.paths import shortest_path
from mazes.utils.rng import SeededRNG


@pytest.fixture
def rng():
    """Seeded random source so failures reproduce."""
    return SeededRNG(1234)


@pytest.fixture
def grid_2x2():
    return Grid.create(2, 2)


@pytest.fixture
def plus_mask():
    """Plus-shaped mask on a 3x3 universe."""
    return Grid.create_from_cells({(0, 1), (1, 0), (1, 1), (1, 2), (2, 1)})


@pytest.fixture
def two_island_grid():
    """5x5 grid with the middle column masked out."""
    cells = {(row, column) for row in range(5) for column in range(5) if column != 2}
    return Grid.create_from_cells(cells)


def assert_perfect_maze(grid: Grid, check_paths: bool = True):
    """Assert the links form a spanning tree of every island."""
    for island in islands(grid):
        island_links = sum(len(grid.linked(cell)) for cell in island) // 2
        assert island_links == len(island) - 1

        for cell in island:
            assert grid.linked(cell) <= island

        if check_paths:
            for a, b in combinations(sorted(island), 2):
                assert shortest_path(grid, a, b) is not None

    for cell, others in grid.links.items():
        for other in others:
            assert grid.is_linked(other, cell)
