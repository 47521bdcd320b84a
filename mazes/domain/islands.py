"""Connected component discovery over physical adjacency."""

from typing import FrozenSet, List

from .grid import Grid
from .paths import bfs
from .types import Coord


def islands(grid: Grid) -> List[FrozenSet[Coord]]:
    """
    Partition the grid's cells into islands of neighbor-connected cells.

    Carving is ignored: two cells share an island iff a chain of adjacent
    existing cells joins them. Island order is not meaningful.
    """
    frontier = set(grid.cells)
    result: List[FrozenSet[Coord]] = []

    while frontier:
        seed = min(frontier)
        island = frozenset(bfs(grid, seed, relation="neighbors"))
        result.append(island)
        frontier -= island

    return result


def island_of(grid: Grid, cell: Coord) -> FrozenSet[Coord]:
    """Get the island containing cell."""
    return frozenset(bfs(grid, cell, relation="neighbors"))
