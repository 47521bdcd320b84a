"""Recursive backtracker: randomized depth-first carving."""

from typing import FrozenSet, Iterator, List, Set, Tuple

from ..domain.grid import Grid
from ..domain.types import Coord
from ..utils.rng import SeededRNG
from .base import MazeAlgorithm


class RecursiveBacktracker(MazeAlgorithm):
    """
    Depth-first search in random neighbor order, carving as it goes.

    The recursion is kept on an explicit stack of (cell, pending candidates)
    frames so large grids cannot exhaust the interpreter's call stack. A
    candidate is taken only if it has no links at the moment it is reached;
    a deeper frame may have carved into it since the frame was pushed.
    """
    name = "recursive_backtracker"

    def carve(self, grid: Grid, island: FrozenSet[Coord], rng: SeededRNG) -> Grid:
        linked = {cell for cell in island if grid.linked(cell)}
        passages: List[Tuple[Coord, Coord]] = []

        start = rng.pick(island)
        stack: List[Tuple[Coord, Iterator[Coord]]] = [
            (start, self._candidates(grid, start, linked, rng))
        ]

        while stack:
            cell, candidates = stack[-1]
            for candidate in candidates:
                if candidate not in linked:
                    passages.append((cell, candidate))
                    linked.update((cell, candidate))
                    stack.append((candidate, self._candidates(grid, candidate, linked, rng)))
                    break
            else:
                stack.pop()

        return grid.link_all(passages)

    @staticmethod
    def _candidates(grid: Grid, cell: Coord, linked: Set[Coord], rng: SeededRNG) -> Iterator[Coord]:
        """Unlinked neighbors of cell in shuffled order."""
        unlinked = [neighbor for neighbor in grid.neighbors(cell) if neighbor not in linked]
        rng.shuffle(unlinked)
        return iter(unlinked)
