"""Aldous-Broder: uniform spanning tree by unbiased random walk."""

from typing import FrozenSet, List, Tuple

from ..domain.grid import Grid
from ..domain.types import Coord
from ..utils.rng import SeededRNG
from .base import MazeAlgorithm


class AldousBroder(MazeAlgorithm):
    """
    Walk randomly from cell to neighbor, linking whenever the walk enters
    a cell for the first time. Every spanning tree is equally likely, but
    the walk can take a long time to find the last few unvisited cells.
    """
    name = "aldous_broder"

    def carve(self, grid: Grid, island: FrozenSet[Coord], rng: SeededRNG) -> Grid:
        current = rng.pick(island)
        unvisited = set(island)
        unvisited.discard(current)
        passages: List[Tuple[Coord, Coord]] = []

        while unvisited:
            neighbor = rng.choice(grid.neighbors(current))
            if neighbor in unvisited:
                passages.append((current, neighbor))
                unvisited.discard(neighbor)
            current = neighbor

        return grid.link_all(passages)
