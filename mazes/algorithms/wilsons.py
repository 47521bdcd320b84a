"""Wilson's algorithm: spanning tree grown from random walks."""

from typing import FrozenSet, List, Tuple

from ..domain.grid import Grid
from ..domain.types import Coord
from ..utils.rng import SeededRNG
from .base import MazeAlgorithm


class Wilsons(MazeAlgorithm):
    """
    One random cell starts out visited. From a random unvisited cell, walk
    without stepping back onto the walk itself until a visited cell is hit,
    then carve the whole walk into the maze. When the walk boxes itself in
    it restarts from its first cell.
    """
    name = "wilsons"

    def carve(self, grid: Grid, island: FrozenSet[Coord], rng: SeededRNG) -> Grid:
        unvisited = set(island)
        unvisited.discard(rng.pick(island))
        passages: List[Tuple[Coord, Coord]] = []

        while unvisited:
            path = [rng.pick(unvisited)]
            on_path = {path[0]}

            while True:
                candidates = [cell for cell in grid.neighbors(path[-1]) if cell not in on_path]
                if not candidates:
                    path = path[:1]
                    on_path = {path[0]}
                    continue

                neighbor = rng.choice(candidates)
                path.append(neighbor)
                on_path.add(neighbor)

                if neighbor not in unvisited:
                    passages.extend(zip(path, path[1:]))
                    unvisited.difference_update(path)
                    break

        return grid.link_all(passages)
