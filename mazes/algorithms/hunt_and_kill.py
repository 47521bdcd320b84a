"""Hunt-and-kill: random walk with row-major restart scans."""

from typing import FrozenSet, List, Optional, Tuple

from ..domain.grid import Grid
from ..domain.types import Coord
from ..utils.rng import SeededRNG
from .base import MazeAlgorithm


class HuntAndKill(MazeAlgorithm):
    """
    Walk to random unvisited neighbors until stuck (kill), then scan the
    unvisited cells in row-major order for one touching the visited region
    (hunt), join it to a random visited neighbor and walk again from there.
    """
    name = "hunt_and_kill"

    def carve(self, grid: Grid, island: FrozenSet[Coord], rng: SeededRNG) -> Grid:
        current: Optional[Coord] = rng.pick(island)
        unvisited = set(island)
        unvisited.discard(current)
        scan_order = sorted(island)
        passages: List[Tuple[Coord, Coord]] = []

        while current is not None:
            candidates = [cell for cell in grid.neighbors(current) if cell in unvisited]
            if candidates:
                neighbor = rng.choice(candidates)
                passages.append((current, neighbor))
                unvisited.discard(neighbor)
                current = neighbor
                continue

            current = None
            for cell in scan_order:
                if cell not in unvisited:
                    continue
                visited_neighbors = [n for n in grid.neighbors(cell) if n not in unvisited]
                if visited_neighbors:
                    passages.append((cell, rng.choice(visited_neighbors)))
                    unvisited.discard(cell)
                    current = cell
                    break

        return grid.link_all(passages)
