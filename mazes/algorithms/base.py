"""Base class shared by the maze generation algorithms."""

import logging
from abc import ABC, abstractmethod
from typing import FrozenSet, Optional

from ..domain.grid import Grid
from ..domain.islands import islands
from ..domain.types import Coord
from ..utils.rng import SeededRNG, ensure_rng

logger = logging.getLogger(__name__)


class MazeAlgorithm(ABC):
    """
    A strategy that carves a perfect maze into a grid.

    Subclasses implement carve() for a single island; on() runs it once
    per island so masked grids split into several regions are handled
    the same way by every algorithm.
    """
    name: str = ""
    options_type: Optional[type] = None

    def on(self, grid: Grid, rng: Optional[SeededRNG] = None) -> Grid:
        """Carve a maze into every island of grid and return the new grid."""
        rng = ensure_rng(rng)
        regions = islands(grid)
        logger.debug("Running %s on %dx%d grid (%d cells, %d islands)",
                     self.name, grid.rows, grid.columns, grid.size, len(regions))

        # Islands come back in discovery order; sort so a seed reproduces the maze
        for island in sorted(regions, key=min):
            if len(island) > 1:
                grid = self.carve(grid, island, rng)

        logger.debug("%s carved %d links", self.name, grid.link_count)
        return grid

    @abstractmethod
    def carve(self, grid: Grid, island: FrozenSet[Coord], rng: SeededRNG) -> Grid:
        """Carve a spanning tree over one island of two or more cells."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
