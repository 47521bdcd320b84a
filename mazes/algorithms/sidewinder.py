"""Sidewinder: row-by-row runs closed with a single northward passage."""

from dataclasses import dataclass
from itertools import groupby
from typing import FrozenSet, List, Optional, Tuple

from ..domain.errors import InvalidOption
from ..domain.grid import Grid
from ..domain.types import Coord
from ..utils.rng import SeededRNG
from .base import MazeAlgorithm


@dataclass(frozen=True)
class SidewinderOptions:
    """Configuration for the sidewinder algorithm."""
    weight: float = 0.5  # Chance a run keeps growing east

    def __post_init__(self):
        if not 0.0 <= self.weight <= 1.0:
            raise InvalidOption(f"Weight must be between 0.0 and 1.0, got {self.weight}")


class Sidewinder(MazeAlgorithm):
    """
    Carve each row into east-west runs and join every run to the row above.

    Cells with nothing above them always extend their run, so the top
    row becomes one hallway. A weight of 0 gives runs of a single cell
    below the top row; a weight of 1 gives one run per contiguous row.

    Only rectangles, and masks whose rows are contiguous with a path north
    from every run, come out as a single tree. On other masks a run with no
    cell below a northern neighbor is left unjoined and the island becomes
    a forest; use one of the walk-based algorithms for irregular shapes.
    """
    name = "sidewinder"
    options_type = SidewinderOptions

    def __init__(self, weight: float = 0.5, options: Optional[SidewinderOptions] = None):
        self.options = options if options is not None else SidewinderOptions(weight=weight)

    def carve(self, grid: Grid, island: FrozenSet[Coord], rng: SeededRNG) -> Grid:
        passages: List[Tuple[Coord, Coord]] = []

        for _, row_cells in groupby(sorted(island), key=lambda cell: cell[0]):
            run: List[Coord] = []
            for cell in row_cells:
                run.append(cell)
                has_east = grid.neighbor(cell, "east") is not None
                has_north = grid.neighbor(cell, "north") is not None

                if has_east and (not has_north or rng.random() < self.options.weight):
                    continue

                passages.extend(self._close_run(grid, run, rng))
                run = []

        return grid.link_all(passages)

    @staticmethod
    def _close_run(grid: Grid, run: List[Coord], rng: SeededRNG) -> List[Tuple[Coord, Coord]]:
        """Passages joining the run east-west, plus one from a random member north."""
        passages = list(zip(run, run[1:]))

        with_north = [cell for cell in run if grid.neighbor(cell, "north") is not None]
        if with_north:
            cell = rng.choice(with_north)
            passages.append((cell, grid.neighbor(cell, "north")))
        return passages

    def __repr__(self) -> str:
        return f"Sidewinder(weight={self.options.weight})"
