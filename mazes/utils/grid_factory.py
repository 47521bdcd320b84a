"""Grid construction helpers: presets, masks, named positions and endpoints."""

import logging
from typing import Iterable, Optional, Tuple, Union

from ..algorithms import generate_maze
from ..domain.errors import InvalidCell, InvalidDimensions, InvalidOption
from ..domain.grid import Grid
from ..domain.paths import farthest_cell
from ..domain.types import Coord
from .rng import SeededRNG, ensure_rng

logger = logging.getLogger(__name__)

ANCHORS = (
    "top_left", "top_middle", "top_right",
    "middle_left", "middle", "middle_right",
    "bottom_left", "bottom_middle", "bottom_right",
)

PRESETS = ("full", "ring", "cross", "split", "sparse", "dense")


def create_empty_grid(rows: int, columns: int) -> Grid:
    """
    Create a full rectangular grid with no passages.

    Raises:
        InvalidDimensions: If rows or columns is not positive
    """
    return Grid.create(rows, columns)


def remove_cells(grid: Grid, cells: Iterable[Coord]) -> Grid:
    """
    Mask cells out of a grid, keeping its dimensions.
    Links touching a removed cell are dropped.
    """
    removed = set(cells)
    remaining = grid.cells - removed
    if not remaining:
        raise InvalidDimensions("Cannot remove every cell from the grid")

    links = {
        cell: others - removed
        for cell, others in grid.links.items()
        if cell not in removed and others - removed
    }
    return Grid(rows=grid.rows, columns=grid.columns, cells=remaining, links=links)


def add_random_holes(grid: Grid, density: float, rng: Optional[SeededRNG] = None) -> Grid:
    """
    Mask out a random fraction of the grid's cells.

    Args:
        grid: Grid to start from
        density: Fraction of cells to remove (0.0 to 1.0, at least one cell is kept)
        rng: Random number generator to use

    Returns:
        New grid without the removed cells
    """
    if not 0.0 <= density <= 1.0:
        raise InvalidOption(f"Density must be between 0.0 and 1.0, got {density}")

    rng = ensure_rng(rng)
    candidates = sorted(grid.cells)
    count = min(int(len(candidates) * density), len(candidates) - 1)
    if count <= 0:
        return grid
    return remove_cells(grid, rng.sample(candidates, count))


def create_preset_grid(rows: int, columns: int, preset: str,
                       rng: Optional[SeededRNG] = None) -> Grid:
    """
    Create a masked grid from a named shape.

    Presets:
        full: every cell
        ring: a two-cell-thick border around a hollow centre
        cross: a plus shape through the middle third
        split: left and right halves separated by an empty column
        sparse / dense: 15% / 35% of cells removed at random
    """
    grid = create_empty_grid(rows, columns)

    if preset == "full":
        return grid
    if preset == "ring":
        if rows < 5 or columns < 5:
            return grid
        hole = [
            (row, column)
            for row in range(2, rows - 2)
            for column in range(2, columns - 2)
        ]
        return remove_cells(grid, hole)
    if preset == "cross":
        row_band = range(rows // 3, rows - rows // 3)
        column_band = range(columns // 3, columns - columns // 3)
        outside = [
            cell for cell in grid.cells
            if cell[0] not in row_band and cell[1] not in column_band
        ]
        return remove_cells(grid, outside)
    if preset == "split":
        if columns < 3:
            raise InvalidDimensions(f"Split preset needs at least 3 columns, got {columns}")
        middle = columns // 2
        return remove_cells(grid, [(row, middle) for row in range(rows)])
    if preset == "sparse":
        return add_random_holes(grid, 0.15, rng)
    if preset == "dense":
        return add_random_holes(grid, 0.35, rng)

    raise InvalidOption(f"Unknown preset: {preset}")


def resolve_cell(grid: Grid, anchor: Union[str, Coord]) -> Coord:
    """
    Translate a named position into a coordinate.
    Explicit (row, column) tuples are returned unchanged.
    """
    if not isinstance(anchor, str):
        row, column = anchor
        return (row, column)

    last_row = grid.rows - 1
    last_column = grid.columns - 1
    mid_row = last_row // 2
    mid_column = last_column // 2

    positions = {
        "top_left": (0, 0),
        "top_middle": (0, mid_column),
        "top_right": (0, last_column),
        "middle_left": (mid_row, 0),
        "middle": (mid_row, mid_column),
        "middle_right": (mid_row, last_column),
        "bottom_left": (last_row, 0),
        "bottom_middle": (last_row, mid_column),
        "bottom_right": (last_row, last_column),
    }
    if anchor not in positions:
        raise InvalidOption(f"Unknown anchor {anchor!r}, expected one of {', '.join(ANCHORS)}")
    return positions[anchor]


def place_start_and_target(grid: Grid, start: Optional[Coord] = None,
                           target: Optional[Coord] = None,
                           rng: Optional[SeededRNG] = None) -> Tuple[Coord, Coord]:
    """
    Choose start and target cells for a maze.

    Args:
        grid: Grid to place on
        start: Specific start coordinate (random if None)
        target: Specific target coordinate (farthest linked cell from start if None)
        rng: Random number generator to use

    Returns:
        Tuple of (start_coord, target_coord)

    Raises:
        InvalidDimensions: If the grid has fewer than two cells
        InvalidCell: If a given position does not exist or both positions are the same
    """
    rng = ensure_rng(rng)

    if grid.size < 2:
        raise InvalidDimensions("Not enough cells for start and target")

    if start is None:
        start = rng.pick(grid.cells)
    elif not grid.exists(start):
        raise InvalidCell(f"Start position {start} is not in the grid")

    if target is None:
        target = farthest_cell(grid, start)
        if target == start:
            target = rng.pick(grid.cells - {start})
    elif not grid.exists(target):
        raise InvalidCell(f"Target position {target} is not in the grid")
    elif target == start:
        raise InvalidCell("Start and target positions cannot be the same")

    return start, target


def generate_maze_grid(rows: int, columns: int, algorithm: str = "recursive_backtracker",
                       seed: Optional[int] = None, preset: str = "full",
                       **options) -> Tuple[Grid, Coord, Coord]:
    """
    Generate a maze and choose its endpoints.

    Args:
        rows: Grid rows
        columns: Grid columns
        algorithm: Registry name of the maze algorithm
        seed: Random seed for reproducibility
        preset: Grid shape, see create_preset_grid
        **options: Algorithm options (bias, weight)

    Returns:
        Tuple of (grid, start_coord, target_coord)
    """
    rng = SeededRNG(seed)
    grid = create_preset_grid(rows, columns, preset, rng)
    grid = generate_maze(grid, algorithm, rng, **options)
    start, target = place_start_and_target(grid, rng=rng)

    logger.debug("Generated %s maze %dx%d (seed=%s): %s -> %s",
                 algorithm, rows, columns, seed, start, target)
    return grid, start, target
