"""numpy views of a finished grid for rendering collaborators."""

from typing import Dict

import numpy as np

from ..domain.grid import Grid
from ..domain.types import Coord

# Passage bits, one per direction
NORTH = 0b0001
EAST = 0b0010
SOUTH = 0b0100
WEST = 0b1000

DIRECTION_BITS = {
    "north": NORTH,
    "east": EAST,
    "south": SOUTH,
    "west": WEST,
}


def occupancy_array(grid: Grid) -> np.ndarray:
    """Boolean (rows, columns) array, True where a cell exists."""
    occupied = np.zeros(grid.dimensions, dtype=bool)
    for row, column in grid.cells:
        occupied[row, column] = True
    return occupied


def distance_array(grid: Grid, distances: Dict[Coord, int]) -> np.ndarray:
    """
    Lay a distance map out as a (rows, columns) integer array.
    Cells that are masked out or missing from the map hold -1.
    """
    result = np.full(grid.dimensions, -1, dtype=np.int64)
    for (row, column), distance in distances.items():
        if grid.exists((row, column)):
            result[row, column] = distance
    return result


def passage_array(grid: Grid) -> np.ndarray:
    """
    uint8 (rows, columns) array of open-passage bitmasks.
    A cell linked north and east holds NORTH | EAST; masked cells hold 0.
    """
    passages = np.zeros(grid.dimensions, dtype=np.uint8)
    for cell in grid.cells:
        bits = 0
        for direction in grid.linked_directions(cell):
            bits |= DIRECTION_BITS[direction]
        passages[cell] = bits
    return passages


def normalized_distances(grid: Grid, distances: Dict[Coord, int]) -> np.ndarray:
    """
    Distances scaled to [0.0, 1.0] for color ramps; absent cells are NaN.
    A map whose maximum distance is 0 scales to all zeros.
    """
    raw = distance_array(grid, distances).astype(np.float64)
    raw[raw < 0] = np.nan
    maximum = np.nanmax(raw) if np.any(~np.isnan(raw)) else 0.0
    if maximum > 0:
        raw /= maximum
    return raw
