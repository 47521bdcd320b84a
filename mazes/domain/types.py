"""Core type definitions for grid mazes."""

from typing import Dict, Literal, Tuple

# Coordinate type for grid cells: (row, column)
Coord = Tuple[int, int]

# Cardinal directions on the lattice
Direction = Literal["north", "south", "east", "west"]

# Binary tree diagonal bias identifiers
Bias = Literal["northeast", "northwest", "southeast", "southwest"]

# Relations a breadth-first search can traverse
RelationId = Literal["linked", "neighbors"]

# Order matters: neighbor lists are built in this order
DIRECTION_DELTAS: Dict[Direction, Coord] = {
    "north": (-1, 0),
    "south": (1, 0),
    "west": (0, -1),
    "east": (0, 1),
}

OPPOSITE: Dict[Direction, Direction] = {
    "north": "south",
    "south": "north",
    "east": "west",
    "west": "east",
}

BIAS_DIRECTIONS: Dict[Bias, Tuple[Direction, Direction]] = {
    "northeast": ("north", "east"),
    "northwest": ("north", "west"),
    "southeast": ("south", "east"),
    "southwest": ("south", "west"),
}


def offset(cell: Coord, direction: Direction) -> Coord:
    """Get the coordinate one step away from cell in the given direction."""
    d_row, d_col = DIRECTION_DELTAS[direction]
    return (cell[0] + d_row, cell[1] + d_col)


def direction_between(from_cell: Coord, to_cell: Coord) -> Direction:
    """
    Get the direction of a single lattice step.
    Raises ValueError if the cells are not lattice-adjacent.
    """
    delta = (to_cell[0] - from_cell[0], to_cell[1] - from_cell[1])
    for direction, direction_delta in DIRECTION_DELTAS.items():
        if direction_delta == delta:
            return direction
    raise ValueError(f"Cells {from_cell} and {to_cell} are not adjacent")
