"""Immutable grid value: the cell universe plus the carved link relation."""

import numbers
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, List, Mapping, Optional, Tuple

from .errors import InvalidCell, InvalidDimensions
from .types import DIRECTION_DELTAS, Coord, Direction, direction_between, offset


def _check_coordinates(cell: Coord):
    if len(cell) != 2:
        raise InvalidCell(f"Cells are (row, column) pairs, got {cell!r}")
    for value in cell:
        if not isinstance(value, numbers.Integral) or isinstance(value, bool):
            raise InvalidCell(f"Cell coordinates must be integers, got {cell!r}")


def _freeze_links(links: Mapping[Coord, Iterable[Coord]]) -> Mapping[Coord, FrozenSet[Coord]]:
    return MappingProxyType({cell: frozenset(others) for cell, others in links.items()})


@dataclass(frozen=True)
class Grid:
    """
    A rectangular lattice of cells, optionally masked, with a symmetric link relation.

    Grids are values: link() and link_all() return a new Grid and never touch
    the receiver, so algorithms can keep earlier snapshots around freely.
    """
    rows: int
    columns: int
    cells: FrozenSet[Coord]
    links: Mapping[Coord, FrozenSet[Coord]] = field(default_factory=dict)

    def __post_init__(self):
        if self.rows <= 0 or self.columns <= 0:
            raise InvalidDimensions(f"Grid dimensions must be positive, got {self.rows}x{self.columns}")

        object.__setattr__(self, "cells", frozenset(self.cells))
        object.__setattr__(self, "links", _freeze_links(self.links))

        for cell in self.cells:
            _check_coordinates(cell)
            if not self.exists(cell):
                raise InvalidCell(f"Cell {cell} is outside {self.rows}x{self.columns}")

        for cell, others in self.links.items():
            for other in others:
                if cell not in self.cells or other not in self.cells:
                    raise InvalidCell(f"Link {cell} -> {other} references a cell not in the grid")
                if cell not in self.links.get(other, frozenset()):
                    raise InvalidCell(f"Link {cell} -> {other} has no matching {other} -> {cell}")

    def __hash__(self):
        return hash((self.rows, self.columns, self.cells, frozenset(self.link_pairs())))

    def _with_links(self, links: Dict[Coord, FrozenSet[Coord]]) -> "Grid":
        """Build a sibling grid from links already checked by link_all()."""
        grid = object.__new__(Grid)
        object.__setattr__(grid, "rows", self.rows)
        object.__setattr__(grid, "columns", self.columns)
        object.__setattr__(grid, "cells", self.cells)
        object.__setattr__(grid, "links", MappingProxyType(links))
        return grid

    @classmethod
    def create(cls, rows: int, columns: int) -> "Grid":
        """Create a full rectangular grid with no links."""
        if rows <= 0 or columns <= 0:
            raise InvalidDimensions(f"Grid dimensions must be positive, got {rows}x{columns}")

        cells = frozenset((row, column) for row in range(rows) for column in range(columns))
        return cls(rows=rows, columns=columns, cells=cells)

    @classmethod
    def create_from_cells(cls, cells: Iterable[Coord]) -> "Grid":
        """
        Create a masked grid from an explicit set of coordinates.
        Dimensions are inferred as max row + 1 by max column + 1.
        """
        cell_set = frozenset(tuple(cell) for cell in cells)
        if not cell_set:
            raise InvalidDimensions("Cannot create a grid from an empty cell set")

        for cell in cell_set:
            _check_coordinates(cell)
        cell_set = frozenset((int(row), int(column)) for row, column in cell_set)

        for row, column in cell_set:
            if row < 0 or column < 0:
                raise InvalidCell(f"Cell coordinates must be non-negative, got {(row, column)}")

        rows = max(row for row, _ in cell_set) + 1
        columns = max(column for _, column in cell_set) + 1
        return cls(rows=rows, columns=columns, cells=cell_set)

    @property
    def dimensions(self) -> Tuple[int, int]:
        """(rows, columns) bounding the cell universe."""
        return (self.rows, self.columns)

    @property
    def size(self) -> int:
        """Number of cells that exist in the grid."""
        return len(self.cells)

    @property
    def link_count(self) -> int:
        """Number of undirected link pairs."""
        return sum(len(others) for others in self.links.values()) // 2

    def exists(self, cell: Coord) -> bool:
        """Check if a cell is within bounds and not masked out."""
        row, column = cell
        return 0 <= row < self.rows and 0 <= column < self.columns and cell in self.cells

    def neighbor(self, cell: Coord, direction: Direction) -> Optional[Coord]:
        """Get the adjacent cell in a direction, or None if it does not exist."""
        candidate = offset(cell, direction)
        return candidate if self.exists(candidate) else None

    def neighbors(self, cell: Coord) -> List[Coord]:
        """
        Get the lattice-adjacent cells that exist in the grid.
        Ordered north, south, west, east; carving is ignored.
        """
        result = []
        for direction in DIRECTION_DELTAS:
            candidate = offset(cell, direction)
            if self.exists(candidate):
                result.append(candidate)
        return result

    def linked(self, cell: Coord) -> FrozenSet[Coord]:
        """Get the cells linked to cell (empty if none)."""
        return self.links.get(cell, frozenset())

    def is_linked(self, a: Coord, b: Coord) -> bool:
        """Check if a passage connects a and b."""
        return b in self.linked(a)

    def link(self, a: Coord, b: Coord) -> "Grid":
        """Return a new grid with a bidirectional link between a and b."""
        return self.link_all([(a, b)])

    def link_all(self, pairs: Iterable[Tuple[Coord, Coord]]) -> "Grid":
        """
        Return a new grid with every pair linked in both directions.
        Pairs that are already linked are ignored; if nothing changes the
        receiver itself is returned.
        """
        links: Optional[Dict[Coord, FrozenSet[Coord]]] = None

        for a, b in pairs:
            for cell in (a, b):
                if not self.exists(cell):
                    raise InvalidCell(f"Cannot link {a} and {b}: {cell} is not in the grid")

            current = links if links is not None else self.links
            if b in current.get(a, frozenset()):
                continue

            if links is None:
                links = dict(self.links)
            links[a] = links.get(a, frozenset()) | {b}
            links[b] = links.get(b, frozenset()) | {a}

        if links is None:
            return self
        return self._with_links(links)

    def link_pairs(self) -> List[Tuple[Coord, Coord]]:
        """Get every undirected link as a sorted (smaller, larger) pair."""
        pairs = set()
        for cell, others in self.links.items():
            for other in others:
                pairs.add((min(cell, other), max(cell, other)))
        return sorted(pairs)

    def linked_directions(self, cell: Coord) -> List[Direction]:
        """Get the directions of open passages out of cell."""
        return [
            direction for direction in DIRECTION_DELTAS
            if offset(cell, direction) in self.linked(cell)
        ]

    def direction_of(self, a: Coord, b: Coord) -> Direction:
        """Get the direction of the step from a to an adjacent b."""
        return direction_between(a, b)

    def deadends(self) -> List[Coord]:
        """Get the cells with exactly one link, in row-major order."""
        return sorted(cell for cell in self.cells if len(self.linked(cell)) == 1)
