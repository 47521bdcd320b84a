"""Breadth-first search and path reconstruction over a grid."""

from collections import deque
from typing import Callable, Dict, Iterable, List, Optional, Union

from .errors import InvalidCell, InvalidOption
from .grid import Grid
from .types import Coord, Direction, RelationId, direction_between

Relation = Callable[[Grid, Coord], Iterable[Coord]]


def linked_relation(grid: Grid, cell: Coord) -> List[Coord]:
    """Cells reachable through a carved passage, in a fixed order."""
    return sorted(grid.linked(cell))


def neighbor_relation(grid: Grid, cell: Coord) -> List[Coord]:
    """Cells that are physically adjacent, ignoring carving."""
    return grid.neighbors(cell)


RELATIONS: Dict[RelationId, Relation] = {
    "linked": linked_relation,
    "neighbors": neighbor_relation,
}


def get_relation(relation: Union[RelationId, Relation]) -> Relation:
    """Get a relation function by id; callables are passed through."""
    if callable(relation):
        return relation
    if relation not in RELATIONS:
        raise InvalidOption(f"Unknown relation: {relation!r}")
    return RELATIONS[relation]


def bfs(grid: Grid, source: Coord, goal: Optional[Coord] = None,
        relation: Union[RelationId, Relation] = "linked") -> Dict[Coord, int]:
    """
    Breadth-first search from source.

    Returns a mapping of cell -> distance from source. Unreachable cells
    are absent. When goal is given the search stops as soon as goal is
    taken off the frontier; every distance recorded up to then is final.
    """
    if not grid.exists(source):
        raise InvalidCell(f"Source cell {source} is not in the grid")

    expand = get_relation(relation)
    distances = {source: 0}
    frontier = deque([source])

    while frontier:
        current = frontier.popleft()
        if current == goal:
            break

        next_distance = distances[current] + 1
        for cell in expand(grid, current):
            if cell not in distances:
                distances[cell] = next_distance
                frontier.append(cell)

    return distances


def shortest_path(grid: Grid, start: Coord, goal: Coord) -> Optional[List[Coord]]:
    """
    Shortest path from start to goal along carved passages.
    Returns None if goal cannot be reached.
    """
    if not grid.exists(goal):
        raise InvalidCell(f"Goal cell {goal} is not in the grid")

    distances = bfs(grid, start, goal)
    if goal not in distances:
        return None

    path = [goal]
    current = goal
    while current != start:
        # Cells missing from the map were never reached, so never closer
        candidates = [cell for cell in linked_relation(grid, current) if cell in distances]
        current = min(candidates, key=lambda cell: (distances[cell], cell))
        path.append(current)

    path.reverse()
    return path


def path_directions(path: List[Coord]) -> List[Direction]:
    """
    Get the direction of each step along a path.
    Returns an empty list for paths shorter than two cells.
    """
    if len(path) < 2:
        return []

    return [direction_between(path[i - 1], path[i]) for i in range(1, len(path))]


def farthest_cell(grid: Grid, source: Coord) -> Coord:
    """Get the cell with the greatest link distance from source (ties: smallest cell)."""
    distances = bfs(grid, source)
    return max(distances, key=lambda cell: (distances[cell], tuple(-c for c in cell)))


def longest_path(grid: Grid, source: Optional[Coord] = None) -> List[Coord]:
    """
    Longest shortest path in the linked component containing source.

    Uses two passes of breadth-first search: the farthest cell from any
    cell of a tree is one end of its longest path. Source defaults to the
    smallest cell in the grid.
    """
    if source is None:
        source = min(grid.cells)

    start = farthest_cell(grid, source)
    goal = farthest_cell(grid, start)
    return shortest_path(grid, start, goal)
