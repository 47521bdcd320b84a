"""Grid Mazes - perfect maze generation and path queries on rectangular lattices.

This package models a (possibly masked) grid of cells as a graph, carves
spanning-tree mazes into it with one of six randomized algorithms, and
answers breadth-first reachability and shortest-path queries.
"""

from .algorithms import (
    ALGORITHMS,
    AldousBroder,
    BinaryTree,
    HuntAndKill,
    RecursiveBacktracker,
    Sidewinder,
    Wilsons,
    generate_maze,
    get_algorithm,
)
from .domain.errors import InvalidCell, InvalidDimensions, InvalidOption, MazeError
from .domain.grid import Grid
from .domain.islands import islands
from .domain.paths import bfs, longest_path, shortest_path
from .utils.rng import SeededRNG

__version__ = "1.0.0"
__author__ = "Grid Mazes"

__all__ = [
    "ALGORITHMS",
    "AldousBroder",
    "BinaryTree",
    "Grid",
    "HuntAndKill",
    "InvalidCell",
    "InvalidDimensions",
    "InvalidOption",
    "MazeError",
    "RecursiveBacktracker",
    "SeededRNG",
    "Sidewinder",
    "Wilsons",
    "bfs",
    "generate_maze",
    "get_algorithm",
    "islands",
    "longest_path",
    "shortest_path",
]
