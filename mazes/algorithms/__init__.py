"""Maze generation algorithms and the name registry used to look them up."""

from dataclasses import fields
from typing import Dict, Optional, Type, Union

from ..domain.errors import InvalidOption
from ..domain.grid import Grid
from ..utils.rng import SeededRNG
from .aldous_broder import AldousBroder
from .base import MazeAlgorithm
from .binary_tree import BinaryTree, BinaryTreeOptions
from .hunt_and_kill import HuntAndKill
from .recursive_backtracker import RecursiveBacktracker
from .sidewinder import Sidewinder, SidewinderOptions
from .wilsons import Wilsons

ALGORITHMS: Dict[str, Type[MazeAlgorithm]] = {
    algorithm.name: algorithm
    for algorithm in (
        AldousBroder,
        Wilsons,
        RecursiveBacktracker,
        BinaryTree,
        Sidewinder,
        HuntAndKill,
    )
}


def get_algorithm(name: str, **options) -> MazeAlgorithm:
    """
    Build a configured algorithm by registry name.
    Raises InvalidOption for unknown names, unknown options or bad values.
    """
    if name not in ALGORITHMS:
        raise InvalidOption(f"Unknown algorithm {name!r}, expected one of {', '.join(ALGORITHMS)}")

    algorithm_cls = ALGORITHMS[name]
    allowed = set()
    if algorithm_cls.options_type is not None:
        allowed = {option.name for option in fields(algorithm_cls.options_type)}

    unknown = sorted(set(options) - allowed)
    if unknown:
        raise InvalidOption(f"Algorithm {name!r} does not take option(s): {', '.join(unknown)}")

    return algorithm_cls(**options)


def generate_maze(grid: Grid, algorithm: Union[str, MazeAlgorithm] = "recursive_backtracker",
                  rng: Optional[SeededRNG] = None, **options) -> Grid:
    """
    Convenience function to carve a maze into every island of a grid.

    Args:
        grid: Grid to carve (usually without links)
        algorithm: Registry name or a configured algorithm instance
        rng: Random source; a fresh unseeded one is used when omitted
        **options: Algorithm options when algorithm is given by name

    Returns:
        New grid whose links form a spanning tree of each island
    """
    if isinstance(algorithm, MazeAlgorithm):
        if options:
            raise InvalidOption("Options cannot be combined with an algorithm instance")
        return algorithm.on(grid, rng)

    return get_algorithm(algorithm, **options).on(grid, rng)


__all__ = [
    "ALGORITHMS",
    "AldousBroder",
    "BinaryTree",
    "BinaryTreeOptions",
    "HuntAndKill",
    "MazeAlgorithm",
    "RecursiveBacktracker",
    "Sidewinder",
    "SidewinderOptions",
    "Wilsons",
    "generate_maze",
    "get_algorithm",
]
