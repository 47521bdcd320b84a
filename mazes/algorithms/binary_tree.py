"""Binary tree: one biased coin flip per cell."""

from dataclasses import dataclass
from typing import FrozenSet, List, Optional, Tuple

from ..domain.errors import InvalidOption
from ..domain.grid import Grid
from ..domain.types import BIAS_DIRECTIONS, Bias, Coord
from ..utils.rng import SeededRNG
from .base import MazeAlgorithm


@dataclass(frozen=True)
class BinaryTreeOptions:
    """Configuration for the binary tree algorithm."""
    bias: Bias = "northeast"

    def __post_init__(self):
        if self.bias not in BIAS_DIRECTIONS:
            raise InvalidOption(
                f"Invalid bias {self.bias!r}, expected one of {', '.join(BIAS_DIRECTIONS)}"
            )


class BinaryTree(MazeAlgorithm):
    """
    Link every cell to one of the two neighbors named by the bias.

    The two sides of the grid matching the bias (e.g. north and east for
    "northeast") end up as unbroken hallways, and passages flow diagonally
    towards the corner where they meet.

    Each cell is joined only towards the bias, so on a mask where some
    cell other than the corner has neither biased neighbor, e.g. the
    L-shape {(0, 0), (1, 0), (1, 1), (1, 2)} with a northeast bias, that
    cell roots a second tree and the island is carved as a forest. Use one
    of the walk-based algorithms for irregular shapes.
    """
    name = "binary_tree"
    options_type = BinaryTreeOptions

    def __init__(self, bias: Bias = "northeast", options: Optional[BinaryTreeOptions] = None):
        self.options = options if options is not None else BinaryTreeOptions(bias=bias)

    def carve(self, grid: Grid, island: FrozenSet[Coord], rng: SeededRNG) -> Grid:
        directions = BIAS_DIRECTIONS[self.options.bias]
        passages: List[Tuple[Coord, Coord]] = []

        for cell in sorted(island):
            available = [grid.neighbor(cell, direction) for direction in directions]
            available = [neighbor for neighbor in available if neighbor is not None]
            if available:
                passages.append((cell, rng.choice(available)))

        return grid.link_all(passages)

    def __repr__(self) -> str:
        return f"BinaryTree(bias={self.options.bias!r})"
