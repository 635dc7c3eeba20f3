"""
Grid model: positions and bounds.
"""

from typing import Iterator, NamedTuple

from .constants import GRID_SIZE


class Position(NamedTuple):
    """An immutable (x, y) cell on the board."""

    x: int
    y: int


def is_in_bounds(pos: Position, grid_size: int = GRID_SIZE) -> bool:
    """Return True iff both coordinates lie in [0, grid_size)."""
    return 0 <= pos[0] < grid_size and 0 <= pos[1] < grid_size


def all_cells(grid_size: int = GRID_SIZE) -> Iterator[Position]:
    for y in range(grid_size):
        for x in range(grid_size):
            yield Position(x, y)
