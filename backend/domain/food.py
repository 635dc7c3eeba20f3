"""
Food placement.
"""

import random
from typing import AbstractSet, Optional

from .constants import GRID_SIZE
from .grid import Position, all_cells


def place_food(
    occupied: AbstractSet[Position],
    grid_size: int = GRID_SIZE,
    rng: Optional[random.Random] = None
) -> Position:
    """
    Pick a uniformly random free cell.

    Samples from the complement of ``occupied`` instead of retrying random
    cells, so the call always terminates even on a nearly full board.

    Args:
        occupied: Cells that must not receive the food (the snake body)
        grid_size: Board edge length
        rng: Random source; defaults to the module-level generator

    Returns:
        The new food position

    Raises:
        ValueError: If every cell is occupied
    """
    free_cells = [cell for cell in all_cells(grid_size) if cell not in occupied]
    if not free_cells:
        raise ValueError("No free cell left for food")
    chooser = rng if rng is not None else random
    return chooser.choice(free_cells)
