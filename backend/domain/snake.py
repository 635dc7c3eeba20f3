"""
Snake entity for the game engine.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple

from .constants import UNIT_VECTORS
from .grid import Position


@dataclass(frozen=True)
class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: tuple of Position from head at index 0 to tail at the end
    """

    positions: Tuple[Position, ...]

    @classmethod
    def from_cells(cls, cells: Iterable[Tuple[int, int]]) -> "Snake":
        positions = tuple(Position(x, y) for x, y in cells)
        if not positions:
            raise ValueError("A snake needs at least one cell")
        return cls(positions)

    @property
    def head(self) -> Position:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def tail(self) -> Position:
        return self.positions[-1]

    def next_head(self, direction: str) -> Position:
        """Cell the head would move into when travelling in ``direction``."""
        dx, dy = UNIT_VECTORS[direction]
        return Position(self.head.x + dx, self.head.y + dy)

    def moved_to(self, new_head: Position, grow: bool = False) -> "Snake":
        """
        Return the snake after its head enters ``new_head``.

        The tail is dropped unless ``grow`` is set, so the length only
        changes when food was eaten.
        """
        body = self.positions if grow else self.positions[:-1]
        return Snake((new_head,) + body)

    def __contains__(self, pos) -> bool:
        return pos in self.positions

    def __iter__(self) -> Iterator[Position]:
        return iter(self.positions)

    def __len__(self) -> int:
        return len(self.positions)
