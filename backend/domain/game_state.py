"""
GameSession entity - the whole state of one game at a point in time.
"""

import random
from dataclasses import dataclass, replace
from typing import Any, Dict, Optional

from .constants import (
    GRID_SIZE,
    INITIAL_TICK_MS,
    START_DIRECTION,
    START_POSITION,
)
from .food import place_food
from .grid import Position
from .snake import Snake


class Phase:
    """Coarse lifecycle of a game session."""

    NOT_STARTED = "not_started"
    RUNNING = "running"
    PAUSED = "paused"
    OVER = "over"

    ALL = (NOT_STARTED, RUNNING, PAUSED, OVER)


@dataclass(frozen=True)
class GameSession:
    """
    A snapshot of one single-player game.

    Attributes:
        snake: the snake, head first
        food: the single food cell, never on the snake
        direction: the direction committed on the last tick
        pending_direction: buffered intent, committed on the next tick
        score: points so far (multiples of SCORE_PER_FOOD)
        tick_interval_ms: current simulation period
        phase: one of Phase.ALL
        player_name: who is playing (empty until started)
        grid_size: board edge length
    """

    snake: Snake
    food: Position
    direction: str = START_DIRECTION
    pending_direction: str = START_DIRECTION
    score: int = 0
    tick_interval_ms: int = INITIAL_TICK_MS
    phase: str = Phase.NOT_STARTED
    player_name: str = ""
    grid_size: int = GRID_SIZE

    def evolve(self, **changes: Any) -> "GameSession":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    @property
    def is_active(self) -> bool:
        return self.phase in (Phase.RUNNING, Phase.PAUSED)

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        S = snake body
        H = snake head
        Row 0 is printed first (top of the screen).
        """
        board = [['.' for _ in range(self.grid_size)] for _ in range(self.grid_size)]

        fx, fy = self.food
        board[fy][fx] = 'F'

        for idx, (x, y) in enumerate(self.snake):
            if 0 <= x < self.grid_size and 0 <= y < self.grid_size:
                board[y][x] = 'H' if idx == 0 else 'S'

        return "\n".join(' '.join(row) for row in board)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly view used by renderers and logs."""
        return {
            'player_name': self.player_name,
            'phase': self.phase,
            'score': self.score,
            'direction': self.direction,
            'pending_direction': self.pending_direction,
            'tick_interval_ms': self.tick_interval_ms,
            'grid_size': self.grid_size,
            'snake': [list(pos) for pos in self.snake],
            'food': list(self.food),
        }

    def __repr__(self):
        return (
            f"<GameSession phase={self.phase}, score={self.score}, "
            f"length={len(self.snake)}, head={tuple(self.snake.head)}, food={tuple(self.food)}>"
        )


def new_session(
    player_name: str = "",
    grid_size: int = GRID_SIZE,
    rng: Optional[random.Random] = None
) -> GameSession:
    """
    Create a fresh NotStarted session: one-cell snake at the start
    position heading right, score 0, initial speed and new food.
    """
    snake = Snake.from_cells([START_POSITION])
    food = place_food(set(snake), grid_size=grid_size, rng=rng)
    return GameSession(
        snake=snake,
        food=food,
        player_name=player_name,
        grid_size=grid_size,
    )
