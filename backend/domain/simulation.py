"""
Simulation step for the snake game.

``tick`` is a pure transition: it takes a GameSession and returns the
next one without touching the input.
"""

import logging
import random
from typing import Optional

from .constants import MIN_TICK_MS, SCORE_PER_FOOD, TICK_SPEEDUP_MS
from .food import place_food
from .game_state import GameSession, Phase
from .grid import is_in_bounds

logger = logging.getLogger(__name__)


def next_tick_interval(interval_ms: int) -> int:
    """Speed up by one step, never going below the floor."""
    if interval_ms > MIN_TICK_MS:
        return max(MIN_TICK_MS, interval_ms - TICK_SPEEDUP_MS)
    return interval_ms


def tick(session: GameSession, rng: Optional[random.Random] = None) -> GameSession:
    """
    Advance the session by one cell.

    1) Commit the pending direction
    2) Compute the new head
    3) Wall / self collision against the pre-move body (tail included)
       ends the game with the snake unchanged
    4) Otherwise move; on food, score, grow, re-place food and speed up

    Sessions that are not Running are returned unchanged.
    """
    if session.phase != Phase.RUNNING:
        return session

    direction = session.pending_direction
    snake = session.snake
    new_head = snake.next_head(direction)

    if not is_in_bounds(new_head, session.grid_size):
        logger.debug(f"Wall collision at {tuple(new_head)}")
        return session.evolve(direction=direction, phase=Phase.OVER)

    if new_head in snake:
        logger.debug(f"Self collision at {tuple(new_head)}")
        return session.evolve(direction=direction, phase=Phase.OVER)

    if new_head == session.food:
        grown = snake.moved_to(new_head, grow=True)
        return session.evolve(
            snake=grown,
            direction=direction,
            score=session.score + SCORE_PER_FOOD,
            food=place_food(set(grown), grid_size=session.grid_size, rng=rng),
            tick_interval_ms=next_tick_interval(session.tick_interval_ms),
        )

    return session.evolve(snake=snake.moved_to(new_head), direction=direction)
