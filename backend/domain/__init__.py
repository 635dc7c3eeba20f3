"""
Domain entities for the snake leaderboard game.

This module contains the core game entities and transitions that are
independent of infrastructure concerns (database, HTTP, timers, UI).
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES, OPPOSITE,
    GRID_SIZE, SCORE_PER_FOOD, INITIAL_TICK_MS, MIN_TICK_MS, HIGH_SCORE_LIMIT,
)
from .grid import Position, is_in_bounds
from .snake import Snake
from .game_state import GameSession, Phase, new_session
from .food import place_food
from .input_buffer import propose_direction
from .simulation import tick

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'OPPOSITE',
    'GRID_SIZE', 'SCORE_PER_FOOD', 'INITIAL_TICK_MS', 'MIN_TICK_MS', 'HIGH_SCORE_LIMIT',
    'Position',
    'is_in_bounds',
    'Snake',
    'GameSession',
    'Phase',
    'new_session',
    'place_food',
    'propose_direction',
    'tick',
]
