"""
Game constants for the snake leaderboard game.
"""

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

OPPOSITE = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}

# Screen coordinates: y grows downward
UNIT_VECTORS = {
    UP: (0, -1),
    DOWN: (0, 1),
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}

# Board settings
GRID_SIZE = 20
CELL_SIZE = 20  # pixels, presentation only
START_POSITION = (10, 10)
START_DIRECTION = RIGHT

# Scoring and speed
SCORE_PER_FOOD = 10
INITIAL_TICK_MS = 150
MIN_TICK_MS = 50
TICK_SPEEDUP_MS = 5

# Leaderboard
HIGH_SCORE_LIMIT = 5
