"""
Game session controller.

Owns the single GameSession, drives it from the simulation clock and
turns keyboard/UI commands into state transitions. When a game ends it
emits a SessionEnded event to its listeners (the leaderboard client).
"""

import logging
import random
import threading
from dataclasses import dataclass
from typing import Callable, List, Optional

from domain.constants import DOWN, GRID_SIZE, LEFT, RIGHT, UP
from domain.food import place_food
from domain.game_state import GameSession, Phase, new_session
from domain.input_buffer import propose_direction
from domain.simulation import tick
from services.simulation_clock import SimulationClock

logger = logging.getLogger(__name__)

KEY_DIRECTIONS = {
    "up": UP,
    "down": DOWN,
    "left": LEFT,
    "right": RIGHT,
}
PAUSE_KEY = "space"
RESET_KEY = "r"


@dataclass(frozen=True)
class SessionEnded:
    """Emitted once per game on the Running -> Over transition."""

    player_name: str
    final_score: int


SessionEndedListener = Callable[[SessionEnded], object]


class GameController:
    """
    Manages:
      - The current GameSession
      - The simulation clock (one active timer at most)
      - Start / pause / reset transitions
      - Session-ended listeners

    All mutations go through one re-entrant lock, so a tick never
    interleaves with input handling or a reset.
    """

    def __init__(
        self,
        clock: Optional[SimulationClock] = None,
        rng: Optional[random.Random] = None,
        grid_size: int = GRID_SIZE
    ):
        self.clock = clock or SimulationClock()
        self.rng = rng
        self.grid_size = grid_size
        self._lock = threading.RLock()
        self._listeners: List[SessionEndedListener] = []
        # Bumped on every arm/disarm; callbacks carrying an older value are dropped
        self._arm_token = 0
        self._session = new_session(grid_size=grid_size, rng=rng)

    @property
    def session(self) -> GameSession:
        """Current session snapshot (immutable, safe to render)."""
        with self._lock:
            return self._session

    def add_listener(self, listener: SessionEndedListener) -> None:
        self._listeners.append(listener)

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------

    def start(self, player_name: str) -> bool:
        """
        Start a game for ``player_name``.

        Returns:
            False (and does nothing) if the name is blank or a game is
            already under way
        """
        name = (player_name or "").strip()
        if not name:
            return False

        with self._lock:
            if self._session.phase != Phase.NOT_STARTED:
                return False
            session = self._session
            self._session = session.evolve(
                player_name=name,
                phase=Phase.RUNNING,
                food=place_food(set(session.snake), grid_size=self.grid_size, rng=self.rng),
            )
            self._arm_clock()

        logger.info(f"Game started for {name!r}")
        return True

    def set_pending_direction(self, direction: str) -> bool:
        """Buffer a direction for the next tick; reversals are ignored."""
        with self._lock:
            if not self._session.is_active:
                return False
            accepted = propose_direction(direction, self._session.direction)
            if accepted is None:
                return False
            self._session = self._session.evolve(pending_direction=accepted)
            return True

    def toggle_pause(self) -> bool:
        """Flip Running <-> Paused. Returns False outside an active game."""
        with self._lock:
            phase = self._session.phase
            if phase == Phase.RUNNING:
                self._disarm_clock()
                self._session = self._session.evolve(phase=Phase.PAUSED)
            elif phase == Phase.PAUSED:
                self._session = self._session.evolve(phase=Phase.RUNNING)
                self._arm_clock()
            else:
                return False
            logger.info(f"Game {self._session.phase}")
            return True

    def on_tick(self, token: Optional[int] = None) -> None:
        """
        Advance the game one step; called by the clock.

        ``token`` identifies the arm that scheduled the call. A callback
        from a timer armed before the last pause, reset or game over is
        ignored.
        """
        with self._lock:
            if token is not None and token != self._arm_token:
                return
            before = self._session
            if before.phase != Phase.RUNNING:
                return
            after = tick(before, rng=self.rng)
            self._session = after

            if after.phase == Phase.OVER:
                self._disarm_clock()
                event = SessionEnded(player_name=after.player_name, final_score=after.score)
            else:
                event = None
                if after.tick_interval_ms != before.tick_interval_ms:
                    self.clock.rearm(after.tick_interval_ms)

        if event is not None:
            logger.info(f"Game over for {event.player_name!r} with score {event.final_score}")
            self._emit(event)

    def reset(self) -> None:
        """Cancel the clock and go back to a fresh NotStarted session."""
        with self._lock:
            self._disarm_clock()
            self._session = new_session(grid_size=self.grid_size, rng=self.rng)
        logger.info("Game reset")

    def shutdown(self) -> None:
        """Stop ticking for good (window closed)."""
        with self._lock:
            self._disarm_clock()

    def handle_key(self, key_name: str) -> bool:
        """
        Map a key name (as reported by pygame.key.name) to a command.

        Arrow keys only act while a game is active; space toggles pause;
        ``r`` resets once the game is over.
        """
        key = (key_name or "").lower()
        if key in KEY_DIRECTIONS:
            return self.set_pending_direction(KEY_DIRECTIONS[key])
        if key == PAUSE_KEY:
            return self.toggle_pause()
        if key == RESET_KEY and self.session.phase == Phase.OVER:
            self.reset()
            return True
        return False

    def _arm_clock(self) -> None:
        self._arm_token += 1
        token = self._arm_token
        self.clock.start(self._session.tick_interval_ms, lambda: self.on_tick(token))

    def _disarm_clock(self) -> None:
        self._arm_token += 1
        self.clock.cancel()

    def _emit(self, event: SessionEnded) -> None:
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception as e:  # noqa: BLE001 - isolate listeners
                logger.error(f"Session-ended listener failed: {e}")
