"""
Simulation clock: a single re-armable periodic timer.

The clock owns at most one live ``threading.Timer``. Arming it again
(for example after a speed-up) cancels the previous timer first, and a
generation counter drops any callback from a timer that had already
fired before it could be cancelled.
"""

import logging
import threading
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class SimulationClock:
    """
    Fires ``callback`` every ``interval_ms`` milliseconds until cancelled.

    The callback runs on a timer thread; callers are expected to
    serialise their own state changes (GameController holds a lock).
    """

    def __init__(self, timer_factory: Callable[..., threading.Timer] = threading.Timer):
        self._timer_factory = timer_factory
        self._lock = threading.Lock()
        self._timer: Optional[threading.Timer] = None
        self._generation = 0
        self._callback: Optional[Callable[[], None]] = None
        self.interval_ms: Optional[int] = None

    @property
    def is_running(self) -> bool:
        with self._lock:
            return self._timer is not None

    def start(self, interval_ms: int, callback: Callable[[], None]) -> None:
        """Arm the clock, replacing any timer that is already active."""
        if interval_ms <= 0:
            raise ValueError(f"interval_ms must be positive, got {interval_ms}")
        with self._lock:
            self._cancel_locked()
            self._callback = callback
            self.interval_ms = interval_ms
            self._schedule_locked()
        logger.debug(f"Clock armed at {interval_ms}ms")

    def rearm(self, interval_ms: int) -> None:
        """Restart the active clock with a new period (no-op if stopped)."""
        with self._lock:
            if self._callback is None:
                return
            if interval_ms == self.interval_ms and self._timer is not None:
                return
            self._cancel_locked()
            self.interval_ms = interval_ms
            self._schedule_locked()
        logger.debug(f"Clock re-armed at {interval_ms}ms")

    def cancel(self) -> None:
        """Stop ticking. Pending callbacks from earlier timers are dropped."""
        with self._lock:
            self._cancel_locked()
            self._callback = None

    def _cancel_locked(self) -> None:
        self._generation += 1
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _schedule_locked(self) -> None:
        generation = self._generation
        timer = self._timer_factory(self.interval_ms / 1000.0, self._fire, args=(generation,))
        timer.daemon = True
        self._timer = timer
        timer.start()

    def _fire(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation or self._callback is None:
                return
            callback = self._callback
            # Schedule the next tick before running this one
            self._schedule_locked()

        try:
            callback()
        except Exception as e:  # noqa: BLE001 - keep the clock alive
            logger.exception(f"Tick callback failed: {e}")
