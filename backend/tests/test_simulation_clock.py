"""
Tests for the re-armable simulation clock.

These use real timer threads with short intervals and wait on events,
so they stay well under a second.
"""

import sys
import os
import threading
from unittest.mock import MagicMock

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from services.simulation_clock import SimulationClock  # noqa: E402


class Counter:
    def __init__(self, target):
        self.count = 0
        self.target = target
        self.done = threading.Event()
        self._lock = threading.Lock()

    def __call__(self):
        with self._lock:
            self.count += 1
            if self.count >= self.target:
                self.done.set()


class TestSimulationClock:
    """Tests for SimulationClock."""

    def test_fires_repeatedly(self):
        clock = SimulationClock()
        counter = Counter(target=3)
        clock.start(10, counter)
        try:
            assert counter.done.wait(timeout=2.0)
        finally:
            clock.cancel()
        assert counter.count >= 3

    def test_cancel_stops_ticks(self):
        clock = SimulationClock()
        counter = Counter(target=1)
        clock.start(10, counter)
        assert counter.done.wait(timeout=2.0)
        clock.cancel()
        assert not clock.is_running
        # let a callback that was already in flight finish
        threading.Event().wait(0.05)
        seen = counter.count
        threading.Event().wait(0.1)
        assert counter.count == seen

    def test_rejects_non_positive_interval(self):
        with pytest.raises(ValueError):
            SimulationClock().start(0, lambda: None)

    def test_start_replaces_previous_timer(self):
        timers = []

        def factory(interval, function, args=()):
            timer = MagicMock()
            timer.interval = interval
            timer.function = function
            timer.args = args
            timers.append(timer)
            return timer

        clock = SimulationClock(timer_factory=factory)
        clock.start(100, lambda: None)
        clock.start(100, lambda: None)

        assert len(timers) == 2
        timers[0].cancel.assert_called_once()
        timers[1].start.assert_called_once()

    def test_rearm_changes_period(self):
        timers = []

        def factory(interval, function, args=()):
            timer = MagicMock()
            timer.interval = interval
            timers.append(timer)
            return timer

        clock = SimulationClock(timer_factory=factory)
        clock.start(150, lambda: None)
        clock.rearm(145)

        assert clock.interval_ms == 145
        assert timers[0].cancel.called
        assert timers[-1].interval == pytest.approx(0.145)

    def test_rearm_when_stopped_is_no_op(self):
        factory = MagicMock()
        clock = SimulationClock(timer_factory=factory)
        clock.rearm(100)
        factory.assert_not_called()

    def test_stale_timer_callback_dropped(self):
        captured = []

        def factory(interval, function, args=()):
            captured.append((function, args))
            return MagicMock()

        callback = MagicMock()
        clock = SimulationClock(timer_factory=factory)
        clock.start(100, callback)
        stale_fire, stale_args = captured[0]
        clock.rearm(90)

        # The first timer fires late, after being replaced
        stale_fire(*stale_args)
        callback.assert_not_called()

        fresh_fire, fresh_args = captured[-1]
        fresh_fire(*fresh_args)
        callback.assert_called_once()

    def test_callback_error_is_contained(self):
        captured = []

        def factory(interval, function, args=()):
            captured.append((function, args))
            return MagicMock()

        clock = SimulationClock(timer_factory=factory)
        clock.start(100, MagicMock(side_effect=RuntimeError("boom")))
        fire, args = captured[-1]
        fire(*args)
        assert clock.is_running
