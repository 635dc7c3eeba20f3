"""
Leaderboard client for the high-score HTTP API.

Submission is best-effort: failures are logged and reported as False,
never raised into the game loop. ``submit_score_async`` runs the POST on
a worker thread so game-over handling never waits on the network.
"""

import os
import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Dict, List, Optional

import requests

from domain.constants import HIGH_SCORE_LIMIT


logger = logging.getLogger(__name__)

DEFAULT_API_URL = "http://localhost:5000"
DEFAULT_TIMEOUT = 10


class LeaderboardClient:
    """
    Talks to ``GET /api/getHighScores`` and ``POST /api/saveScore``.

    Attributes:
        base_url: API root, defaults to LEADERBOARD_API_URL or localhost
        high_scores: last list fetched successfully (stale on failure)
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: int = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
        max_workers: int = 2
    ):
        self.base_url = (base_url or os.getenv("LEADERBOARD_API_URL") or DEFAULT_API_URL).rstrip("/")
        self.timeout = timeout
        self.http = session or requests.Session()
        self.high_scores: List[Dict[str, Any]] = []
        self._lock = threading.Lock()
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="leaderboard")

    def fetch_high_scores(self) -> List[Dict[str, Any]]:
        """
        Fetch the top entries and cache them.

        Returns:
            The fresh list, or the previously cached list if the request failed
        """
        url = f"{self.base_url}/api/getHighScores"
        try:
            response = self.http.get(url, timeout=self.timeout)
            response.raise_for_status()
            rows = response.json()
        except (requests.exceptions.RequestException, ValueError) as e:
            logger.error(f"Failed to fetch high scores from {url}: {e}")
            return self.get_cached_scores()

        if not isinstance(rows, list):
            logger.error(f"Unexpected high score payload from {url}: {rows!r}")
            return self.get_cached_scores()

        scores = [
            {'name': row.get('name'), 'score': row.get('score')}
            for row in rows[:HIGH_SCORE_LIMIT]
            if isinstance(row, dict)
        ]
        with self._lock:
            self.high_scores = scores
        return list(scores)

    def fetch_high_scores_async(self) -> Future:
        """Fetch on the worker pool; the cache fills in when it completes."""
        return self._executor.submit(self.fetch_high_scores)

    def get_cached_scores(self) -> List[Dict[str, Any]]:
        with self._lock:
            return list(self.high_scores)

    def submit_score(self, name: str, score: int) -> bool:
        """
        POST one score, then refresh the cached leaderboard.

        Args:
            name: Player name
            score: Final score

        Returns:
            True if the server accepted the score, False otherwise
        """
        url = f"{self.base_url}/api/saveScore"
        try:
            response = self.http.post(
                url,
                json={'name': name, 'score': score},
                timeout=self.timeout,
                headers={'Content-Type': 'application/json'}
            )
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            logger.error(f"Failed to save score for {name!r} ({score}): {e}")
            return False

        logger.info(f"Saved score {score} for {name!r}")
        self.fetch_high_scores()
        return True

    def submit_score_async(self, name: str, score: int) -> Future:
        """Queue a submission on the worker pool and return its future."""
        return self._executor.submit(self.submit_score, name, score)

    def handle_session_ended(self, event) -> Future:
        """Listener for GameController session-ended events."""
        return self.submit_score_async(event.player_name, event.final_score)

    def close(self) -> None:
        self._executor.shutdown(wait=False)
        self.http.close()
