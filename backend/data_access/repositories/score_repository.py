"""
Score repository for leaderboard database operations.
"""

import logging
from typing import Any, Dict, List

from domain.constants import HIGH_SCORE_LIMIT

from .base import BaseRepository

logger = logging.getLogger(__name__)

INSERT_SCORE_SQL = """
    INSERT INTO player_score (name, score)
    VALUES (%s, %s)
"""

# Equal scores: earliest submission first
TOP_SCORES_SQL = """
    SELECT name, score
    FROM player_score
    ORDER BY score DESC, created_at ASC, id ASC
    LIMIT %s
"""


class ScoreRepository(BaseRepository):
    """
    Repository for the append-only player_score table.
    """

    def insert_score(self, name: str, score: int) -> None:
        """
        Append one leaderboard entry.

        Args:
            name: Player name (non-empty)
            score: Final score (non-negative)
        """
        with self.cursor(write=True) as cursor:
            cursor.execute(INSERT_SCORE_SQL, (name, score))
        logger.info(f"Inserted score {score} for {name!r}")

    def get_top_scores(self, limit: int = HIGH_SCORE_LIMIT) -> List[Dict[str, Any]]:
        """
        Get the best scores, highest first.

        Returns:
            List of {'name', 'score'} dictionaries, at most ``limit`` long
        """
        with self.cursor() as cursor:
            cursor.execute(TOP_SCORES_SQL, (limit,))
            rows = cursor.fetchall()

        return [{'name': row['name'], 'score': row['score']} for row in rows]
