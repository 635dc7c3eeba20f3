"""
API query functions for the leaderboard.

These functions provide the database layer for the Flask API endpoints.
They delegate to the repository classes for actual database operations.
"""

from typing import List, Dict, Any

from domain.constants import HIGH_SCORE_LIMIT

from .repositories import ScoreRepository

# Repository instance
_score_repo = ScoreRepository()


def get_high_scores(limit: int = HIGH_SCORE_LIMIT) -> List[Dict[str, Any]]:
    """
    Retrieve the top leaderboard entries, highest score first.

    Args:
        limit: Maximum number of entries to return

    Returns:
        List of {'name', 'score'} dictionaries
    """
    return _score_repo.get_top_scores(limit=limit)


def save_score(name: str, score: int) -> None:
    """
    Persist one leaderboard entry.

    Args:
        name: Player name
        score: Final score
    """
    _score_repo.insert_score(name, score)
