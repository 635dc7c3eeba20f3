"""
Data access layer for the leaderboard database.
"""

from .api_queries import get_high_scores, save_score

__all__ = [
    'get_high_scores',
    'save_score',
]
