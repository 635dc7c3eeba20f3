"""
Input buffer: validates directional intent between ticks.
"""

from typing import Optional

from .constants import OPPOSITE, VALID_MOVES


def propose_direction(direction: str, current_direction: str) -> Optional[str]:
    """
    Validate a proposed direction against the committed one.

    Returns the proposal unchanged, or None when it would reverse the
    snake onto itself (or is not a direction at all).
    """
    if direction not in VALID_MOVES:
        return None
    if OPPOSITE[direction] == current_direction:
        return None
    return direction
