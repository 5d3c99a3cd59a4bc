"""
Change Detector - decide whether the leaderboard needs reporting.
"""
from typing import Optional

from .models import ChangeResult, LeaderboardSnapshot


def detect_change(
    current: LeaderboardSnapshot,
    previous: Optional[LeaderboardSnapshot],
) -> ChangeResult:
    """
    Compare the current snapshot with the previously seen one.
    
    Only the ordered entrant names matter; a change in medal counts that
    leaves names and order alone is not a change. No previous snapshot
    (first cycle) always counts as changed.
    """
    if previous is None or current.entrants != previous.entrants:
        return ChangeResult(changed=True, snapshot=current)
    return ChangeResult(changed=False)
