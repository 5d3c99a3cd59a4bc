"""
Ranker - order entrants into a leaderboard.

Precedence:
1. Gold count, descending
2. Silver count, descending
3. Bronze count, descending
4. Entrant name, ascending (ties on all three counts)

The result depends only on the tally's contents, never on the order
the feed listed awards in.
"""
from typing import Mapping, Sequence

from .models import LeaderboardEntry, LeaderboardSnapshot, MedalCount


def ranking_key(entry: LeaderboardEntry) -> tuple:
    """Sort key implementing the precedence above."""
    counts = entry.counts
    return (-counts.gold, -counts.silver, -counts.bronze, entry.entrant)


def rank(tally: Mapping[str, MedalCount]) -> list[LeaderboardEntry]:
    """
    Rank every entrant in the tally. Does not truncate.
    
    Args:
        tally: Entrant → MedalCount mapping from build_tally()
        
    Returns:
        Full leaderboard, best first
    """
    entries = [LeaderboardEntry(entrant=name, counts=counts) for name, counts in tally.items()]
    return sorted(entries, key=ranking_key)


def top_n(entries: Sequence[LeaderboardEntry], n: int) -> LeaderboardSnapshot:
    """
    Take the first n ranked entries as a snapshot.
    
    Raises:
        ValueError: If n is not positive
    """
    if n <= 0:
        raise ValueError(f"n must be positive, got {n}")
    return LeaderboardSnapshot.from_entries(entries[:n])
