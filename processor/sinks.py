"""
Emission sinks - where changed leaderboards are reported.
"""
from abc import ABC, abstractmethod

from loguru import logger

from .models import LeaderboardSnapshot


class BaseSink(ABC):
    """Receives a snapshot each time the leaderboard changes."""
    
    @abstractmethod
    def report(self, snapshot: LeaderboardSnapshot) -> None:
        pass


class LogSink(BaseSink):
    """Logs the leaderboard, one line per entrant with its medal counts."""
    
    def __init__(self, level: str = "INFO"):
        self.level = level
    
    def report(self, snapshot: LeaderboardSnapshot) -> None:
        logger.log(self.level, f"Leaderboard changed - top {len(snapshot)}:")
        if snapshot.standings:
            for position, entry in enumerate(snapshot.standings, 1):
                c = entry.counts
                logger.log(
                    self.level,
                    f"  {position}. {entry.entrant} (gold={c.gold}, silver={c.silver}, bronze={c.bronze})"
                )
        else:
            for position, entrant in enumerate(snapshot.entrants, 1):
                logger.log(self.level, f"  {position}. {entrant}")


class CollectingSink(BaseSink):
    """Keeps every reported snapshot in order."""
    
    def __init__(self):
        self.reports: list[LeaderboardSnapshot] = []
    
    def report(self, snapshot: LeaderboardSnapshot) -> None:
        self.reports.append(snapshot)
