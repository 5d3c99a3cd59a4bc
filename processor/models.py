"""
Data models for the tally / ranking / change detection pipeline.
"""
from dataclasses import dataclass, field
from typing import Optional

from constants import MedalClass


@dataclass(order=True)
class MedalCount:
    """
    Gold/silver/bronze counts for one entrant.
    
    Ordered as the (gold, silver, bronze) triple. Only incremented while
    a tally is being built; every tally starts from zero.
    """
    gold: int = 0
    silver: int = 0
    bronze: int = 0
    
    def increment(self, medal_class: MedalClass) -> None:
        if medal_class is MedalClass.GOLD:
            self.gold += 1
        elif medal_class is MedalClass.SILVER:
            self.silver += 1
        elif medal_class is MedalClass.BRONZE:
            self.bronze += 1
        else:
            raise ValueError(f"Unknown medal class: {medal_class!r}")
    
    @property
    def total(self) -> int:
        return self.gold + self.silver + self.bronze
    
    def as_tuple(self) -> tuple[int, int, int]:
        return (self.gold, self.silver, self.bronze)


@dataclass(frozen=True)
class LeaderboardEntry:
    """One ranked entrant."""
    entrant: str
    counts: MedalCount


@dataclass(frozen=True)
class LeaderboardSnapshot:
    """
    Top-N entrant names at one point in time.
    
    Equality is on `entrants` only (same names, same order, same length).
    `standings` keeps the matching entries for presentation.
    """
    entrants: tuple[str, ...]
    standings: tuple[LeaderboardEntry, ...] = field(default=(), compare=False, repr=False)
    
    @classmethod
    def from_entries(cls, entries) -> "LeaderboardSnapshot":
        entries = tuple(entries)
        return cls(
            entrants=tuple(e.entrant for e in entries),
            standings=entries,
        )
    
    def __len__(self) -> int:
        return len(self.entrants)
    
    def __iter__(self):
        return iter(self.entrants)


@dataclass
class ChangeResult:
    """Outcome of comparing two snapshots."""
    changed: bool
    snapshot: Optional[LeaderboardSnapshot] = None  # Set only when changed


@dataclass
class CycleResult:
    """
    Outcome of one poll cycle.
    
    `baseline` is the snapshot the next cycle must compare against: the
    fresh snapshot when the cycle completed, the old one when it failed.
    """
    success: bool
    changed: bool
    baseline: Optional[LeaderboardSnapshot]
    awards_count: int = 0
    error: Optional[str] = None
