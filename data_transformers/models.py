"""
Unified Data Models for Award Extraction

These dataclasses define what every award source hands to the
pipeline after transformation, whatever the wire format was.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List

from constants import MedalClass


@dataclass(frozen=True)
class AwardRecord:
    """
    A single medal awarded to an entrant.
    
    Produced fresh on every poll and consumed once by the tally
    builder; never retained across cycles.
    """
    medal_class: MedalClass
    entrant: str                     # Display name, used as the grouping key
    
    def __post_init__(self):
        """Convert string medal_class to enum if needed."""
        if isinstance(self.medal_class, str) and not isinstance(self.medal_class, MedalClass):
            object.__setattr__(self, "medal_class", MedalClass(self.medal_class))


@dataclass
class AwardFeed:
    """
    Output of a transformer: every award currently listed by the source.
    
    Flow:
        Crawler.fetch() → raw_data → Transformer.transform() → AwardFeed
    """
    source: str
    crawled_at: datetime
    awards: List[AwardRecord] = field(default_factory=list)
    
    # Example: {"events_count": 48, "awards_count": 144}
    stats: Dict[str, Any] = field(default_factory=dict)
    
    @property
    def awards_count(self) -> int:
        return len(self.awards)
    
    def summary(self) -> str:
        """Return a brief summary of the output."""
        return (
            f"AwardFeed(source={self.source}, "
            f"events={self.stats.get('events_count', 0)}, "
            f"awards={self.awards_count})"
        )
