"""
Tally Builder - group award records by entrant.
"""
from typing import Iterable

from data_transformers.models import AwardRecord
from .models import MedalCount


def build_tally(awards: Iterable[AwardRecord]) -> dict[str, MedalCount]:
    """
    Count medals per entrant.
    
    Every record counts, duplicates included. The mapping is built from
    scratch on each call; no counts carry over between calls.
    
    Args:
        awards: Full current award list for the cycle (any order)
        
    Returns:
        Mapping of entrant name to MedalCount, empty for no awards
    """
    tally: dict[str, MedalCount] = {}
    for award in awards:
        counts = tally.get(award.entrant)
        if counts is None:
            counts = tally[award.entrant] = MedalCount()
        counts.increment(award.medal_class)
    return tally
