"""
Processor Module - the tally → rank → change detection pipeline.

Components:
- build_tally: Award records → per-entrant MedalCount
- rank / top_n: Full leaderboard and its top-N snapshot
- detect_change: Snapshot comparison
- Poller: The polling loop tying it together
- Sinks: Where changed snapshots go
"""

from .models import (
    MedalCount,
    LeaderboardEntry,
    LeaderboardSnapshot,
    ChangeResult,
    CycleResult,
)
from .tally import build_tally
from .ranker import rank, ranking_key, top_n
from .change_detector import detect_change
from .sinks import BaseSink, LogSink, CollectingSink
from .poller import Poller, DEFAULT_TOP_N, DEFAULT_POLL_INTERVAL


__all__ = [
    # Models
    "MedalCount",
    "LeaderboardEntry",
    "LeaderboardSnapshot",
    "ChangeResult",
    "CycleResult",
    # Pipeline steps
    "build_tally",
    "rank",
    "ranking_key",
    "top_n",
    "detect_change",
    # Sinks
    "BaseSink",
    "LogSink",
    "CollectingSink",
    # Loop
    "Poller",
    "DEFAULT_TOP_N",
    "DEFAULT_POLL_INTERVAL",
]
