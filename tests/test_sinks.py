import pytest
from loguru import logger

from processor import CollectingSink, LeaderboardSnapshot, LogSink, Poller, build_tally, rank, top_n
from tests.helpers import ScriptedSource, records, run_cycles


@pytest.fixture
def log_lines():
    lines = []
    handler_id = logger.add(lambda message: lines.append(message.rstrip("\n")), format="{message}")
    yield lines
    logger.remove(handler_id)


def test_log_sink_lists_rank_and_counts(log_lines):
    tally = build_tally(records(
        ("GOLD", "A"), ("GOLD", "A"), ("SILVER", "A"), ("BRONZE", "A"),
        ("GOLD", "B"), ("GOLD", "B"), ("SILVER", "B"), ("SILVER", "B"),
        ("BRONZE", "C"),
    ))
    
    LogSink().report(top_n(rank(tally), 3))
    
    assert log_lines == [
        "Leaderboard changed - top 3:",
        "  1. B (gold=2, silver=2, bronze=0)",
        "  2. A (gold=2, silver=1, bronze=1)",
        "  3. C (gold=0, silver=0, bronze=1)",
    ]


def test_log_sink_lists_names_without_standings(log_lines):
    LogSink().report(LeaderboardSnapshot(("A", "B")))
    
    assert log_lines == [
        "Leaderboard changed - top 2:",
        "  1. A",
        "  2. B",
    ]


def test_log_sink_respects_level(log_lines):
    quiet = []
    handler_id = logger.add(quiet.append, level="WARNING", format="{message}")
    try:
        LogSink(level="DEBUG").report(LeaderboardSnapshot(("A",)))
    finally:
        logger.remove(handler_id)
    
    assert quiet == []
    assert log_lines[-1] == "  1. A"


def test_collecting_sink_keeps_reports_in_order():
    sink = CollectingSink()
    run_cycles(Poller(ScriptedSource([
        records(("GOLD", "A")),
        records(("GOLD", "A"), ("GOLD", "B"), ("GOLD", "B")),
    ]), sink, top_n=2), 2)
    
    assert [s.entrants for s in sink.reports] == [("A",), ("B", "A")]
