"""
Poller - drives the fetch → tally → rank → compare → emit loop.

Cycle:
1. Fetch the full current award list from the source
2. Build the tally (from scratch, every cycle)
3. Rank all entrants
4. Truncate to the top N as the snapshot
5. Compare with the previous snapshot
6. Report the snapshot if it changed
7. Keep the snapshot as the next baseline, reported or not
8. Sleep poll_interval seconds, waking early on stop

Cycles run one at a time in a single task. A failed fetch abandons the
cycle and leaves the previous baseline in place.
"""
import asyncio
from typing import Optional

from loguru import logger

from config import ConfigurationError
from constants import PollerState
from crawlers.base_crawler import BaseCrawler, SourceUnavailableError
from data_transformers.base import MalformedRecordError
from .change_detector import detect_change
from .models import CycleResult, LeaderboardSnapshot
from .ranker import rank, top_n
from .sinks import BaseSink
from .tally import build_tally


DEFAULT_TOP_N = 5
DEFAULT_POLL_INTERVAL = 2.0


class Poller:
    """
    Polls an award source and reports leaderboard changes.
    
    The last seen snapshot is loop state: run_cycle() takes it in and
    hands the next one back through CycleResult.baseline.
    """
    
    def __init__(
        self,
        source: BaseCrawler,
        sink: BaseSink,
        top_n: int = DEFAULT_TOP_N,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
    ):
        """
        Args:
            source: Award source (anything with async fetch_awards())
            sink: Receives changed snapshots
            top_n: Leaderboard size to watch
            poll_interval: Seconds to sleep between cycles
            
        Raises:
            ConfigurationError: If top_n or poll_interval is not positive
        """
        if isinstance(top_n, bool) or not isinstance(top_n, int) or top_n <= 0:
            raise ConfigurationError(f"top_n must be a positive integer, got {top_n!r}")
        if isinstance(poll_interval, bool) or not isinstance(poll_interval, (int, float)) or poll_interval <= 0:
            raise ConfigurationError(f"poll_interval must be a positive number of seconds, got {poll_interval!r}")
        
        self.source = source
        self.sink = sink
        self.top_n = top_n
        self.poll_interval = float(poll_interval)
        self.state = PollerState.IDLE
    
    async def run_cycle(self, previous: Optional[LeaderboardSnapshot]) -> CycleResult:
        """
        Run one fetch → report cycle.
        
        Never raises for source problems; they come back as a failed
        CycleResult whose baseline is the unchanged previous snapshot.
        """
        self.state = PollerState.FETCHING
        try:
            awards = await self.source.fetch_awards()
        except (SourceUnavailableError, MalformedRecordError) as e:
            logger.warning(f"[poller] Cycle abandoned, source unavailable: {e}")
            self.state = PollerState.IDLE
            return CycleResult(success=False, changed=False, baseline=previous, error=str(e))
        except Exception as e:
            logger.exception(f"[poller] Cycle abandoned, unexpected fetch error: {e}")
            self.state = PollerState.IDLE
            return CycleResult(success=False, changed=False, baseline=previous, error=str(e))
        
        self.state = PollerState.AGGREGATING
        tally = build_tally(awards)
        
        self.state = PollerState.RANKING
        leaderboard = rank(tally)
        snapshot = top_n(leaderboard, self.top_n)
        
        self.state = PollerState.COMPARING
        change = detect_change(snapshot, previous)
        
        if change.changed:
            self.state = PollerState.EMITTING
            try:
                self.sink.report(change.snapshot)
            except Exception:
                logger.exception("[poller] Sink failed to report leaderboard")
        else:
            logger.debug(f"[poller] Top {self.top_n} unchanged: {list(snapshot.entrants)}")
        
        logger.debug(
            f"[poller] Cycle complete: {len(awards)} awards, {len(tally)} entrants, changed={change.changed}"
        )
        self.state = PollerState.IDLE
        return CycleResult(
            success=True,
            changed=change.changed,
            baseline=snapshot,
            awards_count=len(awards),
        )
    
    async def run(
        self,
        stop_event: Optional[asyncio.Event] = None,
        max_cycles: Optional[int] = None,
    ) -> Optional[LeaderboardSnapshot]:
        """
        Poll until stop_event is set (or max_cycles cycles have run).
        
        Stop is checked before every fetch and interrupts the sleep.
        
        Returns:
            The baseline snapshot left by the last completed cycle
        """
        stop_event = stop_event or asyncio.Event()
        previous: Optional[LeaderboardSnapshot] = None
        cycles = 0
        
        logger.info(f"[poller] Watching top {self.top_n}, polling every {self.poll_interval:g}s")
        
        while not stop_event.is_set():
            result = await self.run_cycle(previous)
            previous = result.baseline
            cycles += 1
            
            if max_cycles is not None and cycles >= max_cycles:
                break
            
            self.state = PollerState.SLEEPING
            try:
                await asyncio.wait_for(stop_event.wait(), timeout=self.poll_interval)
            except asyncio.TimeoutError:
                pass
        
        self.state = PollerState.STOPPED
        logger.info(f"[poller] Stopped after {cycles} cycles")
        return previous
