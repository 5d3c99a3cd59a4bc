"""
Scheduler - Watch a results feed and report medal table changes

Polls the feed every POLL_INTERVAL_SECONDS (default 2s), rebuilds the
medal table from scratch, and logs the top N whenever its entrants or
their order change.

Usage:
    python scheduler.py --url https://...        # Run until Ctrl+C
    python scheduler.py --file athletics.json    # Watch a local copy
    python scheduler.py --once                   # Run one cycle and exit
"""
import asyncio
import signal
import sys

from config import ConfigurationError, load_settings
from crawlers import FileFeedCrawler, ResultsFeedCrawler
from processor import LogSink, Poller
from utils import logger, init_logging, setup_logging


class MedalWatchScheduler:
    """
    Wires settings, award source, sink and poller together.
    """
    
    def __init__(self, settings):
        self.settings = settings
        self.stop_event = None
        self.poller = Poller(
            source=self._build_source(),
            sink=LogSink(),
            top_n=settings.TOP_N,
            poll_interval=settings.POLL_INTERVAL_SECONDS,
        )
    
    def _build_source(self):
        if self.settings.FEED_FILE is not None:
            logger.info(f"Reading results from file: {self.settings.FEED_FILE}")
            return FileFeedCrawler(self.settings.FEED_FILE)
        
        logger.info(f"Reading results from: {self.settings.FEED_URL}")
        return ResultsFeedCrawler(
            url=self.settings.FEED_URL,
            timeout=self.settings.HTTP_TIMEOUT_SECONDS,
            verify_ssl=self.settings.CRAWLERS_ENABLE_SSL,
        )
    
    async def run_forever(self):
        """Poll until SIGINT/SIGTERM."""
        self.stop_event = asyncio.Event()
        loop = asyncio.get_running_loop()
        
        # Handle graceful shutdown
        for sig in (signal.SIGINT, signal.SIGTERM):
            try:
                loop.add_signal_handler(sig, self.stop)
            except NotImplementedError:
                # Windows: KeyboardInterrupt still ends asyncio.run()
                logger.debug(f"Signal handler for {sig.name} not supported")
        
        logger.info("Scheduler started - Press Ctrl+C to stop")
        await self.poller.run(stop_event=self.stop_event)
    
    def stop(self):
        """Ask the poller to stop after the current step."""
        logger.info("Received shutdown signal")
        if self.stop_event is not None:
            self.stop_event.set()
    
    def run_once(self) -> bool:
        """Run a single cycle and exit."""
        logger.info("Running one cycle...")
        result = asyncio.run(self.poller.run_cycle(None))
        
        if result.success:
            logger.info(f"Cycle completed: {result.awards_count} awards")
        else:
            logger.error(f"Cycle failed: {result.error}")
        
        return result.success


def main():
    """Main entry point with CLI arguments."""
    import argparse
    
    parser = argparse.ArgumentParser(description="Medal Watch - report medal table changes")
    parser.add_argument("--url", help="Results feed URL (overrides FEED_URL)")
    parser.add_argument("--file", help="Read the feed from a local JSON file (overrides FEED_FILE)")
    parser.add_argument("--top-n", type=int, help="Number of leading entrants to watch (default 5)")
    parser.add_argument("--interval", type=float, help="Seconds between polls (default 2)")
    parser.add_argument("--once", action="store_true", help="Run one cycle and exit")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    
    args = parser.parse_args()
    
    try:
        settings = load_settings(
            FEED_URL=args.url,
            FEED_FILE=args.file,
            TOP_N=args.top_n,
            POLL_INTERVAL_SECONDS=args.interval,
        )
    except ConfigurationError as e:
        setup_logging()
        logger.error(str(e))
        sys.exit(2)
    
    init_logging(settings, verbose=args.verbose)
    
    try:
        scheduler = MedalWatchScheduler(settings)
    except ConfigurationError as e:
        logger.error(str(e))
        sys.exit(2)
    
    if args.once:
        result = scheduler.run_once()
        sys.exit(0 if result else 1)
    
    try:
        asyncio.run(scheduler.run_forever())
    except KeyboardInterrupt:
        logger.info("Interrupted")


if __name__ == "__main__":
    main()
