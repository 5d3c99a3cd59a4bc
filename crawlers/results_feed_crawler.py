"""
Results Feed Crawler - Medal results from the competition results site

The results pages are served with their page data as JSON, e.g. for
athletics at Tokyo 2020:
    https://olympics.com/en/olympic-games/tokyo-2020/results/athletics

Document shape (only the parts read here):
    {"pageProps": {"gameDiscipline": {"events": [{"awards": [...]}, ...]}}}

The full document is re-fetched every poll; nothing is cached.
"""
import json
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

import httpx
from loguru import logger

from data_transformers.results_feed.mappings import EVENTS_PATH
from .base_crawler import BaseCrawler, CrawlResult


def extract_events(payload: Any) -> list[dict]:
    """
    Walk EVENTS_PATH into the page data document.
    
    Raises:
        ValueError: If the path is missing or does not end in a list
    """
    node = payload
    for key in EVENTS_PATH:
        if not isinstance(node, dict) or key not in node:
            raise ValueError(f"Feed document has no '{'.'.join(EVENTS_PATH)}'")
        node = node[key]
    if not isinstance(node, list):
        raise ValueError(f"'{'.'.join(EVENTS_PATH)}' is not a list")
    return node


class ResultsFeedCrawler(BaseCrawler):
    """
    Crawler for the results page data over HTTP.
    
    Flow:
    1. fetch() - GET JSON from the feed URL
    2. Locate the events list
    3. Return CrawlResult with one data item per event
    """
    
    def __init__(
        self,
        url: str,
        timeout: float = 30.0,
        verify_ssl: bool = True,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        super().__init__("results_feed")
        self.url = url
        self.timeout = timeout
        self.verify_ssl = verify_ssl
        self._transport = transport
        
        self.headers = {
            "User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/145.0.0.0 Safari/537.36",
            "Accept": "application/json, */*;q=0.8",
            "Accept-Language": "en-US,en;q=0.9",
        }
        
        self._transformer = None  # Lazy load
    
    @property
    def transformer(self):
        """Return the transformer for this crawler."""
        if self._transformer is None:
            from data_transformers.results_feed import ResultsFeedTransformer
            self._transformer = ResultsFeedTransformer()
        return self._transformer
    
    async def _load_payload(self) -> Any:
        async with httpx.AsyncClient(
            timeout=self.timeout,
            follow_redirects=True,
            verify=self.verify_ssl,
            transport=self._transport,
        ) as client:
            response = await client.get(self.url, headers=self.headers)
            response.raise_for_status()
            return response.json()
    
    async def fetch(self) -> CrawlResult:
        """
        Fetch the current results document.
        
        Returns:
            CrawlResult whose data is the list of event dicts
        """
        logger.debug(f"[{self.name}] Fetching {self.url}")
        
        try:
            payload = await self._load_payload()
            events = extract_events(payload)
        except httpx.HTTPError as e:
            return self._failed(f"HTTP error: {e}")
        except (ValueError, OSError) as e:
            # json.JSONDecodeError is a ValueError
            return self._failed(f"Unreadable feed document: {e}")
        
        return CrawlResult(
            source=self.name,
            crawled_at=datetime.now(),
            success=True,
            data=events,
        )
    
    def _failed(self, error: str) -> CrawlResult:
        return CrawlResult(
            source=self.name,
            crawled_at=datetime.now(),
            success=False,
            data=[],
            error=error,
        )


class FileFeedCrawler(ResultsFeedCrawler):
    """Reads the same document from a local JSON file (saved page data)."""
    
    def __init__(self, path: Path):
        super().__init__(url=str(path))
        self.name = "results_file"
        self.path = Path(path)
    
    async def _load_payload(self) -> Any:
        with open(self.path, encoding="utf-8") as f:
            return json.load(f)
