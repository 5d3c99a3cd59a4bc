"""
Base Crawler - Abstract base class for all award sources
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    from data_transformers.base import BaseTransformer
    from data_transformers.models import AwardRecord


class SourceUnavailableError(Exception):
    """Raised when the award source cannot produce a usable award list."""
    pass


@dataclass
class CrawlResult:
    """Base result from a crawler."""
    source: str
    crawled_at: datetime
    success: bool
    data: list[dict]
    error: Optional[str] = None
    
    def to_dict(self) -> dict:
        return {
            "source": self.source,
            "crawled_at": self.crawled_at.isoformat(),
            "success": self.success,
            "data": self.data,
            "error": self.error,
            "count": len(self.data)
        }


class BaseCrawler(ABC):
    """Abstract base class for all award crawlers."""
    
    def __init__(self, name: str):
        self.name = name
    
    @property
    @abstractmethod
    def transformer(self) -> "BaseTransformer":
        """Return the transformer that extracts awards from this crawler's data."""
        pass
        
    @abstractmethod
    async def fetch(self) -> CrawlResult:
        """
        Fetch data from the source.
        Must be implemented by subclasses.
        """
        pass
    
    async def run(self) -> CrawlResult:
        """
        Run the crawler with error handling.
        
        Returns:
            CrawlResult from fetch operation; unexpected exceptions are
            logged and reported as a failed result
        """
        logger.debug(f"[{self.name}] Starting crawl...")
        
        try:
            result = await self.fetch()
            
            if result.success:
                logger.debug(f"[{self.name}] Successfully crawled {len(result.data)} items")
            else:
                logger.error(f"[{self.name}] Crawl failed: {result.error}")
                
            return result
            
        except Exception as e:
            logger.exception(f"[{self.name}] Unexpected error during crawl")
            return CrawlResult(
                source=self.name,
                crawled_at=datetime.now(),
                success=False,
                data=[],
                error=str(e)
            )
    
    async def fetch_awards(self) -> list["AwardRecord"]:
        """
        Crawl and extract the full current award list.
        
        Raises:
            SourceUnavailableError: If the crawl failed
            MalformedRecordError: If any award in the document is unreadable
        """
        result = await self.run()
        if not result.success:
            raise SourceUnavailableError(f"[{self.name}] {result.error}")
        
        feed = self.transformer.transform(result.to_dict())
        logger.debug(f"[{self.name}] {feed.summary()}")
        return feed.awards
