"""
Base Transformer Interface

All source-specific transformers must inherit from BaseTransformer
and implement the transform() method.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Dict, Optional

from data_transformers.models import AwardFeed


class MalformedRecordError(Exception):
    """
    Raised when an award in the feed has an unknown medal class or no entrant.
    
    The whole fetch is rejected for the cycle; a partial tally would
    misrepresent the standings.
    """
    pass


class BaseTransformer(ABC):
    """
    Abstract base class for all award transformers.
    
    Each feed format gets its own transformer that converts the raw
    crawler output into an AwardFeed.
    
    Usage:
        transformer = ResultsFeedTransformer()
        feed = transformer.transform(raw_data)
    """
    
    @property
    @abstractmethod
    def source_name(self) -> str:
        """Return the source name (e.g., 'results_feed')."""
        pass
    
    @abstractmethod
    def transform(self, raw_data: Dict[str, Any]) -> AwardFeed:
        """
        Transform raw crawler data to an AwardFeed.
        
        Args:
            raw_data: CrawlResult.to_dict() of the crawl
        
        Returns:
            AwardFeed with every award record in the document
        
        Raises:
            MalformedRecordError: If any single award cannot be extracted
        """
        pass
    
    @staticmethod
    def _parse_datetime(value: Optional[str]) -> datetime:
        """Parse an ISO timestamp, falling back to now."""
        if value:
            try:
                return datetime.fromisoformat(value)
            except ValueError:
                pass
        return datetime.now()
