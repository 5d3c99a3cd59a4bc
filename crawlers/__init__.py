"""Crawlers package for Medal Watch."""

from .base_crawler import BaseCrawler, CrawlResult, SourceUnavailableError
from .results_feed_crawler import ResultsFeedCrawler, FileFeedCrawler, extract_events

__all__ = [
    "BaseCrawler",
    "CrawlResult",
    "SourceUnavailableError",
    "ResultsFeedCrawler",
    "FileFeedCrawler",
    "extract_events",
]
