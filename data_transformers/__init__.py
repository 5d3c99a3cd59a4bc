"""
Data Transformers Module

Turns raw crawler output into AwardFeed records for the pipeline.

Usage:
    from data_transformers import ResultsFeedTransformer, AwardFeed
    
    transformer = ResultsFeedTransformer()
    feed: AwardFeed = transformer.transform(raw_data)

Structure:
    data_transformers/
    ├── models.py           # Shared models (AwardRecord, AwardFeed)
    ├── base.py             # BaseTransformer, MalformedRecordError
    └── results_feed/       # Competition results page data
        ├── transformer.py  # ResultsFeedTransformer
        └── mappings.py     # Document key paths, medalType map
"""

from .models import AwardRecord, AwardFeed
from .base import BaseTransformer, MalformedRecordError
from .results_feed import ResultsFeedTransformer

__all__ = [
    # Models
    "AwardRecord",
    "AwardFeed",
    # Transformers
    "BaseTransformer",
    "MalformedRecordError",
    "ResultsFeedTransformer",
]
