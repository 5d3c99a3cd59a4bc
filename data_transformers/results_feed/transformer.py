"""
Results Feed Transformer - Extract award records from the results page data.

Each event in the document lists its medals under "awards":

    {"medalType": "GOLD", "participant": {"countryObject": {"name": "Kenya"}, ...}}

Entrant resolution order:
- participant.countryObject.name (team or athlete with a country)
- participant.country.name (older documents)
- participant.title (entrants without a country object)
"""
from typing import Any, Dict, List, Optional

from loguru import logger

from data_transformers.base import BaseTransformer, MalformedRecordError
from data_transformers.models import AwardFeed, AwardRecord
from .mappings import (
    AWARDS_KEY,
    COUNTRY_KEYS,
    COUNTRY_NAME_KEY,
    MEDAL_TYPE_KEY,
    MEDAL_TYPE_MAP,
    PARTICIPANT_KEY,
    TITLE_KEY,
)


class ResultsFeedTransformer(BaseTransformer):
    """
    Transforms ResultsFeedCrawler output to an AwardFeed.
    
    Input: list of event dicts (CrawlResult.data)
    Output: one AwardRecord per medal listed across all events
    
    A single unreadable award rejects the whole document with
    MalformedRecordError rather than being skipped.
    """
    
    @property
    def source_name(self) -> str:
        return "results_feed"
    
    def transform(self, raw_data: Dict[str, Any]) -> AwardFeed:
        crawled_at = self._parse_datetime(raw_data.get("crawled_at"))
        events = raw_data.get("data") or []
        
        awards: List[AwardRecord] = []
        for index, event in enumerate(events):
            label = self._event_label(event, index)
            if not isinstance(event, dict):
                raise MalformedRecordError(f"Event {label} is not an object")
            
            event_awards = event.get(AWARDS_KEY) or []
            if not isinstance(event_awards, list):
                raise MalformedRecordError(f"Event {label} has non-list '{AWARDS_KEY}'")
            
            for award in event_awards:
                awards.append(self._transform_award(award, label))
        
        logger.debug(
            f"[ResultsFeedTransformer] Extracted {len(awards)} awards from {len(events)} events"
        )
        
        return AwardFeed(
            source=raw_data.get("source") or self.source_name,
            crawled_at=crawled_at,
            awards=awards,
            stats={"events_count": len(events), "awards_count": len(awards)},
        )
    
    def _transform_award(self, award: Any, label: str) -> AwardRecord:
        """Build one AwardRecord, raising MalformedRecordError on bad shape."""
        if not isinstance(award, dict):
            raise MalformedRecordError(f"Event {label}: award is not an object")
        
        medal_type = award.get(MEDAL_TYPE_KEY)
        medal_class = MEDAL_TYPE_MAP.get(medal_type) if isinstance(medal_type, str) else None
        if medal_class is None:
            raise MalformedRecordError(f"Event {label}: unknown medal type {medal_type!r}")
        
        entrant = self._resolve_entrant(award.get(PARTICIPANT_KEY))
        if not entrant:
            raise MalformedRecordError(f"Event {label}: {medal_type} award has no entrant")
        
        return AwardRecord(medal_class=medal_class, entrant=entrant)
    
    @staticmethod
    def _resolve_entrant(participant: Any) -> Optional[str]:
        if not isinstance(participant, dict):
            return None
        
        for key in COUNTRY_KEYS:
            country = participant.get(key)
            if isinstance(country, dict):
                name = country.get(COUNTRY_NAME_KEY)
                if isinstance(name, str) and name.strip():
                    return name.strip()
        
        title = participant.get(TITLE_KEY)
        if isinstance(title, str) and title.strip():
            return title.strip()
        return None
    
    @staticmethod
    def _event_label(event: Any, index: int) -> str:
        if isinstance(event, dict):
            title = event.get("title") or event.get("name")
            if title:
                return f"#{index} ({title})"
        return f"#{index}"
