"""Feed documents, scripted award sources and cycle helpers shared by the tests."""
import asyncio

from constants import MedalClass
from data_transformers.models import AwardRecord


def award(medal_type, country=None, title=None, country_key="countryObject"):
    """One award entry as it appears in the feed document."""
    participant = {}
    if country is not None:
        participant[country_key] = {"name": country}
    if title is not None:
        participant["title"] = title
    return {"medalType": medal_type, "participant": participant}


def feed_document(*events):
    """Wrap event award lists in the page data shape."""
    return {
        "pageProps": {
            "gameDiscipline": {
                "events": [
                    {"title": f"Event {i}", "awards": list(awards)}
                    for i, awards in enumerate(events)
                ]
            }
        }
    }


def records(*pairs):
    """[(medal_class, entrant), ...] → AwardRecords."""
    return [AwardRecord(medal_class=MedalClass(m), entrant=e) for m, e in pairs]


class ScriptedSource:
    """Returns (or raises) the next scripted item on every fetch_awards()."""
    
    def __init__(self, script):
        self.script = list(script)
        self.calls = 0
    
    async def fetch_awards(self):
        item = self.script[min(self.calls, len(self.script) - 1)]
        self.calls += 1
        if isinstance(item, Exception):
            raise item
        return list(item)




def run_cycles(poller, count):
    """Run `count` poller cycles, threading the baseline through."""
    async def go():
        results = []
        previous = None
        for _ in range(count):
            result = await poller.run_cycle(previous)
            previous = result.baseline
            results.append(result)
        return results
    return asyncio.run(go())
