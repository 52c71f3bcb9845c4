# scripts/smoke_search.py
import asyncio

from dreamhouse.db import async_session
from dreamhouse.domain.intent import intent_from_payload
from dreamhouse.logging_setup import configure_logging
from dreamhouse.service_layer.search import search_market


INTENT = {
    "styles": ["craftsman"],
    "features": ["garage", "fireplace"],
    "budget": {"min": None, "max": 1200000},
    "locations": [{"name": "Ballard", "lat": 47.6677, "lng": -122.3846, "radiusMiles": 1.5}],
    "beds": {"min": 3, "max": None},
    "baths": {"min": 2, "max": None},
}


async def main():
    configure_logging()
    async with async_session() as session:
        result = await search_market(session, intent_from_payload(INTENT), "seattle")

    print(f"source={result.data_source.value} total={result.page.total}")
    for r in result.page.results[:10]:
        print(r.property.id, r.property.address, r.match_score, r.transact_level.value, r.match_explanation.overall_reason)


if __name__ == "__main__":
    asyncio.run(main())
