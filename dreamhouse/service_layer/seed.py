# dreamhouse/service_layer/seed.py
from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from ..adapters.repos.properties import PropertyRepository
from ..models import Market

log = logging.getLogger(__name__)


SEATTLE = {
    "id": "seattle",
    "name": "Seattle Metro",
    "slug": "seattle",
    "state": "WA",
    "config": {"defaultCenter": [-122.3321, 47.6062], "defaultZoom": 11},
}


async def upsert_market(session: AsyncSession, market: dict[str, Any]) -> Market:
    row = await session.get(Market, market["id"])
    if row is None:
        row = Market(id=market["id"])
        session.add(row)

    row.name = market["name"]
    row.slug = market["slug"]
    row.state = market["state"]
    row.active = bool(market.get("active", True))
    row.config_json = json.dumps(market.get("config") or {})
    await session.flush()
    return row


async def seed_properties(
    session: AsyncSession,
    payloads: Iterable[dict[str, Any]],
    *,
    market: dict[str, Any] = SEATTLE,
) -> dict[str, Any]:
    """
    Idempotent seed:
    - upserts the market row
    - upserts each property by id; rows without id/coordinates are skipped
    - safe to run multiple times
    """
    await upsert_market(session, market)
    repo = PropertyRepository(session)

    seeded = 0
    skipped = 0
    for payload in payloads:
        try:
            await repo.upsert_from_payload({"marketId": market["id"], **payload})
        except ValueError as e:
            log.warning("seed skipped row error=%s", e)
            skipped += 1
            continue
        seeded += 1

    return {"market": market["id"], "seeded": seeded, "skipped": skipped}
