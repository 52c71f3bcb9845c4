# dreamhouse/service_layer/profiles.py
from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from ..adapters.repos.profiles import BuyerProfileRepository
from ..domain.types import ParsedIntent
from ..models import BuyerProfile
from .search import MarketSearchPage, search_market


async def save_profile(
    session: AsyncSession,
    *,
    market_id: str,
    raw_text: str,
    intent: ParsedIntent,
) -> BuyerProfile:
    return await BuyerProfileRepository(session).create(market_id=market_id, raw_text=raw_text, intent=intent)


async def run_profile_search(session: AsyncSession, profile_id: int, page: int = 1) -> MarketSearchPage | None:
    """
    Re-run a saved buyer profile against the current catalog. Results are
    recomputed every time; only last_run_at is persisted.
    """
    repo = BuyerProfileRepository(session)
    row = await repo.get(profile_id)
    if row is None:
        return None

    result = await search_market(session, repo.intent_of(row), row.market_id, page)
    await repo.mark_run(row)
    return result
