# dreamhouse/service_layer/scoring.py
from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from ..adapters.repos.properties import PropertyRepository
from ..domain.match_scoring import compute_match_score
from ..domain.transact import compute_transact_score
from ..domain.types import MatchResult, ParsedIntent, PropertyRecord, TransactResult


def match_score(prop: PropertyRecord, intent: ParsedIntent) -> MatchResult:
    return compute_match_score(prop, intent)


def transact_score(prop: PropertyRecord, recent_nearby_sales: bool = False) -> TransactResult:
    return compute_transact_score(prop, recent_nearby_sales)


@dataclass(frozen=True)
class PropertyScore:
    property: PropertyRecord
    match: MatchResult
    transact: TransactResult


async def rescore_property(
    session: AsyncSession,
    property_id: str,
    intent: ParsedIntent,
    *,
    recent_nearby_sales: bool = False,
) -> PropertyScore | None:
    """
    Score one stored property without a ranking pass (e.g. a saved favorite).
    Returns None when the id is unknown.
    """
    repo = PropertyRepository(session)
    row = await repo.get(property_id)
    if row is None:
        return None

    prop = repo.to_record(row)
    return PropertyScore(
        property=prop,
        match=match_score(prop, intent),
        transact=transact_score(prop, recent_nearby_sales),
    )
