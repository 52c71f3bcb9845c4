# dreamhouse/service_layer/search.py
from __future__ import annotations

import logging
from collections.abc import Callable, Collection, Iterable
from dataclasses import dataclass
from typing import Union

from sqlalchemy.ext.asyncio import AsyncSession

from ..adapters.sources import DataSource, load_market_properties
from ..domain.match_scoring import compute_match_score
from ..domain.policies import require_intent
from ..domain.ranking import paginate, rank_results
from ..domain.transact import compute_transact_score
from ..domain.types import ParsedIntent, PropertyRecord, ScoredResult, SearchPage

log = logging.getLogger(__name__)

NearbySales = Union[Callable[[PropertyRecord], bool], Collection[str], None]


@dataclass(frozen=True)
class MarketSearchPage:
    page: SearchPage
    market_id: str
    data_source: DataSource


def _nearby_sales_flag(recent_nearby_sales: NearbySales) -> Callable[[PropertyRecord], bool]:
    """
    Callers flag market heat with a predicate, a set of property ids or a
    single id string; nothing flagged by default.
    """
    if recent_nearby_sales is None:
        return lambda _p: False
    if callable(recent_nearby_sales):
        return recent_nearby_sales
    if isinstance(recent_nearby_sales, str):
        # one id, not a collection of characters
        ids = {recent_nearby_sales}
    else:
        ids = {str(x) for x in recent_nearby_sales}
    return lambda p: p.id in ids


def score_property(
    prop: PropertyRecord,
    intent: ParsedIntent,
    *,
    recent_nearby_sales: bool = False,
) -> ScoredResult:
    match = compute_match_score(prop, intent)
    transact = compute_transact_score(prop, recent_nearby_sales)
    return ScoredResult(
        property=prop,
        match_score=match.score,
        transact_level=transact.level,
        match_explanation=match.explanation,
    )


def search(
    intent: ParsedIntent,
    properties: Iterable[PropertyRecord],
    page: int = 1,
    *,
    recent_nearby_sales: NearbySales = None,
) -> SearchPage:
    """
    Score every property independently, drop noise, order by the composite
    key and return one page. Pure and synchronous.
    """
    require_intent(intent)
    flagged = _nearby_sales_flag(recent_nearby_sales)

    scored = [score_property(p, intent, recent_nearby_sales=flagged(p)) for p in properties]
    ranked = rank_results(scored)
    result = paginate(ranked, page)

    log.debug("search scored=%d kept=%d page=%d", len(scored), len(ranked), result.page)
    return result


async def search_market(
    session: AsyncSession | None,
    intent: ParsedIntent,
    market_id: str,
    page: int = 1,
    *,
    recent_nearby_sales: NearbySales = None,
) -> MarketSearchPage:
    """
    Load the market's catalog, then run the pure search over it. The source
    that served the catalog is returned with the page.
    """
    require_intent(intent)
    properties, source = await load_market_properties(session, market_id)

    result = search(intent, properties, page, recent_nearby_sales=recent_nearby_sales)
    log.info(
        "market search market_id=%s source=%s candidates=%d total=%d page=%d",
        market_id,
        source.value,
        len(properties),
        result.total,
        result.page,
    )
    return MarketSearchPage(page=result, market_id=market_id, data_source=source)
