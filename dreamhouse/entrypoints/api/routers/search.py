# dreamhouse/entrypoints/api/routers/search.py
from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ....db import get_session
from ....schemas import ScoredResultOut, SearchRequest, SearchResponse
from ....service_layer.search import MarketSearchPage, search_market
from ..deps import market_or_default, require_intent_payload

router = APIRouter(tags=["search"])


def search_response(result: MarketSearchPage) -> SearchResponse:
    return SearchResponse(
        results=[ScoredResultOut.from_domain(r) for r in result.page.results],
        total=result.page.total,
        page=result.page.page,
        page_size=result.page.page_size,
        market_id=result.market_id,
        data_source=result.data_source.value,
    )


@router.post("/search", response_model=SearchResponse)
async def search(
    body: SearchRequest,
    session: AsyncSession = Depends(get_session),
) -> SearchResponse:
    intent = require_intent_payload(body.intent)
    result = await search_market(session, intent, market_or_default(body.market_id), body.page)
    return search_response(result)
