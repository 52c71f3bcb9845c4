# dreamhouse/entrypoints/api/routers/profiles.py
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from ....adapters.repos.profiles import BuyerProfileRepository
from ....db import get_session
from ....domain.intent import intent_to_payload
from ....models import BuyerProfile
from ....schemas import ProfileCreate, ProfileOut, SearchResponse
from ....service_layer.profiles import run_profile_search, save_profile
from ..deps import market_or_default, require_intent_payload
from .search import search_response

router = APIRouter(tags=["profiles"])


def _profile_out(row: BuyerProfile) -> ProfileOut:
    return ProfileOut(
        id=row.id,
        market_id=row.market_id,
        raw_text=row.raw_text,
        intent=intent_to_payload(BuyerProfileRepository.intent_of(row)),
        created_at=row.created_at,
        last_run_at=row.last_run_at,
    )


@router.post("/profiles", response_model=ProfileOut, status_code=201)
async def create_profile(
    body: ProfileCreate,
    session: AsyncSession = Depends(get_session),
) -> ProfileOut:
    intent = require_intent_payload(body.intent)
    row = await save_profile(
        session,
        market_id=market_or_default(body.market_id),
        raw_text=body.raw_text,
        intent=intent,
    )
    await session.commit()
    return _profile_out(row)


@router.get("/profiles", response_model=list[ProfileOut])
async def list_profiles(
    market_id: str | None = Query(default=None, alias="marketId"),
    limit: int = Query(50, ge=1, le=200),
    session: AsyncSession = Depends(get_session),
) -> list[ProfileOut]:
    rows = await BuyerProfileRepository(session).list_recent(market_id=market_id, limit=limit)
    return [_profile_out(r) for r in rows]


@router.post("/profiles/{profile_id}/search", response_model=SearchResponse)
async def search_profile(
    profile_id: int,
    page: int = Query(1, ge=1),
    session: AsyncSession = Depends(get_session),
) -> SearchResponse:
    result = await run_profile_search(session, profile_id, page)
    if result is None:
        raise HTTPException(status_code=404, detail=f"Unknown profile: {profile_id}")
    await session.commit()
    return search_response(result)
