# dreamhouse/entrypoints/api/routers/properties.py
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from ....db import get_session
from ....domain.records import property_to_payload
from ....schemas import MatchExplanationOut, PropertyScoreOut, ScoreRequest
from ....service_layer.scoring import rescore_property
from ..deps import require_intent_payload

router = APIRouter(tags=["properties"])


@router.post("/properties/{property_id}/score", response_model=PropertyScoreOut)
async def score_property(
    property_id: str,
    body: ScoreRequest,
    session: AsyncSession = Depends(get_session),
) -> PropertyScoreOut:
    intent = require_intent_payload(body.intent)

    scored = await rescore_property(
        session,
        property_id,
        intent,
        recent_nearby_sales=body.recent_nearby_sales,
    )
    if scored is None:
        raise HTTPException(status_code=404, detail=f"Unknown property: {property_id}")

    return PropertyScoreOut(
        property=property_to_payload(scored.property),
        match_score=scored.match.score,
        match_explanation=MatchExplanationOut.from_domain(scored.match.explanation),
        transact_score=scored.transact.score,
        transact_level=scored.transact.level.value,
        transact_signals=list(scored.transact.signals),
    )
