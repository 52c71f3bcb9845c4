# dreamhouse/entrypoints/api/routers/intent.py
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from ....adapters.clients.intent_service import IntentServiceClient, IntentServiceError
from ....domain.intent import intent_to_payload
from ....schemas import IntentRequest, IntentResponse
from ..deps import market_or_default

router = APIRouter(tags=["intent"])

_STATUS_BY_KIND = {
    "invalid_input": 400,
    "not_configured": 503,
    "upstream": 502,
}


def get_intent_client() -> IntentServiceClient:
    return IntentServiceClient.from_settings()


@router.post("/intent", response_model=IntentResponse)
async def parse_intent(
    body: IntentRequest,
    client: IntentServiceClient = Depends(get_intent_client),
) -> IntentResponse:
    market_id = market_or_default(body.market_id)
    try:
        intent = await client.parse(body.text, market_id=market_id)
    except IntentServiceError as e:
        raise HTTPException(status_code=_STATUS_BY_KIND.get(e.kind, 502), detail=str(e))

    return IntentResponse(intent=intent_to_payload(intent), raw_text=body.text.strip(), market_id=market_id)
