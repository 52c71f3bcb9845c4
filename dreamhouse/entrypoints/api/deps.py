# dreamhouse/entrypoints/api/deps.py
from __future__ import annotations

from typing import Any

from fastapi import HTTPException

from ...config import settings
from ...domain.intent import intent_from_payload
from ...domain.types import ParsedIntent


def market_or_default(market_id: str | None) -> str:
    m = (market_id or "").strip()
    return m or settings.DEFAULT_MARKET


def require_intent_payload(raw: dict[str, Any] | None) -> ParsedIntent:
    """
    The only hard check at the HTTP edge: an intent object must be present.
    Everything inside it is optional.
    """
    if not isinstance(raw, dict):
        raise HTTPException(
            status_code=400,
            detail="Missing required field: intent (provide a ParsedIntent object from /intent)",
        )
    return intent_from_payload(raw)
