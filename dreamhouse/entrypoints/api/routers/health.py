# dreamhouse/entrypoints/api/routers/health.py
from __future__ import annotations

from typing import Any

from fastapi import APIRouter

from ....config import settings

router = APIRouter(tags=["health"])


@router.get("/health")
def health() -> dict[str, Any]:
    return {
        "status": "ok",
        "env": settings.ENV,
        "defaultMarket": settings.DEFAULT_MARKET,
        "intentServiceConfigured": bool(settings.INTENT_SERVICE_URL),
    }
