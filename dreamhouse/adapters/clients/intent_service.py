# dreamhouse/adapters/clients/intent_service.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import httpx

from ...config import settings
from ...domain.intent import intent_from_payload
from ...domain.types import ParsedIntent
from .http_resilience import resilient_request

log = logging.getLogger(__name__)


class IntentServiceError(Exception):
    def __init__(self, message: str, *, kind: str = "upstream"):
        super().__init__(message)
        # invalid_input | not_configured | upstream
        self.kind = kind


@dataclass
class IntentServiceClient:
    """
    Client for the external text -> structured intent service.

    The service's natural-language parsing is not ours; we only send the
    buyer's text and canonicalize whatever JSON comes back.
    """

    base_url: str | None
    api_key: str | None = None
    max_chars: int = 2000
    transport: httpx.AsyncBaseTransport | None = None

    @classmethod
    def from_settings(cls) -> "IntentServiceClient":
        return cls(
            base_url=settings.INTENT_SERVICE_URL,
            api_key=settings.INTENT_SERVICE_API_KEY,
            max_chars=settings.INTENT_MAX_TEXT_CHARS,
        )

    def _headers(self) -> dict[str, str]:
        h = {"Accept": "application/json"}
        if self.api_key:
            h["Authorization"] = f"Bearer {self.api_key}"
        return h

    async def parse(self, text: str, *, market_id: str) -> ParsedIntent:
        if not self.base_url:
            raise IntentServiceError("INTENT_SERVICE_URL is not configured", kind="not_configured")

        cleaned = (text or "").strip()
        if not cleaned:
            raise IntentServiceError("text is required", kind="invalid_input")
        if len(cleaned) > self.max_chars:
            raise IntentServiceError(f"text must be {self.max_chars} characters or fewer", kind="invalid_input")

        url = self.base_url.rstrip("/") + "/parse"
        try:
            resp = await resilient_request(
                "POST",
                url,
                headers=self._headers(),
                json={"text": cleaned, "marketId": market_id},
                transport=self.transport,
            )
            body: Any = resp.json()
        except (httpx.HTTPError, ValueError) as e:
            log.warning("intent service call failed url=%s error=%s", url, e)
            raise IntentServiceError(f"intent service call failed: {e}") from e

        # accept {"intent": {...}} or the bare intent object
        if isinstance(body, dict) and isinstance(body.get("intent"), dict):
            body = body["intent"]
        if not isinstance(body, dict):
            raise IntentServiceError("intent service returned a non-object payload")

        return intent_from_payload(body)
