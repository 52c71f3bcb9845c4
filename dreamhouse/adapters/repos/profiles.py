# dreamhouse/adapters/repos/profiles.py
from __future__ import annotations

import json
from datetime import datetime

from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from ...domain.intent import intent_from_payload, intent_to_payload
from ...domain.types import ParsedIntent
from ...models import BuyerProfile


class BuyerProfileRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, *, market_id: str, raw_text: str, intent: ParsedIntent) -> BuyerProfile:
        row = BuyerProfile(
            market_id=market_id,
            raw_text=raw_text,
            intent_json=json.dumps(intent_to_payload(intent)),
        )
        self.session.add(row)
        await self.session.flush()
        return row

    async def get(self, profile_id: int) -> BuyerProfile | None:
        return await self.session.get(BuyerProfile, profile_id)

    async def list_recent(self, *, market_id: str | None = None, limit: int = 50) -> list[BuyerProfile]:
        q = select(BuyerProfile).order_by(desc(BuyerProfile.created_at), desc(BuyerProfile.id)).limit(limit)
        if market_id is not None:
            q = q.where(BuyerProfile.market_id == market_id)
        return list((await self.session.execute(q)).scalars().all())

    async def mark_run(self, row: BuyerProfile) -> None:
        row.last_run_at = datetime.utcnow()
        await self.session.flush()

    @staticmethod
    def intent_of(row: BuyerProfile) -> ParsedIntent:
        try:
            payload = json.loads(row.intent_json or "{}")
        except json.JSONDecodeError:
            payload = {}
        return intent_from_payload(payload)
