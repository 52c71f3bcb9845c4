# dreamhouse/adapters/sources.py
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from ..config import settings
from ..domain.records import property_from_payload
from ..domain.types import PropertyRecord
from .repos.properties import PropertyRepository

log = logging.getLogger(__name__)


class DataSource(str, Enum):
    database = "database"
    ingested = "ingested"
    seed = "seed"


def _as_list_of_dicts(payload: Any) -> list[dict[str, Any]]:
    """
    Accept either:
      - list[dict]
      - {"properties": list[dict]}
    """
    if isinstance(payload, list):
        return [x for x in payload if isinstance(x, dict)]
    if isinstance(payload, dict):
        v = payload.get("properties")
        if isinstance(v, list):
            return [x for x in v if isinstance(x, dict)]
    return []


@dataclass
class JsonPropertyFile:
    """
    A JSON property catalog on disk, parsed once and cached until invalidate().

    A missing or malformed file is an expected state (ingestion may never have
    run) and yields an empty catalog.
    """

    path: Path
    _cache: list[PropertyRecord] | None = field(default=None, init=False, repr=False)

    def load(self) -> list[PropertyRecord]:
        if self._cache is not None:
            return self._cache

        records: list[PropertyRecord] = []
        if self.path.exists():
            try:
                rows = _as_list_of_dicts(json.loads(self.path.read_text(encoding="utf-8")))
            except (OSError, json.JSONDecodeError) as e:
                log.warning("property catalog unreadable path=%s error=%s", self.path, e)
                rows = []

            for row in rows:
                try:
                    records.append(property_from_payload(row))
                except ValueError as e:
                    log.warning("skipping catalog row path=%s error=%s", self.path, e)

        self._cache = records
        return records

    def invalidate(self) -> None:
        """Call after an ingestion run rewrites the file."""
        self._cache = None


ingested_catalog = JsonPropertyFile(Path(settings.INGESTED_PROPERTIES_PATH))
seed_catalog = JsonPropertyFile(Path(settings.SEED_PROPERTIES_PATH))


def _for_market(records: list[PropertyRecord], market_id: str) -> list[PropertyRecord]:
    # the default market serves every catalog row
    if market_id == settings.DEFAULT_MARKET:
        return list(records)
    return [r for r in records if r.market_id == market_id]


async def load_market_properties(
    session: AsyncSession | None,
    market_id: str,
    *,
    ingested: JsonPropertyFile | None = None,
    seed: JsonPropertyFile | None = None,
    limit: int | None = None,
) -> tuple[list[PropertyRecord], DataSource]:
    """
    Properties for a market plus which source actually served them.

    Priority:
      1. database rows for the market
      2. ingested JSON catalog (real public-records data)
      3. bundled seed JSON
    """
    ingested = ingested or ingested_catalog
    seed = seed or seed_catalog
    limit = limit or settings.PROPERTY_SOURCE_LIMIT

    if session is not None:
        repo = PropertyRepository(session)
        rows = await repo.list_by_market(market_id, limit=limit)
        records: list[PropertyRecord] = []
        for row in rows:
            try:
                records.append(repo.to_record(row))
            except ValueError as e:
                log.warning("skipping stored property id=%s error=%s", row.id, e)
        if records:
            return records, DataSource.database

    real = _for_market(ingested.load(), market_id)
    if real:
        return real[:limit], DataSource.ingested

    log.warning("falling back to seed catalog market_id=%s", market_id)
    return _for_market(seed.load(), market_id)[:limit], DataSource.seed
