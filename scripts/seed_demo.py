from __future__ import annotations

import argparse
import asyncio
import json
from pathlib import Path

from dreamhouse.config import settings
from dreamhouse.db import async_session_maker, engine
from dreamhouse.logging_setup import configure_logging
from dreamhouse.models import Base
from dreamhouse.service_layer.seed import seed_properties


async def _ensure_schema() -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--file", default=settings.SEED_PROPERTIES_PATH, help="JSON list of property payloads")
    args = parser.parse_args()

    configure_logging()
    await _ensure_schema()

    payloads = json.loads(Path(args.file).read_text(encoding="utf-8"))

    async with async_session_maker() as session:
        summary = await seed_properties(session, payloads)
        await session.commit()

    print(f"Seeded properties: {summary}")


if __name__ == "__main__":
    asyncio.run(main())
