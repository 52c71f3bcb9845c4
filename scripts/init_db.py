# scripts/init_db.py
import argparse
import asyncio

from dreamhouse.db import engine
from dreamhouse.logging_setup import configure_logging
from dreamhouse.models import Base


async def main() -> None:
    parser = argparse.ArgumentParser(description="Create (or recreate) the dreamhouse tables.")
    parser.add_argument("--drop", action="store_true", help="drop every table first (destroys data)")
    args = parser.parse_args()

    configure_logging()
    async with engine.begin() as conn:
        if args.drop:
            await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    await engine.dispose()

    print(f"OK: tables ready ({', '.join(sorted(Base.metadata.tables))}).")


if __name__ == "__main__":
    asyncio.run(main())
