# dreamhouse/entrypoints/fastapi_app.py
from __future__ import annotations

from fastapi import FastAPI

from ..db import engine
from ..logging_setup import configure_logging
from ..models import Base
from .api.routers import health, intent, profiles, properties, search


def create_app(*, create_tables: bool = True) -> FastAPI:
    app = FastAPI(title="Dreamhouse - Buyer Match Engine")

    @app.on_event("startup")
    async def _startup() -> None:
        configure_logging()
        if not create_tables:
            return
        # Single place where DB tables are created in dev.
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    # Routers
    app.include_router(health.router)
    app.include_router(search.router)
    app.include_router(properties.router)
    app.include_router(profiles.router)
    app.include_router(intent.router)

    return app


app = create_app()
