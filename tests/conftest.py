# tests/conftest.py
from dataclasses import replace

import pytest
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from dreamhouse.domain.types import (
    ListingStatus,
    LocationTarget,
    NumericRange,
    ParsedIntent,
    PropertyRecord,
    TaxStatus,
)
from dreamhouse.models import Base


BALLARD = LocationTarget(name="Ballard", lat=47.6677, lng=-122.3846, radius_miles=1.5)


@pytest.fixture
def make_property():
    """
    Builder for a plain on-market property with no seller signals, so each
    test only spells out the fields it cares about.
    """
    base = PropertyRecord(
        id="p-1",
        lat=BALLARD.lat,
        lng=BALLARD.lng,
        address="123 Main St",
        city="Seattle",
        state="WA",
        zip="98107",
        bedrooms=3,
        bathrooms=2,
        sqft=1800,
        year_built=2015,
        architectural_style="craftsman",
        features=("garage", "fireplace"),
        listing_price=900_000,
        tax_status=TaxStatus.current,
        listing_status=ListingStatus.on_market,
    )

    def _make(**overrides) -> PropertyRecord:
        return replace(base, **overrides)

    return _make


@pytest.fixture
def make_intent():
    def _make(**overrides) -> ParsedIntent:
        return replace(ParsedIntent(), **overrides)

    return _make


@pytest.fixture
def ballard() -> LocationTarget:
    return BALLARD


@pytest.fixture
def budget_max():
    def _r(x: float) -> NumericRange:
        return NumericRange(min=None, max=x)

    return _r


@pytest.fixture
async def engine():
    """
    Fresh in-memory DB per test. StaticPool makes all connections share the same
    in-memory database for the lifetime of this engine fixture.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
def async_session_maker(engine):
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=True)
