# dreamhouse/models.py
from __future__ import annotations

from datetime import date, datetime

from sqlalchemy import Boolean, Date, DateTime, Float, Integer, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


# -----------------------------
# Models
# -----------------------------
class Market(Base):
    __tablename__ = "markets"

    id: Mapped[str] = mapped_column(String(40), primary_key=True)
    name: Mapped[str] = mapped_column(String(120))
    slug: Mapped[str] = mapped_column(String(40), unique=True)
    state: Mapped[str] = mapped_column(String(2))
    active: Mapped[bool] = mapped_column(Boolean, default=True)

    # {"defaultCenter": [lng, lat], "defaultZoom": 11, ...}
    config_json: Mapped[str] = mapped_column(Text, default="{}")

    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)


class Property(Base):
    """
    Stored parcel. Enrichment steps may fill in the optional columns later;
    the scorers only ever see the PropertyRecord built from this row.
    """

    __tablename__ = "properties"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    market_id: Mapped[str] = mapped_column(String(40), index=True)
    parcel_id: Mapped[str | None] = mapped_column(String(40), nullable=True)

    address: Mapped[str] = mapped_column(String(255), default="")
    city: Mapped[str] = mapped_column(String(80), default="")
    state: Mapped[str] = mapped_column(String(2), default="")
    zip: Mapped[str] = mapped_column(String(10), default="")

    # 0/0 = not geocoded yet
    lat: Mapped[float] = mapped_column(Float, default=0.0)
    lng: Mapped[float] = mapped_column(Float, default=0.0)

    bedrooms: Mapped[float | None] = mapped_column(Float, nullable=True)
    bathrooms: Mapped[float | None] = mapped_column(Float, nullable=True)
    sqft: Mapped[int | None] = mapped_column(Integer, nullable=True)
    lot_sqft: Mapped[int | None] = mapped_column(Integer, nullable=True)
    year_built: Mapped[int | None] = mapped_column(Integer, nullable=True)

    property_type: Mapped[str] = mapped_column(String(20), default="single_family")
    architectural_style: Mapped[str | None] = mapped_column(String(80), nullable=True)
    features_json: Mapped[str] = mapped_column(Text, default="[]")

    last_sale_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    last_sale_price: Mapped[float | None] = mapped_column(Float, nullable=True)
    estimated_value: Mapped[float | None] = mapped_column(Float, nullable=True)

    owner_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    owner_mailing_address: Mapped[str | None] = mapped_column(String(255), nullable=True)
    absentee_owner: Mapped[bool] = mapped_column(Boolean, default=False)
    ownership_years: Mapped[float | None] = mapped_column(Float, nullable=True)
    equity_estimate: Mapped[float | None] = mapped_column(Float, nullable=True)
    tax_status: Mapped[str] = mapped_column(String(20), default="unknown")
    permit_history_json: Mapped[str] = mapped_column(Text, default="[]")

    listing_status: Mapped[str] = mapped_column(String(20), default="off_market", index=True)
    listing_price: Mapped[float | None] = mapped_column(Float, nullable=True)
    mls_number: Mapped[str | None] = mapped_column(String(40), nullable=True)

    photo_urls_json: Mapped[str] = mapped_column(Text, default="[]")
    data_sources_json: Mapped[str] = mapped_column(Text, default="[]")

    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)


class BuyerProfile(Base):
    __tablename__ = "buyer_profiles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    market_id: Mapped[str] = mapped_column(String(40), index=True)

    raw_text: Mapped[str] = mapped_column(Text, default="")
    # camelCase ParsedIntent payload (see domain/intent.py)
    intent_json: Mapped[str] = mapped_column(Text, default="{}")

    last_run_at: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, index=True)
