# dreamhouse/domain/types.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum


class PropertyType(str, Enum):
    single_family = "single_family"
    condo = "condo"
    townhouse = "townhouse"
    multi_family = "multi_family"
    land = "land"
    other = "other"


class TaxStatus(str, Enum):
    current = "current"
    delinquent = "delinquent"
    unknown = "unknown"


class ListingStatus(str, Enum):
    on_market = "on_market"
    off_market = "off_market"
    recently_sold = "recently_sold"


class TransactLevel(str, Enum):
    low = "low"
    medium = "medium"
    high = "high"


@dataclass(frozen=True)
class PermitRecord:
    type: str
    date: date | None
    description: str = ""
    value: float | None = None


@dataclass(frozen=True)
class PropertyRecord:
    """
    A residential parcel as handed to the scorers.

    Optional fields are None when public records did not provide them.
    lat/lng of (0, 0) means the parcel was never geocoded.
    """

    id: str
    lat: float
    lng: float
    market_id: str = "seattle"
    parcel_id: str | None = None
    address: str = ""
    city: str = ""
    state: str = ""
    zip: str = ""
    bedrooms: float | None = None
    bathrooms: float | None = None
    sqft: int | None = None
    lot_sqft: int | None = None
    year_built: int | None = None
    property_type: PropertyType = PropertyType.single_family
    architectural_style: str | None = None
    features: tuple[str, ...] = ()
    last_sale_date: date | None = None
    last_sale_price: float | None = None
    estimated_value: float | None = None
    owner_name: str | None = None
    owner_mailing_address: str | None = None
    absentee_owner: bool = False
    ownership_years: float | None = None
    equity_estimate: float | None = None
    tax_status: TaxStatus = TaxStatus.unknown
    permit_history: tuple[PermitRecord, ...] = ()
    listing_status: ListingStatus = ListingStatus.off_market
    listing_price: float | None = None
    mls_number: str | None = None
    photo_urls: tuple[str, ...] = ()
    data_sources: tuple[str, ...] = ()


@dataclass(frozen=True)
class NumericRange:
    min: float | None = None
    max: float | None = None

    @property
    def specified(self) -> bool:
        return self.min is not None or self.max is not None


@dataclass(frozen=True)
class LocationTarget:
    name: str
    lat: float
    lng: float
    radius_miles: float = 2.0


@dataclass(frozen=True)
class ParsedIntent:
    styles: tuple[str, ...] = ()
    features: tuple[str, ...] = ()
    budget: NumericRange = field(default_factory=NumericRange)
    locations: tuple[LocationTarget, ...] = ()
    beds: NumericRange = field(default_factory=NumericRange)
    baths: NumericRange = field(default_factory=NumericRange)
    sqft: NumericRange = field(default_factory=NumericRange)
    property_types: tuple[PropertyType, ...] = ()
    lifestyle_tags: tuple[str, ...] = ()
    summary: str = ""


@dataclass(frozen=True)
class FactorScore:
    score: float
    reason: str


@dataclass(frozen=True)
class MatchFactor:
    name: str
    score: float
    reason: str
    matched: bool


@dataclass(frozen=True)
class MatchExplanation:
    overall_reason: str
    factors: tuple[MatchFactor, ...]


@dataclass(frozen=True)
class MatchResult:
    score: float
    explanation: MatchExplanation


@dataclass(frozen=True)
class TransactResult:
    score: int
    level: TransactLevel
    signals: tuple[str, ...]


@dataclass(frozen=True)
class ScoredResult:
    property: PropertyRecord
    match_score: float
    transact_level: TransactLevel
    match_explanation: MatchExplanation


@dataclass(frozen=True)
class SearchPage:
    results: list[ScoredResult]
    total: int
    page: int
    page_size: int
