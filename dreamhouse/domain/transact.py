# dreamhouse/domain/transact.py
from __future__ import annotations

from datetime import date

from .policies import require_scorable_property
from .types import ListingStatus, PropertyRecord, TaxStatus, TransactLevel, TransactResult


LONG_HOLD_YEARS = 10
VERY_LONG_HOLD_YEARS = 15
HIGH_EQUITY_PCT = 50
RECENT_PERMIT_YEARS = 5
OLD_HOME_YEARS = 30

MEDIUM_FROM = 31
HIGH_FROM = 61


def transact_level_for(score: int) -> TransactLevel:
    if score >= HIGH_FROM:
        return TransactLevel.high
    if score >= MEDIUM_FROM:
        return TransactLevel.medium
    return TransactLevel.low


def _has_recent_permit(prop: PropertyRecord, current_year: int) -> bool:
    for permit in prop.permit_history:
        if permit.date is None:
            continue
        if current_year - permit.date.year <= RECENT_PERMIT_YEARS:
            return True
    return False


def compute_transact_score(
    prop: PropertyRecord,
    recent_nearby_sales: bool = False,
    *,
    today: date | None = None,
) -> TransactResult:
    """
    Transparent point system for "how likely is this owner to sell".

      ownership > 10y              +20
      ownership > 15y (additional) +10
      absentee owner               +15
      equity > 50%                 +10
      tax delinquent               +15
      recent nearby sales          +5   (caller-supplied market heat)
      no permit in 5y, home > 30y  +10
      off market                   +5

    Capped at 100. Every rule that fires leaves a signal string so an agent can
    see exactly why a parcel came out "high".
    """
    require_scorable_property(prop)
    current_year = (today or date.today()).year

    score = 0
    signals: list[str] = []

    years = prop.ownership_years
    if years is not None and years > LONG_HOLD_YEARS:
        score += 20
        signals.append(f"Owner for {years:g} years (>{LONG_HOLD_YEARS})")
        if years > VERY_LONG_HOLD_YEARS:
            score += 10
            signals.append(f"Long-term owner (>{VERY_LONG_HOLD_YEARS} years)")

    if prop.absentee_owner:
        score += 15
        signals.append("Absentee owner")

    if prop.equity_estimate is not None and prop.equity_estimate > HIGH_EQUITY_PCT:
        score += 10
        signals.append(f"High equity: {prop.equity_estimate:.0f}% estimated")

    if prop.tax_status == TaxStatus.delinquent:
        score += 15
        signals.append("Tax delinquent")

    if recent_nearby_sales:
        score += 5
        signals.append("Recent nearby sales activity")

    home_age = current_year - prop.year_built if prop.year_built else None
    if home_age is not None and home_age > OLD_HOME_YEARS and not _has_recent_permit(prop, current_year):
        score += 10
        signals.append(f"No recent permits on {home_age}-year-old home (deferred maintenance likely)")

    if prop.listing_status == ListingStatus.off_market:
        score += 5
        signals.append("Currently off-market")

    score = max(0, min(100, score))
    return TransactResult(score=score, level=transact_level_for(score), signals=tuple(signals))
