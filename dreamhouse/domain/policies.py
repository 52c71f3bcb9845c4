# dreamhouse/domain/policies.py
from __future__ import annotations

from typing import Any

from .errors import ScoringContractError


MIN_MATCH_SCORE = 25.0
PAGE_SIZE = 25


def require_intent(intent: Any) -> None:
    if intent is None:
        raise ScoringContractError("intent is required for scoring (got None)")


def require_scorable_property(prop: Any) -> None:
    """
    Fail fast on upstream ingestion bugs instead of scoring them as zero.
    (0, 0) coordinates are allowed: that is the "unknown location" marker.
    """
    if prop is None:
        raise ScoringContractError("property is required for scoring (got None)")

    prop_id = getattr(prop, "id", None)
    if prop_id is None or (isinstance(prop_id, str) and not prop_id.strip()):
        raise ScoringContractError("property is missing its id")

    lat = getattr(prop, "lat", None)
    lng = getattr(prop, "lng", None)
    if lat is None or lng is None:
        hint = {"id": prop_id, "lat": lat, "lng": lng}
        raise ScoringContractError(f"property is missing coordinates. hint={hint}")
