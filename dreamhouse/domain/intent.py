# dreamhouse/domain/intent.py
from __future__ import annotations

from typing import Any

from .parsing import get_first, to_float, to_str_list
from .types import LocationTarget, NumericRange, ParsedIntent, PropertyType


DEFAULT_RADIUS_MILES = 2.0


def _range(payload: dict[str, Any], key: str) -> NumericRange:
    raw = payload.get(key)
    if not isinstance(raw, dict):
        return NumericRange()
    return NumericRange(min=to_float(raw.get("min")), max=to_float(raw.get("max")))


def _locations(raw: Any) -> tuple[LocationTarget, ...]:
    if not isinstance(raw, list):
        return ()

    out: list[LocationTarget] = []
    for item in raw:
        if not isinstance(item, dict):
            continue
        lat = to_float(item.get("lat"))
        lng = to_float(get_first(item, "lng", "lon"))
        if lat is None or lng is None:
            continue
        radius = to_float(get_first(item, "radiusMiles", "radius_miles", "radius"))
        out.append(
            LocationTarget(
                name=str(item.get("name") or "").strip(),
                lat=lat,
                lng=lng,
                radius_miles=radius if radius and radius > 0 else DEFAULT_RADIUS_MILES,
            )
        )
    return tuple(out)


def _property_types(raw: Any) -> tuple[PropertyType, ...]:
    out: list[PropertyType] = []
    for v in to_str_list(raw):
        try:
            pt = PropertyType(v.lower())
        except ValueError:
            continue
        if pt not in out:
            out.append(pt)
    return tuple(out)


def intent_from_payload(payload: dict[str, Any] | None) -> ParsedIntent:
    """
    Build a ParsedIntent from whatever the intent service (or a saved profile)
    handed us. Accepts camelCase and snake_case keys. Anything missing or
    malformed simply means "no preference" on that axis.
    """
    p = payload if isinstance(payload, dict) else {}

    summary = p.get("summary")
    return ParsedIntent(
        styles=tuple(to_str_list(p.get("styles"))),
        features=tuple(to_str_list(p.get("features"))),
        budget=_range(p, "budget"),
        locations=_locations(p.get("locations")),
        beds=_range(p, "beds"),
        baths=_range(p, "baths"),
        sqft=_range(p, "sqft"),
        property_types=_property_types(get_first(p, "propertyTypes", "property_types")),
        lifestyle_tags=tuple(to_str_list(get_first(p, "lifestyleTags", "lifestyle_tags"))),
        summary=summary.strip() if isinstance(summary, str) else "",
    )


def intent_to_payload(intent: ParsedIntent) -> dict[str, Any]:
    """Inverse of intent_from_payload, camelCase like the intent service speaks."""

    def _r(r: NumericRange) -> dict[str, float | None]:
        return {"min": r.min, "max": r.max}

    return {
        "styles": list(intent.styles),
        "features": list(intent.features),
        "budget": _r(intent.budget),
        "locations": [
            {"name": loc.name, "lat": loc.lat, "lng": loc.lng, "radiusMiles": loc.radius_miles}
            for loc in intent.locations
        ],
        "beds": _r(intent.beds),
        "baths": _r(intent.baths),
        "sqft": _r(intent.sqft),
        "propertyTypes": [pt.value for pt in intent.property_types],
        "lifestyleTags": list(intent.lifestyle_tags),
        "summary": intent.summary,
    }
