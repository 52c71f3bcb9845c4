# dreamhouse/domain/match_scoring.py
from __future__ import annotations

from .geo import has_known_location, haversine_distance
from .policies import require_intent, require_scorable_property
from .styles import best_style_match, normalize_style
from .types import (
    FactorScore,
    MatchExplanation,
    MatchFactor,
    MatchResult,
    NumericRange,
    ParsedIntent,
    PropertyRecord,
)
from .weights import WeightVector, redistribute_weights, specified_factors


NEUTRAL = 50.0
UNKNOWN_STYLE = 25.0
DEFAULT_RADIUS_MILES = 2.0
ON_TARGET_MILES = 0.1

STRONG_AT = 75.0
MATCHED_AT = 50.0

# (display name, weight field) in explanation order
FACTORS: tuple[tuple[str, str], ...] = (
    ("Location", "location"),
    ("Budget", "budget"),
    ("Style", "style"),
    ("Features", "features"),
    ("Beds/Baths", "beds_baths"),
    ("Sqft", "sqft"),
)


def _fmt_k(dollars: float) -> str:
    return f"${dollars / 1000:.0f}K"


def _fmt_num(x: float) -> str:
    return f"{x:g}"


def _linear_falloff(ratio: float) -> float:
    """100 at ratio 0, 0 at ratio >= 1."""
    return max(0.0, 100.0 * (1.0 - ratio))


def score_location(prop: PropertyRecord, intent: ParsedIntent) -> FactorScore:
    if not intent.locations:
        return FactorScore(NEUTRAL, "No location preference specified")

    if not has_known_location(prop.lat, prop.lng):
        return FactorScore(NEUTRAL, "Property location unknown")

    best_score = 0.0
    best_name = ""
    for loc in intent.locations:
        dist = haversine_distance(prop.lat, prop.lng, loc.lat, loc.lng)
        radius = loc.radius_miles or DEFAULT_RADIUS_MILES

        if dist <= ON_TARGET_MILES:
            s = 100.0
        elif dist <= radius:
            # 100 at the center down to 60 at the radius edge
            s = max(0.0, 100.0 - (dist / radius) * 40.0)
        elif dist <= radius * 2:
            s = max(0.0, 60.0 * (1.0 - (dist - radius) / radius))
        else:
            s = 0.0

        if s > best_score:
            best_score = s
            best_name = loc.name

    if best_score <= 0:
        return FactorScore(0.0, "Outside all target locations")
    return FactorScore(best_score, f"{best_score:.0f}% match for {best_name or 'target location'}")


def score_budget(prop: PropertyRecord, intent: ParsedIntent) -> FactorScore:
    lo, hi = intent.budget.min, intent.budget.max
    if lo is None and hi is None:
        return FactorScore(NEUTRAL, "No budget constraint specified")

    price = prop.listing_price if prop.listing_price is not None else prop.estimated_value
    if not price:
        return FactorScore(NEUTRAL, "No price data available")

    score = 100.0
    reasons: list[str] = []

    if hi is not None and price > hi:
        if hi > 0:
            over = (price - hi) / hi
            score = _linear_falloff(over)
            reasons.append(f"{_fmt_k(price)} is {over * 100:.0f}% over max budget of {_fmt_k(hi)}")
        else:
            # zero max: every positive price is out of range
            score = 0.0
            reasons.append(f"{_fmt_k(price)} is over max budget of {_fmt_k(hi)}")

    if lo is not None and lo > 0 and price < lo:
        under = (lo - price) / lo
        score = min(score, _linear_falloff(under))
        reasons.append(f"Below minimum budget of {_fmt_k(lo)}")

    if not reasons:
        reasons.append(f"{_fmt_k(price)} is within budget")

    return FactorScore(score, ". ".join(reasons))


def score_style(prop: PropertyRecord, intent: ParsedIntent) -> FactorScore:
    if not intent.styles:
        return FactorScore(NEUTRAL, "No style preference specified")

    style = prop.architectural_style
    if not style:
        return FactorScore(UNKNOWN_STYLE, "Property style unknown")

    similarity = best_style_match(intent.styles, style)
    wanted = ", ".join(intent.styles)
    if similarity == 1.0:
        return FactorScore(100.0, f"Exact style match: {style}")
    if similarity >= 0.5:
        return FactorScore(50.0, f"Related style: {style} (similar to {wanted})")
    return FactorScore(0.0, f"Style mismatch: {style} vs desired {wanted}")


def score_features(prop: PropertyRecord, intent: ParsedIntent) -> FactorScore:
    if not intent.features:
        return FactorScore(NEUTRAL, "No feature requirements specified")

    have = [normalize_style(f) for f in prop.features if f]
    matched: list[str] = []
    missing: list[str] = []

    for desired in intent.features:
        want = normalize_style(desired)
        if want and any(want in tag or tag in want for tag in have):
            matched.append(desired)
        else:
            missing.append(desired)

    score = len(matched) / len(intent.features) * 100.0

    parts: list[str] = []
    if matched:
        parts.append(f"Has: {', '.join(matched)}")
    if missing:
        parts.append(f"Missing: {', '.join(missing)}")
    return FactorScore(score, ". ".join(parts))


def _count_axis(actual: float | None, wanted: NumericRange) -> float:
    """
    One beds-or-baths axis. The gap is measured to the nearer requested bound;
    a count inside a closed range has no gap.
    """
    if actual is None:
        return NEUTRAL

    lo, hi = wanted.min, wanted.max
    if lo is not None and hi is not None:
        if lo <= actual <= hi:
            diff = 0.0
        else:
            diff = min(abs(actual - lo), abs(actual - hi))
    elif lo is not None:
        diff = abs(actual - lo)
    elif hi is not None:
        diff = abs(actual - hi)
    else:
        diff = 0.0

    if diff <= 1:
        s = 100.0
    elif diff <= 2:
        s = 50.0
    else:
        s = 0.0

    if lo is not None and actual < lo:
        short = lo - actual
        if short > 2:
            s = 0.0
        elif short > 1:
            s = min(s, 50.0)
    return s


def score_beds_baths(prop: PropertyRecord, intent: ParsedIntent) -> FactorScore:
    beds_on = intent.beds.specified
    baths_on = intent.baths.specified
    if not beds_on and not baths_on:
        return FactorScore(NEUTRAL, "No bed/bath preference specified")

    bed_score = NEUTRAL
    bath_score = NEUTRAL
    reasons: list[str] = []

    if beds_on:
        bed_score = _count_axis(prop.bedrooms, intent.beds)
        have = "unknown" if prop.bedrooms is None else _fmt_num(prop.bedrooms)
        want = "any" if intent.beds.min is None else _fmt_num(intent.beds.min)
        reasons.append(f"{have} beds (wanted {want}+)")

    if baths_on:
        bath_score = _count_axis(prop.bathrooms, intent.baths)
        have = "unknown" if prop.bathrooms is None else _fmt_num(prop.bathrooms)
        want = "any" if intent.baths.min is None else _fmt_num(intent.baths.min)
        reasons.append(f"{have} baths (wanted {want}+)")

    return FactorScore((bed_score + bath_score) / 2, ". ".join(reasons))


def score_sqft(prop: PropertyRecord, intent: ParsedIntent) -> FactorScore:
    lo, hi = intent.sqft.min, intent.sqft.max
    if lo is None and hi is None:
        return FactorScore(NEUTRAL, "No sqft preference specified")

    sqft = prop.sqft
    if not sqft:
        return FactorScore(NEUTRAL, "Property sqft unknown")

    if lo is not None and lo > 0 and sqft < lo:
        return FactorScore(_linear_falloff((lo - sqft) / lo), f"{sqft} sqft is below minimum of {_fmt_num(lo)}")
    if hi is not None and sqft > hi:
        score = _linear_falloff((sqft - hi) / hi) if hi > 0 else 0.0
        return FactorScore(score, f"{sqft} sqft is above maximum of {_fmt_num(hi)}")

    if lo is not None and hi is not None:
        return FactorScore(100.0, f"{sqft} sqft is within range")
    return FactorScore(100.0, f"{sqft} sqft meets criteria")


def summarize(factors: tuple[MatchFactor, ...]) -> str:
    strong = [f.name.lower() for f in factors if f.score >= STRONG_AT]
    weak = [f.name.lower() for f in factors if f.score < MATCHED_AT]

    if len(strong) >= 4:
        return f"Strong match across {', '.join(strong)}"
    if len(strong) >= 2:
        reason = f"Good match on {', '.join(strong)}"
        if weak:
            reason += f"; weaker on {', '.join(weak)}"
        return reason
    if len(strong) == 1:
        return f"Partial match: strong on {strong[0]}"
    return "Weak match across most factors"


def score_factors(prop: PropertyRecord, intent: ParsedIntent) -> dict[str, FactorScore]:
    return {
        "location": score_location(prop, intent),
        "budget": score_budget(prop, intent),
        "style": score_style(prop, intent),
        "features": score_features(prop, intent),
        "beds_baths": score_beds_baths(prop, intent),
        "sqft": score_sqft(prop, intent),
    }


def aggregate(
    subscores: dict[str, FactorScore],
    weights: WeightVector,
    specified: dict[str, bool] | None = None,
) -> MatchResult:
    """
    Weighted sum of the sub-scores. A factor only counts as matched when it
    carries weight, was asked for, and scored at least MATCHED_AT; the neutral
    50 of an unspecified axis never does.
    """
    w = weights.as_dict()
    on = specified if specified is not None else {key: True for _, key in FACTORS}

    factors = tuple(
        MatchFactor(
            name=name,
            score=subscores[key].score,
            reason=subscores[key].reason,
            matched=w[key] > 0 and on[key] and subscores[key].score >= MATCHED_AT,
        )
        for name, key in FACTORS
    )
    overall = sum(subscores[key].score * w[key] for _, key in FACTORS)

    return MatchResult(
        score=round(overall, 2),
        explanation=MatchExplanation(overall_reason=summarize(factors), factors=factors),
    )


def compute_match_score(prop: PropertyRecord, intent: ParsedIntent) -> MatchResult:
    require_intent(intent)
    require_scorable_property(prop)
    return aggregate(
        score_factors(prop, intent),
        redistribute_weights(intent),
        specified_factors(intent),
    )
