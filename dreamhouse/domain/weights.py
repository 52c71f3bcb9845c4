# dreamhouse/domain/weights.py
from __future__ import annotations

from dataclasses import astuple, dataclass, fields

from .types import ParsedIntent


@dataclass(frozen=True)
class WeightVector:
    location: float
    budget: float
    style: float
    features: float
    beds_baths: float
    sqft: float

    def as_dict(self) -> dict[str, float]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def total(self) -> float:
        return sum(astuple(self))


BASE_WEIGHTS = WeightVector(
    location=0.25,
    budget=0.20,
    style=0.20,
    features=0.15,
    beds_baths=0.10,
    sqft=0.10,
)


def specified_factors(intent: ParsedIntent) -> dict[str, bool]:
    """Which axes the buyer actually expressed a preference on."""
    return {
        "location": len(intent.locations) > 0,
        "budget": intent.budget.specified,
        "style": len(intent.styles) > 0,
        "features": len(intent.features) > 0,
        "beds_baths": intent.beds.specified or intent.baths.specified,
        "sqft": intent.sqft.specified,
    }


def redistribute_weights(intent: ParsedIntent, base: WeightVector = BASE_WEIGHTS) -> WeightVector:
    """
    Unspecified axes get 0; specified axes are rescaled to sum to 1.0.

    When nothing is specified the base weights come back unchanged, so every
    axis contributes its neutral 50 and every property lands on exactly 50.
    """
    specified = specified_factors(intent)
    base_map = base.as_dict()

    total_specified = sum(w for k, w in base_map.items() if specified[k])
    if total_specified <= 0:
        return base

    return WeightVector(
        **{k: (w / total_specified if specified[k] else 0.0) for k, w in base_map.items()}
    )
