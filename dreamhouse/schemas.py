from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .domain.records import property_to_payload
from .domain.types import MatchExplanation, ScoredResult


class CamelModel(BaseModel):
    # the presentation layer speaks camelCase; accept both on input
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MatchFactorOut(CamelModel):
    name: str
    score: float
    reason: str
    matched: bool


class MatchExplanationOut(CamelModel):
    overall_reason: str
    factors: list[MatchFactorOut]

    @classmethod
    def from_domain(cls, ex: MatchExplanation) -> "MatchExplanationOut":
        return cls(
            overall_reason=ex.overall_reason,
            factors=[
                MatchFactorOut(name=f.name, score=f.score, reason=f.reason, matched=f.matched)
                for f in ex.factors
            ],
        )


class ScoredResultOut(CamelModel):
    property: dict[str, Any]
    match_score: float
    transact_level: str
    match_explanation: MatchExplanationOut

    @classmethod
    def from_domain(cls, r: ScoredResult) -> "ScoredResultOut":
        return cls(
            property=property_to_payload(r.property),
            match_score=r.match_score,
            transact_level=r.transact_level.value,
            match_explanation=MatchExplanationOut.from_domain(r.match_explanation),
        )


class SearchRequest(CamelModel):
    intent: dict[str, Any] | None = None
    market_id: str | None = None
    page: int = Field(1, ge=1)


class SearchResponse(CamelModel):
    results: list[ScoredResultOut]
    total: int = Field(..., ge=0)
    page: int
    page_size: int
    market_id: str
    data_source: str


class ScoreRequest(CamelModel):
    intent: dict[str, Any] | None = None
    recent_nearby_sales: bool = False


class PropertyScoreOut(CamelModel):
    property: dict[str, Any]
    match_score: float
    match_explanation: MatchExplanationOut
    transact_score: int
    transact_level: str
    transact_signals: list[str]


class ProfileCreate(CamelModel):
    raw_text: str = ""
    market_id: str | None = None
    intent: dict[str, Any] | None = None


class ProfileOut(CamelModel):
    id: int
    market_id: str
    raw_text: str
    intent: dict[str, Any]
    created_at: datetime
    last_run_at: datetime | None = None


class IntentRequest(CamelModel):
    text: str = ""
    market_id: str | None = None


class IntentResponse(CamelModel):
    intent: dict[str, Any]
    raw_text: str
    market_id: str
