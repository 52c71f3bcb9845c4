# dreamhouse/domain/ranking.py
from __future__ import annotations

from collections.abc import Iterable

from .policies import MIN_MATCH_SCORE, PAGE_SIZE
from .types import ScoredResult, SearchPage, TransactLevel


W_MATCH = 0.7
W_TRANSACT = 0.3

_TRANSACT_NUMERIC = {
    TransactLevel.high: 100.0,
    TransactLevel.medium: 50.0,
    TransactLevel.low: 20.0,
}


def transact_to_numeric(level: TransactLevel | str | None) -> float:
    if level is None:
        return 0.0
    try:
        return _TRANSACT_NUMERIC.get(TransactLevel(level), 0.0)
    except ValueError:
        return 0.0


def composite_key(result: ScoredResult) -> float:
    """
    Ordering value: fit to the brief matters more than seller likelihood.
    """
    return W_MATCH * result.match_score + W_TRANSACT * transact_to_numeric(result.transact_level)


def rank_results(results: Iterable[ScoredResult], *, min_match: float = MIN_MATCH_SCORE) -> list[ScoredResult]:
    """
    Drop noise (< min_match), then order by composite key descending.
    Equal keys fall back to property id ascending so the order never depends
    on input order.
    """
    kept = [r for r in results if r.match_score >= min_match]
    kept.sort(key=lambda r: (-composite_key(r), str(r.property.id)))
    return kept


def paginate(ranked: list[ScoredResult], page: int = 1, *, page_size: int = PAGE_SIZE) -> SearchPage:
    page = max(1, int(page))
    offset = (page - 1) * page_size
    return SearchPage(
        results=ranked[offset : offset + page_size],
        total=len(ranked),
        page=page,
        page_size=page_size,
    )
