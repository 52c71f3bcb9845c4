import pytest

from dreamhouse.domain.ranking import composite_key, paginate, rank_results, transact_to_numeric
from dreamhouse.domain.types import MatchExplanation, ScoredResult, TransactLevel


def _scored(make_property, pid: str, match: float, level: TransactLevel = TransactLevel.low) -> ScoredResult:
    return ScoredResult(
        property=make_property(id=pid),
        match_score=match,
        transact_level=level,
        match_explanation=MatchExplanation(overall_reason="", factors=()),
    )


def test_transact_to_numeric():
    assert transact_to_numeric(TransactLevel.high) == 100
    assert transact_to_numeric(TransactLevel.medium) == 50
    assert transact_to_numeric(TransactLevel.low) == 20
    assert transact_to_numeric("medium") == 50
    assert transact_to_numeric("bogus") == 0
    assert transact_to_numeric(None) == 0


def test_composite_key_weights_match_over_transact(make_property):
    r = _scored(make_property, "a", 80, TransactLevel.high)
    assert composite_key(r) == pytest.approx(0.7 * 80 + 0.3 * 100)


def test_threshold_drops_noise_but_keeps_boundary(make_property):
    results = [
        _scored(make_property, "below", 24.99),
        _scored(make_property, "edge", 25.0),
        _scored(make_property, "above", 60.0),
    ]
    ranked = rank_results(results)
    assert [r.property.id for r in ranked] == ["above", "edge"]


def test_composite_can_beat_raw_match(make_property):
    # 70*0.7 + 100*0.3 = 79 beats 80*0.7 + 20*0.3 = 62
    hot = _scored(make_property, "hot", 70, TransactLevel.high)
    cold = _scored(make_property, "cold", 80, TransactLevel.low)
    assert [r.property.id for r in rank_results([cold, hot])] == ["hot", "cold"]


def test_ties_break_by_id_regardless_of_input_order(make_property):
    a = _scored(make_property, "a", 60, TransactLevel.medium)
    b = _scored(make_property, "b", 60, TransactLevel.medium)
    c = _scored(make_property, "c", 60, TransactLevel.medium)

    assert [r.property.id for r in rank_results([c, a, b])] == ["a", "b", "c"]
    assert [r.property.id for r in rank_results([b, c, a])] == ["a", "b", "c"]


def test_ranking_is_sorted_by_composite(make_property):
    results = [_scored(make_property, f"p-{i:02d}", 25 + i * 3, TransactLevel.low) for i in range(20)]
    ranked = rank_results(reversed(results))
    keys = [composite_key(r) for r in ranked]
    assert keys == sorted(keys, reverse=True)


def test_paginate_slices_and_reports_total(make_property):
    ranked = [_scored(make_property, f"p-{i:02d}", 90) for i in range(60)]

    first = paginate(ranked, 1)
    assert first.total == 60
    assert first.page_size == 25
    assert len(first.results) == 25
    assert first.results[0].property.id == "p-00"

    third = paginate(ranked, 3)
    assert [r.property.id for r in third.results] == [f"p-{i:02d}" for i in range(50, 60)]

    past_end = paginate(ranked, 4)
    assert past_end.results == []
    assert past_end.total == 60


def test_paginate_clamps_page_below_one(make_property):
    ranked = [_scored(make_property, "only", 90)]
    for page in (0, -3):
        res = paginate(ranked, page)
        assert res.page == 1
        assert len(res.results) == 1
