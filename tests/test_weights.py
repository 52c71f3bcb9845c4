import pytest

from dreamhouse.domain.types import NumericRange
from dreamhouse.domain.weights import BASE_WEIGHTS, redistribute_weights, specified_factors


def test_nothing_specified_falls_back_to_base_weights(make_intent):
    intent = make_intent()
    assert not any(specified_factors(intent).values())
    assert redistribute_weights(intent) == BASE_WEIGHTS
    assert BASE_WEIGHTS.total() == pytest.approx(1.0)


def test_budget_only_takes_all_the_weight(make_intent, budget_max):
    w = redistribute_weights(make_intent(budget=budget_max(1_000_000)))
    assert w.budget == 1.0
    assert w.location == w.style == w.features == w.beds_baths == w.sqft == 0.0


def test_specified_weights_are_rescaled_proportionally(make_intent, ballard):
    w = redistribute_weights(make_intent(locations=(ballard,), styles=("craftsman",)))
    # 0.25 and 0.20 rescaled by their sum 0.45
    assert w.location == pytest.approx(0.25 / 0.45)
    assert w.style == pytest.approx(0.20 / 0.45)
    assert w.total() == pytest.approx(1.0)
    assert w.budget == 0.0


def test_either_bed_or_bath_bound_specifies_the_axis(make_intent):
    assert specified_factors(make_intent(baths=NumericRange(max=2)))["beds_baths"] is True
    assert specified_factors(make_intent(beds=NumericRange(min=3)))["beds_baths"] is True
    assert specified_factors(make_intent(sqft=NumericRange()))["sqft"] is False


def test_lifestyle_and_property_types_do_not_count_as_scored_axes(make_intent):
    intent = make_intent(lifestyle_tags=("walkable",), summary="quiet family home")
    assert redistribute_weights(intent) == BASE_WEIGHTS
