from datetime import date

import pytest

from dreamhouse.adapters.repos.properties import PropertyRepository
from dreamhouse.adapters.sources import DataSource
from dreamhouse.domain.errors import ScoringContractError
from dreamhouse.domain.records import property_to_payload
from dreamhouse.domain.types import NumericRange, TaxStatus, TransactLevel
from dreamhouse.service_layer.profiles import run_profile_search, save_profile
from dreamhouse.service_layer.scoring import rescore_property
from dreamhouse.service_layer.search import score_property, search, search_market


def test_score_property_carries_match_and_transact(make_property, make_intent, budget_max):
    prop = make_property(ownership_years=20, absentee_owner=True, tax_status=TaxStatus.delinquent, equity_estimate=80)
    res = score_property(prop, make_intent(budget=budget_max(1_000_000)))

    assert res.property is prop
    assert res.match_score == 100
    assert res.transact_level == TransactLevel.high
    assert res.match_explanation.factors[1].name == "Budget"


def test_search_filters_ranks_and_paginates(make_property, make_intent, budget_max):
    intent = make_intent(budget=budget_max(1_000_000))
    props = [
        make_property(id="over-budget", listing_price=2_500_000),
        make_property(id="b", listing_price=900_000),
        make_property(id="a", listing_price=950_000),
        make_property(id="motivated", listing_price=990_000, ownership_years=25, absentee_owner=True),
    ]

    page = search(intent, props)
    assert page.total == 3
    assert [r.property.id for r in page.results] == ["motivated", "a", "b"]


def test_search_marks_recent_nearby_sales_by_id_or_predicate(make_property, make_intent):
    props = [make_property(id="x", ownership_years=20, absentee_owner=True, tax_status=TaxStatus.delinquent)]
    # 20 + 10 + 15 + 15 = 60 is medium; the nearby-sales bump makes it high
    assert search(make_intent(), props).results[0].transact_level == TransactLevel.medium
    assert search(make_intent(), props, recent_nearby_sales={"x"}).results[0].transact_level == TransactLevel.high
    assert search(make_intent(), props, recent_nearby_sales=lambda p: True).results[0].transact_level == TransactLevel.high


def test_search_with_empty_intent_keeps_everything_at_fifty(make_property, make_intent):
    props = [make_property(id=f"p-{i}") for i in range(3)]
    page = search(make_intent(), props)
    assert page.total == 3
    assert {r.match_score for r in page.results} == {50}
    assert [r.property.id for r in page.results] == ["p-0", "p-1", "p-2"]


def test_search_pages_past_the_end(make_property, make_intent):
    page = search(make_intent(), [make_property(id="only")], page=2)
    assert page.results == []
    assert page.total == 1
    assert page.page == 2


def test_search_rejects_missing_intent(make_property):
    with pytest.raises(ScoringContractError):
        search(None, [make_property()])


def test_search_fails_fast_on_bad_property(make_property, make_intent):
    with pytest.raises(ScoringContractError):
        search(make_intent(), [make_property(), make_property(id=" ")])


async def _store(session, *props):
    repo = PropertyRepository(session)
    for p in props:
        await repo.upsert_from_payload(property_to_payload(p))
    await session.commit()


async def test_search_market_reads_the_database(async_session_maker, make_property, make_intent):
    intent = make_intent(sqft=NumericRange(min=1500, max=2500))
    async with async_session_maker() as session:
        await _store(session, make_property(id="fits", sqft=2000), make_property(id="tiny", sqft=300))
        result = await search_market(session, intent, "seattle")

    assert result.data_source == DataSource.database
    assert result.market_id == "seattle"
    assert [r.property.id for r in result.page.results] == ["fits"]
    assert result.page.total == 1


async def test_rescore_property(async_session_maker, make_property, make_intent):
    prop = make_property(id="stored", year_built=1950, listing_price=1_500_000)
    async with async_session_maker() as session:
        await _store(session, prop)

        scored = await rescore_property(session, "stored", make_intent(budget=NumericRange(max=1_000_000)))
        missing = await rescore_property(session, "nope", make_intent())

    assert missing is None
    assert scored.match.score == 50
    assert scored.transact.score == 10
    assert scored.transact.signals[0].startswith(f"No recent permits on {date.today().year - 1950}-year-old home")


async def test_saved_profile_reruns_against_current_catalog(async_session_maker, make_property, make_intent):
    intent = make_intent(budget=NumericRange(max=1_000_000))
    async with async_session_maker() as session:
        await _store(session, make_property(id="first"))
        profile = await save_profile(session, market_id="seattle", raw_text="under a million", intent=intent)
        await session.commit()

        before = await run_profile_search(session, profile.id)
        await _store(session, make_property(id="second", listing_price=800_000))
        after = await run_profile_search(session, profile.id)
        missing = await run_profile_search(session, 9999)

    assert [r.property.id for r in before.page.results] == ["first"]
    assert [r.property.id for r in after.page.results] == ["first", "second"]
    assert profile.last_run_at is not None
    assert missing is None


def test_a_single_id_string_flags_only_that_property(make_property, make_intent):
    props = [
        make_property(id="x", ownership_years=20, absentee_owner=True, tax_status=TaxStatus.delinquent),
        make_property(id="xy", ownership_years=20, absentee_owner=True, tax_status=TaxStatus.delinquent),
        make_property(id="y", ownership_years=20, absentee_owner=True, tax_status=TaxStatus.delinquent),
    ]
    levels = {r.property.id: r.transact_level for r in search(make_intent(), props, recent_nearby_sales="xy").results}
    assert levels == {"x": TransactLevel.medium, "xy": TransactLevel.high, "y": TransactLevel.medium}
