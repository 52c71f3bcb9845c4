from datetime import date, datetime

import pytest

from dreamhouse.domain.intent import intent_from_payload, intent_to_payload
from dreamhouse.domain.parsing import get_first, to_bool, to_date, to_float, to_int, to_str_list
from dreamhouse.domain.records import normalize_property_type, property_from_payload, property_to_payload
from dreamhouse.domain.types import ListingStatus, ParsedIntent, PropertyType, TaxStatus


def test_parsing_helpers():
    assert to_int("1,200") is None
    assert to_int("1200.7") == 1200
    assert to_int(True) is None
    assert to_float("nan") is None
    assert to_float("inf") is None
    assert to_float("3.5") == 3.5
    assert to_bool("Yes") is True
    assert to_bool("no") is False
    assert to_bool(0) is False
    assert to_date("2019-04-02T00:00:00Z") == date(2019, 4, 2)
    assert to_date(datetime(2020, 1, 1, 12)) == date(2020, 1, 1)
    assert to_date("not a date") is None
    assert to_str_list([" a ", None, "", 3]) == ["a", "3"]
    assert to_str_list("a") == []
    assert get_first({"a": " ", "b": None, "c": 0}, "a", "b", "c") == 0


def test_intent_from_camel_case_payload():
    intent = intent_from_payload(
        {
            "styles": ["craftsman", " "],
            "features": ["garage"],
            "budget": {"min": None, "max": "1000000"},
            "locations": [{"name": "Ballard", "lat": 47.67, "lng": -122.38, "radiusMiles": 1.5}],
            "beds": {"min": 3},
            "baths": {"min": 2, "max": None},
            "sqft": {},
            "propertyTypes": ["single_family", "CONDO", "castle", "condo"],
            "lifestyleTags": ["walkable"],
            "summary": "  craftsman near Ballard ",
        }
    )

    assert intent.styles == ("craftsman",)
    assert intent.budget.max == 1_000_000
    assert intent.budget.min is None
    assert intent.locations[0].name == "Ballard"
    assert intent.locations[0].radius_miles == 1.5
    assert intent.beds.min == 3
    assert not intent.sqft.specified
    assert intent.property_types == (PropertyType.single_family, PropertyType.condo)
    assert intent.lifestyle_tags == ("walkable",)
    assert intent.summary == "craftsman near Ballard"


def test_intent_accepts_snake_case_and_defaults_radius():
    intent = intent_from_payload(
        {
            "locations": [
                {"name": "Fremont", "lat": 47.65, "lon": -122.35},
                {"name": "Nowhere", "lat": 47.6},
                {"name": "Zero", "lat": 47.6, "lng": -122.3, "radius_miles": 0},
            ],
            "property_types": ["townhouse"],
            "lifestyle_tags": ["quiet"],
        }
    )
    assert [loc.name for loc in intent.locations] == ["Fremont", "Zero"]
    assert all(loc.radius_miles == 2.0 for loc in intent.locations)
    assert intent.property_types == (PropertyType.townhouse,)
    assert intent.lifestyle_tags == ("quiet",)


@pytest.mark.parametrize("payload", [None, {}, {"budget": "cheap", "locations": "here", "styles": "modern"}])
def test_malformed_intent_means_no_preference(payload):
    assert intent_from_payload(payload) == ParsedIntent()


def test_intent_payload_is_camel_case():
    intent = intent_from_payload({"propertyTypes": ["condo"], "budget": {"max": 5e5}})
    out = intent_to_payload(intent)
    assert out["propertyTypes"] == ["condo"]
    assert out["budget"] == {"min": None, "max": 500000.0}
    assert intent_from_payload(out) == intent


def test_property_from_payload_normalizes_fields():
    prop = property_from_payload(
        {
            "id": 42,
            "latitude": "47.61",
            "longitude": "-122.33",
            "propertyType": "Single Family Residence",
            "architecturalStyle": "  Mid-Century   Modern",
            "bedrooms": "3",
            "sqft": 0,
            "absenteeOwner": "true",
            "taxStatus": "DELINQUENT",
            "listingStatus": "pending",
            "permitHistory": [{"type": "roof", "date": "2021-05-01"}, "junk"],
        }
    )

    assert prop.id == "42"
    assert prop.lat == 47.61
    assert prop.property_type == PropertyType.single_family
    assert prop.architectural_style == "mid-century modern"
    assert prop.bedrooms == 3.0
    assert prop.sqft is None
    assert prop.absentee_owner is True
    assert prop.tax_status == TaxStatus.delinquent
    assert prop.listing_status == ListingStatus.off_market
    assert len(prop.permit_history) == 1
    assert prop.permit_history[0].date == date(2021, 5, 1)


@pytest.mark.parametrize(
    "payload",
    [
        {"lat": 47.6, "lng": -122.3},
        {"id": "x", "lng": -122.3},
        {"id": "x", "lat": "n/a", "lng": -122.3},
    ],
)
def test_property_from_payload_requires_identity(payload):
    with pytest.raises(ValueError):
        property_from_payload(payload)


def test_property_payload_survives_a_json_catalog(make_property):
    prop = make_property(last_sale_date=date(2010, 6, 1), tax_status=TaxStatus.delinquent)
    assert property_from_payload(property_to_payload(prop)) == prop


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Condominium", PropertyType.condo),
        ("Townhome", PropertyType.townhouse),
        ("Duplex", PropertyType.multi_family),
        ("Vacant", PropertyType.land),
        ("SFR", PropertyType.single_family),
        ("houseboat", PropertyType.other),
        (None, PropertyType.other),
    ],
)
def test_normalize_property_type(raw, expected):
    assert normalize_property_type(raw) == expected
