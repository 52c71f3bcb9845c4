# dreamhouse/domain/records.py
from __future__ import annotations

from typing import Any

from .parsing import get_first, to_bool, to_date, to_float, to_int, to_str_list
from .styles import normalize_style
from .types import ListingStatus, PermitRecord, PropertyRecord, PropertyType, TaxStatus


def _enum(cls: Any, raw: Any, default: Any) -> Any:
    if raw is None:
        return default
    try:
        return cls(str(raw).strip().lower())
    except ValueError:
        return default


def normalize_property_type(raw: str | None) -> PropertyType:
    """
    Map assessor / MLS type strings onto the six canonical property types.
    """
    if not raw:
        return PropertyType.other
    s = raw.strip().lower().replace("-", " ").replace("_", " ")

    if "condo" in s:
        return PropertyType.condo
    if "town" in s or "row" in s:
        return PropertyType.townhouse
    if any(k in s for k in ("multi", "duplex", "triplex", "fourplex", "apartment")):
        return PropertyType.multi_family
    if "land" in s or s in ("lot", "vacant"):
        return PropertyType.land
    if "single" in s or "sfr" in s or "residential" in s:
        return PropertyType.single_family
    return PropertyType.other


def _permits(raw: Any) -> tuple[PermitRecord, ...]:
    if not isinstance(raw, list):
        return ()
    out: list[PermitRecord] = []
    for item in raw:
        if not isinstance(item, dict):
            continue
        out.append(
            PermitRecord(
                type=str(item.get("type") or "").strip(),
                date=to_date(item.get("date")),
                description=str(item.get("description") or "").strip(),
                value=to_float(item.get("value")),
            )
        )
    return tuple(out)


def property_from_payload(payload: dict[str, Any]) -> PropertyRecord:
    """
    Canonical PropertyRecord from an ingested row (camelCase or snake_case).

    Raises ValueError when the identity or coordinates are missing; every
    other field is optional and left None when absent or unparseable.
    """
    prop_id = get_first(payload, "id", "propertyId", "property_id")
    lat = to_float(payload.get("lat", payload.get("latitude")))
    lng = to_float(get_first(payload, "lng", "lon", "longitude"))

    if prop_id is None or lat is None or lng is None:
        hint = {"id": bool(prop_id), "lat": lat is not None, "lng": lng is not None}
        raise ValueError(f"Missing required property identity fields. hint={hint}")

    raw_type = get_first(payload, "propertyType", "property_type")
    try:
        prop_type = PropertyType(str(raw_type)) if raw_type else PropertyType.other
    except ValueError:
        prop_type = normalize_property_type(str(raw_type))

    style = get_first(payload, "architecturalStyle", "architectural_style")

    return PropertyRecord(
        id=str(prop_id),
        lat=lat,
        lng=lng,
        market_id=str(get_first(payload, "marketId", "market_id") or "seattle"),
        parcel_id=get_first(payload, "parcelId", "parcel_id"),
        address=str(payload.get("address") or "").strip(),
        city=str(payload.get("city") or "").strip(),
        state=str(payload.get("state") or "").strip(),
        zip=str(get_first(payload, "zip", "zipCode", "zipcode") or "").strip(),
        bedrooms=to_float(get_first(payload, "bedrooms", "beds")),
        bathrooms=to_float(get_first(payload, "bathrooms", "baths")),
        sqft=to_int(get_first(payload, "sqft", "squareFeet")) or None,
        lot_sqft=to_int(get_first(payload, "lotSqft", "lot_sqft")),
        year_built=to_int(get_first(payload, "yearBuilt", "year_built")),
        property_type=prop_type,
        architectural_style=normalize_style(str(style)) if style else None,
        features=tuple(to_str_list(payload.get("features"))),
        last_sale_date=to_date(get_first(payload, "lastSaleDate", "last_sale_date")),
        last_sale_price=to_float(get_first(payload, "lastSalePrice", "last_sale_price")),
        estimated_value=to_float(get_first(payload, "estimatedValue", "estimated_value")),
        owner_name=get_first(payload, "ownerName", "owner_name"),
        owner_mailing_address=get_first(payload, "ownerMailingAddress", "owner_mailing_address"),
        absentee_owner=to_bool(get_first(payload, "absenteeOwner", "absentee_owner")),
        ownership_years=to_float(get_first(payload, "ownershipYears", "ownership_years")),
        equity_estimate=to_float(get_first(payload, "equityEstimate", "equity_estimate")),
        tax_status=_enum(TaxStatus, get_first(payload, "taxStatus", "tax_status"), TaxStatus.unknown),
        permit_history=_permits(get_first(payload, "permitHistory", "permit_history")),
        listing_status=_enum(
            ListingStatus, get_first(payload, "listingStatus", "listing_status"), ListingStatus.off_market
        ),
        listing_price=to_float(get_first(payload, "listingPrice", "listing_price")),
        mls_number=get_first(payload, "mlsNumber", "mls_number"),
        photo_urls=tuple(to_str_list(get_first(payload, "photoUrls", "photo_urls"))),
        data_sources=tuple(to_str_list(get_first(payload, "dataSources", "data_sources"))),
    )


def property_to_payload(prop: PropertyRecord) -> dict[str, Any]:
    """camelCase dict for API responses and JSON catalogs."""
    return {
        "id": prop.id,
        "marketId": prop.market_id,
        "parcelId": prop.parcel_id,
        "address": prop.address,
        "city": prop.city,
        "state": prop.state,
        "zip": prop.zip,
        "lat": prop.lat,
        "lng": prop.lng,
        "bedrooms": prop.bedrooms,
        "bathrooms": prop.bathrooms,
        "sqft": prop.sqft,
        "lotSqft": prop.lot_sqft,
        "yearBuilt": prop.year_built,
        "propertyType": prop.property_type.value,
        "architecturalStyle": prop.architectural_style,
        "features": list(prop.features),
        "lastSaleDate": prop.last_sale_date.isoformat() if prop.last_sale_date else None,
        "lastSalePrice": prop.last_sale_price,
        "estimatedValue": prop.estimated_value,
        "ownerName": prop.owner_name,
        "ownerMailingAddress": prop.owner_mailing_address,
        "absenteeOwner": prop.absentee_owner,
        "ownershipYears": prop.ownership_years,
        "equityEstimate": prop.equity_estimate,
        "taxStatus": prop.tax_status.value,
        "permitHistory": [
            {
                "type": p.type,
                "date": p.date.isoformat() if p.date else None,
                "description": p.description,
                "value": p.value,
            }
            for p in prop.permit_history
        ],
        "listingStatus": prop.listing_status.value,
        "listingPrice": prop.listing_price,
        "mlsNumber": prop.mls_number,
        "photoUrls": list(prop.photo_urls),
        "dataSources": list(prop.data_sources),
    }
