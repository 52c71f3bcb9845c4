# dreamhouse/adapters/repos/properties.py
from __future__ import annotations

import json
from datetime import datetime
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ...domain.records import property_from_payload, property_to_payload
from ...domain.types import PropertyRecord
from ...models import Property


def _loads_list(raw: str | None) -> list[Any]:
    if not raw:
        return []
    try:
        v = json.loads(raw)
    except json.JSONDecodeError:
        return []
    return v if isinstance(v, list) else []


class PropertyRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, property_id: str) -> Property | None:
        return await self.session.get(Property, property_id)

    async def list_by_market(self, market_id: str, *, limit: int = 1000) -> list[Property]:
        q = select(Property).where(Property.market_id == market_id).order_by(Property.id).limit(limit)
        return list((await self.session.execute(q)).scalars().all())

    async def upsert_from_payload(self, payload: dict[str, Any]) -> Property:
        """
        Upsert keyed on the property id. The payload goes through the same
        canonicalization as JSON catalogs, so camelCase (ingestion) and
        snake_case keys both work. Raises ValueError without id/coordinates.
        """
        rec = property_from_payload(payload)

        prop = await self.get(rec.id)
        if prop is None:
            prop = Property(id=rec.id)
            self.session.add(prop)

        self._apply(prop, rec)
        prop.updated_at = datetime.utcnow()

        await self.session.flush()
        return prop

    @staticmethod
    def _apply(prop: Property, rec: PropertyRecord) -> None:
        data = property_to_payload(rec)

        prop.market_id = rec.market_id
        prop.parcel_id = rec.parcel_id
        prop.address = rec.address
        prop.city = rec.city
        prop.state = rec.state
        prop.zip = rec.zip
        prop.lat = rec.lat
        prop.lng = rec.lng

        prop.bedrooms = rec.bedrooms
        prop.bathrooms = rec.bathrooms
        prop.sqft = rec.sqft
        prop.lot_sqft = rec.lot_sqft
        prop.year_built = rec.year_built

        prop.property_type = rec.property_type.value
        prop.architectural_style = rec.architectural_style
        prop.features_json = json.dumps(data["features"])

        prop.last_sale_date = rec.last_sale_date
        prop.last_sale_price = rec.last_sale_price
        prop.estimated_value = rec.estimated_value

        prop.owner_name = rec.owner_name
        prop.owner_mailing_address = rec.owner_mailing_address
        prop.absentee_owner = rec.absentee_owner
        prop.ownership_years = rec.ownership_years
        prop.equity_estimate = rec.equity_estimate
        prop.tax_status = rec.tax_status.value
        prop.permit_history_json = json.dumps(data["permitHistory"])

        prop.listing_status = rec.listing_status.value
        prop.listing_price = rec.listing_price
        prop.mls_number = rec.mls_number
        prop.photo_urls_json = json.dumps(data["photoUrls"])
        prop.data_sources_json = json.dumps(data["dataSources"])

    @staticmethod
    def to_record(row: Property) -> PropertyRecord:
        """
        Row -> immutable PropertyRecord. Routed through the payload
        canonicalizer so DB rows and JSON catalog rows can never drift apart.
        """
        return property_from_payload(
            {
                "id": row.id,
                "marketId": row.market_id,
                "parcelId": row.parcel_id,
                "address": row.address,
                "city": row.city,
                "state": row.state,
                "zip": row.zip,
                "lat": row.lat,
                "lng": row.lng,
                "bedrooms": row.bedrooms,
                "bathrooms": row.bathrooms,
                "sqft": row.sqft,
                "lotSqft": row.lot_sqft,
                "yearBuilt": row.year_built,
                "propertyType": row.property_type,
                "architecturalStyle": row.architectural_style,
                "features": _loads_list(row.features_json),
                "lastSaleDate": row.last_sale_date,
                "lastSalePrice": row.last_sale_price,
                "estimatedValue": row.estimated_value,
                "ownerName": row.owner_name,
                "ownerMailingAddress": row.owner_mailing_address,
                "absenteeOwner": row.absentee_owner,
                "ownershipYears": row.ownership_years,
                "equityEstimate": row.equity_estimate,
                "taxStatus": row.tax_status,
                "permitHistory": _loads_list(row.permit_history_json),
                "listingStatus": row.listing_status,
                "listingPrice": row.listing_price,
                "mlsNumber": row.mls_number,
                "photoUrls": _loads_list(row.photo_urls_json),
                "dataSources": _loads_list(row.data_sources_json),
            }
        )
