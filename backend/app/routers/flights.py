"""Flight search router — resolves locations, creates a Duffel offer request, returns offers."""

import logging

from fastapi import APIRouter, HTTPException

from app.schemas.flight import FlightSearchRequest, FlightSearchResponse
from app.services.duffel_client import DuffelAPIError, duffel_client
from app.services.flight_search_builder import LocationNotFoundError, flight_search_builder

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/flight-search", response_model=FlightSearchResponse)
async def flight_search(body: FlightSearchRequest):
    try:
        offer_request = await flight_search_builder.build(body)
    except LocationNotFoundError as e:
        raise HTTPException(status_code=422, detail=str(e))

    first_slice = offer_request["data"]["slices"][0]
    try:
        offers = await duffel_client.create_offer_request(offer_request)
    except DuffelAPIError as e:
        logger.error(f"Flight search failed for {first_slice['origin']}-{first_slice['destination']}: {e}")
        raise HTTPException(status_code=502, detail="Flight search provider unavailable")

    logger.info(
        f"Flight search {first_slice['origin']}-{first_slice['destination']}: {len(offers)} offers"
    )
    return FlightSearchResponse(
        origin=first_slice["origin"],
        destination=first_slice["destination"],
        offer_request=offer_request,
        offers=offers,
    )
