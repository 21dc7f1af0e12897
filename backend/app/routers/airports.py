"""Airport search router — autocomplete, general search and single-airport lookup."""

from fastapi import APIRouter, HTTPException, Query

from app.config import settings
from app.schemas.airport import AirportAutocompleteResponse, AirportRecord
from app.services.airport_service import airport_service

router = APIRouter()


@router.get("", response_model=AirportAutocompleteResponse)
async def autocomplete_airports(
    q: str = Query(""),
    limit: int = Query(settings.autocomplete_limit, ge=1, le=50),
):
    """Autocomplete: ranked airports for the search box. Short queries return no data."""
    return {"data": await airport_service.search_airports(q, limit)}


@router.get("/search", response_model=list[AirportRecord])
async def search_airports(
    q: str = Query(..., min_length=1),
    limit: int = Query(settings.search_limit, ge=1, le=50),
):
    """Search airports by city, IATA code, airport or country name."""
    return await airport_service.search_airports(q, limit)


@router.get("/{iata}", response_model=AirportRecord)
async def get_airport(iata: str):
    """Look up one airport by IATA code."""
    if len(iata) != 3 or not iata.isalpha():
        raise HTTPException(status_code=400, detail="IATA code must be 3 letters")
    airport = await airport_service.get_airport(iata)
    if airport is None:
        raise HTTPException(status_code=404, detail="Airport not found")
    return airport
