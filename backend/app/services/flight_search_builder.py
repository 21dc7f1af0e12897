"""Flight search request builder — resolves locations and builds Duffel offer requests."""

import logging
import re

from app.schemas.flight import FlightSearchRequest
from app.services.airport_service import AirportService, airport_service

logger = logging.getLogger(__name__)

_CODE_RE = re.compile(r"^[A-Z]{3}$")
_EMBEDDED_CODE_RE = re.compile(r"\b[A-Z]{3}\b")


class LocationNotFoundError(ValueError):
    """Raised when a free-text location matches no airport."""

    def __init__(self, value: str):
        super().__init__(f"No airport found for {value!r}")
        self.value = value


def extract_airport_code(value: str) -> str | None:
    """Pull an IATA code out of UI input.

    "MCI - Kansas City International Airport" -> "MCI" (any case), "LHR" -> "LHR",
    "London (LHR)" -> "LHR". Free text with no code returns None.
    """
    if not value:
        return None
    value = value.strip()

    if " - " in value:
        head = value.split(" - ", 1)[0].strip().upper()
        if _CODE_RE.match(head):
            return head

    if _CODE_RE.match(value):
        return value

    match = _EMBEDDED_CODE_RE.search(value)
    return match.group(0) if match else None


class FlightSearchBuilder:
    """Turns a flight search form into a Duffel offer-request payload."""

    def __init__(self, airports: AirportService | None = None):
        self._airports = airports or airport_service

    async def resolve_location(self, value: str) -> str:
        code = extract_airport_code(value)
        if code:
            return code

        code = await self._airports.resolve_iata(value)
        if code is None:
            raise LocationNotFoundError(value)
        logger.info(f"Resolved {value!r} to {code}")
        return code

    async def build(self, request: FlightSearchRequest) -> dict:
        origin = await self.resolve_location(request.origin)
        destination = await self.resolve_location(request.destination)

        slices = [{
            "origin": origin,
            "destination": destination,
            "departure_date": request.departure_date.isoformat(),
        }]
        if request.return_date:
            slices.append({
                "origin": destination,
                "destination": origin,
                "departure_date": request.return_date.isoformat(),
            })

        pax = request.passengers
        passengers = (
            [{"type": "adult"} for _ in range(pax.adults)]
            + [{"type": "child"} for _ in range(pax.children)]
            + [{"type": "infant_without_seat"} for _ in range(pax.infants)]
        )

        return {
            "data": {
                "slices": slices,
                "passengers": passengers,
                "cabin_class": request.cabin_class,
            }
        }


flight_search_builder = FlightSearchBuilder()
