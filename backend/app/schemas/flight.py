from datetime import date
from typing import Literal

from pydantic import AliasChoices, BaseModel, Field, field_validator, model_validator


class Passengers(BaseModel):
    adults: int = Field(1, ge=1, le=9)
    children: int = Field(0, ge=0, le=8)
    infants: int = Field(0, ge=0, le=8)

    @model_validator(mode="after")
    def _infants_need_adults(self):
        if self.infants > self.adults:
            raise ValueError("each infant must travel with an adult")
        return self


class FlightSearchRequest(BaseModel):
    origin: str = Field(min_length=2)  # IATA code, "MCI - Kansas City ..." or free text
    destination: str = Field(min_length=2)
    departure_date: date = Field(validation_alias=AliasChoices("departure_date", "departureDate"))
    return_date: date | None = Field(
        default=None, validation_alias=AliasChoices("return_date", "returnDate")
    )
    passengers: Passengers = Field(default_factory=Passengers)
    cabin_class: Literal["economy", "premium_economy", "business", "first"] = Field(
        default="economy", validation_alias=AliasChoices("cabin_class", "cabinClass")
    )

    @field_validator("return_date", mode="before")
    @classmethod
    def _blank_return(cls, v):
        return None if v == "" else v

    @field_validator("passengers", mode="before")
    @classmethod
    def _passenger_count(cls, v):
        if isinstance(v, int):
            return {"adults": v}
        if v is None:
            return {}
        return v

    @model_validator(mode="after")
    def _return_after_departure(self):
        if self.return_date and self.return_date < self.departure_date:
            raise ValueError("return_date must not be before departure_date")
        return self


class FlightSearchResponse(BaseModel):
    origin: str
    destination: str
    offer_request: dict
    offers: list[dict]
