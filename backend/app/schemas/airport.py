from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class AirportRecord(BaseModel):
    """One airport as supplied by a directory source.

    Accepts both our field names and Duffel's (``iata_code``, ``city_name``,
    ``iata_country_code``...). Immutable for the lifetime of a ranking call.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    iata_code: str = Field(validation_alias=AliasChoices("iata_code", "iataCode", "iata"))
    icao_code: str | None = Field(default=None, validation_alias=AliasChoices("icao_code", "icaoCode"))
    name: str = ""
    city_name: str = Field(default="", validation_alias=AliasChoices("city_name", "cityName", "city"))
    country_code: str = Field(
        default="",
        validation_alias=AliasChoices("country_code", "countryCode", "iata_country_code"),
    )
    country_name: str = Field(default="", validation_alias=AliasChoices("country_name", "countryName"))

    @field_validator("iata_code")
    @classmethod
    def _upper_iata(cls, v: str) -> str:
        v = v.strip().upper()
        if len(v) != 3 or not v.isalpha():
            raise ValueError(f"invalid IATA code: {v!r}")
        return v

    @field_validator("city_name", "name", "country_name", "country_code", mode="before")
    @classmethod
    def _none_to_empty(cls, v):
        return "" if v is None else v

    @field_validator("country_code")
    @classmethod
    def _upper_country(cls, v: str) -> str:
        return v.strip().upper()


class AirportAutocompleteResponse(BaseModel):
    data: list[AirportRecord]
