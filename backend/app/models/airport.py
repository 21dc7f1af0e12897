from datetime import datetime
from decimal import Decimal

from sqlalchemy import DateTime, Integer, Numeric, String, func
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.schemas.airport import AirportRecord


class Airport(Base):
    __tablename__ = "airports"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    iata_code: Mapped[str] = mapped_column(String(3), nullable=False, unique=True, index=True)
    icao_code: Mapped[str | None] = mapped_column(String(4))
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    city_name: Mapped[str | None] = mapped_column(String(100), index=True)
    country_code: Mapped[str] = mapped_column(String(2), nullable=False)
    country_name: Mapped[str | None] = mapped_column(String(100))
    time_zone: Mapped[str | None] = mapped_column(String(64))
    latitude: Mapped[Decimal | None] = mapped_column(Numeric(9, 6))
    longitude: Mapped[Decimal | None] = mapped_column(Numeric(9, 6))
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    def to_record(self) -> AirportRecord:
        return AirportRecord(
            iata_code=self.iata_code,
            icao_code=self.icao_code,
            name=self.name,
            city_name=self.city_name or "",
            country_code=self.country_code,
            country_name=self.country_name or "",
        )
