from app.models.airport import Airport

__all__ = [
    "Airport",
]
