"""Tool result models - external search provider data shapes."""

from pydantic import BaseModel, Field

from backend.tripplanner.models.common import Money


class FlightSlice(BaseModel):
    """One leg of a flight offer."""

    origin: str
    destination: str
    departure: str
    arrival: str
    duration: str
    carrier: str
    stops: int = 0


class FlightOffer(BaseModel):
    """Priced flight offer; price covers all passengers."""

    offer_id: str
    price: Money
    slices: list[FlightSlice] = Field(default_factory=list)


class HotelOffer(BaseModel):
    """Hotel search result."""

    name: str
    rate_per_night: Money | None = None
    rating: float | None = None
    hotel_class: int | None = None
    amenities: list[str] = Field(default_factory=list)
    latitude: float | None = None
    longitude: float | None = None


class ActivityOffer(BaseModel):
    """Activity, restaurant or tour search result."""

    title: str
    category: str | None = None
    price: Money | None = None
    rating: float | None = None
    address: str | None = None
    indoor: bool | None = None
    description: str | None = None


class WeatherReading(BaseModel):
    """Current weather at a location."""

    location: str
    condition: str
    temperature_c: float
    wind_kmh: float
