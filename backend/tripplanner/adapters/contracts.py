"""Call shapes of the external search providers the orchestrator uses.

Public API for the external orchestrator. The itinerary store never calls
these; the orchestrator does, and hands the chosen offer to the store through
the helpers in adapters.selection.
"""

from datetime import date
from typing import Literal, Protocol

from backend.tripplanner.models.tool_results import (
    ActivityOffer,
    FlightOffer,
    HotelOffer,
    WeatherReading,
)

CabinClass = Literal["economy", "premium_economy", "business", "first"]


class ProviderError(Exception):
    """Upstream provider failed; the orchestrator retries with adjusted parameters."""

    pass


class FlightSearchProvider(Protocol):
    """Flight offer search."""

    async def search(
        self,
        origin: str,
        destination: str,
        departure_date: date,
        adults: int = 1,
        cabin_class: CabinClass = "economy",
        return_date: date | None = None,
        max_connections: int | None = None,
    ) -> list[FlightOffer]:
        """Ranked priced offers.

        Raises:
            ProviderError: On upstream failure
        """
        ...


class HotelSearchProvider(Protocol):
    """Hotel search by location and stay dates."""

    async def search(
        self,
        location: str,
        check_in_date: date,
        check_out_date: date,
        adults: int = 2,
        children: int = 0,
        rooms: int = 1,
        currency: str = "USD",
    ) -> list[HotelOffer]:
        ...


class ActivitySearchProvider(Protocol):
    """Activity, restaurant and tour search."""

    async def search(
        self,
        location: str,
        category: str | None = None,
        day: date | None = None,
        weather: WeatherReading | None = None,
    ) -> list[ActivityOffer]:
        ...


class WeatherProvider(Protocol):
    """Current weather lookup."""

    async def current(self, location: str) -> WeatherReading:
        ...
