"""Tests that stub providers satisfy the provider contracts and feed the store."""

import asyncio
from datetime import date

import pytest

from backend.tripplanner.adapters.contracts import (
    ActivitySearchProvider,
    CabinClass,
    FlightSearchProvider,
    HotelSearchProvider,
    ProviderError,
    WeatherProvider,
)
from backend.tripplanner.adapters.selection import (
    accommodation_from_offer,
    activity_from_offer,
    flight_overrides,
)
from backend.tripplanner.itinerary.store import ItineraryStore
from backend.tripplanner.models import (
    ActivityOffer,
    FlightOffer,
    FlightSlice,
    HotelOffer,
    Money,
    WeatherReading,
)


class StubFlights:
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
        if origin == destination:
            raise ProviderError("origin and destination must differ")
        leg = FlightSlice(
            origin=origin,
            destination=destination,
            departure=f"{departure_date.isoformat()}T08:00",
            arrival=f"{departure_date.isoformat()}T20:00",
            duration="PT7H",
            carrier="AF",
        )
        price = Money(amount=310.0 * adults, currency="USD")
        return [FlightOffer(offer_id="off_1", price=price, slices=[leg])]


class StubHotels:
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
        rate = Money(amount=150, currency=currency)
        return [HotelOffer(name=f"Hotel {location}", rate_per_night=rate)]


class StubActivities:
    async def search(
        self,
        location: str,
        category: str | None = None,
        day: date | None = None,
        weather: WeatherReading | None = None,
    ) -> list[ActivityOffer]:
        indoor = weather is not None and weather.condition == "rain"
        return [
            ActivityOffer(
                title="Louvre Museum" if indoor else "Seine walk",
                category=category,
                price=Money(amount=20, currency="USD") if indoor else None,
                indoor=indoor,
            )
        ]


class StubWeather:
    async def current(self, location: str) -> WeatherReading:
        return WeatherReading(location=location, condition="rain", temperature_c=14, wind_kmh=9)


async def plan_day(
    store: ItineraryStore,
    session_id: str,
    flights: FlightSearchProvider,
    hotels: HotelSearchProvider,
    activities: ActivitySearchProvider,
    weather: WeatherProvider,
) -> None:
    day = date(2025, 6, 1)
    outbound = (await flights.search("NYC", "Paris", day, adults=2))[0]
    hotel = (await hotels.search("Paris", day, date(2025, 6, 3)))[0]
    reading = await weather.current("Paris")
    activity = (await activities.search("Paris", category="museum", day=day, weather=reading))[0]

    store.add_activity(session_id, day, "morning", activity_from_offer(activity, "09:00"))
    for night in (date(2025, 6, 1), date(2025, 6, 2)):
        store.set_accommodation(session_id, night, **accommodation_from_offer(hotel).model_dump())
    store.summarize_budget(session_id, flight_overrides(outbound))


def test_stub_providers_drive_store(store: ItineraryStore, paris_trip: str) -> None:
    asyncio.run(
        plan_day(store, paris_trip, StubFlights(), StubHotels(), StubActivities(), StubWeather())
    )

    session = store.get_itinerary(paris_trip)
    assert session.days[0].morning[0].title == "Louvre Museum"
    assert session.totals is not None
    assert session.totals.flights_total == 620
    assert session.totals.accommodation_total == 300
    assert session.totals.grand_total == 940


def test_provider_error_surfaces() -> None:
    with pytest.raises(ProviderError):
        asyncio.run(StubFlights().search("CDG", "CDG", date(2025, 6, 1)))
