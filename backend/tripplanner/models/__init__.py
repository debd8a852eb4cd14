"""Models package - re-exports for convenience."""

from backend.tripplanner.models.common import PERIODS, Money, Period, SessionStatus, TravelStyle
from backend.tripplanner.models.itinerary import (
    Accommodation,
    ActivityItem,
    BudgetOverrides,
    BudgetSummary,
    DayPlan,
    ItinerarySession,
)
from backend.tripplanner.models.preferences import Preferences
from backend.tripplanner.models.tool_results import (
    ActivityOffer,
    FlightOffer,
    FlightSlice,
    HotelOffer,
    WeatherReading,
)

__all__ = [
    # Common
    "Money",
    "Period",
    "PERIODS",
    "TravelStyle",
    "SessionStatus",
    # Preferences
    "Preferences",
    # Itinerary
    "ItinerarySession",
    "DayPlan",
    "ActivityItem",
    "Accommodation",
    "BudgetSummary",
    "BudgetOverrides",
    # Tool results
    "FlightOffer",
    "FlightSlice",
    "HotelOffer",
    "ActivityOffer",
    "WeatherReading",
]
