"""Budget aggregation over the current itinerary document.

Totals are always recomputed from the day plans; nothing is tracked
incrementally. Flights are not modeled in the document, so their total only
ever comes from an override or the previously stored summary.
"""

from backend.tripplanner.models.common import PERIODS
from backend.tripplanner.models.itinerary import BudgetOverrides, BudgetSummary, ItinerarySession


def activities_total(session: ItinerarySession) -> float:
    """Sum every priced activity across all days and periods."""
    total = 0.0
    for day in session.days:
        for period in PERIODS:
            for activity in day.activities(period):
                if activity.price is not None:
                    total += activity.price.amount
    return total


def accommodation_total(session: ItinerarySession) -> float:
    """Sum nightly hotel prices, skipping the checkout day.

    The last day of the trip is never billed since no night is stayed.
    """
    total = 0.0
    for day in session.days[:-1]:
        if day.accommodation is not None and day.accommodation.price_per_night is not None:
            total += day.accommodation.price_per_night.amount
    return total


def compute_budget(
    session: ItinerarySession, overrides: BudgetOverrides | None = None
) -> BudgetSummary:
    """Compute a fresh budget summary.

    Args:
        session: Current itinerary document
        overrides: Optional caller-supplied totals; each one set wins over
            the computed (or, for flights, previously stored) value

    Returns:
        Summary with grand_total and per_person derived from the three totals
    """
    overrides = overrides or BudgetOverrides()
    previous_flights = session.totals.flights_total if session.totals is not None else 0.0

    flights = overrides.flights_total if overrides.flights_total is not None else previous_flights
    lodging = (
        overrides.accommodation_total
        if overrides.accommodation_total is not None
        else accommodation_total(session)
    )
    activities = (
        overrides.activities_total
        if overrides.activities_total is not None
        else activities_total(session)
    )

    grand_total = flights + lodging + activities
    per_person = grand_total / session.num_travelers if session.num_travelers > 0 else grand_total

    return BudgetSummary(
        flights_total=flights,
        accommodation_total=lodging,
        activities_total=activities,
        grand_total=grand_total,
        per_person=per_person,
    )
