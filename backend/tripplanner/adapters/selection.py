"""Turn a chosen provider offer into itinerary store inputs.

Public helpers for the external orchestrator: after it picks an offer from a
search provider, these build the arguments for add_activity,
set_accommodation and the summarize_budget flight override. Nothing inside
the store calls them.
"""

from backend.tripplanner.models.itinerary import Accommodation, ActivityItem, BudgetOverrides
from backend.tripplanner.models.tool_results import ActivityOffer, FlightOffer, HotelOffer


def activity_from_offer(offer: ActivityOffer, time: str) -> ActivityItem:
    """Activity item for a selected venue at the given time label."""
    details = " - ".join(part for part in (offer.category, offer.address) if part) or None
    return ActivityItem(
        title=offer.title,
        time=time,
        price=offer.price.model_copy() if offer.price is not None else None,
        details=details,
    )


def accommodation_from_offer(offer: HotelOffer) -> Accommodation:
    """Accommodation record for a selected hotel."""
    return Accommodation(
        hotel_name=offer.name,
        price_per_night=offer.rate_per_night.model_copy() if offer.rate_per_night else None,
    )


def flight_overrides(*offers: FlightOffer) -> BudgetOverrides:
    """Budget override carrying the summed price of the chosen flights.

    Offer prices already cover every passenger on the booking.

    Raises:
        ValueError: If no offers are given or currencies differ
    """
    if not offers:
        raise ValueError("at least one flight offer is required")

    currencies = {offer.price.currency for offer in offers}
    if len(currencies) > 1:
        raise ValueError(f"flight offers use mixed currencies: {sorted(currencies)}")

    return BudgetOverrides(flights_total=sum(offer.price.amount for offer in offers))
