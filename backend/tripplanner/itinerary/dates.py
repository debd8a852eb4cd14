"""Calendar date range expansion."""

from datetime import date, timedelta

from backend.tripplanner.itinerary.errors import InvalidRangeError
from backend.tripplanner.models.itinerary import DayPlan


def enumerate_dates(start: date, end: date) -> list[date]:
    """List every calendar date from start to end inclusive.

    Plain `date` arithmetic has no timezone, so DST transitions cannot
    shift or duplicate a day.

    Raises:
        InvalidRangeError: If end is before start.
    """
    if end < start:
        raise InvalidRangeError(start, end)

    span = (end - start).days
    return [start + timedelta(days=offset) for offset in range(span + 1)]


def empty_days(start: date, end: date) -> list[DayPlan]:
    """Seed one empty day plan per date in the range."""
    return [DayPlan(date=d) for d in enumerate_dates(start, end)]
