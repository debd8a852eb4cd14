"""Typed failures raised by the itinerary store."""

from datetime import date
from typing import Any


class ItineraryError(Exception):
    """Base class for all itinerary store failures."""

    code = "itinerary_error"


class SessionNotFoundError(ItineraryError):
    """No document exists for the session id."""

    code = "session_not_found"

    def __init__(self, session_id: str) -> None:
        super().__init__(f"Itinerary not found: {session_id}")
        self.session_id = session_id


class DateNotFoundError(ItineraryError):
    """Date is outside the session's fixed day range."""

    code = "date_not_found"

    def __init__(self, session_id: str, day: date) -> None:
        super().__init__(f"Date not in itinerary: {day.isoformat()}")
        self.session_id = session_id
        self.date = day


class InvalidRangeError(ItineraryError):
    """End date precedes start date."""

    code = "invalid_range"

    def __init__(self, start: date, end: date) -> None:
        super().__init__(
            f"end_date {end.isoformat()} is before start_date {start.isoformat()}"
        )
        self.start = start
        self.end = end


class ItineraryValidationError(ItineraryError):
    """Payload failed schema checks."""

    code = "validation_error"

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []


class StorageError(ItineraryError):
    """Durable read or write failed."""

    code = "storage_error"


class SessionFinalizedError(ItineraryError):
    """Mutation attempted on a finalized session while finalization locks it."""

    code = "session_finalized"

    def __init__(self, session_id: str) -> None:
        super().__init__(f"Itinerary is finalized: {session_id}")
        self.session_id = session_id
