"""Itinerary document store.

Every mutation is a single read-modify-write of one session's complete
document: load (cache first), apply in memory, persist the whole document.
Mutations on the same session id are serialized by a per-session lock held
from load until persist; different sessions never contend.
"""

import logging
import threading
import time
from collections.abc import Callable, Iterator, Mapping
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import UTC, date, datetime, timedelta
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from backend.tripplanner.db.repositories import ItineraryRepository
from backend.tripplanner.itinerary.budget import compute_budget
from backend.tripplanner.itinerary.dates import empty_days
from backend.tripplanner.itinerary.errors import (
    DateNotFoundError,
    ItineraryError,
    ItineraryValidationError,
    SessionFinalizedError,
    SessionNotFoundError,
)
from backend.tripplanner.models.common import PERIODS, Money, Period, SessionStatus
from backend.tripplanner.models.itinerary import (
    Accommodation,
    ActivityItem,
    BudgetOverrides,
    BudgetSummary,
    DayPlan,
    ItinerarySession,
)
from backend.tripplanner.models.preferences import Preferences
from backend.tripplanner.utils.logging import StructuredStoreLogger
from backend.tripplanner.utils.metrics import PrometheusStoreMetrics

logger = logging.getLogger(__name__)

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)


@dataclass(frozen=True)
class RemovalResult:
    """Outcome of a bulk activity removal over the selected days and periods."""

    removed: int
    remaining: int


@dataclass(frozen=True)
class FinalizeResult:
    """Terminal acknowledgment for a session."""

    status: str
    itinerary_id: str
    confirmation: str


class SessionLockRegistry:
    """Hands out one lock per session id."""

    def __init__(self) -> None:
        self._locks: dict[str, threading.Lock] = {}
        self._guard = threading.Lock()

    def lock_for(self, session_id: str) -> threading.Lock:
        with self._guard:
            lock = self._locks.get(session_id)
            if lock is None:
                lock = threading.Lock()
                self._locks[session_id] = lock
            return lock

    def discard(self, session_id: str) -> None:
        with self._guard:
            self._locks.pop(session_id, None)

    def __contains__(self, session_id: str) -> bool:
        with self._guard:
            return session_id in self._locks


def _validate(model: type[M], value: M | Mapping[str, Any], what: str) -> M:
    """Validate a payload against a closed schema."""
    if isinstance(value, model):
        return value
    try:
        return model.model_validate(value)
    except ValidationError as e:
        raise ItineraryValidationError(
            f"Invalid {what}: {e.error_count()} validation error(s)",
            errors=e.errors(include_url=False, include_context=False),
        ) from e


def _parse_period(period: Period | str) -> Period:
    try:
        return Period(period)
    except ValueError as e:
        raise ItineraryValidationError(
            f"Invalid period: {period!r}",
            errors=[{"loc": ["period"], "msg": "must be morning, afternoon or evening"}],
        ) from e


def _confirmation_millis(session: ItinerarySession) -> int | None:
    if not session.confirmation:
        return None
    _, _, suffix = session.confirmation.rpartition("-")
    return int(suffix) if suffix.isdigit() else None


class ItineraryStore:
    """Mutation and query operations over per-session itinerary documents."""

    def __init__(
        self,
        repository: ItineraryRepository,
        *,
        lock_after_finalize: bool = False,
        clock: Callable[[], datetime] | None = None,
        locks: SessionLockRegistry | None = None,
        op_logger: StructuredStoreLogger | None = None,
        metrics: PrometheusStoreMetrics | None = None,
    ) -> None:
        """Initialize the store.

        Args:
            repository: Durable (optionally cached) document repository
            lock_after_finalize: Reject mutations of finalized sessions
                instead of applying them with a warning
            clock: Source of UTC timestamps (default: datetime.now(UTC))
            locks: Per-session lock registry (default: private registry)
            op_logger: Structured operation logger
            metrics: Operation metrics sink
        """
        self._repository = repository
        self._lock_after_finalize = lock_after_finalize
        self._clock = clock or (lambda: datetime.now(UTC))
        self._locks = locks or SessionLockRegistry()
        self._op_logger = op_logger or StructuredStoreLogger()
        self._metrics = metrics or PrometheusStoreMetrics()

    @property
    def repository(self) -> ItineraryRepository:
        return self._repository

    # Plumbing

    @contextmanager
    def _operation(self, operation: str, session_id: str) -> Iterator[None]:
        started = time.perf_counter()
        outcome = "success"
        error_reason: str | None = None
        try:
            yield
        except ItineraryError as e:
            outcome = e.code
            error_reason = str(e)
            raise
        except Exception as e:
            outcome = "error"
            error_reason = type(e).__name__
            raise
        finally:
            latency_ms = (time.perf_counter() - started) * 1000
            self._metrics.record_operation(operation, outcome, latency_ms)
            self._op_logger.log_operation(session_id, operation, outcome, latency_ms, error_reason)

    def _require(self, session_id: str) -> ItinerarySession:
        session = self._repository.load(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)
        return session

    def _require_day(self, session: ItinerarySession, day: date) -> DayPlan:
        plan = session.find_day(day)
        if plan is None:
            raise DateNotFoundError(session.id, day)
        return plan

    def _check_mutable(self, session: ItinerarySession, operation: str) -> None:
        if session.status != SessionStatus.finalized:
            return
        if self._lock_after_finalize:
            raise SessionFinalizedError(session.id)
        logger.warning("%s on finalized itinerary %s", operation, session.id)

    def _persist(self, session: ItinerarySession) -> None:
        session.updated_at = self._clock()
        self._repository.save(session)

    def _mutate(
        self, operation: str, session_id: str, apply: Callable[[ItinerarySession], T]
    ) -> T:
        with self._operation(operation, session_id), self._locks.lock_for(session_id):
            session = self._require(session_id)
            self._check_mutable(session, operation)
            result = apply(session)
            self._persist(session)
            return result

    # Operations

    def create_session(
        self,
        session_id: str,
        origin: str,
        destinations: list[str],
        start_date: date,
        end_date: date,
        num_travelers: int = 1,
        currency: str = "USD",
    ) -> ItinerarySession:
        """Create (or reset) a session with one empty day per trip date.

        An existing session with the same id is overwritten entirely.

        Raises:
            InvalidRangeError: If end_date is before start_date; nothing is stored.
            ItineraryValidationError: If any other field is malformed.
        """
        with self._operation("create_session", session_id), self._locks.lock_for(session_id):
            days = empty_days(start_date, end_date)
            try:
                session = ItinerarySession(
                    id=session_id,
                    origin=origin,
                    destinations=destinations,
                    start_date=start_date,
                    end_date=end_date,
                    num_travelers=num_travelers,
                    currency=currency,
                    days=days,
                    updated_at=self._clock(),
                )
            except ValidationError as e:
                raise ItineraryValidationError(
                    f"Invalid itinerary: {e.error_count()} validation error(s)",
                    errors=e.errors(include_url=False, include_context=False),
                ) from e

            self._repository.save(session)
            return session

    def update_preferences(
        self, session_id: str, preferences: Preferences | Mapping[str, Any]
    ) -> Preferences:
        """Shallow-merge a partial preference update into the session.

        Returns:
            The merged preferences
        """
        update = _validate(Preferences, preferences, "preferences")

        def apply(session: ItinerarySession) -> Preferences:
            session.preferences = session.preferences.merged_with(update)
            return session.preferences

        return self._mutate("update_preferences", session_id, apply)

    def add_activity(
        self,
        session_id: str,
        day: date,
        period: Period | str,
        activity: ActivityItem | Mapping[str, Any],
    ) -> int:
        """Append an activity to one period of one day.

        Returns:
            Number of activities now in that period
        """
        slot = _parse_period(period)
        item = _validate(ActivityItem, activity, "activity")

        def apply(session: ItinerarySession) -> int:
            items = self._require_day(session, day).activities(slot)
            items.append(item)
            return len(items)

        return self._mutate("add_activity", session_id, apply)

    def set_accommodation(
        self,
        session_id: str,
        day: date,
        hotel_name: str,
        price_per_night: Money | Mapping[str, Any] | None = None,
    ) -> Accommodation:
        """Replace the accommodation for one day."""
        price = None
        if price_per_night is not None:
            price = _validate(Money, price_per_night, "price_per_night")
        accommodation = _validate(
            Accommodation, {"hotel_name": hotel_name, "price_per_night": price}, "accommodation"
        )

        def apply(session: ItinerarySession) -> Accommodation:
            self._require_day(session, day).accommodation = accommodation
            return accommodation

        return self._mutate("set_accommodation", session_id, apply)

    def get_itinerary(self, session_id: str) -> ItinerarySession:
        """Return the current document."""
        with self._operation("get_itinerary", session_id):
            return self._require(session_id)

    def remove_activities(
        self,
        session_id: str,
        day: date | None = None,
        period: Period | str | None = None,
        title_contains: str | None = None,
    ) -> RemovalResult:
        """Remove activities matching the filters.

        Args:
            session_id: Session id
            day: Restrict to this date (all days if None)
            period: Restrict to this period ("all" or None means every period)
            title_contains: Case-insensitive title substring (everything if empty)

        Returns:
            Counts of removed activities and of those left in the selection

        Raises:
            DateNotFoundError: If day is given but not part of the trip
        """
        if period is None or period == "all":
            periods: tuple[Period, ...] = PERIODS
        else:
            periods = (_parse_period(period),)
        needle = title_contains.lower() if title_contains else None

        def matches(item: ActivityItem) -> bool:
            return needle is None or needle in item.title.lower()

        with self._operation("remove_activities", session_id), self._locks.lock_for(session_id):
            session = self._require(session_id)
            targets = [self._require_day(session, day)] if day is not None else session.days

            removed = 0
            remaining = 0
            for plan in targets:
                for slot in periods:
                    kept = [item for item in plan.activities(slot) if not matches(item)]
                    removed += len(plan.activities(slot)) - len(kept)
                    remaining += len(kept)
                    plan.replace_activities(slot, kept)

            if removed:
                self._check_mutable(session, "remove_activities")
                self._persist(session)

            return RemovalResult(removed=removed, remaining=remaining)

    def summarize_budget(
        self,
        session_id: str,
        overrides: BudgetOverrides | Mapping[str, Any] | None = None,
    ) -> BudgetSummary:
        """Recompute and store the session's budget totals."""
        parsed = None
        if overrides is not None:
            parsed = _validate(BudgetOverrides, overrides, "overrides")

        def apply(session: ItinerarySession) -> BudgetSummary:
            session.totals = compute_budget(session, parsed)
            return session.totals

        return self._mutate("summarize_budget", session_id, apply)

    def finalize_session(self, session_id: str) -> FinalizeResult:
        """Mark the session finalized and mint a confirmation token.

        Calling it again mints a new, distinct token; day plans, preferences
        and totals are never touched.
        """
        with self._operation("finalize_session", session_id), self._locks.lock_for(session_id):
            session = self._require(session_id)
            now = self._clock()

            millis = int(now.timestamp() * 1000)
            previous = _confirmation_millis(session)
            if previous is not None and millis <= previous:
                millis = previous + 1

            session.status = SessionStatus.finalized
            session.finalized_at = now
            session.confirmation = f"{session_id}-{millis}"
            self._persist(session)

            return FinalizeResult(
                status="finalized", itinerary_id=session_id, confirmation=session.confirmation
            )

    def purge_expired(self, now: datetime, retention: timedelta) -> list[str]:
        """Delete sessions not updated within the retention window.

        Returns:
            Ids of deleted sessions
        """
        cutoff = now - retention
        deleted: list[str] = []
        for session_id in self._repository.list_ids():
            with self._locks.lock_for(session_id):
                session = self._repository.load(session_id)
                if session is None or session.updated_at >= cutoff:
                    continue
                if self._repository.delete(session_id):
                    deleted.append(session_id)
                    self._locks.discard(session_id)

        if deleted:
            logger.info("Purged %d expired itineraries", len(deleted))
        return deleted
