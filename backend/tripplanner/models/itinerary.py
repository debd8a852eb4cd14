"""Itinerary models - the persisted per-session document."""

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from backend.tripplanner.models.common import (
    PERIODS,
    Money,
    Period,
    SessionStatus,
    StrictAmount,
)
from backend.tripplanner.models.preferences import Preferences


class ActivityItem(BaseModel):
    """Single scheduled activity."""

    model_config = ConfigDict(extra="forbid")

    title: str
    time: str = Field(..., description="Start time or time window, e.g. '09:00' or '09:00-11:00'")
    price: Money | None = None
    details: str | None = None


class Accommodation(BaseModel):
    """Hotel booked for one night."""

    model_config = ConfigDict(extra="forbid")

    hotel_name: str
    price_per_night: Money | None = None


class DayPlan(BaseModel):
    """Activities and accommodation for a single calendar date."""

    date: date
    morning: list[ActivityItem] = Field(default_factory=list)
    afternoon: list[ActivityItem] = Field(default_factory=list)
    evening: list[ActivityItem] = Field(default_factory=list)
    accommodation: Accommodation | None = None

    def activities(self, period: Period) -> list[ActivityItem]:
        """Activities scheduled in one period, in insertion order."""
        items: list[ActivityItem] = getattr(self, period.value)
        return items

    def replace_activities(self, period: Period, items: list[ActivityItem]) -> None:
        setattr(self, period.value, items)

    def activity_count(self) -> int:
        return sum(len(self.activities(p)) for p in PERIODS)


class BudgetSummary(BaseModel):
    """Derived trip totals from the most recent budget computation."""

    flights_total: float = 0.0
    accommodation_total: float = 0.0
    activities_total: float = 0.0
    grand_total: float = 0.0
    per_person: float = 0.0


class ItinerarySession(BaseModel):
    """Root itinerary document for one planning session."""

    id: str = Field(..., min_length=1)
    origin: str
    destinations: list[str] = Field(..., min_length=1)
    start_date: date
    end_date: date
    num_travelers: int = Field(1, ge=0)
    currency: str = "USD"
    preferences: Preferences = Field(default_factory=Preferences)
    days: list[DayPlan] = Field(default_factory=list)
    totals: BudgetSummary | None = None
    status: SessionStatus = SessionStatus.draft
    finalized_at: datetime | None = None
    confirmation: str | None = None
    updated_at: datetime

    @field_validator("end_date")
    @classmethod
    def validate_end_after_start(cls, v: date, info: ValidationInfo) -> date:
        """Ensure end_date >= start_date."""
        if "start_date" in info.data and v < info.data["start_date"]:
            raise ValueError("end_date must be >= start_date")
        return v

    def find_day(self, day: date) -> DayPlan | None:
        """Look up a day plan by exact date match."""
        for plan in self.days:
            if plan.date == day:
                return plan
        return None

    def to_document(self) -> dict[str, Any]:
        """Serialize to the JSON document shape, omitting unset optional fields."""
        return self.model_dump(mode="json", exclude_none=True)


class BudgetOverrides(BaseModel):
    """Caller-supplied totals that take precedence over computed values."""

    model_config = ConfigDict(extra="forbid")

    flights_total: StrictAmount | None = Field(None, ge=0)
    accommodation_total: StrictAmount | None = Field(None, ge=0)
    activities_total: StrictAmount | None = Field(None, ge=0)
