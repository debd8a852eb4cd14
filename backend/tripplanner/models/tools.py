"""Tool request/response models exposed to the orchestrating agent."""

import datetime as dt
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from backend.tripplanner.models.common import Money, Period
from backend.tripplanner.models.itinerary import (
    Accommodation,
    ActivityItem,
    BudgetOverrides,
    BudgetSummary,
)
from backend.tripplanner.models.preferences import Preferences


class ToolRequest(BaseModel):
    """Base for tool inputs - every tool addresses one session."""

    model_config = ConfigDict(extra="forbid")

    session_id: str = Field(..., min_length=1, description="Itinerary session id")


class StartItineraryRequest(ToolRequest):
    origin: str = Field(..., description="Origin city or airport")
    destinations: list[str] = Field(..., min_length=1, description="Destination city/cities")
    start_date: dt.date = Field(..., description="Trip start date YYYY-MM-DD")
    end_date: dt.date = Field(..., description="Trip end date YYYY-MM-DD")
    num_travelers: int = Field(1, ge=0, description="Number of travelers")
    currency: str = Field("USD", description="Currency code (e.g. USD, INR)")


class UpdatePreferencesRequest(ToolRequest):
    preferences: Preferences


class AddActivityRequest(ToolRequest):
    date: dt.date = Field(..., description="YYYY-MM-DD for the day to update")
    period: Period = Field(..., description="Which part of the day")
    activity: ActivityItem


class SetAccommodationRequest(ToolRequest):
    date: dt.date = Field(..., description="YYYY-MM-DD")
    hotel_name: str
    price_per_night: Money | None = None


class GetItineraryRequest(ToolRequest):
    pass


class RemoveActivitiesRequest(ToolRequest):
    date: dt.date | None = Field(
        None,
        description="YYYY-MM-DD to target a specific day. If omitted, applies across all days.",
    )
    period: Period | Literal["all"] | None = Field(
        None, description="Period to target. Defaults to all periods."
    )
    title_contains: str | None = Field(
        None, description="Case-insensitive substring to match activity titles for removal."
    )


class SummarizeBudgetRequest(ToolRequest):
    overrides: BudgetOverrides | None = None


class FinalizeItineraryRequest(ToolRequest):
    pass


class ToolResponse(BaseModel):
    """Base for tool outputs."""

    status: str = "ok"
    itinerary_id: str


class StartItineraryResponse(ToolResponse):
    days: int


class UpdatePreferencesResponse(ToolResponse):
    preferences: dict[str, Any]


class AddActivityResponse(ToolResponse):
    date: dt.date
    period: Period
    count: int


class SetAccommodationResponse(ToolResponse):
    date: dt.date
    accommodation: Accommodation


class RemoveActivitiesResponse(ToolResponse):
    date: dt.date | None
    period: str
    title_filter: str | None
    removed: int
    remaining: int


class SummarizeBudgetResponse(ToolResponse):
    totals: BudgetSummary


class FinalizeItineraryResponse(ToolResponse):
    status: str = "finalized"
    confirmation: str
