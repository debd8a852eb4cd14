"""Common types and enums shared across all models."""

from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, Strict

# Number that must arrive as a JSON number; numeric strings are rejected
StrictAmount = Annotated[float, Strict()]


class Money(BaseModel):
    """Monetary amount in the given currency."""

    model_config = ConfigDict(extra="forbid")

    amount: StrictAmount = Field(..., ge=0)
    currency: str


class Period(str, Enum):
    """Time-of-day bucket within a day plan."""

    morning = "morning"
    afternoon = "afternoon"
    evening = "evening"


# Iteration order of periods inside a day
PERIODS: tuple[Period, ...] = (Period.morning, Period.afternoon, Period.evening)


class TravelStyle(str, Enum):
    """Overall travel style."""

    budget = "budget"
    standard = "standard"
    luxury = "luxury"
    family = "family"


class SessionStatus(str, Enum):
    """Lifecycle state of an itinerary session."""

    draft = "draft"
    finalized = "finalized"
