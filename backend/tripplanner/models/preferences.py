"""Trip-level preference models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr

from backend.tripplanner.models.common import StrictAmount, TravelStyle


class Preferences(BaseModel):
    """Sparse trip preferences.

    Every field is optional; a session starts with none set. Unknown keys are
    rejected so that a misspelled preference never silently disappears.
    """

    model_config = ConfigDict(extra="forbid")

    vegetarian: StrictBool | None = Field(
        None, description="Whether travelers prefer vegetarian options"
    )
    accessibility: StrictBool | None = Field(
        None, description="Require accessibility-friendly options"
    )
    travel_style: TravelStyle | None = Field(None, description="Overall travel style")
    max_hotel_budget: StrictAmount | None = Field(
        None, ge=0, description="Max hotel budget per night"
    )
    notes: StrictStr | None = Field(None, description="Freeform preference notes")

    def merged_with(self, update: "Preferences") -> "Preferences":
        """Shallow-merge an update over these preferences.

        Keys the update does not mention keep their current value. A key the
        update sets explicitly to None is cleared.
        """
        merged: dict[str, Any] = self.model_dump(exclude_none=True)
        merged.update(update.model_dump(exclude_unset=True))
        return Preferences.model_validate({k: v for k, v in merged.items() if v is not None})
