"""Itinerary tool surface for the orchestrating agent.

Each tool validates a JSON argument object against its closed input model,
runs one store operation, and returns a JSON-ready response carrying enough
of the mutated state for the caller to verify the effect.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ValidationError

from backend.tripplanner.itinerary.errors import ItineraryValidationError
from backend.tripplanner.itinerary.store import ItineraryStore
from backend.tripplanner.models.common import Period
from backend.tripplanner.models.tools import (
    AddActivityRequest,
    AddActivityResponse,
    FinalizeItineraryRequest,
    FinalizeItineraryResponse,
    GetItineraryRequest,
    RemoveActivitiesRequest,
    RemoveActivitiesResponse,
    SetAccommodationRequest,
    SetAccommodationResponse,
    StartItineraryRequest,
    StartItineraryResponse,
    SummarizeBudgetRequest,
    SummarizeBudgetResponse,
    ToolRequest,
    UpdatePreferencesRequest,
    UpdatePreferencesResponse,
)

JsonObject = dict[str, Any]


@dataclass(frozen=True)
class ItineraryTool:
    """A named store operation with its input schema."""

    name: str
    description: str
    input_model: type[ToolRequest]
    handler: Callable[[ItineraryStore, Any], JsonObject]

    def schema(self) -> JsonObject:
        """Tool definition for language-model function calling."""
        return {
            "name": self.name,
            "description": self.description,
            "parameters": self.input_model.model_json_schema(),
        }


def _dump(response: BaseModel, exclude_none: bool = False) -> JsonObject:
    return response.model_dump(mode="json", exclude_none=exclude_none)


def _start_itinerary(store: ItineraryStore, req: StartItineraryRequest) -> JsonObject:
    session = store.create_session(
        req.session_id,
        origin=req.origin,
        destinations=req.destinations,
        start_date=req.start_date,
        end_date=req.end_date,
        num_travelers=req.num_travelers,
        currency=req.currency,
    )
    return _dump(StartItineraryResponse(itinerary_id=session.id, days=len(session.days)))


def _update_preferences(store: ItineraryStore, req: UpdatePreferencesRequest) -> JsonObject:
    merged = store.update_preferences(req.session_id, req.preferences)
    return _dump(
        UpdatePreferencesResponse(
            itinerary_id=req.session_id,
            preferences=merged.model_dump(mode="json", exclude_none=True),
        )
    )


def _add_activity(store: ItineraryStore, req: AddActivityRequest) -> JsonObject:
    count = store.add_activity(req.session_id, req.date, req.period, req.activity)
    return _dump(
        AddActivityResponse(
            itinerary_id=req.session_id, date=req.date, period=req.period, count=count
        )
    )


def _set_accommodation(store: ItineraryStore, req: SetAccommodationRequest) -> JsonObject:
    accommodation = store.set_accommodation(
        req.session_id, req.date, req.hotel_name, req.price_per_night
    )
    return _dump(
        SetAccommodationResponse(
            itinerary_id=req.session_id, date=req.date, accommodation=accommodation
        ),
        exclude_none=True,
    )


def _get_itinerary(store: ItineraryStore, req: GetItineraryRequest) -> JsonObject:
    return store.get_itinerary(req.session_id).to_document()


def _remove_activities(store: ItineraryStore, req: RemoveActivitiesRequest) -> JsonObject:
    result = store.remove_activities(
        req.session_id, day=req.date, period=req.period, title_contains=req.title_contains
    )
    period = req.period.value if isinstance(req.period, Period) else (req.period or "all")
    return _dump(
        RemoveActivitiesResponse(
            itinerary_id=req.session_id,
            date=req.date,
            period=period,
            title_filter=req.title_contains or None,
            removed=result.removed,
            remaining=result.remaining,
        )
    )


def _summarize_budget(store: ItineraryStore, req: SummarizeBudgetRequest) -> JsonObject:
    totals = store.summarize_budget(req.session_id, req.overrides)
    return _dump(SummarizeBudgetResponse(itinerary_id=req.session_id, totals=totals))


def _finalize_itinerary(store: ItineraryStore, req: FinalizeItineraryRequest) -> JsonObject:
    result = store.finalize_session(req.session_id)
    return _dump(
        FinalizeItineraryResponse(
            status=result.status,
            itinerary_id=result.itinerary_id,
            confirmation=result.confirmation,
        )
    )


ITINERARY_TOOLS: list[ItineraryTool] = [
    ItineraryTool(
        name="start_itinerary",
        description=(
            "Start or reset an itinerary session with dates, destinations, and traveler info."
        ),
        input_model=StartItineraryRequest,
        handler=_start_itinerary,
    ),
    ItineraryTool(
        name="update_preferences",
        description="Update user preferences for the current itinerary session.",
        input_model=UpdatePreferencesRequest,
        handler=_update_preferences,
    ),
    ItineraryTool(
        name="add_activity",
        description="Add an activity to a specific day and period (morning/afternoon/evening).",
        input_model=AddActivityRequest,
        handler=_add_activity,
    ),
    ItineraryTool(
        name="set_accommodation",
        description="Set accommodation (hotel) for a specific date.",
        input_model=SetAccommodationRequest,
        handler=_set_accommodation,
    ),
    ItineraryTool(
        name="get_itinerary",
        description="Get the current itinerary document for a session.",
        input_model=GetItineraryRequest,
        handler=_get_itinerary,
    ),
    ItineraryTool(
        name="remove_activities",
        description=(
            "Remove activities from the itinerary by date, period, and/or title substring. "
            "If no filters provided for a date, removes all activities on that date."
        ),
        input_model=RemoveActivitiesRequest,
        handler=_remove_activities,
    ),
    ItineraryTool(
        name="summarize_budget",
        description=(
            "Compute totals for flights, accommodation, and activities, with optional overrides."
        ),
        input_model=SummarizeBudgetRequest,
        handler=_summarize_budget,
    ),
    ItineraryTool(
        name="finalize_itinerary",
        description="Mark itinerary as finalized and return a confirmation id.",
        input_model=FinalizeItineraryRequest,
        handler=_finalize_itinerary,
    ),
]

TOOLS_BY_NAME: dict[str, ItineraryTool] = {tool.name: tool for tool in ITINERARY_TOOLS}


def tool_schemas() -> list[JsonObject]:
    """Definitions of every itinerary tool."""
    return [tool.schema() for tool in ITINERARY_TOOLS]


def invoke_tool(store: ItineraryStore, name: str, arguments: Mapping[str, Any]) -> JsonObject:
    """Validate arguments and run one itinerary tool.

    Args:
        store: Itinerary store to operate on
        name: Tool name, e.g. "add_activity"
        arguments: JSON argument object

    Returns:
        JSON-ready response

    Raises:
        KeyError: If no tool has this name
        ItineraryValidationError: If the arguments fail the input schema
        ItineraryError: Any typed store failure
    """
    tool = TOOLS_BY_NAME.get(name)
    if tool is None:
        raise KeyError(f"Unknown tool: {name}")

    try:
        request = tool.input_model.model_validate(arguments)
    except ValidationError as e:
        raise ItineraryValidationError(
            f"Invalid arguments for {name}: {e.error_count()} validation error(s)",
            errors=e.errors(include_url=False, include_context=False),
        ) from e

    return tool.handler(store, request)
