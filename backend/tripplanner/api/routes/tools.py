"""Tool endpoints - the orchestrator's operation surface over HTTP."""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, HTTPException, status

from backend.tripplanner.itinerary.service import get_store
from backend.tripplanner.itinerary.store import ItineraryStore
from backend.tripplanner.tools.itinerary_tools import TOOLS_BY_NAME, invoke_tool, tool_schemas

router = APIRouter(prefix="/tools", tags=["tools"])


@router.get("")
def list_tools() -> list[dict[str, Any]]:
    """List tool definitions for language-model binding."""
    return tool_schemas()


@router.post("/{tool_name}")
def call_tool(
    tool_name: str,
    arguments: Annotated[dict[str, Any], Body()],
    store: Annotated[ItineraryStore, Depends(get_store)],
) -> dict[str, Any]:
    """Invoke one itinerary tool.

    Args:
        tool_name: Tool name, e.g. "add_activity"
        arguments: JSON argument object
        store: Itinerary store

    Returns:
        Tool response

    Raises:
        HTTPException: 404 if the tool does not exist
    """
    if tool_name not in TOOLS_BY_NAME:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=f"Unknown tool: {tool_name}"
        )

    return invoke_tool(store, tool_name, arguments)
