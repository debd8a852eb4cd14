"""Export JSON schemas for ItinerarySession and every itinerary tool input."""

import json
from pathlib import Path

from backend.tripplanner.models import ItinerarySession
from backend.tripplanner.tools.itinerary_tools import ITINERARY_TOOLS


def main() -> None:
    """Export schemas to docs/schemas/."""
    schemas_dir = Path("docs/schemas")
    schemas_dir.mkdir(parents=True, exist_ok=True)

    # Export the persisted document schema
    session_path = schemas_dir / "ItinerarySession.schema.json"
    with open(session_path, "w") as f:
        json.dump(ItinerarySession.model_json_schema(), f, indent=2)
    print(f"Exported ItinerarySession schema to {session_path}")

    # Export one input schema per tool
    for tool in ITINERARY_TOOLS:
        tool_path = schemas_dir / f"{tool.name}.schema.json"
        with open(tool_path, "w") as f:
            json.dump(tool.schema(), f, indent=2)
        print(f"Exported {tool.name} schema to {tool_path}")


if __name__ == "__main__":
    main()
