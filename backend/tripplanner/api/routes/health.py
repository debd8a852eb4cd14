"""Health check endpoints.

- /health is a liveness check
- /healthz checks that durable itinerary storage is reachable
"""

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse

from backend.tripplanner.itinerary.errors import StorageError
from backend.tripplanner.itinerary.service import get_store
from backend.tripplanner.itinerary.store import ItineraryStore

router = APIRouter()


def check_storage(store: ItineraryStore) -> tuple[bool, str]:
    """Check durable storage connectivity.

    Returns:
        (is_ok, status_message)
    """
    try:
        store.repository.list_ids()
        return (True, "ok")
    except StorageError as e:
        return (False, f"error: {type(e.__cause__ or e).__name__}")


@router.get("/health")
def health() -> dict[str, str]:
    """Simple health check for Docker/k8s.

    Returns:
        200 OK always (application is running)
    """
    return {"status": "ok"}


@router.get("/healthz", response_model=None)
def healthz(store: Annotated[ItineraryStore, Depends(get_store)]) -> dict[str, Any] | Response:
    """Health check endpoint.

    Returns:
        200 with component status if storage is ok
        503 if storage is unreachable
    """
    storage_ok, storage_status = check_storage(store)

    response_body = {
        "status": "ok" if storage_ok else "degraded",
        "components": {"storage": storage_status},
    }

    if not storage_ok:
        return JSONResponse(content=response_body, status_code=503)

    return response_body
