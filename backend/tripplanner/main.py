"""FastAPI application."""

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from backend.tripplanner.api.routes.health import router as health_router
from backend.tripplanner.api.routes.itineraries import router as itineraries_router
from backend.tripplanner.api.routes.metrics import router as metrics_router
from backend.tripplanner.api.routes.tools import router as tools_router
from backend.tripplanner.itinerary.errors import (
    DateNotFoundError,
    InvalidRangeError,
    ItineraryError,
    ItineraryValidationError,
    SessionFinalizedError,
    SessionNotFoundError,
    StorageError,
)

ERROR_STATUS: dict[type[ItineraryError], int] = {
    SessionNotFoundError: status.HTTP_404_NOT_FOUND,
    DateNotFoundError: status.HTTP_422_UNPROCESSABLE_ENTITY,
    InvalidRangeError: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ItineraryValidationError: status.HTTP_422_UNPROCESSABLE_ENTITY,
    SessionFinalizedError: status.HTTP_409_CONFLICT,
    StorageError: status.HTTP_503_SERVICE_UNAVAILABLE,
}

app = FastAPI(title="Trip Itinerary Planner API", version="0.1.0")

# Register routes
app.include_router(health_router, tags=["health"])
app.include_router(metrics_router, tags=["metrics"])
app.include_router(tools_router, tags=["tools"])
app.include_router(itineraries_router, tags=["itineraries"])


@app.exception_handler(ItineraryError)
async def itinerary_error_handler(request: Request, exc: ItineraryError) -> JSONResponse:
    """Map typed store failures to HTTP responses."""
    body: dict[str, object] = {"error": exc.code, "detail": str(exc)}
    if isinstance(exc, ItineraryValidationError) and exc.errors:
        body["errors"] = exc.errors

    return JSONResponse(
        status_code=ERROR_STATUS.get(type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR),
        content=jsonable_encoder(body),
    )


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {"message": "Trip Itinerary Planner API", "version": "0.1.0"}
