"""Process-wide itinerary store wiring from settings."""

from functools import lru_cache

from backend.tripplanner.config import Settings, get_settings
from backend.tripplanner.db.cache import CachedItineraryRepository, SessionCache
from backend.tripplanner.db.engine import (
    create_engine_from_settings,
    create_session_factory,
    init_schema,
)
from backend.tripplanner.db.file_store import FileItineraryRepository
from backend.tripplanner.db.inmemory import InMemoryItineraryRepository
from backend.tripplanner.db.repositories import ItineraryRepository
from backend.tripplanner.db.sql_repositories import SqlItineraryRepository
from backend.tripplanner.itinerary.store import ItineraryStore


def build_durable_repository(settings: Settings) -> ItineraryRepository:
    """Create the configured durable repository."""
    if settings.itinerary_backend == "sql":
        engine = create_engine_from_settings(settings)
        init_schema(engine)
        return SqlItineraryRepository(create_session_factory(engine))
    if settings.itinerary_backend == "memory":
        return InMemoryItineraryRepository()
    return FileItineraryRepository(settings.itinerary_dir)


def build_store(settings: Settings) -> ItineraryStore:
    """Create a store over the durable repository wrapped by the session cache."""
    repository = CachedItineraryRepository(
        build_durable_repository(settings),
        SessionCache(settings.cache_max_entries),
    )
    return ItineraryStore(repository, lock_after_finalize=settings.lock_after_finalize)


@lru_cache
def get_store() -> ItineraryStore:
    """Get the cached process-wide store (FastAPI dependency)."""
    return build_store(get_settings())
