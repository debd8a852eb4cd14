"""Bounded in-process session cache in front of a durable repository."""

import logging
import threading
from collections import OrderedDict

from backend.tripplanner.db.repositories import ItineraryRepository
from backend.tripplanner.models.itinerary import ItinerarySession
from backend.tripplanner.utils.metrics import PrometheusStoreMetrics

logger = logging.getLogger(__name__)


class SessionCache:
    """LRU map of session id to document, evicting beyond max_entries."""

    def __init__(self, max_entries: int = 256) -> None:
        self._max_entries = max(1, max_entries)
        self._entries: OrderedDict[str, ItinerarySession] = OrderedDict()
        self._lock = threading.Lock()

    def get(self, session_id: str) -> ItinerarySession | None:
        with self._lock:
            session = self._entries.get(session_id)
            if session is None:
                return None
            self._entries.move_to_end(session_id)
            return session.model_copy(deep=True)

    def put(self, session: ItinerarySession) -> None:
        with self._lock:
            self._entries[session.id] = session.model_copy(deep=True)
            self._entries.move_to_end(session.id)
            while len(self._entries) > self._max_entries:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug("Evicted itinerary %s from cache", evicted)

    def discard(self, session_id: str) -> None:
        with self._lock:
            self._entries.pop(session_id, None)

    def __contains__(self, session_id: str) -> bool:
        with self._lock:
            return session_id in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


class CachedItineraryRepository:
    """ItineraryRepository that serves reads from a SessionCache.

    Loads are cache-first and populate the cache on fallback. Saves reach the
    durable repository first; the cache is only updated once that succeeds,
    so a failed write leaves the last known good document cached.
    """

    def __init__(
        self,
        backing: ItineraryRepository,
        cache: SessionCache | None = None,
        metrics: PrometheusStoreMetrics | None = None,
    ) -> None:
        self._backing = backing
        self._cache = cache if cache is not None else SessionCache()
        self._metrics = metrics or PrometheusStoreMetrics()

    @property
    def backing(self) -> ItineraryRepository:
        return self._backing

    @property
    def cache(self) -> SessionCache:
        return self._cache

    def load(self, session_id: str) -> ItinerarySession | None:
        """Load from cache, falling back to durable storage."""
        cached = self._cache.get(session_id)
        self._metrics.record_cache_lookup(hit=cached is not None)
        if cached is not None:
            return cached

        session = self._backing.load(session_id)
        if session is not None:
            logger.debug("Loaded itinerary %s from durable storage", session_id)
            self._cache.put(session)
        return session

    def save(self, session: ItinerarySession) -> None:
        """Write durably, then refresh the cache."""
        self._backing.save(session)
        self._cache.put(session)

    def delete(self, session_id: str) -> bool:
        """Delete from durable storage and the cache."""
        deleted = self._backing.delete(session_id)
        self._cache.discard(session_id)
        return deleted

    def list_ids(self) -> list[str]:
        """List ids known to durable storage."""
        return self._backing.list_ids()
