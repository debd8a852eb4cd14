"""File-backed itinerary repository: one JSON document per session."""

import json
import logging
import os
import tempfile
from pathlib import Path
from urllib.parse import quote, unquote

from pydantic import ValidationError

from backend.tripplanner.itinerary.errors import StorageError
from backend.tripplanner.models.itinerary import ItinerarySession

logger = logging.getLogger(__name__)


class FileItineraryRepository:
    """File implementation of ItineraryRepository.

    Writes go to a temporary file in the target directory which is then
    atomically renamed over the session file, so an interrupted write leaves
    either the old or the new document on disk.
    """

    def __init__(self, directory: str | Path) -> None:
        self._dir = Path(directory)

    @property
    def directory(self) -> Path:
        return self._dir

    def _path(self, session_id: str) -> Path:
        # Quote so any opaque id maps to a single file inside the directory
        return self._dir / f"{quote(session_id, safe='')}.json"

    def load(self, session_id: str) -> ItinerarySession | None:
        """Read and validate the session document."""
        path = self._path(session_id)
        try:
            raw = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as e:
            raise StorageError(f"Failed to read itinerary {session_id}: {e}") from e

        try:
            return ItinerarySession.model_validate(json.loads(raw))
        except (json.JSONDecodeError, ValidationError) as e:
            raise StorageError(f"Corrupt itinerary record {session_id}") from e

    def save(self, session: ItinerarySession) -> None:
        """Atomically replace the session document."""
        path = self._path(session.id)
        payload = json.dumps(session.to_document(), indent=2)

        tmp_name: str | None = None
        try:
            self._dir.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=".tmp-", suffix=".tmp", dir=self._dir)
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, path)
            tmp_name = None
        except OSError as e:
            raise StorageError(f"Failed to write itinerary {session.id}: {e}") from e
        finally:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)

        logger.debug("Persisted itinerary %s to %s", session.id, path)

    def delete(self, session_id: str) -> bool:
        """Remove the session file."""
        try:
            self._path(session_id).unlink()
        except FileNotFoundError:
            return False
        except OSError as e:
            raise StorageError(f"Failed to delete itinerary {session_id}: {e}") from e
        return True

    def list_ids(self) -> list[str]:
        """List ids of all session files."""
        if not self._dir.exists():
            return []
        return sorted(unquote(p.stem) for p in self._dir.glob("*.json"))
