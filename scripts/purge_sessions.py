"""Delete itinerary sessions older than the configured retention window."""

import logging
import sys
from datetime import UTC, datetime, timedelta

from backend.tripplanner.config import get_settings
from backend.tripplanner.itinerary.service import build_store

logger = logging.getLogger(__name__)


def main() -> int:
    """Apply SESSION_RETENTION_DAYS to the configured store."""
    logging.basicConfig(level=logging.INFO)
    settings = get_settings()

    if settings.session_retention_days is None:
        logger.info("SESSION_RETENTION_DAYS not set - nothing to purge")
        return 0

    store = build_store(settings)
    deleted = store.purge_expired(
        datetime.now(UTC), timedelta(days=settings.session_retention_days)
    )
    for session_id in deleted:
        print(session_id)
    return 0


if __name__ == "__main__":
    sys.exit(main())
