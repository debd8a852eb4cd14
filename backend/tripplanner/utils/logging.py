"""Structured logging for itinerary store operations."""

import logging
from typing import Any

logger = logging.getLogger(__name__)


class StructuredStoreLogger:
    """Structured logger for itinerary store operations."""

    def log_operation(
        self,
        session_id: str,
        operation: str,
        outcome: str,
        latency_ms: float,
        error_reason: str | None = None,
    ) -> None:
        """Log one store operation with structured data."""
        log_data: dict[str, Any] = {
            "session_id": session_id,
            "operation": operation,
            "outcome": outcome,
            "latency_ms": round(latency_ms, 2),
        }

        if error_reason:
            log_data["error_reason"] = error_reason

        log_msg = f"Itinerary operation: {operation} - {outcome}"

        if outcome == "success":
            logger.info(log_msg, extra={"structured": log_data})
        else:
            logger.warning(log_msg, extra={"structured": log_data})
