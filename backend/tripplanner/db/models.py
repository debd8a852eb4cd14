"""SQLAlchemy ORM models for the SQL itinerary backend."""

from datetime import datetime
from typing import Any

from sqlalchemy import JSON, DateTime, Index, Text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


class ItinerarySessionRow(Base):
    """Itinerary session table - one full document per session id."""

    __tablename__ = "itinerary_session"
    __table_args__ = (Index("idx_itinerary_session_updated", "updated_at"),)

    session_id: Mapped[str] = mapped_column(Text, primary_key=True)
    document: Mapped[dict[str, Any]] = mapped_column(
        JSON().with_variant(JSONB, "postgresql"), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
