"""Engine and session factory for the SQL itinerary backend."""

from pathlib import Path

from sqlalchemy import Engine, create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, sessionmaker

from backend.tripplanner.config import Settings
from backend.tripplanner.db.models import Base


def create_engine_from_settings(settings: Settings) -> Engine:
    """Create the SQLAlchemy engine for DATABASE_URL.

    SQLite file databases get their parent directory created; server
    databases get pre-ping so stale pooled connections are replaced.

    Raises:
        ValueError: If DATABASE_URL is unset or empty.
    """
    if not settings.database_url:
        raise ValueError(
            "DATABASE_URL must be set to a valid connection string "
            "when ITINERARY_BACKEND=sql."
        )

    url = make_url(settings.database_url)
    if url.get_backend_name() == "sqlite":
        if url.database and url.database != ":memory:":
            Path(url.database).parent.mkdir(parents=True, exist_ok=True)
        return create_engine(url, echo=False)

    return create_engine(url, pool_pre_ping=True, echo=False)


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Sessionmaker whose loaded rows stay readable after commit."""
    return sessionmaker(bind=engine, expire_on_commit=False)


def init_schema(engine: Engine) -> None:
    """Create the itinerary tables if they do not exist."""
    Base.metadata.create_all(engine)
