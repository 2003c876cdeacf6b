"""Database infrastructure setup."""

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from roadready.infrastructure.config.settings import settings


def enable_sqlite_foreign_keys(engine: Engine) -> None:
    """Turn on foreign key enforcement for every SQLite connection of an engine."""

    @event.listens_for(engine, "connect")
    def _set_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


# Engine creation is deferred until the first session is requested
_engine = None
_SessionLocal = None


def _get_engine():
    """Get or create the database engine."""
    global _engine
    if _engine is None:
        if not settings.database_url:
            raise ValueError("DATABASE_URL is required for database operations")
        engine_args = {}
        if settings.database_url.startswith("sqlite"):
            engine_args["connect_args"] = {"check_same_thread": False}
        else:
            engine_args["pool_pre_ping"] = True  # Verify connections before using
        _engine = create_engine(
            settings.database_url,
            echo=settings.debug_mode,  # Log SQL queries in debug mode
            **engine_args,
        )
        if _engine.dialect.name == "sqlite":
            enable_sqlite_foreign_keys(_engine)
    return _engine


def get_db_session() -> Session:
    """
    Get a database session.

    Returns:
        SQLAlchemy session instance
    """
    global _SessionLocal
    if _SessionLocal is None:
        engine = _get_engine()
        _SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    return _SessionLocal()


def init_db() -> None:
    """Create all tables known to the ORM metadata."""
    from roadready.adapters.outbound.persistence.models import Base

    Base.metadata.create_all(bind=_get_engine())
