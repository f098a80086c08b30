import logging
import os
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.engine.url import make_url
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

# Create Base class for models
Base = declarative_base()

DEFAULT_DATABASE_URL = "sqlite:///./puppy_care.db"

# Internal lazy globals
_engine: Optional[Engine] = None
_SessionLocal = None
_database_url: Optional[str] = None


def build_engine(database_url: str) -> Engine:
    """Create an engine tuned for the target backend."""
    url = make_url(database_url)
    if url.drivername.startswith("postgres"):
        return create_engine(
            database_url,
            pool_size=10,
            max_overflow=20,
            pool_pre_ping=True,  # Detects and refreshes stale connections
            pool_recycle=3600,
            connect_args={"application_name": "puppy_care", "connect_timeout": 10},
        )
    if url.drivername.startswith("sqlite") and url.database in (None, "", ":memory:"):
        # One shared in-memory database so DDL survives across sessions
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    if url.drivername.startswith("sqlite"):
        return create_engine(database_url, connect_args={"check_same_thread": False})
    return create_engine(database_url)


def get_engine(database_url: Optional[str] = None) -> Engine:
    """Return a cached engine, creating it on first call.

    The URL comes from the argument, else DATABASE_URL. A different URL
    disposes the cached engine and builds a new one.
    """
    global _engine, _SessionLocal, _database_url
    database_url = database_url or os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL)
    if _engine is None or _database_url != database_url:
        if _engine is not None:
            _engine.dispose()
        _engine = build_engine(database_url)
        _SessionLocal = None
        _database_url = database_url
        logger.debug(
            "SQLAlchemy engine created",
            extra={"context": {"dialect": _engine.dialect.name}},
        )
    return _engine


def get_sessionmaker():
    """Return a cached sessionmaker bound to the lazy engine."""
    global _SessionLocal
    if _SessionLocal is None:
        _SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
            bind=_engine if _engine is not None else get_engine(),
        )
    return _SessionLocal


def SessionLocal():
    """Return a new Session bound to the current engine."""
    return get_sessionmaker()()


def get_db():
    """Yield a session and close it afterwards."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def create_tables(engine: Optional[Engine] = None):
    """Create all tables registered on Base."""
    from puppy_care.db import base  # noqa: F401  (registers the models)

    Base.metadata.create_all(bind=engine or get_engine())


def reset_engine():
    """Dispose the cached engine (tests switch databases with this)."""
    global _engine, _SessionLocal, _database_url
    if _engine is not None:
        _engine.dispose()
    _engine = None
    _SessionLocal = None
    _database_url = None
