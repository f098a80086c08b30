"""
Shared fixtures for the puppy care test suite.

Time is frozen with a FixedClock so age, urgency and timeline assertions
do not depend on when the suite runs.
"""

import logging
import os
from datetime import datetime, timezone

import pytest

# Set test environment before importing application modules
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ["TESTING"] = "true"

from sqlalchemy.orm import sessionmaker  # noqa: E402

from puppy_care.core.clock import FixedClock  # noqa: E402
from puppy_care.core.config import Settings  # noqa: E402
from puppy_care.db.session import build_engine, create_tables  # noqa: E402
from puppy_care.main import create_app  # noqa: E402
from puppy_care.repositories import build_repositories  # noqa: E402
from puppy_care.repositories.in_memory import (  # noqa: E402
    InMemoryAIRepository,
    InMemoryAnalyticsRepository,
    InMemoryEventRepository,
    InMemoryPuppyRepository,
    InMemoryTrainingRepository,
    InMemoryUserRepository,
)
from tests.config.markers import (  # noqa: E402,F401
    pytest_collection_modifyitems,
    pytest_configure,
)

FIXED_NOW = datetime(2024, 6, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def fixed_now():
    return FIXED_NOW


@pytest.fixture
def clock():
    """Clock frozen at 2024-06-15 12:00 UTC."""
    return FixedClock(FIXED_NOW)


# ===========================
# In-memory repositories
# ===========================


@pytest.fixture
def puppy_repo():
    return InMemoryPuppyRepository()


@pytest.fixture
def event_repo(clock):
    return InMemoryEventRepository(clock=clock)


@pytest.fixture
def user_repo():
    return InMemoryUserRepository()


@pytest.fixture
def training_repo():
    return InMemoryTrainingRepository()


@pytest.fixture
def ai_repo():
    return InMemoryAIRepository()


@pytest.fixture
def analytics_repo():
    return InMemoryAnalyticsRepository()


# ===========================
# Database
# ===========================


@pytest.fixture
def session_factory():
    """Session factory bound to a fresh in-memory SQLite database."""
    engine = build_engine("sqlite:///:memory:")
    create_tables(engine)
    factory = sessionmaker(
        autocommit=False, autoflush=False, expire_on_commit=False, bind=engine
    )
    yield factory
    engine.dispose()


# ===========================
# Flask application
# ===========================


@pytest.fixture
def clean_logging():
    """Restore the root logger after a test that reconfigures logging."""
    root_logger = logging.getLogger()
    original_handlers = root_logger.handlers[:]
    original_level = root_logger.level

    yield

    for handler in root_logger.handlers[:]:
        handler.close()
        root_logger.removeHandler(handler)
    for handler in original_handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(original_level)


@pytest.fixture
def app(clock, clean_logging):
    """Application wired to in-memory repositories and the frozen clock."""
    settings = Settings(repository_backend="memory", log_level="WARNING")
    app = create_app(
        settings=settings,
        repositories=build_repositories("memory", clock=clock),
        clock=clock,
    )
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
