"""Database configuration and session management."""

import logging

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from fitassess.config import get_settings
from fitassess.models.base import Base

logger = logging.getLogger(__name__)

settings = get_settings()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    """SQLite ignores ON DELETE CASCADE unless foreign keys are switched on."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(url: str, **kwargs) -> Engine:
    """
    Create an engine for the given URL.

    SQLite engines are shared across threads and enforce foreign keys.
    """
    is_sqlite = url.startswith("sqlite")
    if is_sqlite:
        connect_args = kwargs.pop("connect_args", {})
        connect_args.setdefault("check_same_thread", False)
        kwargs["connect_args"] = connect_args

    new_engine = create_engine(url, echo=False, **kwargs)
    if is_sqlite:
        event.listen(new_engine, "connect", _enable_sqlite_foreign_keys)
    return new_engine


# Create SQLAlchemy engine
engine = build_engine(settings.DATABASE_URL)

# Create session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    """Dependency to get database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def create_tables(bind=None):
    """Create all database tables."""
    # Import all models to ensure they are registered with Base
    from fitassess.models import (  # noqa: F401
        User,
        Athlete,
        TestResult,
        TrainingPlan,
        PlanWorkout,
        Sport,
        Exercise,
    )
    target = bind or engine
    Base.metadata.create_all(bind=target)
    logger.info(f"Database tables ready on {target.url.render_as_string(hide_password=True)}")
