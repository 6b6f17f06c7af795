"""
PostgreSQL Connection Utility

One pooled engine per process. Components receive the engine explicitly so
tests can hand them an in-memory SQLite engine instead.
"""
import logging
from contextlib import contextmanager
from functools import lru_cache
from typing import Iterator

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    Integer,
    MetaData,
    Table,
    Text,
    create_engine,
    func,
    text,
    false,
)
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from scholar_api.core.config import get_settings

logger = logging.getLogger(__name__)

metadata = MetaData()

student_profiles = Table(
    "student_profiles",
    metadata,
    Column("user_id", Integer, primary_key=True, autoincrement=True),
    Column("email", Text, nullable=False, unique=True),
    Column("full_name", Text),
    Column("current_gpa", Text),
    Column("education_level", Text),
    Column("major_of_interest", Text),
    Column("personal_statement", Text),
    Column("extracurriculars", Text),
    Column("subscription_status", Text, nullable=False, server_default=text("'free'")),
    Column("is_friends_family", Boolean, nullable=False, server_default=false()),
    Column("created_at", DateTime, nullable=False, server_default=func.current_timestamp()),
    Column("updated_at", DateTime, nullable=False, server_default=func.current_timestamp()),
)


@lru_cache()
def get_engine() -> Engine:
    """
    Create the process-wide engine with a connection pool.
    pool_size=5: maintain 5 connections ready
    max_overflow=10: allow 10 extra connections under load
    """
    settings = get_settings()
    return create_engine(
        settings.postgres_url,
        pool_size=5,
        max_overflow=10,
        echo=settings.debug  # Log SQL queries in debug mode
    )


@contextmanager
def get_db_session(engine: Engine) -> Iterator[Session]:
    """
    Context manager for database sessions.
    Usage:
        with get_db_session(engine) as db:
            db.execute(text("SELECT * FROM student_profiles"))
    """
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def init_schema(engine: Engine) -> None:
    """Create the student_profiles table if it does not exist yet."""
    metadata.create_all(engine)


def test_postgres_connection(engine: Engine) -> bool:
    """
    Test if the database is reachable.
    Returns True if connection successful, False otherwise.
    """
    try:
        with get_db_session(engine) as db:
            result = db.execute(text("SELECT 1 as test"))
            row = result.fetchone()
            return row[0] == 1
    except Exception as e:
        logger.error(f"Database connection failed: {e}")
        return False
