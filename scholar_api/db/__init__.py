"""
Database module - PostgreSQL connection, sessions and schema.
"""
from scholar_api.db.postgres import (
    get_engine,
    get_db_session,
    init_schema,
    test_postgres_connection,
    student_profiles,
)

__all__ = [
    "get_engine",
    "get_db_session",
    "init_schema",
    "test_postgres_connection",
    "student_profiles",
]
