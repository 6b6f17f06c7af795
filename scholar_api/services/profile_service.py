"""
Profile Service - persistence for student profiles.

Every write is keyed by email:
- save():    INSERT ... ON CONFLICT (email) DO UPDATE (upsert)
- promote(): flips a row to premium / friends-and-family

created_at is written once by the column default; updated_at is refreshed on
every upsert. Subscription flags are only ever changed by promote().
"""

import logging
from typing import List, Optional

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from scholar_api.core.errors import DatabaseError
from scholar_api.db.postgres import get_db_session
from scholar_api.schemas.schemas import ProfileSave, ProfileSummary, StudentProfile

logger = logging.getLogger(__name__)

UPSERT_PROFILE_SQL = """
    INSERT INTO student_profiles
        (email, full_name, current_gpa, education_level, major_of_interest,
         personal_statement, extracurriculars)
    VALUES
        (:email, :full_name, :current_gpa, :education_level, :major_of_interest,
         :personal_statement, :extracurriculars)
    ON CONFLICT (email)
    DO UPDATE SET
        full_name = EXCLUDED.full_name,
        current_gpa = EXCLUDED.current_gpa,
        education_level = EXCLUDED.education_level,
        major_of_interest = EXCLUDED.major_of_interest,
        personal_statement = EXCLUDED.personal_statement,
        extracurriculars = EXCLUDED.extracurriculars,
        updated_at = CURRENT_TIMESTAMP
    RETURNING *
"""

SELECT_PROFILE_SQL = "SELECT * FROM student_profiles WHERE email = :email"

LIST_PROFILES_SQL = """
    SELECT user_id, email, full_name, subscription_status, is_friends_family, created_at
    FROM student_profiles
    ORDER BY created_at DESC, user_id DESC
"""

PROMOTE_PROFILE_SQL = """
    UPDATE student_profiles
    SET subscription_status = 'premium', is_friends_family = TRUE
    WHERE email = :email
"""


class ProfileStore:
    """
    Reads and writes the student_profiles table.
    Storage failures surface as DatabaseError; nothing is retried.
    """

    def __init__(self, engine: Engine):
        self.engine = engine

    def save(self, profile: ProfileSave) -> StudentProfile:
        """Insert a profile, or overwrite the descriptive fields of the existing row."""
        try:
            with get_db_session(self.engine) as db:
                result = db.execute(text(UPSERT_PROFILE_SQL), profile.model_dump())
                row = result.mappings().one()
        except SQLAlchemyError as e:
            logger.exception(f"Database error saving profile for {profile.email}")
            raise DatabaseError("Database error") from e

        return StudentProfile(**row)

    def find_by_email(self, email: str) -> Optional[StudentProfile]:
        """Return the profile for this email, or None."""
        try:
            with get_db_session(self.engine) as db:
                row = db.execute(text(SELECT_PROFILE_SQL), {"email": email}).mappings().first()
        except SQLAlchemyError as e:
            logger.exception(f"Database error loading profile for {email}")
            raise DatabaseError("Database error") from e

        if row is None:
            return None
        return StudentProfile(**row)

    def list_all(self) -> List[ProfileSummary]:
        """All profiles, newest first."""
        try:
            with get_db_session(self.engine) as db:
                rows = db.execute(text(LIST_PROFILES_SQL)).mappings().all()
        except SQLAlchemyError as e:
            logger.exception("Database error listing profiles")
            raise DatabaseError("Database error") from e

        return [ProfileSummary(**row) for row in rows]

    def promote(self, email: Optional[str]) -> int:
        """
        Mark a profile as premium friends-and-family.
        Returns the number of rows updated; 0 for an unknown or missing email is not an error.
        """
        try:
            with get_db_session(self.engine) as db:
                result = db.execute(text(PROMOTE_PROFILE_SQL), {"email": email})
                updated = result.rowcount
        except SQLAlchemyError as e:
            logger.exception(f"Database error promoting {email}")
            raise DatabaseError("Update failed") from e

        logger.info(f"Promoted {email}: {updated} row(s) updated")
        return updated
