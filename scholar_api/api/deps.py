"""
Dependency providers for the route handlers.

Each component is built once per process and handed to the routes through
FastAPI's Depends(); tests swap them with app.dependency_overrides.
"""

from functools import lru_cache

from scholar_api.core.config import get_settings
from scholar_api.db.postgres import get_engine
from scholar_api.services.perplexity_client import PerplexityClient, create_perplexity_client
from scholar_api.services.profile_service import ProfileStore
from scholar_api.utils.file_upload import ResumeExtractor


@lru_cache()
def get_profile_store() -> ProfileStore:
    return ProfileStore(get_engine())


@lru_cache()
def get_ai_client() -> PerplexityClient:
    return create_perplexity_client()


@lru_cache()
def get_resume_extractor() -> ResumeExtractor:
    return ResumeExtractor()


def get_admin_pin() -> str:
    return get_settings().admin_pin
