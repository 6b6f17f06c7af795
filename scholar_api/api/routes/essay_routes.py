"""
Essay Routes

POST /write-essay - Draft a personal statement from a stored profile
"""

from fastapi import APIRouter, Depends

from scholar_api.api.deps import get_ai_client, get_profile_store
from scholar_api.core.errors import AIServiceError, DatabaseError, error_response
from scholar_api.schemas.schemas import EssayRequest, EssayResponse
from scholar_api.services.perplexity_client import PerplexityClient
from scholar_api.services.profile_service import ProfileStore

router = APIRouter(tags=["Essays"])


@router.post("/write-essay", response_model=EssayResponse)
def write_essay(
    data: EssayRequest,
    store: ProfileStore = Depends(get_profile_store),
    ai: PerplexityClient = Depends(get_ai_client)
):
    """
    Look up the profile, then ask the model for a first-person statement.
    The upstream API is never called for an unknown email.
    """
    try:
        profile = store.find_by_email(data.email)
    except DatabaseError:
        return error_response(500, "AI generation failed.")

    if profile is None:
        return error_response(404, "Profile not found.")

    try:
        essay = ai.compose_essay(profile, data.scholarship_prompt)
    except AIServiceError:
        return error_response(500, "AI generation failed.")

    return EssayResponse(essay=essay)
