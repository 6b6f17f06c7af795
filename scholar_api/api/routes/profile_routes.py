"""
Profile Routes

POST /save-profile - Create or overwrite the profile for an email
"""

from fastapi import APIRouter, Depends

from scholar_api.api.deps import get_profile_store
from scholar_api.core.errors import DatabaseError, error_response
from scholar_api.schemas.schemas import ProfileSave, SaveProfileResponse
from scholar_api.services.profile_service import ProfileStore

router = APIRouter(tags=["Profiles"])


@router.post("/save-profile", response_model=SaveProfileResponse)
def save_profile(data: ProfileSave, store: ProfileStore = Depends(get_profile_store)):
    """Upsert keyed by email. A repeat save overwrites every descriptive field."""
    try:
        profile = store.save(data)
    except DatabaseError:
        return error_response(500, "Database error")
    return SaveProfileResponse(profile=profile)
