"""
Admin Routes

GET  /admin/users   - List every profile, newest first
POST /admin/promote - Grant premium friends-and-family status (PIN protected)
"""

from typing import List

from fastapi import APIRouter, Depends

from scholar_api.api.deps import get_admin_pin, get_profile_store
from scholar_api.core.auth import verify_admin_pin
from scholar_api.core.errors import AdminAuthError, DatabaseError, error_response
from scholar_api.schemas.schemas import ProfileSummary, PromoteRequest, SuccessResponse
from scholar_api.services.profile_service import ProfileStore

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.get("/users", response_model=List[ProfileSummary])
def list_users(store: ProfileStore = Depends(get_profile_store)):
    try:
        return store.list_all()
    except DatabaseError:
        return error_response(500, "Database error", success=None)


@router.post("/promote", response_model=SuccessResponse)
def promote_user(
    data: PromoteRequest,
    store: ProfileStore = Depends(get_profile_store),
    admin_pin: str = Depends(get_admin_pin)
):
    """Wrong PIN: 403 and no write. Unknown email: success, zero rows touched."""
    try:
        verify_admin_pin(data.pin, admin_pin)
    except AdminAuthError:
        return error_response(403, "Wrong PIN!")

    try:
        # A missing or non-string email matches no row, like WHERE email = NULL
        email = data.email if isinstance(data.email, str) else None
        store.promote(email)
    except DatabaseError:
        return error_response(500, "Update failed")

    return SuccessResponse()
