"""
Schemas module - Request/Response schemas for API endpoints.
"""
from scholar_api.schemas.schemas import (
    SubscriptionStatus,
    ProfileSave,
    StudentProfile,
    ProfileSummary,
    SaveProfileResponse,
    SearchRequest,
    EssayRequest,
    EssayResponse,
    ResumeUploadResponse,
    PromoteRequest,
    SuccessResponse,
)

__all__ = [
    "SubscriptionStatus",
    "ProfileSave",
    "StudentProfile",
    "ProfileSummary",
    "SaveProfileResponse",
    "SearchRequest",
    "EssayRequest",
    "EssayResponse",
    "ResumeUploadResponse",
    "PromoteRequest",
    "SuccessResponse",
]
