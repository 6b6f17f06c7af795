"""
Pydantic Schemas - Request/Response Validation

All API request and response schemas in one file for simplicity.
Descriptive profile fields are stored as given; only the email is required.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Optional
from datetime import datetime
from enum import Enum


# ============================================================
# ENUMS
# ============================================================

class SubscriptionStatus(str, Enum):
    free = "free"
    premium = "premium"


# ============================================================
# PROFILE SCHEMAS
# ============================================================

class ProfileSave(BaseModel):
    # Clients may send numbers (e.g. current_gpa: 3.8); they are stored as text
    model_config = ConfigDict(coerce_numbers_to_str=True)

    email: str = Field(..., min_length=1)
    full_name: Optional[str] = None
    current_gpa: Optional[str] = None
    education_level: Optional[str] = None
    major_of_interest: Optional[str] = None
    personal_statement: Optional[str] = None
    extracurriculars: Optional[str] = None


class StudentProfile(BaseModel):
    user_id: int
    email: str
    full_name: Optional[str] = None
    current_gpa: Optional[str] = None
    education_level: Optional[str] = None
    major_of_interest: Optional[str] = None
    personal_statement: Optional[str] = None
    extracurriculars: Optional[str] = None
    # Not an Enum: stored values are not validated
    subscription_status: str = SubscriptionStatus.free.value
    is_friends_family: bool = False
    created_at: datetime
    updated_at: datetime


class ProfileSummary(BaseModel):
    user_id: int
    email: str
    full_name: Optional[str] = None
    subscription_status: str = SubscriptionStatus.free.value
    is_friends_family: bool = False
    created_at: datetime


class SaveProfileResponse(BaseModel):
    success: bool = True
    profile: StudentProfile


# ============================================================
# AI SCHEMAS
# ============================================================

class SearchRequest(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    query: str


class EssayRequest(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    email: str = Field(..., min_length=1)
    scholarship_prompt: str = ""


class EssayResponse(BaseModel):
    success: bool = True
    essay: str


# ============================================================
# RESUME SCHEMAS
# ============================================================

class ResumeUploadResponse(BaseModel):
    success: bool = True
    text: str


# ============================================================
# ADMIN SCHEMAS
# ============================================================

class PromoteRequest(BaseModel):
    # Both optional so the PIN is always checked before anything else
    email: Optional[Any] = None
    pin: Optional[Any] = None


class SuccessResponse(BaseModel):
    success: bool = True
