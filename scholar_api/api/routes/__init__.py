"""
API Routes - Combines all route modules into single router.
"""

from fastapi import APIRouter

from scholar_api.api.routes.search_routes import router as search_router
from scholar_api.api.routes.profile_routes import router as profile_router
from scholar_api.api.routes.essay_routes import router as essay_router
from scholar_api.api.routes.resume_routes import router as resume_router
from scholar_api.api.routes.admin_routes import router as admin_router

# Main API router
api_router = APIRouter()

# Include all sub-routers
api_router.include_router(search_router)
api_router.include_router(profile_router)
api_router.include_router(essay_router)
api_router.include_router(resume_router)
api_router.include_router(admin_router)
