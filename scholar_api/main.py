"""
Scholarship Assistant API - Main Application

FastAPI backend with:
- PostgreSQL for student profiles
- Perplexity AI for scholarship search and personal statements
- PyPDF2 for resume text extraction
- Static frontend served from STATIC_DIR

Run: uvicorn scholar_api.main:app --reload
  or: scholar-api   (listens on $PORT, default 3000)
"""

import logging
import os

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from scholar_api.api.deps import get_profile_store
from scholar_api.api.routes import api_router
from scholar_api.core.config import get_settings
from scholar_api.core.errors import error_response
from scholar_api.core.logging import configure_logging
from scholar_api.db.postgres import get_engine, init_schema, test_postgres_connection
from scholar_api.services.profile_service import ProfileStore

settings = get_settings()
configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

FRONTEND_DIR = os.path.abspath(settings.static_dir)

# Create FastAPI app
app = FastAPI(
    title="Scholarship Assistant API",
    description="""
    Scholarship search, student profiles and AI-drafted personal statements.

    ## Features
    - **Search**: Scholarship search through Perplexity
    - **Profiles**: Upsert student profiles keyed by email
    - **Essays**: First-person personal statements built from a stored profile
    - **Resumes**: PDF text extraction
    - **Admin**: List users, grant friends-and-family premium
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# CORS middleware (allow all for development)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(api_router, prefix="/api")


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies are client errors: 400 in the usual error shape."""
    logger.warning(f"Invalid request to {request.url.path}: {exc.errors()}")
    return error_response(400, "Invalid request")


# Startup event
@app.on_event("startup")
async def startup_event():
    """Create the student_profiles table on startup."""
    try:
        init_schema(get_engine())
        logger.info("Database schema initialized")
    except Exception as e:
        logger.error(f"Database schema initialization failed: {e}")


# Serve frontend for root path
@app.get("/", tags=["Frontend"])
async def serve_frontend():
    """Serve the frontend."""
    index_path = os.path.join(FRONTEND_DIR, "index.html")
    if os.path.exists(index_path):
        return FileResponse(index_path)
    return {"status": "healthy", "app": "Scholarship Assistant API", "message": "Frontend not found. API is running."}


@app.get("/health", tags=["Health"])
def health_check(store: ProfileStore = Depends(get_profile_store)):
    """Detailed health check."""
    return {
        "status": "healthy",
        "postgres": "connected" if test_postgres_connection(store.engine) else "disconnected"
    }


def mount_frontend(application: FastAPI, directory: str) -> bool:
    """
    Serve the frontend directory from the site root, like the original static
    server. Must run after every route is registered: the mount at "/" catches
    whatever is left.
    """
    if not os.path.isdir(directory):
        return False
    application.mount("/", StaticFiles(directory=directory, html=True), name="frontend")
    return True


mount_frontend(app, FRONTEND_DIR)


def run():
    """Console entry point: serve on $PORT."""
    import uvicorn

    logger.info(f"Server running at http://localhost:{settings.port}")
    uvicorn.run("scholar_api.main:app", host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    run()
