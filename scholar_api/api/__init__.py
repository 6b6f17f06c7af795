"""
API module - FastAPI routers and dependency providers.

Usage:
    from scholar_api.api.routes import api_router
    app.include_router(api_router, prefix="/api")
"""
