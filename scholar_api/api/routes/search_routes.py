"""
Search Routes

POST /search - Find scholarships through the AI search model
"""

from fastapi import APIRouter, Depends

from scholar_api.api.deps import get_ai_client
from scholar_api.core.errors import AIServiceError, error_response
from scholar_api.schemas.schemas import SearchRequest
from scholar_api.services.perplexity_client import PerplexityClient

router = APIRouter(tags=["Search"])


@router.post("/search")
def search_scholarships(data: SearchRequest, ai: PerplexityClient = Depends(get_ai_client)):
    """Forward the query upstream and return the chat-completion body unmodified."""
    try:
        return ai.search(data.query)
    except AIServiceError:
        return error_response(500, "Search failed", success=None)
