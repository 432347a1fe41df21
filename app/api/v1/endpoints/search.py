"""Search API endpoints."""

import logging

from fastapi import APIRouter, Query, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from app.config import settings
from app.errors import ProblemDetailException
from app.models.common import ProblemDetails
from app.models.search import SuggestResponse
from app.services.search_service import suggest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/search")
limiter = Limiter(key_func=get_remote_address)

MAX_SUGGESTIONS = 10


@router.get(
    "/suggest",
    response_model=SuggestResponse,
    responses={400: {"model": ProblemDetails}, 429: {"model": ProblemDetails}},
    summary="Autocomplete suggestions",
    description="Best matching animals for a partial keyword. ``limit`` is clamped to 1-10.",
)
@limiter.limit(settings.RATE_LIMIT)
async def suggestions(
    request: Request,
    q: str | None = Query(None, description="Partial keyword"),
    limit: int = Query(5, description="Maximum number of suggestions"),
) -> SuggestResponse:
    if not q or not q.strip():
        raise ProblemDetailException(400, "q is required")
    limit = max(1, min(limit, MAX_SUGGESTIONS))
    return SuggestResponse(suggestions=suggest(q, limit))
