"""Exception types and handlers producing problem-details responses.

API routes (under ``/api``) answer with an RFC 7807 JSON body; HTML routes
render the generic error page instead.
"""

import logging
from http import HTTPStatus

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.db.database import DataFileError
from app.models.common import ProblemDetails

logger = logging.getLogger(__name__)

API_PREFIX = "/api"


class ProblemDetailException(Exception):
    """Raised by API endpoints to return a problem-details error."""

    def __init__(self, status_code: int, detail: str):
        super().__init__(detail)
        self.status_code = status_code
        self.detail = detail


def _is_api_request(request: Request) -> bool:
    return request.url.path.startswith(API_PREFIX)


def problem_response(
    request: Request,
    status_code: int,
    detail: str | None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Build a problem-details JSON response for ``request``."""
    body = ProblemDetails(
        title=HTTPStatus(status_code).phrase,
        status=status_code,
        detail=detail,
        instance=request.url.path,
    )
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(),
        media_type="application/problem+json",
        headers=headers,
    )


def _error_page(request: Request, status_code: int, message: str) -> Response:
    from app.web.templating import render  # local import: templating pulls in the services

    return render(
        request,
        "error.html",
        {"status_code": status_code, "message": message},
        status_code=status_code,
    )


async def problem_detail_handler(request: Request, exc: ProblemDetailException) -> Response:
    return problem_response(request, exc.status_code, exc.detail)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> Response:
    errors = exc.errors()
    if any(e.get("type") == "json_invalid" for e in errors):
        detail = "Malformed JSON body"
    else:
        detail = "; ".join(
            f"{'.'.join(str(p) for p in e.get('loc', ()))}: {e.get('msg', '')}" for e in errors
        )
    logger.warning("Rejected request %s %s: %s", request.method, request.url.path, detail)
    if _is_api_request(request):
        return problem_response(request, 400, detail)
    return _error_page(request, 400, detail)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> Response:
    detail = exc.detail if isinstance(exc.detail, str) else None
    if _is_api_request(request):
        return problem_response(request, exc.status_code, detail, headers=exc.headers)
    response = _error_page(request, exc.status_code, detail or HTTPStatus(exc.status_code).phrase)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def rate_limit_handler(request: Request, exc: RateLimitExceeded) -> Response:
    logger.warning("Rate limit exceeded for %s on %s", get_remote_address(request), request.url.path)
    return problem_response(request, 429, f"Rate limit exceeded: {exc.detail}")


async def data_file_error_handler(request: Request, exc: DataFileError) -> Response:
    logger.error("Data source failure while serving %s: %s", request.url.path, exc)
    if _is_api_request(request):
        return problem_response(request, 500, "The zoo data could not be loaded")
    return _error_page(request, 500, "The zoo data could not be loaded")
