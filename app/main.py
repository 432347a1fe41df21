"""FastAPI application initialization and configuration."""

import logging
import time
from logging.handlers import TimedRotatingFileHandler

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.v1.endpoints.animals import limiter, router as animals_router
from app.api.v1.endpoints.quizzes import router as quizzes_router
from app.api.v1.endpoints.routes import router as routes_router
from app.api.v1.endpoints.search import router as search_router
from app.api.v1.endpoints.zones import router as zones_router
from app.config import BASE_DIR, settings
from app.db.database import DataFileError
from app.errors import (
    ProblemDetailException,
    data_file_error_handler,
    http_exception_handler,
    problem_detail_handler,
    rate_limit_handler,
    validation_error_handler,
)
from app.web.views import router as pages_router

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format=LOG_FORMAT,
)
if settings.LOG_FILE:
    file_handler = TimedRotatingFileHandler(settings.LOG_FILE, when="midnight", encoding="utf-8")
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logging.getLogger().addHandler(file_handler)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Zoo Guide",
    description="Animal catalog, park map, tour routes and quiz for zoo visitors.",
    version="1.0.0",
    docs_url="/api/v1/docs",
    redoc_url="/api/v1/redoc",
    openapi_url="/api/v1/openapi.json",
)

# --- Middleware ---

# Rate limiting
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, rate_limit_handler)
app.add_middleware(SlowAPIMiddleware)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins_list,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


# Request logging
@app.middleware("http")
async def log_requests(request: Request, call_next) -> Response:
    """Log every request with its status and duration. Static assets log at debug level."""
    start = time.perf_counter()
    response: Response = await call_next(request)
    duration_ms = (time.perf_counter() - start) * 1000
    level = logging.DEBUG if request.url.path.startswith("/static") else logging.INFO
    logger.log(
        level,
        "%s %s -> %s (%.1fms)",
        request.method,
        request.url.path,
        response.status_code,
        duration_ms,
    )
    return response


# --- Error handling ---

app.add_exception_handler(ProblemDetailException, problem_detail_handler)
app.add_exception_handler(RequestValidationError, validation_error_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(DataFileError, data_file_error_handler)

# Static files (css, js, images)
app.mount("/static", StaticFiles(directory=str(BASE_DIR / "static")), name="static")

# Register routes
app.include_router(animals_router, prefix="/api/v1", tags=["animals"])
app.include_router(zones_router, prefix="/api/v1", tags=["zones"])
app.include_router(routes_router, prefix="/api/v1", tags=["routes"])
app.include_router(quizzes_router, prefix="/api/v1", tags=["quizzes"])
app.include_router(search_router, prefix="/api/v1", tags=["search"])
app.include_router(pages_router, include_in_schema=False)

logger.info("Zoo Guide started (debug=%s, data=%s)", settings.DEBUG, settings.DATA_DIR)
