"""Animal API endpoints."""

import logging

from fastapi import APIRouter, Depends, Query, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from app.config import settings
from app.dependencies import get_search_filter
from app.errors import ProblemDetailException
from app.models.animal import (
    AnimalDetailResponse,
    AnimalListResponse,
    AnimalSummary,
    RelatedAnimal,
)
from app.models.common import ProblemDetails
from app.models.search import SearchFilter
from app.services.animal_service import (
    get_animal_by_id,
    get_featured_animals,
    get_related_animals,
)
from app.services.search_service import filter_animals

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get(
    "/animals",
    response_model=AnimalListResponse,
    responses={429: {"model": ProblemDetails}},
    summary="List animals",
    description="Retrieve the catalog, optionally filtered by class, habitat, diet, activity pattern or zone.",
)
@limiter.limit(settings.RATE_LIMIT)
async def list_animals(
    request: Request,
    search_filter: SearchFilter = Depends(get_search_filter),
) -> AnimalListResponse:
    """List animals matching the categorical filters. Any keyword is ignored."""
    animals = filter_animals(search_filter)
    return AnimalListResponse(
        animals=[AnimalSummary.from_animal(a) for a in animals],
        total=len(animals),
    )


@router.get(
    "/animals/featured",
    response_model=AnimalListResponse,
    responses={429: {"model": ProblemDetails}},
    summary="Featured animals",
    description="Most threatened animals first, for the home page.",
)
@limiter.limit(settings.RATE_LIMIT)
async def featured_animals(
    request: Request,
    count: int = Query(3, description="Number of animals to return"),
) -> AnimalListResponse:
    animals = get_featured_animals(count)
    return AnimalListResponse(
        animals=[AnimalSummary.from_animal(a) for a in animals],
        total=len(animals),
    )


@router.get(
    "/animals/{animal_id}",
    response_model=AnimalDetailResponse,
    responses={404: {"model": ProblemDetails}, 429: {"model": ProblemDetails}},
    summary="Get animal by ID",
    description="Retrieve one animal (case-insensitive ID) with its related animals.",
)
@limiter.limit(settings.RATE_LIMIT)
async def animal_by_id(request: Request, animal_id: str) -> AnimalDetailResponse:
    """Get a specific animal by ID."""
    animal = get_animal_by_id(animal_id)
    if animal is None:
        raise ProblemDetailException(404, f"Animal '{animal_id}' not found")

    related = [
        RelatedAnimal(
            id=a.id,
            chinese_name=a.chinese_name,
            english_name=a.english_name,
            thumbnail_url=a.media.thumbnail_path,
        )
        for a in get_related_animals(animal.id)
    ]
    return AnimalDetailResponse(
        id=animal.id,
        chinese_name=animal.chinese_name,
        english_name=animal.english_name,
        scientific_name=animal.scientific_name,
        zone_id=animal.zone_id,
        classification=animal.classification,
        description=animal.description,
        fun_facts=list(animal.fun_facts),
        conservation_status=animal.conservation_status,
        media=animal.media,
        related_animals=related,
    )


@router.get(
    "/health",
    summary="Health check",
    description="Check that the API is running.",
)
@limiter.limit(settings.RATE_LIMIT)
async def health_check(request: Request) -> dict:
    """Health check endpoint."""
    return {"status": "healthy"}
