"""Zone API endpoints."""

import logging

from fastapi import APIRouter, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from app.config import settings
from app.errors import ProblemDetailException
from app.models.common import ProblemDetails
from app.models.zone import (
    ZoneAnimal,
    ZoneAnimalsResponse,
    ZoneListResponse,
    ZoneRef,
    ZoneWithCount,
)
from app.services.zone_service import get_animals_by_zone, get_zone_animal_counts, get_zone_by_id

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get(
    "/zones",
    response_model=ZoneListResponse,
    responses={429: {"model": ProblemDetails}},
    summary="List zones",
    description="All park zones with their map position and number of animals.",
)
@limiter.limit(settings.RATE_LIMIT)
async def list_zones(request: Request) -> ZoneListResponse:
    zones = [
        ZoneWithCount(
            id=zone.id,
            name_zh=zone.name_zh,
            name_en=zone.name_en,
            description=zone.description,
            position=zone.position,
            svg_path_id=zone.svg_path_id,
            color=zone.color,
            animal_count=count,
        )
        for zone, count in get_zone_animal_counts()
    ]
    return ZoneListResponse(zones=zones)


@router.get(
    "/zones/{zone_id}/animals",
    response_model=ZoneAnimalsResponse,
    responses={404: {"model": ProblemDetails}, 429: {"model": ProblemDetails}},
    summary="Animals in a zone",
)
@limiter.limit(settings.RATE_LIMIT)
async def zone_animals(request: Request, zone_id: str) -> ZoneAnimalsResponse:
    """List the animals housed in a zone, used by the map side panel."""
    zone = get_zone_by_id(zone_id)
    if zone is None:
        raise ProblemDetailException(404, f"Zone '{zone_id}' not found")

    animals = [
        ZoneAnimal(
            id=a.id,
            chinese_name=a.chinese_name,
            english_name=a.english_name,
            thumbnail_url=a.media.thumbnail_path,
            conservation_status=a.conservation_status.value,
        )
        for a in get_animals_by_zone(zone.id)
    ]
    return ZoneAnimalsResponse(
        zone=ZoneRef(id=zone.id, name_zh=zone.name_zh, name_en=zone.name_en),
        animals=animals,
    )
