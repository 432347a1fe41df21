"""Tour route API endpoints."""

import logging

from fastapi import APIRouter, Query, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from app.config import settings
from app.errors import ProblemDetailException
from app.models.animal import Animal
from app.models.common import ProblemDetails
from app.models.route import (
    CustomRouteResult,
    PlanRouteRequest,
    PlanRouteResponse,
    RouteAnimal,
    RouteDetailResponse,
    RouteListResponse,
    RouteSummary,
    RouteType,
    RouteZone,
)
from app.services.animal_service import get_all_animals
from app.services.route_service import (
    decode_share_code,
    get_all_routes,
    get_route_animals,
    get_route_by_id,
    get_route_zones,
    plan_custom_route,
)
from app.services.search_service import parse_enum

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


def _route_animal(animal: Animal) -> RouteAnimal:
    return RouteAnimal(
        id=animal.id,
        chinese_name=animal.chinese_name,
        english_name=animal.english_name,
        thumbnail_url=animal.media.thumbnail_path,
        zone_id=animal.zone_id,
        conservation_status=animal.conservation_status.value,
    )


def _plan_response(result: CustomRouteResult, include_animals: bool) -> PlanRouteResponse:
    if not result.success:
        raise ProblemDetailException(400, result.error_message or "Route could not be planned")

    animals = None
    if include_animals:
        by_id = {a.id.casefold(): a for a in get_all_animals()}
        animals = [_route_animal(by_id[i.casefold()]) for i in result.animal_ids if i.casefold() in by_id]

    return PlanRouteResponse(
        animal_ids=result.animal_ids,
        zone_ids=result.zone_ids,
        estimated_minutes=result.estimated_minutes,
        share_code=result.share_code,
        animals=animals,
    )


@router.get(
    "/routes",
    response_model=RouteListResponse,
    responses={429: {"model": ProblemDetails}},
    summary="List tour routes",
    description="Curated routes, optionally filtered by type. Unknown types are ignored.",
)
@limiter.limit(settings.RATE_LIMIT)
async def list_routes(
    request: Request,
    route_type: str | None = Query(None, alias="type", description="Route type"),
) -> RouteListResponse:
    wanted = parse_enum(RouteType, route_type)
    routes = [r for r in get_all_routes() if wanted is None or r.type == wanted]
    summaries = [
        RouteSummary(
            id=r.id,
            name_zh=r.name_zh,
            name_en=r.name_en,
            type=r.type,
            description=r.description,
            estimated_minutes=r.estimated_minutes,
            zone_count=len(r.zone_ids),
            animal_count=len(r.animal_ids),
        )
        for r in routes
    ]
    return RouteListResponse(routes=summaries, total=len(summaries))


@router.get(
    "/routes/plan",
    response_model=PlanRouteResponse,
    response_model_exclude_none=True,
    responses={400: {"model": ProblemDetails}, 429: {"model": ProblemDetails}},
    summary="Restore a shared route",
    description="Decode a share code and plan the route it describes.",
)
@limiter.limit(settings.RATE_LIMIT)
async def plan_from_share_code(
    request: Request,
    share_code: str | None = Query(None, alias="shareCode", description="Code from a shared route link"),
) -> PlanRouteResponse:
    if not share_code or not share_code.strip():
        raise ProblemDetailException(400, "shareCode is required")

    animal_ids = decode_share_code(share_code)
    if not animal_ids:
        logger.warning("Invalid share code %r", share_code)
        raise ProblemDetailException(400, "Invalid share code")

    return _plan_response(plan_custom_route(animal_ids), include_animals=True)


@router.post(
    "/routes/plan",
    response_model=PlanRouteResponse,
    response_model_exclude_none=True,
    responses={400: {"model": ProblemDetails}, 429: {"model": ProblemDetails}},
    summary="Plan a custom route",
    description="Order the selected animals into a walkable route with an estimated duration and share code.",
)
@limiter.limit(settings.RATE_LIMIT)
async def plan_route(request: Request, body: PlanRouteRequest) -> PlanRouteResponse:
    """Plan a route through the selected animals."""
    result = plan_custom_route(body.animal_ids)
    return _plan_response(result, body.include_animals)


@router.get(
    "/routes/{route_id}",
    response_model=RouteDetailResponse,
    response_model_exclude_none=True,
    responses={404: {"model": ProblemDetails}, 429: {"model": ProblemDetails}},
    summary="Get route by ID",
)
@limiter.limit(settings.RATE_LIMIT)
async def route_by_id(
    request: Request,
    route_id: str,
    include_animals: bool = Query(False, alias="includeAnimals"),
    include_zones: bool = Query(False, alias="includeZones"),
) -> RouteDetailResponse:
    route = get_route_by_id(route_id)
    if route is None:
        raise ProblemDetailException(404, f"Route '{route_id}' not found")

    animals = None
    if include_animals:
        animals = [_route_animal(a) for a in get_route_animals(route.id)]

    zones = None
    if include_zones:
        zones = [
            RouteZone(id=z.id, name_zh=z.name_zh, name_en=z.name_en, color=z.color, position=z.position)
            for z in get_route_zones(route.id)
        ]

    return RouteDetailResponse(
        id=route.id,
        name_zh=route.name_zh,
        name_en=route.name_en,
        type=route.type,
        description=route.description,
        estimated_minutes=route.estimated_minutes,
        zone_ids=list(route.zone_ids),
        animal_ids=list(route.animal_ids),
        animals=animals,
        zones=zones,
    )
