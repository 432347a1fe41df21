"""Server-rendered HTML pages."""

import logging

from fastapi import APIRouter, Depends, Form, HTTPException, Query, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from app.dependencies import CULTURE_COOKIE, SUPPORTED_LOCALES, get_search_filter
from app.models.animal import ActivityPattern, BiologicalClass, Diet, Habitat
from app.models.route import RouteType
from app.models.search import SearchFilter
from app.services.animal_service import (
    get_adjacent_animals,
    get_all_animals,
    get_animal_by_id,
    get_featured_animals,
    get_related_animals,
)
from app.services.quiz_service import get_all_quizzes, get_animals_with_quizzes
from app.services.route_service import get_all_routes
from app.services.search_service import search
from app.services.zone_service import get_all_zones, get_zone_animal_counts
from app.web.templating import render

logger = logging.getLogger(__name__)

router = APIRouter()

CULTURE_COOKIE_MAX_AGE = 365 * 24 * 60 * 60


def _zones_by_id() -> dict:
    return {z.id.casefold(): z for z in get_all_zones()}


def _is_local_url(url: str | None) -> bool:
    return bool(url) and url.startswith("/") and not url.startswith("//") and not url.startswith("/\\")


@router.get("/", response_class=HTMLResponse)
async def home(request: Request) -> HTMLResponse:
    """Home page with featured animals and the zone overview."""
    return render(
        request,
        "index.html",
        {"featured": get_featured_animals(3), "zone_counts": get_zone_animal_counts()},
    )


@router.get("/animals", response_class=HTMLResponse)
async def animal_list(request: Request) -> HTMLResponse:
    animals = get_all_animals()
    logger.info("Rendering catalog with %d animals", len(animals))
    return render(request, "animals/index.html", {"animals": animals})


@router.get("/animals/details", response_class=HTMLResponse)
async def animal_details(request: Request, animal_id: str | None = Query(None, alias="id")):
    """Detail page. A blank id goes back to the catalog; an unknown one is a 404."""
    if not animal_id or not animal_id.strip():
        logger.warning("Animal detail requested without an id, redirecting to the catalog")
        return RedirectResponse("/animals", status_code=302)

    animal = get_animal_by_id(animal_id)
    if animal is None:
        raise HTTPException(status_code=404, detail=f"Animal '{animal_id}' not found")

    previous, following = get_adjacent_animals(animal.id)
    return render(
        request,
        "animals/detail.html",
        {
            "animal": animal,
            "zone": _zones_by_id().get(animal.zone_id.casefold()),
            "related": get_related_animals(animal.id),
            "previous": previous,
            "next": following,
        },
    )


@router.get("/search", response_class=HTMLResponse)
async def search_page(
    request: Request,
    search_filter: SearchFilter = Depends(get_search_filter),
) -> HTMLResponse:
    results = search(search_filter)
    return render(
        request,
        "search.html",
        {
            "search_filter": search_filter,
            "results": results,
            "zones": get_all_zones(),
            "classes": list(BiologicalClass),
            "habitats": list(Habitat),
            "diets": list(Diet),
            "activities": list(ActivityPattern),
        },
    )


@router.get("/map", response_class=HTMLResponse)
async def map_page(request: Request) -> HTMLResponse:
    return render(request, "map.html", {"zone_counts": get_zone_animal_counts()})


@router.get("/routes", response_class=HTMLResponse)
async def routes_page(request: Request) -> HTMLResponse:
    """Curated routes plus the custom route planner."""
    return render(
        request,
        "routes.html",
        {
            "routes": get_all_routes(),
            "route_types": list(RouteType),
            "animals": get_all_animals(),
            "zone_names": {z.id: {"zh": z.name_zh, "en": z.name_en} for z in get_all_zones()},
        },
    )


@router.get("/quiz", response_class=HTMLResponse)
async def quiz_page(request: Request) -> HTMLResponse:
    return render(
        request,
        "quiz.html",
        {"total_quizzes": len(get_all_quizzes()), "animals": get_animals_with_quizzes()},
    )


@router.get("/favorites", response_class=HTMLResponse)
async def favorites_page(request: Request) -> HTMLResponse:
    # Favorites live in the browser; the script fetches the animals it needs.
    return render(request, "favorites.html")


@router.get("/about", response_class=HTMLResponse)
async def about_page(request: Request) -> HTMLResponse:
    return render(request, "about.html")


@router.post("/set-language")
async def set_language(
    culture: str = Form(""),
    return_url: str = Form("", alias="returnUrl"),
) -> RedirectResponse:
    """Remember the chosen UI language for a year and go back to the calling page."""
    if culture not in SUPPORTED_LOCALES:
        culture = "zh-TW"
    logger.info("Switching UI language to %s", culture)

    target = return_url if _is_local_url(return_url) else "/"
    response = RedirectResponse(target, status_code=303)
    response.set_cookie(
        CULTURE_COOKIE,
        culture,
        max_age=CULTURE_COOKIE_MAX_AGE,
        samesite="lax",
    )
    return response
