"""Business logic for tour routes and custom route planning."""

import base64
import binascii
import logging

from app.db.database import load_routes
from app.models.animal import Animal
from app.models.route import CustomRouteResult, Route
from app.models.zone import Zone
from app.services.animal_service import get_all_animals
from app.services.zone_service import get_all_zones

logger = logging.getLogger(__name__)

# Walking time between two consecutive zones
MINUTES_PER_ZONE = 15
# Viewing time spent at each animal
MINUTES_PER_ANIMAL = 5

SHARE_CODE_SEPARATOR = ","

NO_ANIMALS_SELECTED = "Please select at least one animal"
NO_VALID_ANIMALS = "None of the selected animal ids are valid"


def get_all_routes() -> list[Route]:
    """Return all curated routes."""
    return load_routes()


def get_route_by_id(route_id: str | None) -> Route | None:
    """Return a route by ID (case-insensitive)."""
    if not route_id or not route_id.strip():
        logger.warning("Route ID must not be blank")
        return None

    wanted = route_id.casefold()
    route = next((r for r in get_all_routes() if r.id.casefold() == wanted), None)
    if route is None:
        logger.warning("Route '%s' not found", route_id)
    return route


def _resolve_in_order(ids: list[str], items: list) -> list:
    by_id = {}
    for item in items:
        by_id.setdefault(item.id.casefold(), item)
    return [by_id[i.casefold()] for i in ids if i.casefold() in by_id]


def get_route_animals(route_id: str | None) -> list[Animal]:
    """Return the route's animals in visiting order, skipping unknown IDs."""
    route = get_route_by_id(route_id)
    if route is None:
        return []
    return _resolve_in_order(route.animal_ids, get_all_animals())


def get_route_zones(route_id: str | None) -> list[Zone]:
    """Return the route's zones in visiting order, skipping unknown IDs."""
    route = get_route_by_id(route_id)
    if route is None:
        return []
    return _resolve_in_order(route.zone_ids, get_all_zones())


def calculate_estimated_minutes(animal_count: int, zone_count: int) -> int:
    """Walking time between zones plus viewing time per animal."""
    return max(zone_count - 1, 0) * MINUTES_PER_ZONE + animal_count * MINUTES_PER_ANIMAL


def order_animals(animals: list[Animal], zones: list[Zone]) -> list[Animal]:
    """Order animals from the top-left of the map towards the bottom-right.

    The sort key is the ``x + y`` position of each animal's zone; animals in
    zones without a known position go last. Ties are broken by Chinese name.
    """
    positions = {z.id.casefold(): z.position.x + z.position.y for z in zones}
    return sorted(
        animals,
        key=lambda a: (positions.get(a.zone_id.casefold(), float("inf")), a.chinese_name),
    )


def encode_share_code(animal_ids: list[str]) -> str:
    """Encode an ordered ID list as URL-safe base64 without padding."""
    raw = SHARE_CODE_SEPARATOR.join(animal_ids).encode("utf-8")
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")


def decode_share_code(share_code: str | None) -> list[str]:
    """Decode a share code back into its ID list. Invalid codes yield ``[]``."""
    if not share_code or not share_code.strip():
        return []

    code = share_code.strip()
    code += "=" * (-len(code) % 4)
    try:
        raw = base64.b64decode(code, altchars=b"-_", validate=True)
        text = raw.decode("utf-8")
    except (binascii.Error, ValueError):
        return []
    return [part for part in text.split(SHARE_CODE_SEPARATOR) if part]


def _failure(message: str) -> CustomRouteResult:
    return CustomRouteResult(success=False, error_message=message)


def plan_custom_route(animal_ids: list[str] | None) -> CustomRouteResult:
    """Order the selected animals into a walkable route and estimate its duration."""
    requested = [i for i in (animal_ids or []) if i]
    if not requested:
        logger.warning("Custom route requested without any animal")
        return _failure(NO_ANIMALS_SELECTED)

    logger.debug("Planning custom route for %d animals", len(requested))

    by_id: dict[str, Animal] = {}
    for animal in get_all_animals():
        by_id.setdefault(animal.id.casefold(), animal)

    selected: list[Animal] = []
    invalid: list[str] = []
    for animal_id in requested:
        animal = by_id.get(animal_id.casefold())
        if animal is None:
            invalid.append(animal_id)
        else:
            selected.append(animal)

    if invalid:
        logger.warning("Unknown animal IDs in custom route: %s", ", ".join(invalid))
    if not selected:
        return _failure(NO_VALID_ANIMALS)

    ordered = order_animals(selected, get_all_zones())
    zone_ids = list(dict.fromkeys(a.zone_id for a in ordered))
    ordered_ids = [a.id for a in ordered]

    result = CustomRouteResult(
        success=True,
        animal_ids=ordered_ids,
        zone_ids=zone_ids,
        estimated_minutes=calculate_estimated_minutes(len(ordered), len(zone_ids)),
        share_code=encode_share_code(ordered_ids),
    )
    logger.info(
        "Planned custom route: %d animals, %d zones, ~%d minutes",
        len(result.animal_ids),
        len(result.zone_ids),
        result.estimated_minutes,
    )
    return result
