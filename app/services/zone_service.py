"""Business logic for park zones."""

import logging
from collections import Counter

from app.db.database import load_zones
from app.models.animal import Animal
from app.models.zone import Zone
from app.services.animal_service import get_all_animals

logger = logging.getLogger(__name__)


def get_all_zones() -> list[Zone]:
    """Return all zones."""
    return load_zones()


def get_zone_by_id(zone_id: str | None) -> Zone | None:
    """Return a zone by ID (case-insensitive)."""
    if not zone_id or not zone_id.strip():
        logger.warning("Zone ID must not be blank")
        return None

    wanted = zone_id.casefold()
    zone = next((z for z in get_all_zones() if z.id.casefold() == wanted), None)
    if zone is None:
        logger.warning("Zone '%s' not found", zone_id)
    return zone


def get_animals_by_zone(zone_id: str | None) -> list[Animal]:
    """Return the animals housed in a zone."""
    if not zone_id or not zone_id.strip():
        logger.warning("Zone ID must not be blank")
        return []

    wanted = zone_id.casefold()
    animals = [a for a in get_all_animals() if a.zone_id.casefold() == wanted]
    logger.info("Zone %s houses %d animals", zone_id, len(animals))
    return animals


def get_zone_animal_counts() -> list[tuple[Zone, int]]:
    """Pair every zone with the number of animals it houses."""
    counts = Counter(a.zone_id.casefold() for a in get_all_animals())
    return [(zone, counts.get(zone.id.casefold(), 0)) for zone in get_all_zones()]
