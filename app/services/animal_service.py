"""Business logic for animal operations."""

import logging

from app.db.database import load_animals
from app.models.animal import CONSERVATION_PRIORITY, Animal

logger = logging.getLogger(__name__)


def _same_id(a: str, b: str) -> bool:
    return a.casefold() == b.casefold()


def get_all_animals() -> list[Animal]:
    """Return all animals in catalog order."""
    animals = load_animals()
    logger.debug("Retrieved %d animals", len(animals))
    return animals


def get_animal_by_id(animal_id: str | None) -> Animal | None:
    """Return a single animal by ID (case-insensitive)."""
    if not animal_id or not animal_id.strip():
        logger.warning("Animal ID must not be blank")
        return None

    for animal in get_all_animals():
        if _same_id(animal.id, animal_id):
            return animal

    logger.warning("Animal '%s' not found", animal_id)
    return None


def get_related_animals(animal_id: str | None) -> list[Animal]:
    """Return the animals listed as related to ``animal_id``, in catalog order."""
    if not animal_id or not animal_id.strip():
        logger.warning("Animal ID must not be blank")
        return []

    animal = get_animal_by_id(animal_id)
    if animal is None or not animal.related_animal_ids:
        return []

    wanted = {rid.casefold() for rid in animal.related_animal_ids}
    related = [a for a in get_all_animals() if a.id.casefold() in wanted]
    logger.info("Found %d animals related to %s", len(related), animal.id)
    return related


def get_featured_animals(count: int = 3) -> list[Animal]:
    """Return ``count`` animals, most threatened first, then by Chinese name."""
    if count <= 0:
        logger.warning("Featured animal count must be positive, got %d", count)
        return []

    ranked = sorted(
        get_all_animals(),
        key=lambda a: (-CONSERVATION_PRIORITY.get(a.conservation_status, 0), a.chinese_name),
    )
    return ranked[:count]


def get_adjacent_animals(animal_id: str) -> tuple[Animal | None, Animal | None]:
    """Return the previous and next animals around ``animal_id`` in catalog order."""
    animals = get_all_animals()
    index = next((i for i, a in enumerate(animals) if _same_id(a.id, animal_id)), None)
    if index is None:
        return None, None
    previous = animals[index - 1] if index > 0 else None
    following = animals[index + 1] if index < len(animals) - 1 else None
    return previous, following
