"""Keyword search, autocomplete and categorical filtering over the animal catalog."""

import logging
from enum import Enum
from typing import TypeVar

from app.models.animal import Animal
from app.models.search import SearchFilter, SearchResult, SearchSuggestion
from app.services.animal_service import get_all_animals

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)

MAX_SCORE = 100.0
# Score given to every animal when no keyword is supplied
BASELINE_SCORE = 50.0

# Field weights: (exact match, substring match)
CHINESE_NAME_WEIGHTS = (100, 80)
ENGLISH_NAME_WEIGHTS = (90, 70)
SCIENTIFIC_NAME_WEIGHT = 60
DESCRIPTION_WEIGHT = 30
FUN_FACTS_WEIGHT = 20
APPEARANCE_WEIGHT = 25
BEHAVIOR_WEIGHT = 25


def parse_enum(enum_cls: type[E], value: str | None) -> E | None:
    """Parse a query-string value into ``enum_cls``; blank or unknown values give None."""
    if value is None or not value.strip():
        return None
    try:
        return enum_cls(value.strip())
    except ValueError:
        logger.debug("Ignoring invalid %s filter value %r", enum_cls.__name__, value)
        return None


def matches_filter(animal: Animal, search_filter: SearchFilter) -> bool:
    """Check the categorical criteria of a filter. The keyword is not considered."""
    c = animal.classification
    if search_filter.biological_class is not None and c.biological_class != search_filter.biological_class:
        return False
    if search_filter.habitat is not None and c.habitat != search_filter.habitat:
        return False
    if search_filter.diet is not None and c.diet != search_filter.diet:
        return False
    if search_filter.activity_pattern is not None and c.activity_pattern != search_filter.activity_pattern:
        return False
    if search_filter.zone_id and search_filter.zone_id.strip():
        if animal.zone_id.casefold() != search_filter.zone_id.strip().casefold():
            return False
    return True


def keyword_score(animal: Animal, keyword: str | None) -> tuple[float, list[str]]:
    """Score how well ``keyword`` matches an animal.

    Returns the score (0-100) and the names of the matching fields.
    """
    if keyword is None or not keyword.strip():
        return 0.0, []

    needle = keyword.strip().casefold()
    score = 0
    matched: list[str] = []

    for field, text, (exact, partial) in (
        ("chineseName", animal.chinese_name, CHINESE_NAME_WEIGHTS),
        ("englishName", animal.english_name, ENGLISH_NAME_WEIGHTS),
    ):
        folded = text.casefold()
        if folded == needle:
            score += exact
            matched.append(field)
        elif needle in folded:
            score += partial
            matched.append(field)

    if needle in animal.scientific_name.casefold():
        score += SCIENTIFIC_NAME_WEIGHT
        matched.append("scientificName")

    d = animal.description
    if needle in d.full_description_zh.casefold() or needle in d.full_description_en.casefold():
        score += DESCRIPTION_WEIGHT
        matched.append("description")

    if any(needle in fact.casefold() for fact in animal.fun_facts):
        score += FUN_FACTS_WEIGHT
        matched.append("funFacts")

    if needle in d.appearance.casefold():
        score += APPEARANCE_WEIGHT
        matched.append("appearance")

    if needle in d.behavior.casefold():
        score += BEHAVIOR_WEIGHT
        matched.append("behavior")

    return min(float(score), MAX_SCORE), matched


def search(search_filter: SearchFilter) -> list[SearchResult]:
    """Filter then rank animals by keyword relevance.

    Without a keyword every animal passing the filters gets the baseline
    score. Results are sorted by score descending, then by Chinese name.
    """
    has_keyword = bool(search_filter.keyword and search_filter.keyword.strip())
    results: list[SearchResult] = []

    for animal in get_all_animals():
        if not matches_filter(animal, search_filter):
            continue
        if has_keyword:
            score, matched = keyword_score(animal, search_filter.keyword)
            if score == 0:
                continue
        else:
            score, matched = BASELINE_SCORE, []
        results.append(SearchResult(animal=animal, score=score, matched_fields=matched))

    results.sort(key=lambda r: (-r.score, r.animal.chinese_name))
    logger.info("Search for %r returned %d animals", search_filter.keyword, len(results))
    return results


def suggest(keyword: str | None, limit: int = 5) -> list[SearchSuggestion]:
    """Return up to ``limit`` autocomplete entries for ``keyword``."""
    if keyword is None or not keyword.strip() or limit <= 0:
        return []

    scored = []
    for animal in get_all_animals():
        score, _ = keyword_score(animal, keyword)
        if score > 0:
            scored.append((score, animal))

    # sorted() is stable, so equal scores keep catalog order
    scored = sorted(scored, key=lambda pair: -pair[0])[:limit]
    return [
        SearchSuggestion(
            id=animal.id,
            name=animal.chinese_name,
            english_name=animal.english_name,
            thumbnail_url=animal.media.thumbnail_path,
        )
        for _, animal in scored
    ]


def filter_animals(search_filter: SearchFilter) -> list[Animal]:
    """Apply only the categorical filters, in catalog order. The keyword is ignored."""
    animals = [a for a in get_all_animals() if matches_filter(a, search_filter)]
    logger.info("Filter returned %d animals", len(animals))
    return animals
