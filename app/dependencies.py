"""Shared FastAPI dependencies."""

from fastapi import Query, Request

from app.config import settings
from app.models.animal import ActivityPattern, BiologicalClass, Diet, Habitat
from app.models.search import SearchFilter
from app.services.search_service import parse_enum

SUPPORTED_LOCALES = ("zh-TW", "en")
CULTURE_COOKIE = "culture"


def _match_locale(tag: str) -> str | None:
    """Map a language tag such as ``en-US`` or ``zh-Hant-TW`` to a supported locale."""
    lang = tag.strip().split(";")[0].strip().lower()
    if lang.startswith("zh"):
        return "zh-TW"
    if lang.startswith("en"):
        return "en"
    return None


def resolve_locale(request: Request) -> str:
    """Pick the UI locale: ``culture`` cookie, then Accept-Language, then the default."""
    cookie = request.cookies.get(CULTURE_COOKIE)
    if cookie:
        locale = _match_locale(cookie)
        if locale:
            return locale

    accept_language = request.headers.get("accept-language")
    if accept_language:
        for tag in accept_language.split(","):
            locale = _match_locale(tag)
            if locale:
                return locale

    return settings.DEFAULT_LOCALE if settings.DEFAULT_LOCALE in SUPPORTED_LOCALES else "zh-TW"


async def get_search_filter(
    q: str | None = Query(None, description="Keyword"),
    biological_class: str | None = Query(None, alias="class", description="Biological class"),
    habitat: str | None = Query(None, description="Habitat"),
    diet: str | None = Query(None, description="Diet"),
    activity: str | None = Query(None, description="Activity pattern"),
    zone: str | None = Query(None, description="Zone ID"),
) -> SearchFilter:
    """Build a search filter from query parameters. Unrecognized enum values mean "no filter"."""
    return SearchFilter(
        keyword=q.strip() if q and q.strip() else None,
        biological_class=parse_enum(BiologicalClass, biological_class),
        habitat=parse_enum(Habitat, habitat),
        diet=parse_enum(Diet, diet),
        activity_pattern=parse_enum(ActivityPattern, activity),
        zone_id=zone.strip() if zone and zone.strip() else None,
    )
