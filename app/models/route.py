"""Pydantic models for guided tour routes and custom route planning."""

from typing import Optional

from pydantic import Field

from app.models.common import CamelModel, Entity, LenientEnum
from app.models.zone import Coordinate


class RouteType(LenientEnum):
    COMPLETE = "Complete"
    HIGHLIGHTS = "Highlights"
    FAMILY_FRIENDLY = "FamilyFriendly"
    PHOTOGRAPHY = "Photography"
    THEMED = "Themed"


class Route(Entity):
    """Curated tour through the park."""

    id: str
    name_zh: str
    name_en: str
    type: RouteType
    description: str = ""
    estimated_minutes: int = Field(..., ge=0, description="Estimated walking time in minutes")
    zone_ids: list[str] = Field(default_factory=list, description="Zones visited, in order")
    animal_ids: list[str] = Field(default_factory=list, description="Animals visited, in order")


class CustomRouteResult(CamelModel):
    """Outcome of planning a visitor-defined route."""

    success: bool
    error_message: Optional[str] = None
    animal_ids: list[str] = Field(default_factory=list)
    zone_ids: list[str] = Field(default_factory=list)
    estimated_minutes: int = 0
    share_code: Optional[str] = None


# ---------------------------------------------------------------------------
# API schemas
# ---------------------------------------------------------------------------

class RouteSummary(CamelModel):
    id: str
    name_zh: str
    name_en: str
    type: RouteType
    description: str
    estimated_minutes: int
    zone_count: int
    animal_count: int


class RouteListResponse(CamelModel):
    routes: list[RouteSummary]
    total: int


class RouteAnimal(CamelModel):
    id: str
    chinese_name: str
    english_name: str
    thumbnail_url: str
    zone_id: str
    conservation_status: Optional[str] = None


class RouteZone(CamelModel):
    id: str
    name_zh: str
    name_en: str
    color: str
    position: Coordinate


class RouteDetailResponse(CamelModel):
    id: str
    name_zh: str
    name_en: str
    type: RouteType
    description: str
    estimated_minutes: int
    zone_ids: list[str]
    animal_ids: list[str]
    animals: Optional[list[RouteAnimal]] = None
    zones: Optional[list[RouteZone]] = None


class PlanRouteRequest(CamelModel):
    """Request schema for planning a custom route."""

    animal_ids: Optional[list[str]] = Field(None, description="Animals the visitor wants to see")
    include_animals: bool = Field(False, description="Embed animal summaries in the response")


class PlanRouteResponse(CamelModel):
    success: bool = True
    animal_ids: list[str]
    zone_ids: list[str]
    estimated_minutes: int
    share_code: Optional[str] = None
    animals: Optional[list[RouteAnimal]] = None
