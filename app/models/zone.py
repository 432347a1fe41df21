"""Pydantic models for park zones."""

from pydantic import Field

from app.models.common import CamelModel, Entity


class Coordinate(Entity):
    """Point in the SVG map coordinate system."""

    x: float
    y: float


class Zone(Entity):
    """Schema representing a themed area of the park."""

    id: str = Field(..., description="Unique zone ID, compared case-insensitively")
    name_zh: str
    name_en: str
    description: str = ""
    position: Coordinate
    svg_path_id: str = Field("", description="ID of the SVG element drawn for this zone")
    color: str = "#9e9e9e"


class ZoneWithCount(CamelModel):
    """Zone listing entry including the number of animals it houses."""

    id: str
    name_zh: str
    name_en: str
    description: str
    position: Coordinate
    svg_path_id: str
    color: str
    animal_count: int


class ZoneListResponse(CamelModel):
    zones: list[ZoneWithCount]


class ZoneRef(CamelModel):
    id: str
    name_zh: str
    name_en: str


class ZoneAnimal(CamelModel):
    id: str
    chinese_name: str
    english_name: str
    thumbnail_url: str
    conservation_status: str


class ZoneAnimalsResponse(CamelModel):
    zone: ZoneRef
    animals: list[ZoneAnimal]
