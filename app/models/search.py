"""Pydantic models for keyword search and filtering."""

from typing import Optional

from pydantic import Field

from app.models.animal import ActivityPattern, Animal, BiologicalClass, Diet, Habitat
from app.models.common import CamelModel


class SearchFilter(CamelModel):
    """Request-scoped search criteria. Every field is optional."""

    keyword: Optional[str] = None
    biological_class: Optional[BiologicalClass] = None
    habitat: Optional[Habitat] = None
    diet: Optional[Diet] = None
    activity_pattern: Optional[ActivityPattern] = None
    zone_id: Optional[str] = None


class SearchResult(CamelModel):
    """An animal matched by a search, with its relevance score."""

    animal: Animal
    score: float = Field(..., ge=0, le=100)
    matched_fields: list[str] = Field(default_factory=list)


class SearchSuggestion(CamelModel):
    """Autocomplete entry."""

    id: str
    name: str
    english_name: str
    thumbnail_url: str


class SuggestResponse(CamelModel):
    suggestions: list[SearchSuggestion]
