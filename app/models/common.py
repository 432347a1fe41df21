"""Shared pydantic bases and the problem-details error body."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

PROBLEM_TYPE = "https://tools.ietf.org/html/rfc7807"


class CamelModel(BaseModel):
    """Base for request/response schemas exchanged as camelCase JSON."""

    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)


class Entity(BaseModel):
    """Base for immutable records loaded from the JSON data files."""

    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel, frozen=True)


class LenientEnum(str, Enum):
    """String enum that also accepts its values in any letter case.

    Data files spell values in camelCase (``tropicalRainforest``) while the
    API emits PascalCase (``TropicalRainforest``).
    """

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            wanted = value.strip().lower()
            for member in cls:
                if member.value.lower() == wanted:
                    return member
        return None


class ProblemDetails(BaseModel):
    """RFC 7807 error body returned by the JSON API."""

    type: str = Field(PROBLEM_TYPE, description="Problem type URI")
    title: str = Field(..., description="Short summary of the problem")
    status: int = Field(..., description="HTTP status code")
    detail: Optional[str] = Field(None, description="Human-readable explanation")
    instance: Optional[str] = Field(None, description="Request path that produced the problem")
