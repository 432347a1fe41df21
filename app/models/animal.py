"""Pydantic models for animal data."""

from typing import Optional

from pydantic import Field

from app.models.common import CamelModel, Entity, LenientEnum


class BiologicalClass(LenientEnum):
    MAMMAL = "Mammal"
    BIRD = "Bird"
    REPTILE = "Reptile"
    AMPHIBIAN = "Amphibian"
    FISH = "Fish"
    INVERTEBRATE = "Invertebrate"


class Habitat(LenientEnum):
    TROPICAL_RAINFOREST = "TropicalRainforest"
    DESERT = "Desert"
    GRASSLAND = "Grassland"
    POLAR = "Polar"
    OCEAN = "Ocean"
    FRESHWATER = "Freshwater"
    MOUNTAIN = "Mountain"


class Diet(LenientEnum):
    CARNIVORE = "Carnivore"
    HERBIVORE = "Herbivore"
    OMNIVORE = "Omnivore"


class ActivityPattern(LenientEnum):
    DIURNAL = "Diurnal"
    NOCTURNAL = "Nocturnal"
    CREPUSCULAR = "Crepuscular"


class ConservationStatus(LenientEnum):
    """IUCN Red List category."""

    LC = "LC"  # Least Concern
    NT = "NT"  # Near Threatened
    VU = "VU"  # Vulnerable
    EN = "EN"  # Endangered
    CR = "CR"  # Critically Endangered
    EW = "EW"  # Extinct in the Wild
    EX = "EX"  # Extinct


# Higher ranks are featured first.
CONSERVATION_PRIORITY: dict[ConservationStatus, int] = {
    ConservationStatus.CR: 6,
    ConservationStatus.EN: 5,
    ConservationStatus.VU: 4,
    ConservationStatus.NT: 3,
    ConservationStatus.LC: 2,
    ConservationStatus.EW: 1,
    ConservationStatus.EX: 0,
}


class Classification(Entity):
    """Taxonomy and lifestyle classification of an animal."""

    biological_class: BiologicalClass
    habitat: Habitat
    diet: Diet
    activity_pattern: ActivityPattern


class Description(Entity):
    """Descriptive texts shown on the detail page."""

    size: str = ""
    appearance: str = ""
    behavior: str = ""
    full_description_zh: str = ""
    full_description_en: str = ""


class MediaResources(Entity):
    images: list[str] = Field(default_factory=list)
    sound_path: Optional[str] = None
    thumbnail_path: str = ""


class Animal(Entity):
    """Schema representing an animal of the zoo catalog."""

    id: str = Field(..., description="Unique animal ID, compared case-insensitively")
    chinese_name: str = Field(..., description="Traditional Chinese name")
    english_name: str = Field(..., description="English name")
    scientific_name: str = Field("", description="Latin binomial name")
    zone_id: str = Field(..., description="ID of the zone housing the animal")
    classification: Classification
    description: Description
    fun_facts: list[str] = Field(default_factory=list)
    conservation_status: ConservationStatus
    media: MediaResources
    related_animal_ids: list[str] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# API response schemas
# ---------------------------------------------------------------------------

class ClassificationSummary(CamelModel):
    biological_class: BiologicalClass
    habitat: Habitat


class AnimalSummary(CamelModel):
    """Compact animal representation used in listings."""

    id: str
    chinese_name: str
    english_name: str
    thumbnail_url: str
    conservation_status: ConservationStatus
    classification: ClassificationSummary

    @classmethod
    def from_animal(cls, animal: Animal) -> "AnimalSummary":
        return cls(
            id=animal.id,
            chinese_name=animal.chinese_name,
            english_name=animal.english_name,
            thumbnail_url=animal.media.thumbnail_path,
            conservation_status=animal.conservation_status,
            classification=ClassificationSummary(
                biological_class=animal.classification.biological_class,
                habitat=animal.classification.habitat,
            ),
        )


class AnimalListResponse(CamelModel):
    """Response schema for a list of animals."""

    animals: list[AnimalSummary]
    total: int


class RelatedAnimal(CamelModel):
    id: str
    chinese_name: str
    english_name: str
    thumbnail_url: str


class AnimalDetailResponse(CamelModel):
    """Response schema for a single animal with its related animals."""

    id: str
    chinese_name: str
    english_name: str
    scientific_name: str
    zone_id: str
    classification: Classification
    description: Description
    fun_facts: list[str]
    conservation_status: ConservationStatus
    media: MediaResources
    related_animals: list[RelatedAnimal]
