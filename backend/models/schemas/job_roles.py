"""Job role catalog entries and role-suggestion output."""

from enum import Enum
from types import MappingProxyType
from typing import Mapping

from pydantic import BaseModel, ConfigDict, field_serializer, field_validator


class ExperienceLevel(str, Enum):
    JUNIOR = "Junior"
    MID = "Mid"
    SENIOR = "Senior"
    LEAD = "Lead"


class DemandLevel(str, Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class ExperienceBand(BaseModel):
    """Skill-count threshold and salary range for one experience level."""
    model_config = ConfigDict(frozen=True)

    min_skills: int
    salary_range: str


class JobRoleProfile(BaseModel):
    """Static catalog entry describing one job role.

    ``experience_levels`` is ordered Junior -> Lead with increasing
    ``min_skills``. Market fields are only populated in the suggestion catalog.
    """
    model_config = ConfigDict(frozen=True)

    title: str
    required_skills: tuple[str, ...]
    preferred_skills: tuple[str, ...]
    category: str = ""
    description: str = ""
    popularity: int = 0
    experience_levels: Mapping[ExperienceLevel, ExperienceBand]
    demand_level: DemandLevel = DemandLevel.MEDIUM
    remote_available: bool = False
    industry_growth: str = ""
    market_trends: tuple[str, ...] = ()

    @field_validator("experience_levels", mode="after")
    @classmethod
    def freeze_levels(cls, value):
        return MappingProxyType(dict(value))

    @field_serializer("experience_levels")
    def dump_levels(self, value):
        return dict(value)

    @property
    def all_skills(self) -> tuple[str, ...]:
        return self.required_skills + self.preferred_skills


class JobOption(BaseModel):
    """A selectable target job."""
    model_config = ConfigDict(frozen=True)

    title: str
    category: str
    popularity: int


class JobRoleSuggestion(BaseModel):
    """A catalog role enriched for one suggestion call."""
    model_config = ConfigDict(frozen=True)

    title: str
    match: int
    company: str
    location: str
    salary: str
    requirements: list[str] = []  # required skills the candidate lists verbatim
    missing: list[str] = []  # required skills with no loose match
    description: str = ""
    experience_level: ExperienceLevel = ExperienceLevel.JUNIOR
    demand_level: DemandLevel = DemandLevel.MEDIUM
    remote_available: bool = False
    industry_growth: str = ""
    market_trends: list[str] = []


class MarketInsights(BaseModel):
    model_config = ConfigDict(frozen=True)

    high_demand_skills: list[str] = []
    emerging_trends: list[str] = []
    salary_trends: str = ""
    remote_opportunities: int = 0


class JobRoleSuggestionResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    suggested_roles: list[JobRoleSuggestion] = []
    top_skill_categories: list[str] = []
    overall_profile: str = ""
    market_insights: MarketInsights = MarketInsights()
