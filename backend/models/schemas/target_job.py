"""Comparison of a skill profile against one chosen job role."""

from enum import Enum

from pydantic import BaseModel, ConfigDict

from models.schemas.job_roles import ExperienceLevel


class ChecklistCategory(str, Enum):
    REQUIRED = "required"
    PREFERRED = "preferred"


class Importance(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class SkillChecklistItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    skill: str
    category: ChecklistCategory
    has_skill: bool
    importance: Importance
    learning_time: str
    resources: list[str] = []


class TargetJobComparison(BaseModel):
    """Recomputed on every selection; never cached."""
    model_config = ConfigDict(frozen=True)

    job_title: str
    match_percentage: int = 0
    matching_skills: list[str] = []
    missing_required_skills: list[str] = []
    missing_preferred_skills: list[str] = []
    experience_level: ExperienceLevel = ExperienceLevel.JUNIOR
    salary_range: str = ""
    description: str = ""
    skills_checklist: list[SkillChecklistItem] = []
