"""Pydantic contracts passed between the analysis services."""

from models.schemas.extracted_skills import ExtractedSkills, SkillMatch, TextExtractionResult
from models.schemas.job_roles import (
    DemandLevel,
    ExperienceBand,
    ExperienceLevel,
    JobOption,
    JobRoleProfile,
    JobRoleSuggestion,
    JobRoleSuggestionResult,
    MarketInsights,
)
from models.schemas.target_job import (
    ChecklistCategory,
    Importance,
    SkillChecklistItem,
    TargetJobComparison,
)
from models.schemas.external_analysis import (
    CareerCoachAnalysis,
    ExternalAnalysisResult,
    ExternalATSAnalysis,
    ExternalATSBreakdown,
    RoleSkillGap,
)
from models.schemas.ats_match import (
    ATSBreakdown,
    ATSMatchResult,
    DetailedKeywords,
    FormatAnalysis,
    FormatRating,
    KeywordGroup,
    KeywordMatches,
    MatchedSkill,
    MissingSkill,
    RequirementMatch,
    SkillCategory,
    SkillsAnalysis,
    TitleAnalysis,
)

__all__ = [
    "TextExtractionResult",
    "SkillMatch",
    "ExtractedSkills",
    "ExperienceLevel",
    "DemandLevel",
    "ExperienceBand",
    "JobRoleProfile",
    "JobOption",
    "JobRoleSuggestion",
    "MarketInsights",
    "JobRoleSuggestionResult",
    "ChecklistCategory",
    "Importance",
    "SkillChecklistItem",
    "TargetJobComparison",
    "ExternalATSBreakdown",
    "ExternalATSAnalysis",
    "RoleSkillGap",
    "CareerCoachAnalysis",
    "ExternalAnalysisResult",
    "FormatRating",
    "SkillCategory",
    "ATSBreakdown",
    "KeywordMatches",
    "MatchedSkill",
    "MissingSkill",
    "SkillsAnalysis",
    "TitleAnalysis",
    "FormatAnalysis",
    "RequirementMatch",
    "KeywordGroup",
    "DetailedKeywords",
    "ATSMatchResult",
]
