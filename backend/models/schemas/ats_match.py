"""Deterministic ATS compatibility result for one resume/JD pair."""

from enum import Enum

from pydantic import BaseModel, ConfigDict

from models.schemas.external_analysis import ExternalAnalysisResult
from models.schemas.target_job import Importance


class FormatRating(str, Enum):
    GOOD = "Good"
    FAIR = "Fair"
    POOR = "Poor"


class SkillCategory(str, Enum):
    TECHNICAL = "technical"
    SOFT = "soft"
    INDUSTRY = "industry"


class ATSBreakdown(BaseModel):
    model_config = ConfigDict(frozen=True)

    skill_match: int = 0
    keyword_match: int = 0
    title_alignment: int = 0
    format_check: FormatRating = FormatRating.POOR


class KeywordMatches(BaseModel):
    model_config = ConfigDict(frozen=True)

    matched: list[str] = []
    missing: list[str] = []
    total: int = 0
    match_percentage: int = 0


class MatchedSkill(BaseModel):
    model_config = ConfigDict(frozen=True)

    skill: str
    category: SkillCategory
    importance: Importance
    frequency: int  # resume mentions
    points: int


class MissingSkill(BaseModel):
    model_config = ConfigDict(frozen=True)

    skill: str
    category: SkillCategory
    importance: Importance
    suggestions: list[str] = []
    points_lost: int


class SkillsAnalysis(BaseModel):
    model_config = ConfigDict(frozen=True)

    matched_skills: list[MatchedSkill] = []
    missing_skills: list[MissingSkill] = []


class TitleAnalysis(BaseModel):
    model_config = ConfigDict(frozen=True)

    job_titles: list[str] = []
    resume_titles: list[str] = []
    matching_titles: list[str] = []
    alignment_score: int = 0


class FormatAnalysis(BaseModel):
    model_config = ConfigDict(frozen=True)

    has_bullet_points: bool = False
    has_standard_sections: bool = False
    has_quantified_results: bool = False
    has_contact_info: bool = False
    overall_format_score: FormatRating = FormatRating.POOR


class RequirementMatch(BaseModel):
    """Score and feedback for the experience or education requirement."""
    model_config = ConfigDict(frozen=True)

    score: int = 80
    feedback: str = ""


class KeywordGroup(BaseModel):
    model_config = ConfigDict(frozen=True)

    matched: list[str] = []
    missing: list[str] = []


class DetailedKeywords(BaseModel):
    model_config = ConfigDict(frozen=True)

    nouns: KeywordGroup = KeywordGroup()
    verbs: KeywordGroup = KeywordGroup()
    phrases: KeywordGroup = KeywordGroup()


class ATSMatchResult(BaseModel):
    """Computed from scratch per (resume_text, job_description) call."""
    model_config = ConfigDict(frozen=True)

    overall_score: int = 0
    breakdown: ATSBreakdown = ATSBreakdown()
    external_analysis: ExternalAnalysisResult | None = None
    keyword_matches: KeywordMatches = KeywordMatches()
    skills_analysis: SkillsAnalysis = SkillsAnalysis()
    title_analysis: TitleAnalysis = TitleAnalysis()
    format_analysis: FormatAnalysis = FormatAnalysis()
    experience_match: RequirementMatch = RequirementMatch()
    education_match: RequirementMatch = RequirementMatch()
    recommendations: list[str] = []
    detailed_keywords: DetailedKeywords = DetailedKeywords()
