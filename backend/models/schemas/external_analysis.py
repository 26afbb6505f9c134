"""Shapes returned by the external text-generation collaborator."""

from pydantic import BaseModel, ConfigDict, Field


class ExternalATSBreakdown(BaseModel):
    model_config = ConfigDict(frozen=True)

    keyword_match: int = Field(default=0, ge=0, le=100)
    title_match: int = Field(default=0, ge=0, le=100)
    formatting: int = Field(default=0, ge=0, le=100)
    skill_overlap: int = Field(default=0, ge=0, le=100)
    experience_level: int | None = Field(default=None, ge=0, le=100)
    education_match: int | None = Field(default=None, ge=0, le=100)

    def sub_scores(self) -> list[int]:
        """All populated sub-scores."""
        return [v for v in self.model_dump().values() if v is not None]


class ExternalATSAnalysis(BaseModel):
    """An independently produced ATS score; never blended with the local one."""
    model_config = ConfigDict(frozen=True)

    overall_score: int = Field(default=0, ge=0, le=100)
    breakdown: ExternalATSBreakdown = ExternalATSBreakdown()
    suggestions: list[str] = []
    explanation: str = ""


class RoleSkillGap(BaseModel):
    model_config = ConfigDict(frozen=True)

    job_title: str
    required_skills: list[str] = []
    preferred_skills: list[str] = []


class CareerCoachAnalysis(BaseModel):
    model_config = ConfigDict(frozen=True)

    suitable_job_titles: list[str] = []
    missing_skills: list[RoleSkillGap] = []
    improvements: list[str] = []
    overall_assessment: str = ""


class ExternalAnalysisResult(BaseModel):
    """Envelope around the external ATS score, carrying its own error."""
    model_config = ConfigDict(frozen=True)

    analysis: ExternalATSAnalysis = ExternalATSAnalysis()
    is_ai_generated: bool = False
    error: str | None = None
    confidence: int = 0
    processing_time_ms: int = 0
