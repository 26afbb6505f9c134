from datetime import datetime

from pydantic import BaseModel

from models.schemas import ExtractedSkills, JobRoleSuggestion, JobRoleSuggestionResult


class DocumentAnalysis(BaseModel):
    """Skills and role suggestions for one extracted document."""
    word_count: int = 0
    skills: ExtractedSkills = ExtractedSkills()
    job_suggestions: JobRoleSuggestionResult = JobRoleSuggestionResult()


class JobComparisonRecord(BaseModel):
    job_title: str
    match_percentage: int = 0
    analyzed_at: datetime
    missing_required_skills: list[str] = []
    missing_preferred_skills: list[str] = []


class AnalysisSnapshot(BaseModel):
    """What the history store persists for one analysis."""
    file_name: str
    extracted_text: str
    word_count: int = 0
    skills: ExtractedSkills = ExtractedSkills()
    job_suggestions: list[JobRoleSuggestion] = []
    ai_suggestions: str | None = None
    target_job_comparisons: list[JobComparisonRecord] = []


class ResumeTipsResponse(BaseModel):
    suggestions: str
    is_ai_generated: bool = False


class HealthResponse(BaseModel):
    status: str = "ok"
    gemini_configured: bool = False
    external_analysis_enabled: bool = True
