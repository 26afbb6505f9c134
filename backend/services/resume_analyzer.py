"""Orchestrator: document-level analysis flows.

Flows:
1. analyze_document: extracted text -> skills -> job role suggestions
2. compare_target_job: skills -> one catalog role with learning checklist
3. analyze_match: resume + job description -> ATS score (+ external opinion)
4. build_snapshot: package results for the history store

Only this layer rejects blank or error-flagged text; the analyzers below
it return empty results for such input.
"""

import logging
import random
from datetime import datetime, timezone
from typing import Iterable

from models.responses import AnalysisSnapshot, DocumentAnalysis, JobComparisonRecord
from models.schemas import ATSMatchResult, ExtractedSkills, TargetJobComparison, TextExtractionResult
from services import ats_scorer
from services.errors import ExtractionError
from services.external_analysis import ExternalAnalysisClient
from services.job_role_matcher import suggest_job_roles
from services.skill_extractor import extract_skills
from services.target_job_comparator import compare_with_target_job

logger = logging.getLogger(__name__)

EMPTY_TEXT_MESSAGE = "Could not analyze empty text"


def _require_text(text: str, error: str | None = None) -> str:
    if error:
        raise ExtractionError(error)
    if not text or not text.strip():
        raise ExtractionError(EMPTY_TEXT_MESSAGE)
    return text


def analyze_document(
    extraction: TextExtractionResult, rng: random.Random | None = None,
) -> DocumentAnalysis:
    """Extract skills from a document and suggest matching job roles.

    Raises:
        ExtractionError: the extractor reported an error or produced no text.
    """
    text = _require_text(extraction.text, extraction.error)
    skills = extract_skills(text)
    suggestions = suggest_job_roles(skills, rng=rng)

    logger.info(
        "Document analyzed: %d skills, %d suggested roles",
        skills.total_skills, len(suggestions.suggested_roles),
    )
    return DocumentAnalysis(
        word_count=extraction.word_count or len(text.split()),
        skills=skills,
        job_suggestions=suggestions,
    )


def compare_target_job(job_title: str, skills: ExtractedSkills | list[str]) -> TargetJobComparison:
    """Compare extracted (or rehydrated) skills with one catalog job."""
    user_skills = skills.skill_names if isinstance(skills, ExtractedSkills) else list(skills)
    return compare_with_target_job(job_title, user_skills)


async def analyze_match(
    resume_text: str,
    job_description: str,
    client: ExternalAnalysisClient | None = None,
) -> ATSMatchResult:
    """ATS analysis of a resume against a job description.

    Raises:
        ExtractionError: the resume text is blank.
    """
    _require_text(resume_text)
    return await ats_scorer.analyze_match(resume_text, job_description, client=client)


def record_comparison(
    comparison: TargetJobComparison, analyzed_at: datetime | None = None,
) -> JobComparisonRecord:
    return JobComparisonRecord(
        job_title=comparison.job_title,
        match_percentage=comparison.match_percentage,
        analyzed_at=analyzed_at or datetime.now(timezone.utc),
        missing_required_skills=comparison.missing_required_skills,
        missing_preferred_skills=comparison.missing_preferred_skills,
    )


def build_snapshot(
    file_name: str,
    extraction: TextExtractionResult,
    document: DocumentAnalysis,
    ai_suggestions: str | None = None,
    comparisons: Iterable[TargetJobComparison] = (),
) -> AnalysisSnapshot:
    """Values the history store persists for one analyzed document."""
    return AnalysisSnapshot(
        file_name=file_name,
        extracted_text=extraction.text,
        word_count=document.word_count,
        skills=document.skills,
        job_suggestions=document.job_suggestions.suggested_roles,
        ai_suggestions=ai_suggestions,
        target_job_comparisons=[record_comparison(c) for c in comparisons],
    )
