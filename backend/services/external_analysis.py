"""External text-generation collaborator for ATS scores and career coaching.

Two interchangeable clients implement ``ExternalAnalysisClient``:

- ``LocalAnalysisClient``: deterministic keyword heuristics, used when no
  Gemini credential is configured.
- ``GeminiAnalysisClient``: asks Gemini for JSON, validates it against the
  pydantic shapes and substitutes the local result when the reply is
  malformed. Transport failures raise ``ExternalServiceError``.

``run_external_ats_analysis`` wraps either client so failures end up in the
result's ``error`` field instead of propagating.
"""

import logging
import re
import time
from abc import ABC, abstractmethod

from pydantic import ValidationError

from config import settings
from models.schemas import (
    CareerCoachAnalysis,
    ExternalAnalysisResult,
    ExternalATSAnalysis,
    ExternalATSBreakdown,
    RoleSkillGap,
)
from services import gemini_client, prompt_builder
from services.errors import ExternalServiceError
from services.section_parser import YEARS_EXPERIENCE_RE
from services.text_matching import round_half_up, to_score

logger = logging.getLogger(__name__)

DEFAULT_TIPS_REPLY = "Unable to generate suggestions at this time."


class ExternalAnalysisClient(ABC):
    """Base class for external analysis providers.

    Subclasses must implement:
        - generate_ats_analysis(resume_text, job_description)
        - generate_resume_tips(resume_text)
        - generate_career_coach_analysis(resume_text)
    """

    name: str = ""

    @property
    @abstractmethod
    def is_ai_generated(self) -> bool:
        """True when results come from a real text-generation model."""

    @abstractmethod
    async def generate_ats_analysis(self, resume_text: str, job_description: str) -> ExternalATSAnalysis:
        ...

    @abstractmethod
    async def generate_resume_tips(self, resume_text: str) -> str:
        ...

    @abstractmethod
    async def generate_career_coach_analysis(self, resume_text: str) -> CareerCoachAnalysis:
        ...


# ---------------------------------------------------------------------------
# Local heuristics
# ---------------------------------------------------------------------------
_MOCK_STOP_WORDS: frozenset[str] = frozenset({
    "the", "and", "for", "with", "will", "you", "our", "this", "that", "have", "been", "from",
})

# Technology -> skill-overlap bonus when both texts mention it
_SKILL_BONUSES: dict[str, int] = {
    "react": 20,
    "python": 18,
    "javascript": 15,
    "typescript": 12,
    "aws": 15,
    "docker": 10,
    "kubernetes": 12,
}

_GENERIC_TITLES = ("developer", "engineer", "analyst", "manager", "specialist")
_SENIORITY_TERMS = ("senior", "lead", "principal", "staff", "junior", "entry")
_MOCK_SECTIONS = ("experience", "education", "skills", "projects")

_MOCK_BULLET_RE = re.compile(r"[•\-*]")
_QUANTIFIED_RE = re.compile(r"\d+%|\$\d+|\d+k|\d+\+")
_PHONE_RE = re.compile(r"\(\d{3}\)")
_EDUCATION_RE = re.compile(r"bachelor|master|degree|university|college")
_REMOTE_RE = re.compile(r"remote|distributed|virtual")


def _years(text: str, default: int) -> int:
    found = YEARS_EXPERIENCE_RE.search(text)
    return int(found.group(1)) if found else default


def _score_keywords(resume_lower: str, job_lower: str) -> int:
    meaningful = [
        word for word in job_lower.split()
        if len(word) > 3 and word not in _MOCK_STOP_WORDS
    ]
    if not meaningful:
        return 0
    meaningful_set = set(meaningful)
    common = [word for word in resume_lower.split() if word in meaningful_set]
    return min(round_half_up(len(common) / len(meaningful) * 120), 100)


def _score_skill_overlap(resume_lower: str, job_lower: str) -> int:
    score = 40
    for tech, bonus in _SKILL_BONUSES.items():
        if tech in resume_lower and tech in job_lower:
            score += bonus
    if "experience" in resume_lower or "year" in resume_lower:
        score += 10
    if _REMOTE_RE.search(resume_lower) and "remote" in job_lower:
        score += 8
    return min(score, 100)


def _score_title(resume_lower: str, job_lower: str) -> int:
    title_matches = [t for t in _GENERIC_TITLES if t in resume_lower and t in job_lower]
    seniority_matches = [t for t in _SENIORITY_TERMS if t in resume_lower and t in job_lower]
    score = min(len(title_matches) * 25 + 40, 90)
    if seniority_matches:
        score += 10
    return min(score, 100)


def _score_formatting(resume_text: str) -> int:
    resume_lower = resume_text.lower()
    score = 60
    if _MOCK_BULLET_RE.search(resume_text):
        score += 15
    if _QUANTIFIED_RE.search(resume_text):
        score += 15
    if "@" in resume_text or _PHONE_RE.search(resume_text):
        score += 10
    score += sum(2 for section in _MOCK_SECTIONS if section in resume_lower)
    return min(score, 100)


def _score_experience(resume_text: str, job_description: str) -> int:
    required = _years(job_description, 3)
    candidate = _years(resume_text, 2)
    if candidate >= required:
        return 100
    if candidate >= required * 0.8:
        return 85
    if candidate >= required * 0.6:
        return 70
    return 50


def _describe_ats_score(overall: int) -> str:
    if overall >= 85:
        verdict = "Excellent ATS compatibility with high pass-through probability."
    elif overall >= 70:
        verdict = "Good ATS score with optimization opportunities for better ranking."
    elif overall >= 50:
        verdict = "Moderate ATS compatibility requiring focused improvements."
    else:
        verdict = "Significant ATS optimization needed to improve screening success rate."

    if overall >= 75:
        competitiveness = "strong"
    elif overall >= 60:
        competitiveness = "moderate"
    else:
        competitiveness = "limited"

    return (
        "This analysis simulates modern ATS processing using weighted scoring across "
        f"multiple dimensions. {verdict} Current market analysis suggests {competitiveness} "
        "competitiveness for similar roles."
    )


class LocalAnalysisClient(ExternalAnalysisClient):
    """Deterministic keyword heuristics; identical input gives identical output."""

    name = "local"

    @property
    def is_ai_generated(self) -> bool:
        return False

    async def generate_ats_analysis(self, resume_text: str, job_description: str) -> ExternalATSAnalysis:
        return self.ats_analysis(resume_text, job_description)

    async def generate_resume_tips(self, resume_text: str) -> str:
        return self.resume_tips(resume_text)

    async def generate_career_coach_analysis(self, resume_text: str) -> CareerCoachAnalysis:
        return self.career_coach_analysis(resume_text)

    def ats_analysis(self, resume_text: str, job_description: str) -> ExternalATSAnalysis:
        resume_lower = resume_text.lower()
        job_lower = job_description.lower()

        keyword_match = _score_keywords(resume_lower, job_lower)
        skill_overlap = _score_skill_overlap(resume_lower, job_lower)
        title_match = _score_title(resume_lower, job_lower)
        formatting = _score_formatting(resume_text)
        experience_level = _score_experience(resume_text, job_description)

        education_required = any(k in job_lower for k in ("degree", "bachelor", "master"))
        has_education = bool(_EDUCATION_RE.search(resume_lower))
        education_match = 80
        if education_required:
            education_match = 100 if has_education else 40

        overall = to_score(
            skill_overlap * 0.28
            + keyword_match * 0.25
            + title_match * 0.18
            + formatting * 0.12
            + experience_level * 0.12
            + education_match * 0.05
        )

        suggestions = []
        if keyword_match < 65:
            suggestions.append("Increase keyword density by incorporating more job-specific terminology")
        if skill_overlap < 65:
            suggestions.append("Add missing technical skills and highlight relevant experience")
        if title_match < 70:
            suggestions.append("Align job titles and role descriptions with target position")
        if formatting < 75:
            suggestions.append("Improve ATS compatibility with better formatting and standard sections")
        if experience_level < 80:
            suggestions.append("Emphasize relevant experience and quantify achievements")
        if education_required and not has_education:
            suggestions.append("Highlight relevant certifications or equivalent experience")
        if not suggestions:
            suggestions.append("Excellent match! Consider fine-tuning keywords for optimal ATS performance")

        return ExternalATSAnalysis(
            overall_score=overall,
            breakdown=ExternalATSBreakdown(
                keyword_match=keyword_match,
                title_match=title_match,
                formatting=formatting,
                skill_overlap=skill_overlap,
                experience_level=experience_level,
                education_match=education_match,
            ),
            suggestions=suggestions[:4],
            explanation=_describe_ats_score(overall),
        )

    def resume_tips(self, resume_text: str) -> str:
        text = resume_text.lower()
        has_react = "react" in text
        has_python = "python" in text
        has_sql = "sql" in text
        has_cloud = "aws" in text or "cloud" in text
        has_leadership = "lead" in text or "manage" in text

        titles = []
        if has_react:
            titles += ["Frontend Developer", "React Developer"]
        if has_python and has_sql:
            titles += ["Data Analyst", "Backend Developer"]
        if has_cloud:
            titles += ["Cloud Engineer", "DevOps Engineer"]
        if has_leadership:
            titles += ["Senior Developer", "Tech Lead"]
        if not titles:
            titles = ["Software Developer", "Junior Developer"]

        gaps = []
        if not has_react and "vue" not in text and "angular" not in text:
            gaps.append("modern frontend frameworks (React/Vue/Angular)")
        if not has_sql:
            gaps.append("SQL and database management")
        if not has_cloud and "docker" not in text:
            gaps.append("cloud platforms (AWS/Azure) and containerization")
        if "git" not in text:
            gaps.append("version control (Git)")

        improvements = []
        if len(resume_text.split()) < 200:
            improvements.append(
                "Expand your experience descriptions with specific metrics and quantifiable achievements"
            )
        if "project" not in text:
            improvements.append("Add a projects section showcasing 2-3 technical projects with GitHub links")
        improvements.append("Include specific technologies, tools, and programming languages you've used")
        if "certif" not in text:
            improvements.append(
                "Consider pursuing relevant certifications (AWS, Google Cloud, or technology-specific)"
            )

        assessment = "You have a solid foundation for a tech career! "
        if has_react or has_python or has_sql:
            assessment += (
                "Your technical skills show promise, and with some strategic additions, "
                "you'll be competitive for mid-level positions. "
            )
        assessment += (
            "Focus on showcasing real-world applications of your skills "
            "and you'll see great results in your job search."
        )

        gap_text = " and ".join(gaps[:2]) if gaps else "more specific technical projects"
        return (
            f"**Job Title Suitability:** Based on your experience, you're well-positioned for "
            f"{', '.join(titles[:3])} roles. "
            f"\n\n**Skills Gap Analysis:** To strengthen your candidacy, consider adding {gap_text}. "
            f"\n\n**Actionable Improvements:** {'; '.join(improvements[:3])}. "
            f"\n\n**Overall Assessment:** {assessment}"
        )

    def career_coach_analysis(self, resume_text: str) -> CareerCoachAnalysis:
        text = resume_text.lower()
        has_react = "react" in text
        has_python = "python" in text
        has_sql = "sql" in text
        has_aws = "aws" in text
        has_leadership = "lead" in text or "manage" in text

        titles = []
        if has_react:
            titles += ["Frontend Developer", "React Developer"]
        if has_python and has_sql:
            titles += ["Full Stack Developer", "Backend Developer"]
        if has_python and not has_sql:
            titles += ["Python Developer", "Software Engineer"]
        if has_aws:
            titles += ["Cloud Engineer", "DevOps Engineer"]
        if has_leadership and (has_react or has_python):
            titles += ["Senior Developer", "Tech Lead"]
        if not titles:
            titles = ["Junior Software Developer", "Software Engineer", "Web Developer"]

        gaps: list[RoleSkillGap] = []
        if "Frontend Developer" in titles or "React Developer" in titles:
            required, preferred = [], []
            if "typescript" not in text:
                required.append("TypeScript")
            if "css" not in text and "sass" not in text:
                required.append("Advanced CSS/SASS")
            if "jest" not in text and "test" not in text:
                preferred.append("Jest/Testing")
            if "webpack" not in text and "vite" not in text:
                preferred.append("Build Tools (Webpack/Vite)")
            gaps.append(RoleSkillGap(
                job_title="Frontend Developer", required_skills=required[:2], preferred_skills=preferred[:2],
            ))

        if "Full Stack Developer" in titles or "Backend Developer" in titles:
            required, preferred = [], []
            if not has_sql:
                required.append("SQL/Database Management")
            if "api" not in text and "rest" not in text:
                required.append("REST API Development")
            if "docker" not in text:
                preferred.append("Docker/Containerization")
            if not has_aws and "cloud" not in text:
                preferred.append("Cloud Platforms (AWS/Azure)")
            gaps.append(RoleSkillGap(
                job_title="Full Stack Developer", required_skills=required[:2], preferred_skills=preferred[:2],
            ))

        improvements = []
        if "project" not in text:
            improvements.append("Create a portfolio with 3-4 technical projects showcasing different skills")
        if len(resume_text.split()) < 200:
            improvements.append("Expand experience descriptions with specific metrics and quantifiable achievements")
        if "github" not in text:
            improvements.append("Include GitHub profile link and ensure repositories are well-documented")
        if "certif" not in text:
            improvements.append(
                "Consider pursuing relevant certifications (AWS Cloud Practitioner, Google Cloud, etc.)"
            )
        improvements.append(
            "Use action verbs and quantify impact (e.g., 'Improved performance by 40%', "
            "'Led team of 5 developers')"
        )

        assessment = "You have a solid technical foundation"
        if has_react and has_python:
            assessment += (
                " with versatile full-stack capabilities. Your diverse skill set positions you "
                "well for senior developer roles with continued growth."
            )
        elif has_react:
            assessment += (
                " with strong frontend expertise. You're well-positioned for React-focused roles "
                "and can grow into full-stack positions."
            )
        elif has_python:
            assessment += (
                " with backend/data capabilities. Consider expanding into frontend technologies "
                "or specializing deeper in data engineering."
            )
        else:
            assessment += (
                ". Focus on building projects with modern technologies to demonstrate practical "
                "application of your skills."
            )

        return CareerCoachAnalysis(
            suitable_job_titles=titles[:4],
            missing_skills=gaps[:2],
            improvements=improvements[:4],
            overall_assessment=assessment,
        )


# ---------------------------------------------------------------------------
# Gemini
# ---------------------------------------------------------------------------
class GeminiAnalysisClient(ExternalAnalysisClient):
    """Gemini-backed analysis with the local heuristics as parse fallback."""

    name = "gemini"

    def __init__(self, fallback: LocalAnalysisClient | None = None) -> None:
        self._fallback = fallback or LocalAnalysisClient()

    @property
    def is_ai_generated(self) -> bool:
        return True

    async def generate_ats_analysis(self, resume_text: str, job_description: str) -> ExternalATSAnalysis:
        data = await gemini_client.generate_json(
            prompt_builder.build_ats_prompt(resume_text, job_description),
            system_instruction=prompt_builder.ATS_SYSTEM_INSTRUCTION,
        )
        if data is not None:
            try:
                return ExternalATSAnalysis.model_validate(data)
            except ValidationError as e:
                logger.warning("Gemini ATS reply failed validation: %s", e.error_count())
        logger.warning("Using local ATS heuristics in place of Gemini reply")
        return self._fallback.ats_analysis(resume_text, job_description)

    async def generate_resume_tips(self, resume_text: str) -> str:
        text = await gemini_client.generate_text(
            prompt_builder.build_resume_tips_prompt(resume_text),
            system_instruction=prompt_builder.RESUME_TIPS_SYSTEM_INSTRUCTION,
            temperature=0.4,
        )
        return text or DEFAULT_TIPS_REPLY

    async def generate_career_coach_analysis(self, resume_text: str) -> CareerCoachAnalysis:
        data = await gemini_client.generate_json(
            prompt_builder.build_career_coach_prompt(resume_text),
            system_instruction=prompt_builder.CAREER_COACH_SYSTEM_INSTRUCTION,
        )
        if data is not None:
            try:
                return CareerCoachAnalysis.model_validate(data)
            except ValidationError as e:
                logger.warning("Gemini career reply failed validation: %s", e.error_count())
        logger.warning("Using local career heuristics in place of Gemini reply")
        return self._fallback.career_coach_analysis(resume_text)


def get_analysis_client() -> ExternalAnalysisClient:
    """Gemini when a key is configured, otherwise the local heuristics."""
    if settings.gemini_api_key:
        logger.info("Using Gemini analysis client (%s)", settings.gemini_model)
        return GeminiAnalysisClient()
    logger.info("No Gemini key configured - using local analysis client")
    return LocalAnalysisClient()


# ---------------------------------------------------------------------------
# Result envelope
# ---------------------------------------------------------------------------
def compute_confidence(analysis: ExternalATSAnalysis, resume_text: str, job_description: str) -> int:
    """Heuristic 0-100 confidence in an external ATS analysis."""
    confidence = 70.0
    if 0 <= analysis.overall_score <= 100:
        confidence += 10
    sub_scores = analysis.breakdown.sub_scores()
    if len(sub_scores) >= 4:
        confidence += 10
    if len(analysis.suggestions) >= 2:
        confidence += 5
    if len(analysis.explanation) > 50:
        confidence += 5

    if sub_scores:
        mean = sum(sub_scores) / len(sub_scores)
        if abs(analysis.overall_score - mean) < 15:
            confidence += 10

    complexity = (len(resume_text) + len(job_description)) / 2000
    if complexity > 1:
        confidence += min(complexity * 5, 15)

    return to_score(min(confidence, 100))


async def run_external_ats_analysis(
    client: ExternalAnalysisClient, resume_text: str, job_description: str,
) -> ExternalAnalysisResult:
    """Run ``client`` and wrap its outcome; failures land in ``error``."""
    started = time.perf_counter()
    try:
        analysis = await client.generate_ats_analysis(resume_text, job_description)
    except ExternalServiceError as e:
        error = str(e)
    except Exception:
        logger.exception("External ATS analysis failed")
        error = "Failed to generate AI analysis"
    else:
        return ExternalAnalysisResult(
            analysis=analysis,
            is_ai_generated=client.is_ai_generated,
            confidence=compute_confidence(analysis, resume_text, job_description),
            processing_time_ms=_elapsed_ms(started),
        )

    return ExternalAnalysisResult(
        is_ai_generated=False,
        error=error,
        confidence=0,
        processing_time_ms=_elapsed_ms(started),
    )


def _elapsed_ms(started: float) -> int:
    return int((time.perf_counter() - started) * 1000)
