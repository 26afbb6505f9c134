"""ATS compatibility scoring of a resume against a job description.

Pipeline:
1. Frequency-weighted keyword match (context-sensitive priority)
2. Detailed noun / verb / phrase categorization
3. Catalog skills with importance-based points
4. Job title alignment, with partial credit for related titles
5. Format checks
6. Experience and education requirements
7. Weighted overall score
8. Prioritized recommendations

Each deterministic stage is guarded: a failing stage logs and contributes
its neutral default instead of aborting the analysis. The optional external
stage reports its own failures in ``external_analysis.error``.
"""

import logging
from typing import Callable, TypeVar

from config import settings
from models.schemas import (
    ATSBreakdown,
    ATSMatchResult,
    DetailedKeywords,
    FormatAnalysis,
    FormatRating,
    Importance,
    KeywordMatches,
    MatchedSkill,
    MissingSkill,
    RequirementMatch,
    SkillCategory,
    SkillsAnalysis,
    TitleAnalysis,
)
from services.external_analysis import (
    ExternalAnalysisClient,
    get_analysis_client,
    run_external_ats_analysis,
)
from services.keyword_extractor import extract_detailed_keywords, match_keywords
from services.section_parser import analyze_education, analyze_experience, analyze_format
from services.skill_catalog import (
    ATS_JOB_TITLES,
    ATS_SOFT_SKILLS,
    ATS_TECHNICAL_SKILLS,
    ATS_TITLE_RELATIONS,
)
from services.text_matching import count_mentions, percentage, round_half_up, to_score

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Weights for the overall score
W_SKILLS = 0.35
W_KEYWORDS = 0.25
W_TITLE = 0.20
W_FORMAT = 0.10
W_EXPERIENCE = 0.07
W_EDUCATION = 0.03

FORMAT_SCORES: dict[FormatRating, int] = {
    FormatRating.GOOD: 90,
    FormatRating.FAIR: 70,
    FormatRating.POOR: 50,
}

BASE_POINTS: dict[SkillCategory, dict[Importance, int]] = {
    SkillCategory.TECHNICAL: {Importance.HIGH: 15, Importance.MEDIUM: 10, Importance.LOW: 5},
    SkillCategory.SOFT: {Importance.HIGH: 10, Importance.MEDIUM: 7, Importance.LOW: 4},
    # industry labels carry no points
    SkillCategory.INDUSTRY: {Importance.HIGH: 0, Importance.MEDIUM: 0, Importance.LOW: 0},
}

# Cap on job-description mentions counted towards points at stake
MENTION_CAPS: dict[SkillCategory, int] = {
    SkillCategory.TECHNICAL: 3,
    SkillCategory.SOFT: 2,
    SkillCategory.INDUSTRY: 0,
}

MAX_MATCHED_SKILLS = 20
MAX_MISSING_SKILLS = 10
MAX_RECOMMENDATIONS = 6
DEFAULT_TITLE_ALIGNMENT = 75
RELATED_TITLE_CREDIT = 0.7

SKILL_SUGGESTIONS: dict[str, list[str]] = {
    "react": [
        "Add React projects with hooks and context",
        "Mention component libraries and state management",
        "Include React performance optimization",
    ],
    "python": [
        "Include Python automation and data analysis projects",
        "Highlight specific libraries (pandas, numpy, django)",
        "Add machine learning or web scraping examples",
    ],
    "aws": [
        "List specific AWS services (EC2, S3, Lambda, RDS)",
        "Mention cloud architecture and infrastructure as code",
        "Include cost optimization and security practices",
    ],
    "docker": [
        "Describe containerization and orchestration projects",
        "Include Docker Compose and multi-stage builds",
        "Add container security and optimization",
    ],
    "kubernetes": [
        "Include container orchestration experience",
        "Mention helm charts and cluster management",
        "Add monitoring and scaling strategies",
    ],
    "typescript": [
        "Show TypeScript project examples",
        "Mention type safety and developer experience improvements",
        "Include advanced TypeScript patterns",
    ],
    "graphql": [
        "Add GraphQL API development experience",
        "Mention schema design and resolver optimization",
        "Include client-side GraphQL usage",
    ],
}

SOFT_SKILL_SUGGESTIONS: dict[str, list[str]] = {
    "leadership": [
        "Quantify team size and project outcomes",
        "Include mentoring and coaching achievements",
        "Show cross-functional collaboration results",
    ],
    "communication": [
        "Highlight presentation and documentation skills",
        "Include stakeholder management examples",
        "Show technical writing and knowledge sharing",
    ],
    "problem solving": [
        "Quantify problems solved with metrics",
        "Describe analytical frameworks used",
        "Include process improvement achievements",
    ],
    "project management": [
        "Show project delivery success rates",
        "Include budget and timeline management",
        "Mention agile/scrum facilitation experience",
    ],
}


def _run_stage(name: str, stage: Callable[..., T], default: T, *args) -> T:
    try:
        return stage(*args)
    except Exception:
        logger.exception("ATS stage '%s' failed; using default", name)
        return default


# ---------------------------------------------------------------------------
# Skills with points
# ---------------------------------------------------------------------------
def skill_importance(skill: str, job_text: str) -> Importance:
    """Importance of ``skill`` from literal requirement phrasings in the JD.

    Only exact forms such as "required: python" or "python preferred" count,
    so most prose falls through to LOW.
    """
    text = job_text.lower()
    skill_lower = skill.lower()

    high_patterns = (
        f"required: {skill_lower}", f"must have {skill_lower}", f"essential: {skill_lower}",
        f"required {skill_lower}", f"critical {skill_lower}", f"mandatory {skill_lower}",
        f"key requirement: {skill_lower}", f"{skill_lower} required", f"{skill_lower} essential",
    )
    medium_patterns = (
        f"preferred: {skill_lower}", f"nice to have {skill_lower}", f"plus: {skill_lower}",
        f"desired {skill_lower}", f"advantage: {skill_lower}", f"{skill_lower} preferred",
        f"experience with {skill_lower}", f"familiarity with {skill_lower}",
    )

    if any(pattern in text for pattern in high_patterns):
        return Importance.HIGH
    if any(pattern in text for pattern in medium_patterns):
        return Importance.MEDIUM
    return Importance.LOW


def skill_suggestions(skill: str, category: SkillCategory) -> list[str]:
    if category is SkillCategory.SOFT:
        return SOFT_SKILL_SUGGESTIONS.get(skill) or [
            f"Demonstrate {skill} with examples", f"Quantify {skill} achievements",
        ]
    return SKILL_SUGGESTIONS.get(skill) or [
        f"Add {skill} to skills section", f"Include {skill} in project descriptions",
    ]


def analyze_skills(resume_text: str, job_text: str) -> SkillsAnalysis:
    """Points earned and lost for every catalog skill the JD mentions."""
    matched: list[MatchedSkill] = []
    missing: list[MissingSkill] = []

    vocabularies = (
        (SkillCategory.TECHNICAL, ATS_TECHNICAL_SKILLS),
        (SkillCategory.SOFT, ATS_SOFT_SKILLS),
    )
    for category, skills in vocabularies:
        for skill in skills:
            job_mentions = count_mentions(job_text, skill)
            if job_mentions == 0:
                continue
            resume_mentions = count_mentions(resume_text, skill)
            importance = skill_importance(skill, job_text)
            base_points = BASE_POINTS[category][importance]

            if resume_mentions > 0:
                matched.append(MatchedSkill(
                    skill=skill,
                    category=category,
                    importance=importance,
                    frequency=resume_mentions,
                    points=min(resume_mentions, job_mentions) * base_points,
                ))
            else:
                missing.append(MissingSkill(
                    skill=skill,
                    category=category,
                    importance=importance,
                    suggestions=skill_suggestions(skill, category),
                    points_lost=base_points * min(job_mentions, MENTION_CAPS[category]),
                ))

    return SkillsAnalysis(
        matched_skills=matched[:MAX_MATCHED_SKILLS],
        missing_skills=missing[:MAX_MISSING_SKILLS],
    )


def skill_match_percentage(skills: SkillsAnalysis) -> int:
    earned = sum(s.points for s in skills.matched_skills)
    lost = sum(s.points_lost for s in skills.missing_skills)
    return round_half_up(percentage(earned, earned + lost))


# ---------------------------------------------------------------------------
# Title alignment
# ---------------------------------------------------------------------------
def count_related_title_matches(job_titles: list[str], resume_titles: list[str]) -> int:
    """Job titles for which the resume holds a related title."""
    related_matches = 0
    for job_title in job_titles:
        related = ATS_TITLE_RELATIONS.get(job_title, ())
        if any(
            rel in resume_title or resume_title in rel
            for rel in related
            for resume_title in resume_titles
        ):
            related_matches += 1
    return related_matches


def analyze_title_alignment(resume_text: str, job_text: str) -> TitleAnalysis:
    job_titles = [title for title in ATS_JOB_TITLES if title in job_text]
    resume_titles = [title for title in ATS_JOB_TITLES if title in resume_text]
    matching_titles = [title for title in job_titles if title in resume_titles]

    if not job_titles:
        alignment = DEFAULT_TITLE_ALIGNMENT
    else:
        related = count_related_title_matches(job_titles, resume_titles)
        total_matches = len(matching_titles) + related * RELATED_TITLE_CREDIT
        alignment = to_score(percentage(total_matches, len(job_titles)))

    return TitleAnalysis(
        job_titles=job_titles,
        resume_titles=resume_titles,
        matching_titles=matching_titles,
        alignment_score=alignment,
    )


# ---------------------------------------------------------------------------
# Overall score and recommendations
# ---------------------------------------------------------------------------
def weighted_overall_score(breakdown: ATSBreakdown, experience_score: int, education_score: int) -> int:
    return to_score(
        breakdown.skill_match * W_SKILLS
        + breakdown.keyword_match * W_KEYWORDS
        + breakdown.title_alignment * W_TITLE
        + FORMAT_SCORES[breakdown.format_check] * W_FORMAT
        + experience_score * W_EXPERIENCE
        + education_score * W_EDUCATION
    )


def build_recommendations(breakdown: ATSBreakdown, skills: SkillsAnalysis) -> list[str]:
    """Threshold-triggered advice in fixed priority order, then two generic tips."""
    recommendations = []

    if breakdown.skill_match < 70:
        recommendations.append(
            f"Improve skill match ({breakdown.skill_match}%): Add missing key skills to your resume"
        )
    if breakdown.keyword_match < 65:
        recommendations.append(
            f"Increase keyword density ({breakdown.keyword_match}%): Include more job-specific terminology"
        )
    if breakdown.title_alignment < 75:
        recommendations.append(
            f"Improve title alignment ({breakdown.title_alignment}%): Adjust job titles to match target role"
        )
    if breakdown.format_check is not FormatRating.GOOD:
        recommendations.append(
            f"Improve resume format ({breakdown.format_check.value}): "
            f"Add bullet points and quantified achievements"
        )
    if len(skills.missing_skills) > 3:
        priority = [s.skill for s in skills.missing_skills if s.importance is Importance.HIGH][:3]
        if priority:
            recommendations.append(f"Priority skills to add: {', '.join(priority)}")

    recommendations.append("Use exact keywords from the job description")
    recommendations.append("Include quantified achievements with metrics")
    return recommendations[:MAX_RECOMMENDATIONS]


def score_resume(resume_text: str, job_description: str) -> ATSMatchResult:
    """Deterministic ATS analysis; no external call, never raises on text input."""
    resume_lower = resume_text.lower()
    job_lower = job_description.lower()

    detailed_keywords = _run_stage(
        "detailed_keywords", extract_detailed_keywords, DetailedKeywords(), resume_lower, job_lower,
    )
    keyword_matches = _run_stage("keywords", match_keywords, KeywordMatches(), resume_lower, job_lower)
    skills_analysis = _run_stage("skills", analyze_skills, SkillsAnalysis(), resume_lower, job_lower)
    title_analysis = _run_stage(
        "titles", analyze_title_alignment,
        TitleAnalysis(alignment_score=DEFAULT_TITLE_ALIGNMENT), resume_lower, job_lower,
    )
    format_analysis = _run_stage("format", analyze_format, FormatAnalysis(), resume_text)
    experience_match = _run_stage(
        "experience", analyze_experience, RequirementMatch(), resume_lower, job_lower,
    )
    education_match = _run_stage(
        "education", analyze_education, RequirementMatch(), resume_lower, job_lower,
    )

    breakdown = ATSBreakdown(
        skill_match=skill_match_percentage(skills_analysis),
        keyword_match=keyword_matches.match_percentage,
        title_alignment=title_analysis.alignment_score,
        format_check=format_analysis.overall_format_score,
    )
    overall_score = weighted_overall_score(breakdown, experience_match.score, education_match.score)

    return ATSMatchResult(
        overall_score=overall_score,
        breakdown=breakdown,
        keyword_matches=keyword_matches,
        skills_analysis=skills_analysis,
        title_analysis=title_analysis,
        format_analysis=format_analysis,
        experience_match=experience_match,
        education_match=education_match,
        recommendations=build_recommendations(breakdown, skills_analysis),
        detailed_keywords=detailed_keywords,
    )


async def analyze_match(
    resume_text: str,
    job_description: str,
    client: ExternalAnalysisClient | None = None,
) -> ATSMatchResult:
    """Deterministic ATS analysis plus the external opinion when enabled.

    ``client`` overrides the configured external client. With
    ``settings.external_analysis_enabled`` off, ``external_analysis`` is None.
    """
    result = score_resume(resume_text, job_description)
    if not settings.external_analysis_enabled:
        return result

    if client is None:
        client = get_analysis_client()
    external = await run_external_ats_analysis(client, resume_text, job_description)

    logger.info(
        "ATS analysis complete: overall=%d external=%s",
        result.overall_score,
        "error" if external.error else external.analysis.overall_score,
    )
    return result.model_copy(update={"external_analysis": external})
