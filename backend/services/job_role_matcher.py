"""Rank catalog job roles against an extracted skill profile."""

import logging
import random
import re
from collections import Counter
from typing import Iterable, Mapping, NamedTuple

from config import settings
from models.schemas import (
    DemandLevel,
    ExperienceBand,
    ExperienceLevel,
    ExtractedSkills,
    JobRoleProfile,
    JobRoleSuggestion,
    JobRoleSuggestionResult,
    MarketInsights,
)
from services.skill_catalog import (
    COMPANIES,
    HIGH_DEMAND_SKILLS,
    LOCATIONS,
    MARKET_JOB_ROLES,
    MARKET_TRENDS,
)
from services.text_matching import has_skill, percentage, round_half_up, skills_match, to_score

logger = logging.getLogger(__name__)

REQUIRED_WEIGHT = 0.7
OVERALL_WEIGHT = 0.3
MIN_MATCH = 25
MAX_SUGGESTIONS = 6
REQUIRED_SKILL_BONUS = 5
REMOTE_THRESHOLD = 0.3
DEFAULT_GROWTH = 10

_GROWTH_RE = re.compile(r"(\d+)%")

# Trend keyword -> user skill fragments that make the trend relevant
_TREND_HINTS: dict[str, tuple[str, ...]] = {
    "ai": ("python", "machine learning"),
    "cloud": ("aws",),
    "devops": ("docker", "kubernetes"),
}


class RoleMatch(NamedTuple):
    match: int
    matched_skills: list[str]
    missing: list[str]
    experience_level: ExperienceLevel


def infer_experience_level(
    matched_count: int, levels: Mapping[ExperienceLevel, ExperienceBand],
) -> ExperienceLevel:
    """Highest level whose ``min_skills`` threshold is met, Junior by default."""
    experience_level = ExperienceLevel.JUNIOR
    for level, band in levels.items():
        if matched_count >= band.min_skills:
            experience_level = level
    return experience_level


def calculate_role_match(
    user_skills: list[str], role: JobRoleProfile, count_role_side: bool = False,
) -> RoleMatch:
    """Weighted overlap of ``user_skills`` with one role.

    Required coverage counts 70%, overall overlap 30%. By default the
    overlap counts user skills that match any role skill, so one user skill
    counts once however many role skills it resembles. With
    ``count_role_side`` it counts role skills held by the user instead.
    """
    all_skills = role.all_skills
    if count_role_side:
        matched_skills = [skill for skill in all_skills if has_skill(user_skills, skill)]
    else:
        matched_skills = [skill for skill in user_skills if has_skill(list(all_skills), skill)]
    required_matches = [skill for skill in role.required_skills if has_skill(user_skills, skill)]
    missing = [skill for skill in role.required_skills if not has_skill(user_skills, skill)]

    required_pct = percentage(len(required_matches), len(role.required_skills))
    overall_pct = percentage(len(matched_skills), len(all_skills))
    match = to_score(required_pct * REQUIRED_WEIGHT + overall_pct * OVERALL_WEIGHT)

    return RoleMatch(
        match=match,
        matched_skills=matched_skills,
        missing=missing,
        experience_level=infer_experience_level(len(matched_skills), role.experience_levels),
    )


def _ranking_score(suggestion: JobRoleSuggestion, role: JobRoleProfile) -> int:
    return suggestion.match + (len(role.required_skills) - len(suggestion.missing)) * REQUIRED_SKILL_BONUS


def _build_suggestion(
    role: JobRoleProfile, user_skills: list[str], result: RoleMatch, rng: random.Random,
) -> JobRoleSuggestion:
    company = rng.choice(COMPANIES)
    location = rng.choice(LOCATIONS)
    if role.remote_available and rng.random() > REMOTE_THRESHOLD:
        location = "Remote"

    return JobRoleSuggestion(
        title=role.title,
        match=result.match,
        company=company,
        location=location,
        salary=role.experience_levels[result.experience_level].salary_range,
        requirements=[skill for skill in role.required_skills if skill in user_skills],
        missing=result.missing,
        description=role.description,
        experience_level=result.experience_level,
        demand_level=role.demand_level,
        remote_available=role.remote_available,
        industry_growth=role.industry_growth,
        market_trends=list(role.market_trends),
    )


def top_skill_categories(skills: ExtractedSkills, limit: int = 3) -> list[str]:
    """Most frequent skill categories; first-seen order breaks ties."""
    counts = Counter(s.category for s in skills.hard_skills + skills.soft_skills)
    return [category for category, _ in counts.most_common(limit)]


def describe_profile(skills: ExtractedSkills, suggestions: list[JobRoleSuggestion]) -> str:
    total = skills.total_skills
    hard_count = len(skills.hard_skills)
    soft_count = len(skills.soft_skills)

    if hard_count > soft_count * 1.5:
        profile = (
            f"Technical specialist with {total} identified skills. "
            f"Strong in technical execution with {hard_count} hard skills detected."
        )
    elif soft_count > hard_count:
        profile = (
            f"Well-rounded professional with {total} skills, emphasizing leadership "
            f"and collaboration with {soft_count} soft skills."
        )
    else:
        profile = f"Balanced professional profile with {total} skills across technical and interpersonal domains."

    if suggestions:
        avg_match = sum(s.match for s in suggestions) / len(suggestions)
        profile += (
            f" Best suited for {suggestions[0].title} roles with {round_half_up(avg_match)}% "
            f"average match across suggested positions."
        )
    return profile


def _trend_is_relevant(trend: str, user_skills: Iterable[str]) -> bool:
    trend_lower = trend.lower()
    for skill in user_skills:
        skill_lower = skill.lower()
        if skill_lower in trend_lower:
            return True
        for keyword, fragments in _TREND_HINTS.items():
            if keyword in trend_lower and any(f in skill_lower for f in fragments):
                return True
    return False


def _industry_growth(role: JobRoleSuggestion) -> int:
    found = _GROWTH_RE.search(role.industry_growth)
    return int(found.group(1)) if found else DEFAULT_GROWTH


def describe_salary_trends(suggestions: list[JobRoleSuggestion]) -> str:
    high_demand = [s for s in suggestions if s.demand_level is DemandLevel.HIGH]
    avg_growth = sum(_industry_growth(s) for s in high_demand) / (len(high_demand) or 1)
    rounded = round_half_up(avg_growth)

    if avg_growth >= 15:
        return (
            f"Strong upward trend with {rounded}% average growth. "
            f"High-demand roles showing premium salary increases."
        )
    if avg_growth >= 10:
        return (
            f"Positive salary growth trend at {rounded}% annually. "
            f"Competitive market for skilled professionals."
        )
    return f"Stable market with {rounded}% growth. Focus on high-demand skills for better positioning."


def build_market_insights(user_skills: list[str], suggestions: list[JobRoleSuggestion]) -> MarketInsights:
    high_demand = [
        skill for skill in HIGH_DEMAND_SKILLS
        if any(skills_match(user_skill, skill) for user_skill in user_skills)
    ]
    trends = [trend for trend in MARKET_TRENDS if _trend_is_relevant(trend, user_skills)]
    remote_count = sum(1 for s in suggestions if s.remote_available)

    return MarketInsights(
        high_demand_skills=high_demand[:5],
        emerging_trends=trends[:4],
        salary_trends=describe_salary_trends(suggestions),
        remote_opportunities=round_half_up(percentage(remote_count, len(suggestions))),
    )


def suggest_job_roles(
    skills: ExtractedSkills, rng: random.Random | None = None,
) -> JobRoleSuggestionResult:
    """Suggest up to six catalog roles for the given skill profile.

    Company and location are cosmetic draws from ``rng``; pass a seeded
    ``random.Random`` for reproducible listings. Scores never depend on it.
    """
    if rng is None:
        rng = random.Random(settings.job_listing_seed)

    user_skills = skills.skill_names
    ranked: list[tuple[int, JobRoleSuggestion]] = []

    for role in MARKET_JOB_ROLES.values():
        result = calculate_role_match(user_skills, role)
        if result.match <= MIN_MATCH:
            continue
        suggestion = _build_suggestion(role, user_skills, result, rng)
        ranked.append((_ranking_score(suggestion, role), suggestion))

    ranked.sort(key=lambda item: item[0], reverse=True)
    suggested = [suggestion for _, suggestion in ranked[:MAX_SUGGESTIONS]]

    logger.info("Suggested %d job roles from %d skills", len(suggested), len(user_skills))
    return JobRoleSuggestionResult(
        suggested_roles=suggested,
        top_skill_categories=top_skill_categories(skills),
        overall_profile=describe_profile(skills, suggested),
        market_insights=build_market_insights(user_skills, suggested),
    )
