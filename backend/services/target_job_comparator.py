"""Compare a skill profile against one chosen target job."""

import logging

from models.schemas import (
    ChecklistCategory,
    Importance,
    JobOption,
    JobRoleProfile,
    SkillChecklistItem,
    TargetJobComparison,
)
from services.errors import NotFoundError
from services.job_role_matcher import calculate_role_match
from services.skill_catalog import (
    DEFAULT_LEARNING_RESOURCES,
    DEFAULT_PREFERRED_LEARNING_TIME,
    DEFAULT_REQUIRED_LEARNING_TIME,
    SKILL_LEARNING_PATHS,
    TARGET_JOB_ROLES,
)
from services.text_matching import has_skill

logger = logging.getLogger(__name__)

_CHECKLIST_DEFAULTS: dict[ChecklistCategory, tuple[Importance, str]] = {
    ChecklistCategory.REQUIRED: (Importance.HIGH, DEFAULT_REQUIRED_LEARNING_TIME),
    ChecklistCategory.PREFERRED: (Importance.MEDIUM, DEFAULT_PREFERRED_LEARNING_TIME),
}


def get_available_jobs() -> list[JobOption]:
    """Selectable target jobs, most popular first."""
    options = [
        JobOption(title=role.title, category=role.category, popularity=role.popularity)
        for role in TARGET_JOB_ROLES.values()
    ]
    return sorted(options, key=lambda option: option.popularity, reverse=True)


def _checklist_item(skill: str, category: ChecklistCategory, user_skills: list[str]) -> SkillChecklistItem:
    importance, default_time = _CHECKLIST_DEFAULTS[category]
    path = SKILL_LEARNING_PATHS.get(skill)
    return SkillChecklistItem(
        skill=skill,
        category=category,
        has_skill=has_skill(user_skills, skill),
        importance=importance,
        learning_time=path.time if path else default_time,
        resources=list(path.resources if path else DEFAULT_LEARNING_RESOURCES),
    )


def build_skills_checklist(role: JobRoleProfile, user_skills: list[str]) -> list[SkillChecklistItem]:
    """Required skills first, then preferred, in catalog order."""
    checklist = [
        _checklist_item(skill, ChecklistCategory.REQUIRED, user_skills)
        for skill in role.required_skills
    ]
    checklist.extend(
        _checklist_item(skill, ChecklistCategory.PREFERRED, user_skills)
        for skill in role.preferred_skills
    )
    return checklist


def compare_with_target_job(job_title: str, user_skills: list[str]) -> TargetJobComparison:
    """Measure ``user_skills`` against ``job_title`` and build a learning checklist.

    Raises:
        NotFoundError: if ``job_title`` is not a catalog role.
    """
    role = TARGET_JOB_ROLES.get(job_title)
    if role is None:
        raise NotFoundError(job_title)

    result = calculate_role_match(user_skills, role, count_role_side=True)
    missing_preferred = [skill for skill in role.preferred_skills if not has_skill(user_skills, skill)]

    logger.info("Compared profile with %s: %d%% match", job_title, result.match)
    return TargetJobComparison(
        job_title=job_title,
        match_percentage=result.match,
        matching_skills=result.matched_skills,
        missing_required_skills=result.missing,
        missing_preferred_skills=missing_preferred,
        experience_level=result.experience_level,
        salary_range=role.experience_levels[result.experience_level].salary_range,
        description=role.description,
        skills_checklist=build_skills_checklist(role, user_skills),
    )
