import pytest

from models.schemas import ChecklistCategory, ExperienceLevel, Importance
from services.errors import NotFoundError
from services.skill_catalog import TARGET_JOB_ROLES
from services.target_job_comparator import compare_with_target_job, get_available_jobs


FRONTEND_SKILLS = ["JavaScript", "HTML", "CSS", "React"]


def test_available_jobs_sorted_by_popularity():
    jobs = get_available_jobs()
    assert len(jobs) == len(TARGET_JOB_ROLES)
    assert [j.title for j in jobs[:3]] == ["Frontend Developer", "Full Stack Developer", "React Developer"]
    popularity = [j.popularity for j in jobs]
    assert popularity == sorted(popularity, reverse=True)
    assert jobs[0].category == "Frontend Development"


def test_catalog_bands_are_read_only():
    levels = TARGET_JOB_ROLES["React Developer"].experience_levels
    with pytest.raises(TypeError):
        levels[ExperienceLevel.JUNIOR] = levels[ExperienceLevel.LEAD]
    assert levels[ExperienceLevel.JUNIOR].salary_range == "$65,000 - $85,000"
    dumped = TARGET_JOB_ROLES["React Developer"].model_dump()
    assert dumped["experience_levels"][ExperienceLevel.MID]["min_skills"] == 5


def test_unknown_job_raises_not_found():
    with pytest.raises(NotFoundError) as exc:
        compare_with_target_job("Nonexistent Role", FRONTEND_SKILLS)
    assert str(exc.value) == 'Job title "Nonexistent Role" not found in database'
    assert exc.value.job_title == "Nonexistent Role"


def test_frontend_comparison():
    result = compare_with_target_job("Frontend Developer", FRONTEND_SKILLS)
    # 4/4 required, 5/11 overall ("Tailwind CSS" loosely matches "CSS")
    assert result.match_percentage == 84
    assert result.missing_required_skills == []
    assert result.missing_preferred_skills == ["TypeScript", "Vue.js", "Angular", "SASS", "Webpack", "Jest"]
    assert result.experience_level == ExperienceLevel.MID
    assert result.salary_range == "$80,000 - $110,000"
    assert result.description == TARGET_JOB_ROLES["Frontend Developer"].description


def test_no_skills():
    result = compare_with_target_job("DevOps Engineer", [])
    assert result.match_percentage == 0
    assert result.matching_skills == []
    assert result.missing_required_skills == ["Docker", "AWS", "Linux", "Git"]
    assert result.experience_level == ExperienceLevel.JUNIOR
    assert result.salary_range == "$70,000 - $90,000"


class TestChecklist:
    def test_length_and_order(self):
        role = TARGET_JOB_ROLES["Full Stack Developer"]
        result = compare_with_target_job("Full Stack Developer", ["React", "SQL"])
        checklist = result.skills_checklist
        assert len(checklist) == len(role.required_skills) + len(role.preferred_skills)
        required = checklist[:len(role.required_skills)]
        preferred = checklist[len(role.required_skills):]
        assert [i.skill for i in required] == list(role.required_skills)
        assert all(i.category == ChecklistCategory.REQUIRED and i.importance == Importance.HIGH for i in required)
        assert all(i.category == ChecklistCategory.PREFERRED and i.importance == Importance.MEDIUM for i in preferred)

    def test_has_skill_consistent_with_matching_skills(self):
        for title in TARGET_JOB_ROLES:
            result = compare_with_target_job(title, ["Python", "React", "Docker", "Communication"])
            for item in result.skills_checklist:
                assert item.has_skill == (item.skill in result.matching_skills)

    def test_learning_data_and_fallbacks(self):
        result = compare_with_target_job("Frontend Developer", [])
        items = {i.skill: i for i in result.skills_checklist}
        assert items["JavaScript"].learning_time == "2-3 months"
        assert items["JavaScript"].resources == ["MDN Web Docs", "freeCodeCamp", "JavaScript.info"]
        assert items["Vue.js"].learning_time == "1-2 months"
        assert items["HTML"].learning_time == "2-4 weeks"
        assert items["SASS"].learning_time == "1-3 weeks"
        assert items["SASS"].resources == ["Official Documentation", "Online Tutorials", "Practice Projects"]
