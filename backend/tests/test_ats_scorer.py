import pytest

from config import settings
from models.schemas import (
    ATSBreakdown,
    FormatRating,
    Importance,
    MissingSkill,
    SkillCategory,
    SkillsAnalysis,
)
from services import ats_scorer
from services.ats_scorer import (
    analyze_match,
    analyze_skills,
    analyze_title_alignment,
    build_recommendations,
    score_resume,
    skill_importance,
    weighted_overall_score,
)
from services.errors import ExternalServiceError
from services.external_analysis import ExternalAnalysisClient, LocalAnalysisClient


SCENARIO_RESUME = (
    "Experienced React developer with 5 years experience building JavaScript applications. "
    "Strong communication and leadership skills."
)
SCENARIO_JD = (
    "Looking for React developer with JavaScript, TypeScript, and 3+ years experience. "
    "Leadership skills required."
)


class FailingClient(ExternalAnalysisClient):
    name = "failing"

    @property
    def is_ai_generated(self) -> bool:
        return True

    async def generate_ats_analysis(self, resume_text, job_description):
        raise ExternalServiceError("Gemini API error: quota exceeded")

    async def generate_resume_tips(self, resume_text):
        raise ExternalServiceError("unavailable")

    async def generate_career_coach_analysis(self, resume_text):
        raise ExternalServiceError("unavailable")


@pytest.mark.scenario
class TestScenario:
    def test_title_and_experience(self):
        result = score_resume(SCENARIO_RESUME, SCENARIO_JD)
        assert "react developer" in result.title_analysis.matching_titles
        assert result.breakdown.title_alignment == 100
        assert result.experience_match.score == 100

    def test_skills_with_points(self):
        result = score_resume(SCENARIO_RESUME, SCENARIO_JD)
        matched = {s.skill: s for s in result.skills_analysis.matched_skills}
        assert set(matched) == {"javascript", "react", "leadership"}
        assert matched["leadership"].category == SkillCategory.SOFT
        assert [s.skill for s in result.skills_analysis.missing_skills] == ["typescript"]
        # earned 5 + 5 + 4 vs 5 lost
        assert result.breakdown.skill_match == 74

    def test_scores_in_range(self):
        result = score_resume(SCENARIO_RESUME, SCENARIO_JD)
        for value in (
            result.overall_score,
            result.breakdown.skill_match,
            result.breakdown.keyword_match,
            result.breakdown.title_alignment,
            result.keyword_matches.match_percentage,
        ):
            assert isinstance(value, int)
            assert 0 <= value <= 100


def test_no_catalog_skills_in_resume():
    result = score_resume("I enjoy gardening and cooking", "Python and AWS engineer")
    assert result.skills_analysis.matched_skills == []
    assert {s.skill for s in result.skills_analysis.missing_skills} == {"python", "aws"}
    assert result.breakdown.skill_match == 0


def test_no_skills_at_stake():
    result = score_resume("I sell shoes", "We sell shoes")
    assert result.skills_analysis.matched_skills == []
    assert result.skills_analysis.missing_skills == []
    assert result.breakdown.skill_match == 0


def test_empty_inputs():
    result = score_resume("", "")
    assert result.breakdown.keyword_match == 0
    assert result.breakdown.title_alignment == 75
    assert result.format_analysis.overall_format_score == FormatRating.POOR
    assert result.overall_score == 28


def test_keyword_score_clamped_for_repeated_words():
    result = score_resume("python python python required", "required python python python")
    assert result.breakdown.keyword_match == 100
    assert 0 <= result.overall_score <= 100


def test_idempotent():
    first = score_resume(SCENARIO_RESUME, SCENARIO_JD)
    second = score_resume(SCENARIO_RESUME, SCENARIO_JD)
    assert first == second


def test_failing_stage_uses_default(monkeypatch):
    def boom(text):
        raise RuntimeError("broken")

    monkeypatch.setattr(ats_scorer, "analyze_format", boom)
    result = score_resume(SCENARIO_RESUME, SCENARIO_JD)
    assert result.format_analysis.overall_format_score == FormatRating.POOR
    assert result.experience_match.score == 100


class TestSkillImportance:
    def test_literal_required_pattern(self):
        assert skill_importance("python", "required: python") == Importance.HIGH
        assert skill_importance("python", "python required") == Importance.HIGH

    def test_literal_preferred_pattern(self):
        assert skill_importance("python", "python preferred") == Importance.MEDIUM
        assert skill_importance("python", "experience with python") == Importance.MEDIUM

    def test_prose_falls_through_to_low(self):
        assert skill_importance("python", "strong python skills are required") == Importance.LOW


class TestSkillPoints:
    def test_missing_points_capped_by_mentions(self):
        result = analyze_skills("", "required: python. python python python")
        missing = result.missing_skills[0]
        assert missing.skill == "python"
        assert missing.importance == Importance.HIGH
        assert missing.points_lost == 45
        assert missing.suggestions[0] == "Include Python automation and data analysis projects"

    def test_matched_points(self):
        result = analyze_skills("python and python", "required: python. python python python")
        matched = result.matched_skills[0]
        assert matched.frequency == 2
        assert matched.points == 30

    def test_generic_soft_skill_suggestions(self):
        result = analyze_skills("", "negotiation")
        assert result.missing_skills[0].suggestions == [
            "Demonstrate negotiation with examples",
            "Quantify negotiation achievements",
        ]

    def test_generic_technical_suggestions(self):
        result = analyze_skills("", "linux")
        assert result.missing_skills[0].suggestions == [
            "Add linux to skills section",
            "Include linux in project descriptions",
        ]
        assert result.missing_skills[0].points_lost == 5


class TestTitleAlignment:
    def test_no_titles_defaults_to_75(self):
        assert analyze_title_alignment("", "we build things").alignment_score == 75

    def test_related_title_partial_credit(self):
        result = analyze_title_alignment("python developer", "software engineer")
        assert result.matching_titles == []
        assert result.alignment_score == 70

    def test_unrelated_title(self):
        result = analyze_title_alignment("product manager", "data scientist")
        assert result.alignment_score == 0


class TestOverallScore:
    def test_perfect(self):
        breakdown = ATSBreakdown(skill_match=100, keyword_match=100, title_alignment=100,
                                 format_check=FormatRating.GOOD)
        assert weighted_overall_score(breakdown, 100, 100) == 99

    def test_floor(self):
        breakdown = ATSBreakdown(format_check=FormatRating.POOR)
        assert weighted_overall_score(breakdown, 80, 80) == 13


class TestRecommendations:
    def _missing(self, name):
        return MissingSkill(skill=name, category=SkillCategory.TECHNICAL, importance=Importance.HIGH,
                            points_lost=15)

    def test_truncated_to_six(self):
        breakdown = ATSBreakdown(skill_match=50, keyword_match=50, title_alignment=50,
                                 format_check=FormatRating.POOR)
        skills = SkillsAnalysis(missing_skills=[self._missing(n) for n in ("aws", "docker", "react", "git")])
        recommendations = build_recommendations(breakdown, skills)
        assert len(recommendations) == 6
        assert recommendations[0] == "Improve skill match (50%): Add missing key skills to your resume"
        assert recommendations[3] == "Improve resume format (Poor): Add bullet points and quantified achievements"
        assert recommendations[4] == "Priority skills to add: aws, docker, react"
        assert recommendations[5] == "Use exact keywords from the job description"

    def test_strong_match_gets_generic_tips_only(self):
        breakdown = ATSBreakdown(skill_match=90, keyword_match=90, title_alignment=90,
                                 format_check=FormatRating.GOOD)
        assert build_recommendations(breakdown, SkillsAnalysis()) == [
            "Use exact keywords from the job description",
            "Include quantified achievements with metrics",
        ]


class TestAnalyzeMatch:
    @pytest.mark.asyncio
    async def test_local_external_analysis(self):
        result = await analyze_match(SCENARIO_RESUME, SCENARIO_JD, client=LocalAnalysisClient())
        external = result.external_analysis
        assert external is not None
        assert external.error is None
        assert external.is_ai_generated is False
        assert 0 <= external.analysis.overall_score <= 100
        assert 0 < external.confidence <= 100

    @pytest.mark.asyncio
    async def test_external_failure_is_isolated(self):
        result = await analyze_match(SCENARIO_RESUME, SCENARIO_JD, client=FailingClient())
        assert result.external_analysis.error == "Gemini API error: quota exceeded"
        assert result.external_analysis.is_ai_generated is False
        assert result.external_analysis.confidence == 0
        deterministic = score_resume(SCENARIO_RESUME, SCENARIO_JD)
        assert result.overall_score == deterministic.overall_score
        assert result.breakdown == deterministic.breakdown
        assert result.recommendations == deterministic.recommendations

    @pytest.mark.asyncio
    async def test_external_stage_disabled(self, monkeypatch):
        monkeypatch.setattr(settings, "external_analysis_enabled", False)
        result = await analyze_match(SCENARIO_RESUME, SCENARIO_JD, client=LocalAnalysisClient())
        assert result.external_analysis is None
