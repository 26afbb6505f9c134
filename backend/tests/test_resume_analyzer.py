import random
from datetime import datetime, timezone

import pytest

from models.responses import AnalysisSnapshot
from models.schemas import TextExtractionResult
from services import resume_analyzer
from services.errors import ExtractionError, NotFoundError
from services.external_analysis import LocalAnalysisClient


RESUME = (
    "Python developer with React, JavaScript and Docker experience. "
    "Built AWS services with SQL and Git. Strong communication and leadership."
)


class TestAnalyzeDocument:
    def test_extraction_error_is_raised(self):
        extraction = TextExtractionResult(text="", error="Unsupported file type")
        with pytest.raises(ExtractionError, match="Unsupported file type"):
            resume_analyzer.analyze_document(extraction)

    def test_blank_text_is_rejected(self):
        with pytest.raises(ExtractionError, match=resume_analyzer.EMPTY_TEXT_MESSAGE):
            resume_analyzer.analyze_document(TextExtractionResult(text="   \n"))

    def test_skills_and_suggestions(self):
        result = resume_analyzer.analyze_document(TextExtractionResult(text=RESUME), rng=random.Random(7))
        names = result.skills.skill_names
        assert {"Python", "React", "Docker", "AWS"} <= set(names)
        assert "Communication" in [s.name for s in result.skills.soft_skills]
        assert result.word_count == len(RESUME.split())
        assert result.job_suggestions.suggested_roles

    def test_reported_word_count_wins(self):
        result = resume_analyzer.analyze_document(TextExtractionResult(text=RESUME, word_count=500))
        assert result.word_count == 500


class TestCompareTargetJob:
    def test_accepts_extracted_skills(self):
        document = resume_analyzer.analyze_document(TextExtractionResult(text=RESUME), rng=random.Random(1))
        from_skills = resume_analyzer.compare_target_job("Full Stack Developer", document.skills)
        from_names = resume_analyzer.compare_target_job("Full Stack Developer", document.skills.skill_names)
        assert from_skills == from_names

    def test_unknown_title(self):
        with pytest.raises(NotFoundError):
            resume_analyzer.compare_target_job("Astronaut", ["Python"])


class TestAnalyzeMatch:
    @pytest.mark.asyncio
    async def test_blank_resume_rejected(self):
        with pytest.raises(ExtractionError):
            await resume_analyzer.analyze_match(" ", "Python developer")

    @pytest.mark.asyncio
    async def test_delegates_to_scorer(self):
        result = await resume_analyzer.analyze_match(
            RESUME, "Python developer with Docker", client=LocalAnalysisClient(),
        )
        assert "python developer" in result.title_analysis.matching_titles
        assert result.external_analysis is not None


class TestSnapshot:
    def test_record_comparison(self):
        comparison = resume_analyzer.compare_target_job("DevOps Engineer", ["Docker"])
        at = datetime(2024, 5, 1, tzinfo=timezone.utc)
        record = resume_analyzer.record_comparison(comparison, analyzed_at=at)
        assert record.job_title == "DevOps Engineer"
        assert record.analyzed_at == at
        assert record.match_percentage == comparison.match_percentage
        assert "Docker" not in record.missing_required_skills

    def test_build_and_rehydrate(self):
        extraction = TextExtractionResult(text=RESUME)
        document = resume_analyzer.analyze_document(extraction, rng=random.Random(5))
        comparison = resume_analyzer.compare_target_job("Frontend Developer", document.skills)
        snapshot = resume_analyzer.build_snapshot(
            "resume.pdf", extraction, document, ai_suggestions="Add metrics", comparisons=[comparison],
        )
        assert snapshot.file_name == "resume.pdf"
        assert snapshot.extracted_text == RESUME
        assert snapshot.job_suggestions == document.job_suggestions.suggested_roles
        assert len(snapshot.target_job_comparisons) == 1

        restored = AnalysisSnapshot.model_validate(snapshot.model_dump(mode="json"))
        assert restored == snapshot
        again = resume_analyzer.compare_target_job("Frontend Developer", restored.skills)
        assert again == comparison
