"""Skill extraction output: categorized catalog matches for one document."""

from pydantic import BaseModel, ConfigDict, Field


class TextExtractionResult(BaseModel):
    """Plain text handed over by the file-extraction collaborator."""
    model_config = ConfigDict(frozen=True)

    text: str = ""
    word_count: int = 0
    error: str | None = None


class SkillMatch(BaseModel):
    """One catalog skill found in a document."""
    model_config = ConfigDict(frozen=True)

    name: str
    category: str  # catalog sub-category, e.g. "Programming Languages"
    confidence: int = Field(ge=0, le=100)
    mentions: int = Field(ge=1)


class ExtractedSkills(BaseModel):
    """Hard and soft skills, each sorted by confidence then mentions."""
    model_config = ConfigDict(frozen=True)

    hard_skills: list[SkillMatch] = []
    soft_skills: list[SkillMatch] = []
    total_skills: int = 0

    @property
    def skill_names(self) -> list[str]:
        """Hard skill names followed by soft skill names."""
        return [s.name for s in self.hard_skills] + [s.name for s in self.soft_skills]
