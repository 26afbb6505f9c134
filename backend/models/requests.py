from pydantic import BaseModel, Field


class SkillExtractionRequest(BaseModel):
    text: str = Field(..., description="Plain text extracted from the resume")
    word_count: int | None = Field(None, ge=0, description="Word count reported by the extractor")
    error: str | None = Field(None, description="Extraction error reported upstream")


class TargetJobRequest(BaseModel):
    job_title: str = Field(..., min_length=1, description="Catalog job title")
    skills: list[str] = Field(default_factory=list, description="Candidate skill names")


class ATSAnalyzeRequest(BaseModel):
    resume_text: str = Field(..., description="Plain text resume content")
    job_description: str = Field(..., description="Job description text")


class ResumeTextRequest(BaseModel):
    resume_text: str = Field(..., min_length=1, description="Plain text resume content")
