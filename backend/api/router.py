from fastapi import APIRouter, Depends, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_external_client
from config import settings
from models.requests import (
    ATSAnalyzeRequest,
    ResumeTextRequest,
    SkillExtractionRequest,
    TargetJobRequest,
)
from models.responses import DocumentAnalysis, HealthResponse, ResumeTipsResponse
from models.schemas import (
    ATSMatchResult,
    CareerCoachAnalysis,
    JobOption,
    TargetJobComparison,
    TextExtractionResult,
)
from services import resume_analyzer
from services.errors import ExternalServiceError, ExtractionError, NotFoundError
from services.external_analysis import ExternalAnalysisClient
from services.target_job_comparator import get_available_jobs

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


def _check_length(text: str, limit: int, label: str) -> None:
    if len(text) > limit:
        raise HTTPException(status_code=400, detail=f"{label} too long (max {limit} chars)")


@router.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(
        status="ok",
        gemini_configured=bool(settings.gemini_api_key),
        external_analysis_enabled=settings.external_analysis_enabled,
    )


@router.post("/skills/extract", response_model=DocumentAnalysis)
@limiter.limit("10/minute")
async def extract_skills(request: Request, body: SkillExtractionRequest):
    _check_length(body.text, settings.max_text_length, "Resume text")
    extraction = TextExtractionResult(
        text=body.text,
        word_count=body.word_count or 0,
        error=body.error,
    )
    try:
        return resume_analyzer.analyze_document(extraction)
    except ExtractionError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.get("/jobs", response_model=list[JobOption])
async def list_jobs():
    return get_available_jobs()


@router.post("/jobs/compare", response_model=TargetJobComparison)
@limiter.limit("10/minute")
async def compare_job(request: Request, body: TargetJobRequest):
    try:
        return resume_analyzer.compare_target_job(body.job_title, body.skills)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/ats/analyze", response_model=ATSMatchResult)
@limiter.limit("10/minute")
async def analyze_ats(
    request: Request,
    body: ATSAnalyzeRequest,
    client: ExternalAnalysisClient = Depends(get_external_client),
):
    _check_length(body.resume_text, settings.max_text_length, "Resume text")
    _check_length(body.job_description, settings.max_job_description_length, "Job description")
    try:
        return await resume_analyzer.analyze_match(body.resume_text, body.job_description, client=client)
    except ExtractionError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.post("/coach/tips", response_model=ResumeTipsResponse)
@limiter.limit("10/minute")
async def resume_tips(
    request: Request,
    body: ResumeTextRequest,
    client: ExternalAnalysisClient = Depends(get_external_client),
):
    _check_length(body.resume_text, settings.max_text_length, "Resume text")
    try:
        suggestions = await client.generate_resume_tips(body.resume_text)
    except ExternalServiceError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return ResumeTipsResponse(suggestions=suggestions, is_ai_generated=client.is_ai_generated)


@router.post("/coach/career", response_model=CareerCoachAnalysis)
@limiter.limit("10/minute")
async def career_coach(
    request: Request,
    body: ResumeTextRequest,
    client: ExternalAnalysisClient = Depends(get_external_client),
):
    _check_length(body.resume_text, settings.max_text_length, "Resume text")
    try:
        return await client.generate_career_coach_analysis(body.resume_text)
    except ExternalServiceError as e:
        raise HTTPException(status_code=502, detail=str(e))
