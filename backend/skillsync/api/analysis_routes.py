import logging
import random
from typing import Optional

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile

from skillsync.config import settings
from skillsync.models.api_models import AnalysisHistory, AnalysisResponse, AnalyzeTextInput
from skillsync.services import profile_store
from skillsync.services.resume_analyzer import build_career_profile
from skillsync.services.text_extraction import (
    SUPPORTED_EXTENSIONS,
    extract_document_text,
    file_extension,
)
from skillsync.utils.dependencies import get_analysis_seed

logger = logging.getLogger(__name__)

router = APIRouter()


def _analyze(text: str, seed: Optional[int]) -> AnalysisResponse:
    cached = profile_store.find_by_text(text, seed)
    if cached:
        return cached
    result = build_career_profile(text, random.Random(seed))
    return profile_store.save_result(text, result, seed)


@router.post("/upload-resume", response_model=AnalysisResponse)
async def upload_resume(
    file: UploadFile = File(...),
    seed: Optional[int] = Depends(get_analysis_seed),
):
    """Upload a résumé (PDF/DOCX), decode it and build the career profile."""
    if not file.filename:
        raise HTTPException(status_code=400, detail="No file provided")

    ext = file_extension(file.filename)
    if ext not in SUPPORTED_EXTENSIONS:
        raise HTTPException(
            status_code=400,
            detail=f"Unsupported file type: .{ext}. Please upload PDF or DOCX.",
        )

    file_bytes = await file.read()
    if len(file_bytes) > settings.max_upload_mb * 1024 * 1024:
        raise HTTPException(
            status_code=400,
            detail=f"File too large (max {settings.max_upload_mb} MB)",
        )

    logger.info(f"Resume uploaded: '{file.filename}' ({len(file_bytes)} bytes)")
    try:
        text = extract_document_text(file_bytes, file.filename)
        return _analyze(text, seed)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logger.exception(f"Analysis failed for '{file.filename}'")
        raise HTTPException(status_code=500, detail=f"Error processing resume: {e}")


@router.post("/analyze-text", response_model=AnalysisResponse)
async def analyze_text(
    req: AnalyzeTextInput,
    seed: Optional[int] = Depends(get_analysis_seed),
):
    """Build the career profile from text that was decoded elsewhere."""
    if len(req.text.encode("utf-8")) > settings.max_upload_mb * 1024 * 1024:
        raise HTTPException(
            status_code=400,
            detail=f"Text too large (max {settings.max_upload_mb} MB)",
        )

    try:
        return _analyze(req.text, seed)
    except Exception as e:
        logger.exception("Analysis failed for submitted text")
        raise HTTPException(status_code=500, detail=f"Error processing resume: {e}")


@router.get("/history/{profile_id}", response_model=AnalysisHistory)
async def get_history(profile_id: str):
    """Career matches, skill gaps and roadmap of a previous analysis."""
    stored = profile_store.get_result(profile_id)
    if not stored:
        raise HTTPException(status_code=404, detail=f"Analysis '{profile_id}' not found")
    return AnalysisHistory(
        career_matches=stored.profile.career_matches,
        skill_gaps=stored.profile.skill_gaps,
        learning_roadmap=stored.profile.learning_roadmap,
    )


@router.get("/{profile_id}", response_model=AnalysisResponse)
async def get_analysis(profile_id: str):
    """Retrieve a previous analysis by ID."""
    stored = profile_store.get_result(profile_id)
    if not stored:
        raise HTTPException(status_code=404, detail=f"Analysis '{profile_id}' not found")
    return stored
