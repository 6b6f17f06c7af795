"""
Resume Routes

POST /upload-resume - Extract text from an uploaded PDF (form field "resume")
"""

from typing import Optional

from fastapi import APIRouter, Depends, File, UploadFile

from scholar_api.api.deps import get_resume_extractor
from scholar_api.core.errors import ResumeExtractionError, error_response
from scholar_api.schemas.schemas import ResumeUploadResponse
from scholar_api.utils.file_upload import ResumeExtractor

router = APIRouter(tags=["Resumes"])


@router.post("/upload-resume", response_model=ResumeUploadResponse)
async def upload_resume(
    resume: Optional[UploadFile] = File(None, description="Resume file (PDF)"),
    extractor: ResumeExtractor = Depends(get_resume_extractor)
):
    """Return the resume's text, at most 10,000 characters."""
    if resume is None:
        return error_response(400, "No file uploaded")

    content = await resume.read()
    try:
        text = extractor.extract_text(content)
    except ResumeExtractionError:
        return error_response(500, "Failed to parse PDF")

    return ResumeUploadResponse(text=text)
