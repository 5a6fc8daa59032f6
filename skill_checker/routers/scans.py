from fastapi import APIRouter, File, Form, Request, UploadFile
from typing import Optional

from skill_checker.helpers.uploads import read_upload
from skill_checker.models.response import ScanResponse
from skill_checker.services import scanner
from skill_checker.services.skills import resolve_skills
from skill_checker.utils.logging_config import get_logger

router = APIRouter()
logger = get_logger(__name__)


@router.post("/scan", response_model=ScanResponse)
async def scan_resume(
    request: Request,
    file: UploadFile = File(..., description="Resume document (PDF)"),
    role: Optional[str] = Form(None, description="Name of a predefined job role"),
    custom_skills: Optional[str] = Form(None, description="Comma-separated skills; overrides role"),
):
    """Score an uploaded resume in one request, without creating a session"""
    request_id = getattr(request.state, 'request_id', 'unknown')

    # validate the skill source before reading or parsing anything
    skills = resolve_skills(role, custom_skills)
    file_name, data = await read_upload(file)

    logger.info(
        f"One-shot scan of {file_name!r} against {len(skills)} skills",
        extra={"request_id": request_id, "file_size": len(data)}
    )
    result = await scanner.scan_document(data, skills)
    return ScanResponse(file_name=file_name, skills=skills, result=result)
