from fastapi import APIRouter, File, Request, UploadFile

from skill_checker.helpers.uploads import read_upload
from skill_checker.models.models import MatchResult
from skill_checker.models.schemas import ScanSessionModel, SkillSelection
from skill_checker.services.session_manager import session_manager
from skill_checker.utils.logging_config import get_logger, PerformanceMonitor

router = APIRouter()
logger = get_logger(__name__)


@router.post("", response_model=ScanSessionModel, status_code=201)
async def create_session():
    """Start a new scan session"""
    return session_manager.create_session().to_model()


@router.get("/{session_id}", response_model=ScanSessionModel)
async def get_session(session_id: str):
    """Fetch a session by ID"""
    return session_manager.get_session(session_id).to_model()


@router.delete("/{session_id}", status_code=204)
async def delete_session(session_id: str):
    """Drop a session and everything it holds"""
    session_manager.delete_session(session_id)


@router.put("/{session_id}/document", response_model=ScanSessionModel)
async def upload_document(session_id: str, request: Request, file: UploadFile = File(...)):
    """Upload (or replace) the session's resume; the previous result is kept"""
    request_id = getattr(request.state, 'request_id', 'unknown')
    session_manager.get_session(session_id)

    file_name, data = await read_upload(file)
    session = session_manager.upload_document(session_id, file_name, data)

    logger.info(
        f"Document stored for session {session_id}",
        extra={"request_id": request_id, "session_id": session_id, "file_size": len(data)}
    )
    return session.to_model()


@router.put("/{session_id}/skills", response_model=ScanSessionModel)
async def select_skills(session_id: str, selection: SkillSelection):
    """Choose a job role and/or custom comma-separated skills"""
    session = session_manager.select_skills(session_id, selection.role, selection.custom_skills)
    return session.to_model()


@router.post("/{session_id}/scan", response_model=MatchResult)
async def scan_session(session_id: str, request: Request):
    """Scan the uploaded resume against the selected skills"""
    request_id = getattr(request.state, 'request_id', 'unknown')

    with PerformanceMonitor(f"scan_session {session_id}", logger):
        result = await session_manager.scan(session_id)

    logger.info(
        f"Session {session_id} scored {result.percentage}%",
        extra={"request_id": request_id, "session_id": session_id}
    )
    return result


@router.post("/{session_id}/clear", response_model=ScanSessionModel)
async def clear_session(session_id: str):
    """Forget the uploaded document, skill selection and last result"""
    return session_manager.clear(session_id).to_model()
