"""
Scan Session Management: in-memory state for the upload / scan / clear flow
"""
import uuid
from datetime import datetime, timezone
from typing import Dict, Optional

from skill_checker.models.models import MatchResult
from skill_checker.models.schemas import ScanSessionModel
from skill_checker.services import scanner
from skill_checker.services.skills import resolve_skills
from skill_checker.utils.exceptions import NoFileSelectedError, SessionNotFoundError
from skill_checker.utils.logging_config import get_logger

logger = get_logger(__name__)


class ScanSession:
    """State owned by one client: uploaded document, skill selection, last result"""

    def __init__(self, session_id: str):
        self.session_id = session_id
        self.file_name: Optional[str] = None
        self.pdf_data: Optional[bytes] = None
        self.selected_role: Optional[str] = None
        self.custom_skills: Optional[str] = None
        self.match_result: Optional[MatchResult] = None
        self.scan_count = 0
        # ticket of the newest scan started; older scans drop their result
        self.latest_scan = 0
        self.created_at = datetime.now(timezone.utc)
        self.updated_at = self.created_at

    def touch(self):
        self.updated_at = datetime.now(timezone.utc)

    def reset(self):
        self.file_name = None
        self.pdf_data = None
        self.selected_role = None
        self.custom_skills = None
        self.match_result = None
        # any scan still in flight must not repopulate a cleared session
        self.latest_scan += 1
        self.touch()

    def to_model(self) -> ScanSessionModel:
        return ScanSessionModel(
            session_id=self.session_id,
            file_name=self.file_name,
            has_document=self.pdf_data is not None,
            selected_role=self.selected_role,
            custom_skills=self.custom_skills,
            match_result=self.match_result,
            scan_count=self.scan_count,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


class ScanSessionManager:
    """Registry of scan sessions, kept in process memory only"""

    def __init__(self):
        self._sessions: Dict[str, ScanSession] = {}

    def __len__(self):
        return len(self._sessions)

    def create_session(self) -> ScanSession:
        session = ScanSession(str(uuid.uuid4()))
        self._sessions[session.session_id] = session
        logger.info(f"Created scan session {session.session_id}")
        return session

    def get_session(self, session_id: str) -> ScanSession:
        session = self._sessions.get(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)
        return session

    def delete_session(self, session_id: str) -> None:
        self.get_session(session_id)
        del self._sessions[session_id]
        logger.info(f"Deleted scan session {session_id}")

    def upload_document(self, session_id: str, file_name: str, data: bytes) -> ScanSession:
        session = self.get_session(session_id)
        if not data:
            raise NoFileSelectedError("Uploaded file is empty", session_id=session_id)

        session.file_name = file_name
        session.pdf_data = data
        session.touch()
        logger.info(f"Session {session_id} uploaded {file_name!r} ({len(data)} bytes)")
        return session

    def select_skills(self, session_id: str, role: Optional[str] = None, custom_skills: Optional[str] = None) -> ScanSession:
        session = self.get_session(session_id)
        session.selected_role = role
        session.custom_skills = custom_skills
        session.touch()
        return session

    async def scan(self, session_id: str) -> MatchResult:
        """
        Scan the session's document against its skill selection.

        Raises NoFileSelectedError when nothing was uploaded and
        InvalidArgumentError when no skills are selected; in both cases the
        session is left untouched. Extraction errors propagate the same way.
        If another scan (or a clear) starts before this one resolves, this
        scan's result is discarded and the newer state stands.
        """
        session = self.get_session(session_id)
        if session.pdf_data is None:
            raise NoFileSelectedError(session_id=session_id)

        skills = resolve_skills(session.selected_role, session.custom_skills)

        session.latest_scan += 1
        ticket = session.latest_scan
        result = await scanner.scan_document(session.pdf_data, skills)

        if ticket != session.latest_scan:
            logger.info(f"Discarding superseded scan {ticket} for session {session_id}")
            return result

        session.match_result = result
        session.scan_count += 1
        session.touch()
        return result

    def clear(self, session_id: str) -> ScanSession:
        session = self.get_session(session_id)
        session.reset()
        logger.info(f"Cleared scan session {session_id}")
        return session


session_manager = ScanSessionManager()
