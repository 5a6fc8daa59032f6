from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime, timezone

from skill_checker.models.models import MatchResult


def utc_now() -> datetime:
    return datetime.now(timezone.utc)

# -------- Scan sessions --------
class ScanSessionModel(BaseModel):
    session_id: str
    file_name: Optional[str] = None
    has_document: bool = False
    selected_role: Optional[str] = None
    custom_skills: Optional[str] = None
    match_result: Optional[MatchResult] = None
    scan_count: int = 0
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

# -------- Skill selection --------
class SkillSelection(BaseModel):
    """Either a job role from the role table or comma-separated custom skills"""
    role: Optional[str] = None
    custom_skills: Optional[str] = None
