# models/response.py
from pydantic import BaseModel
from typing import List, Optional

from skill_checker.models.models import MatchResult


class ScanResponse(BaseModel):
    file_name: Optional[str] = None
    skills: List[str]
    result: MatchResult
