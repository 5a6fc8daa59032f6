from pydantic import BaseModel, ConfigDict, Field
from typing import List, Tuple


class MatchResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    matched: Tuple[str, ...] = ()
    percentage: int = Field(ge=0, le=100)


class JobRole(BaseModel):
    name: str
    skills: List[str]
