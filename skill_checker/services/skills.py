"""
Skill sources: the static job-role table and custom comma-separated skills
"""
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple

from skill_checker.models.models import JobRole
from skill_checker.utils.exceptions import InvalidArgumentError

EMPTY_SELECTION_MESSAGE = "Please enter at least one skill or select a job role."

JOB_ROLES: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "Frontend Developer": ("html", "css", "javascript", "react.js"),
    "Backend Developer": ("node.js", "express", "mongodb", "sql"),
    "Full Stack Developer": ("react.js", "node.js", "express", "sql", "java"),
})


def list_roles() -> List[JobRole]:
    return [JobRole(name=name, skills=list(skills)) for name, skills in JOB_ROLES.items()]


def parse_custom_skills(raw: str) -> List[str]:
    """Split on commas, trim and lowercase. Tokens are not filtered or deduplicated."""
    return [s.strip().lower() for s in raw.split(",")]


def resolve_skills(role: Optional[str] = None, custom_skills: Optional[str] = None) -> List[str]:
    """
    Pick the SkillList for a scan.

    Non-blank custom skills take precedence over the role. Raises
    InvalidArgumentError when neither source yields any skill.
    """
    if custom_skills and custom_skills.strip():
        skills = parse_custom_skills(custom_skills)
    else:
        skills = list(JOB_ROLES.get(role, ())) if role else []

    if not skills:
        raise InvalidArgumentError(EMPTY_SELECTION_MESSAGE, field="role", value=role)
    return skills
