from fastapi import APIRouter
from typing import List

from skill_checker.models.models import JobRole
from skill_checker.services.skills import list_roles

router = APIRouter()


@router.get("/roles", response_model=List[JobRole])
async def get_roles():
    """List the predefined job roles and their skills, in display order"""
    return list_roles()
