from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response

from ..database.models import Account
from ..dependencies import get_skill_service, require_account
from ..dto.skill import SkillRead, SkillWrite
from ..dto.statistics import SkillStatistics
from ..services.skill_service import SkillService
from ..utils import unwrap

router = APIRouter(prefix="/skills", tags=["skills"])


@router.get("", response_model=List[SkillRead])
async def get_skills(skill_service: SkillService = Depends(get_skill_service)):
    return await skill_service.get_all()


@router.get("/levels", response_model=List[str])
async def get_skill_levels():
    return SkillService.levels()


@router.get("/search", response_model=List[SkillRead])
async def search_skills(
    name: Optional[str] = Query(None, description="Case-insensitive name fragment"),
    level: Optional[str] = Query(None),
    portfolio_user_id: Optional[int] = Query(None, alias="portfolioUserId"),
    skill_service: SkillService = Depends(get_skill_service),
):
    return await skill_service.search(name=name, level=level, portfolio_user_id=portfolio_user_id)


@router.get("/statistics", response_model=SkillStatistics)
async def get_skill_statistics(skill_service: SkillService = Depends(get_skill_service)):
    return await skill_service.get_statistics()


@router.get("/by-user/{portfolio_user_id}", response_model=List[SkillRead])
async def get_skills_by_user(
    portfolio_user_id: int,
    skill_service: SkillService = Depends(get_skill_service),
):
    return unwrap(await skill_service.get_by_owner(portfolio_user_id))


@router.get("/by-level/{level}", response_model=List[SkillRead])
async def get_skills_by_level(
    level: str,
    skill_service: SkillService = Depends(get_skill_service),
):
    return unwrap(await skill_service.get_by_level(level))


@router.get("/{skill_id}", response_model=SkillRead)
async def get_skill(
    skill_id: int,
    skill_service: SkillService = Depends(get_skill_service),
):
    return unwrap(await skill_service.get_by_id(skill_id))


@router.post("", response_model=SkillRead, status_code=201)
async def create_skill(
    payload: SkillWrite,
    skill_service: SkillService = Depends(get_skill_service),
    current_account: Account = Depends(require_account),
):
    return unwrap(await skill_service.create(payload))


@router.put("/{skill_id}", response_model=SkillRead)
async def update_skill(
    skill_id: int,
    payload: SkillWrite,
    skill_service: SkillService = Depends(get_skill_service),
    current_account: Account = Depends(require_account),
):
    return unwrap(await skill_service.update(skill_id, payload))


@router.delete("/{skill_id}", status_code=204)
async def delete_skill(
    skill_id: int,
    skill_service: SkillService = Depends(get_skill_service),
    current_account: Account = Depends(require_account),
):
    unwrap(await skill_service.delete(skill_id))
    return Response(status_code=204)
