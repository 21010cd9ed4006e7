from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response

from ..database.models import Account
from ..dependencies import (
    get_portfolio_user_service,
    get_project_service,
    get_skill_service,
    require_account,
)
from ..dto.portfolio_user import PortfolioUserRead, PortfolioUserWrite
from ..dto.project import ProjectRead
from ..dto.skill import SkillRead
from ..dto.statistics import PortfolioStatistics, PortfolioUserStatistics
from ..services.portfolio_user_service import PortfolioUserService
from ..services.project_service import ProjectService
from ..services.skill_service import SkillService
from ..utils import unwrap

router = APIRouter(prefix="/portfolio-users", tags=["portfolio-users"])


@router.get("", response_model=List[PortfolioUserRead])
async def get_portfolio_users(
    portfolio_user_service: PortfolioUserService = Depends(get_portfolio_user_service),
):
    return await portfolio_user_service.get_all()


@router.get("/search", response_model=List[PortfolioUserRead])
async def search_portfolio_users(
    name: Optional[str] = Query(None, description="Case-insensitive name fragment"),
    portfolio_user_service: PortfolioUserService = Depends(get_portfolio_user_service),
):
    return await portfolio_user_service.search(name)


@router.get("/statistics", response_model=PortfolioStatistics)
async def get_portfolio_statistics(
    portfolio_user_service: PortfolioUserService = Depends(get_portfolio_user_service),
):
    return await portfolio_user_service.get_statistics()


@router.get("/{portfolio_user_id}", response_model=PortfolioUserRead)
async def get_portfolio_user(
    portfolio_user_id: int,
    portfolio_user_service: PortfolioUserService = Depends(get_portfolio_user_service),
):
    return unwrap(await portfolio_user_service.get_by_id(portfolio_user_id))


@router.get("/{portfolio_user_id}/statistics", response_model=PortfolioUserStatistics)
async def get_portfolio_user_statistics(
    portfolio_user_id: int,
    portfolio_user_service: PortfolioUserService = Depends(get_portfolio_user_service),
):
    return unwrap(await portfolio_user_service.get_user_statistics(portfolio_user_id))


@router.get("/{portfolio_user_id}/projects", response_model=List[ProjectRead])
async def get_portfolio_user_projects(
    portfolio_user_id: int,
    project_service: ProjectService = Depends(get_project_service),
):
    return unwrap(await project_service.get_by_owner(portfolio_user_id))


@router.get("/{portfolio_user_id}/skills", response_model=List[SkillRead])
async def get_portfolio_user_skills(
    portfolio_user_id: int,
    skill_service: SkillService = Depends(get_skill_service),
):
    return unwrap(await skill_service.get_by_owner(portfolio_user_id))


@router.post("", response_model=PortfolioUserRead, status_code=201)
async def create_portfolio_user(
    payload: PortfolioUserWrite,
    portfolio_user_service: PortfolioUserService = Depends(get_portfolio_user_service),
    current_account: Account = Depends(require_account),
):
    return unwrap(await portfolio_user_service.create(payload, account_id=current_account.id))


@router.put("/{portfolio_user_id}", response_model=PortfolioUserRead)
async def update_portfolio_user(
    portfolio_user_id: int,
    payload: PortfolioUserWrite,
    portfolio_user_service: PortfolioUserService = Depends(get_portfolio_user_service),
    current_account: Account = Depends(require_account),
):
    return unwrap(await portfolio_user_service.update(portfolio_user_id, payload))


@router.delete("/{portfolio_user_id}", status_code=204)
async def delete_portfolio_user(
    portfolio_user_id: int,
    portfolio_user_service: PortfolioUserService = Depends(get_portfolio_user_service),
    current_account: Account = Depends(require_account),
):
    unwrap(await portfolio_user_service.delete(portfolio_user_id))
    return Response(status_code=204)
