from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response

from ..database.models import Account
from ..dependencies import get_project_service, require_account
from ..dto.project import ProjectRead, ProjectWrite
from ..dto.statistics import ProjectStatistics
from ..services.project_service import ProjectService
from ..utils import unwrap

router = APIRouter(prefix="/projects", tags=["projects"])


@router.get("", response_model=List[ProjectRead])
async def get_projects(project_service: ProjectService = Depends(get_project_service)):
    return await project_service.get_all()


@router.get("/search", response_model=List[ProjectRead])
async def search_projects(
    title: Optional[str] = Query(None, description="Case-insensitive title fragment"),
    portfolio_user_id: Optional[int] = Query(None, alias="portfolioUserId"),
    project_service: ProjectService = Depends(get_project_service),
):
    return await project_service.search(title=title, portfolio_user_id=portfolio_user_id)


@router.get("/statistics", response_model=ProjectStatistics)
async def get_project_statistics(project_service: ProjectService = Depends(get_project_service)):
    return await project_service.get_statistics()


@router.get("/by-user/{portfolio_user_id}", response_model=List[ProjectRead])
async def get_projects_by_user(
    portfolio_user_id: int,
    project_service: ProjectService = Depends(get_project_service),
):
    return unwrap(await project_service.get_by_owner(portfolio_user_id))


@router.get("/{project_id}", response_model=ProjectRead)
async def get_project(
    project_id: int,
    project_service: ProjectService = Depends(get_project_service),
):
    return unwrap(await project_service.get_by_id(project_id))


@router.post("", response_model=ProjectRead, status_code=201)
async def create_project(
    payload: ProjectWrite,
    project_service: ProjectService = Depends(get_project_service),
    current_account: Account = Depends(require_account),
):
    return unwrap(await project_service.create(payload))


@router.put("/{project_id}", response_model=ProjectRead)
async def update_project(
    project_id: int,
    payload: ProjectWrite,
    project_service: ProjectService = Depends(get_project_service),
    current_account: Account = Depends(require_account),
):
    return unwrap(await project_service.update(project_id, payload))


@router.delete("/{project_id}", status_code=204)
async def delete_project(
    project_id: int,
    project_service: ProjectService = Depends(get_project_service),
    current_account: Account = Depends(require_account),
):
    unwrap(await project_service.delete(project_id))
    return Response(status_code=204)
