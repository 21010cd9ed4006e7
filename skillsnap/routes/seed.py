from fastapi import APIRouter, Depends

from ..database.models import Account
from ..dependencies import get_seed_service, require_role
from ..dto.base import MessageResponse
from ..services.auth_service import ADMIN_ROLE
from ..services.seed_service import SeedService
from ..utils import unwrap

router = APIRouter(tags=["seed"])


@router.post("/seed", response_model=MessageResponse)
async def seed_sample_data(
    seed_service: SeedService = Depends(get_seed_service),
    current_account: Account = Depends(require_role(ADMIN_ROLE)),
):
    return unwrap(await seed_service.seed(account_id=current_account.id))
