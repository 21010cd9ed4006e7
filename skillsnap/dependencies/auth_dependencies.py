from typing import Optional

import redis.asyncio as redis
from fastapi import Depends, HTTPException, Request
from sqlalchemy.ext.asyncio import AsyncSession

from ..auth.services import TokenClaims
from ..database import get_db
from ..database.models import Account
from ..database.repositories import AccountRepository
from ..services.auth_service import AuthService
from .common import get_redis

ACCESS_TOKEN_COOKIE = "access_token"


def get_account_repository(db: AsyncSession = Depends(get_db)) -> AccountRepository:
    return AccountRepository(db)


def get_auth_service(
    account_repo: AccountRepository = Depends(get_account_repository),
    redis_client: redis.Redis = Depends(get_redis),
) -> AuthService:
    return AuthService(account_repo=account_repo, redis_client=redis_client)


def get_request_token(request: Request) -> Optional[str]:
    authorization = request.headers.get("Authorization")
    if authorization:
        scheme, _, credentials = authorization.partition(" ")
        if scheme.lower() == "bearer" and credentials.strip():
            return credentials.strip()
    return request.cookies.get(ACCESS_TOKEN_COOKIE)


async def get_current_claims(
    request: Request,
    auth_service: AuthService = Depends(get_auth_service),
) -> Optional[TokenClaims]:
    return await auth_service.resolve_token(get_request_token(request))


async def get_current_account(
    claims: Optional[TokenClaims] = Depends(get_current_claims),
    auth_service: AuthService = Depends(get_auth_service),
) -> Optional[Account]:
    return await auth_service.get_account(claims)


async def require_account(
    account: Optional[Account] = Depends(get_current_account),
) -> Account:
    if not account:
        raise HTTPException(status_code=401, detail="User not authenticated.")
    return account


def require_role(role: str):
    async def dependency(account: Account = Depends(require_account)) -> Account:
        if role not in account.role_list:
            raise HTTPException(status_code=403, detail="Insufficient permissions.")
        return account

    return dependency
