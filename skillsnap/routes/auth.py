from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Response

from ..auth.services import TokenClaims
from ..config import settings
from ..database.models import Account
from ..dependencies import get_auth_service, get_current_claims, require_account
from ..dependencies.auth_dependencies import ACCESS_TOKEN_COOKIE
from ..dto.auth import AccountInfo, AuthResponse, LoginRequest, RegisterRequest
from ..dto.base import MessageResponse
from ..services.auth_service import AuthService
from ..utils import unwrap

router = APIRouter(prefix="/auth", tags=["auth"])


def set_access_cookie(response: Response, token: str, persistent: bool = False):
    # without max_age the cookie ends with the browser session
    response.set_cookie(
        key=ACCESS_TOKEN_COOKIE,
        value=token,
        httponly=True,
        max_age=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60 if persistent else None,
        secure=not settings.DEBUG,
        samesite="lax",
        path="/",
    )


@router.post("/register", response_model=AuthResponse)
async def register(
    payload: RegisterRequest,
    response: Response,
    auth_service: AuthService = Depends(get_auth_service),
):
    result = unwrap(await auth_service.register(payload.email, payload.password))
    set_access_cookie(response, result.token)
    return result


@router.post("/login", response_model=AuthResponse)
async def login(
    payload: LoginRequest,
    response: Response,
    auth_service: AuthService = Depends(get_auth_service),
):
    result = unwrap(await auth_service.login(payload.email, payload.password))
    set_access_cookie(response, result.token, persistent=payload.remember_me)
    return result


@router.post("/logout", response_model=MessageResponse)
async def logout(
    response: Response,
    claims: Optional[TokenClaims] = Depends(get_current_claims),
    auth_service: AuthService = Depends(get_auth_service),
):
    if claims is None:
        raise HTTPException(status_code=401, detail="User not authenticated.")

    await auth_service.logout(claims)
    response.delete_cookie(
        key=ACCESS_TOKEN_COOKIE,
        httponly=True,
        secure=not settings.DEBUG,
        samesite="lax",
        path="/",
    )
    return MessageResponse(message="Logout successful")


@router.get("/me", response_model=AccountInfo)
async def me(current_account: Account = Depends(require_account)):
    return AuthService.describe(current_account)
