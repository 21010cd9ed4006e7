from typing import Optional

import redis.asyncio as redis

from ..auth.security import validate_password
from ..auth.services import TokenClaims, create_access_token, verify_token
from ..auth.validators import normalize_and_validated_email
from ..config import settings
from ..core import (
    clear_rate_limit,
    get_login_rate_key,
    increment_rate_limit,
    is_rate_limited,
    is_token_revoked,
    revoke_token,
)
from ..core.logger import logger
from ..database.models import Account
from ..database.repositories import AccountRepository, IntegrityViolationError
from ..dto.auth import AccountInfo, AuthResponse
from .results import ErrorKind, ServiceResult, duplicate, validation_error

ADMIN_ROLE = "Admin"


class AuthService:
    def __init__(self, account_repo: AccountRepository, redis_client: redis.Redis):
        self.account_repo = account_repo
        self.redis_client = redis_client

    def _issue_token(self, account: Account, message: str) -> AuthResponse:
        token = create_access_token(account.id, account.email, account.role_list)
        return AuthResponse(
            message=message,
            token=token,
            account_id=account.id,
            email=account.email,
        )

    @staticmethod
    def _roles_for(email: str) -> str:
        if email.lower() in settings.ADMIN_EMAILS:
            return f"user,{ADMIN_ROLE}"
        return "user"

    async def register(self, email: str, password: str) -> ServiceResult[AuthResponse]:
        normalized_email = normalize_and_validated_email(email)
        if not normalized_email:
            return validation_error("Invalid email format.")

        is_valid_pass, pass_error = validate_password(password)
        if not is_valid_pass:
            return validation_error(pass_error)

        if await self.account_repo.email_exists(normalized_email):
            return duplicate("Email already registered.")

        try:
            account = await self.account_repo.create(
                normalized_email, password, roles=self._roles_for(normalized_email)
            )
        except IntegrityViolationError:
            return duplicate("Email already registered.")

        logger.info(f"Account registered successfully: {normalized_email}")
        return ServiceResult.success(self._issue_token(account, "User registered successfully"))

    async def login(self, email: str, password: str) -> ServiceResult[AuthResponse]:
        normalized_email = normalize_and_validated_email(email)
        if not normalized_email:
            return ServiceResult.failure(ErrorKind.AUTH, "Invalid email or password.")

        login_key = get_login_rate_key(normalized_email)
        if await is_rate_limited(self.redis_client, login_key, settings.LOGIN_ATTEMPTS_LIMIT):
            logger.warning(f"Login rate limit exceeded for: {normalized_email}")
            return ServiceResult.failure(
                ErrorKind.RATE_LIMITED, "Too many login attempts. Try again later."
            )

        account = await self.account_repo.verify_credentials(normalized_email, password)
        if not account:
            await increment_rate_limit(
                self.redis_client, login_key, settings.LOGIN_ATTEMPTS_WINDOW_SECONDS
            )
            logger.warning(f"Failed login attempt for: {normalized_email}")
            return ServiceResult.failure(ErrorKind.AUTH, "Invalid email or password.")

        await clear_rate_limit(self.redis_client, login_key)
        logger.info(f"Account logged in successfully: {normalized_email}")
        return ServiceResult.success(self._issue_token(account, "Login successful"))

    async def logout(self, claims: TokenClaims) -> bool:
        revoked = await revoke_token(self.redis_client, claims.jti, claims.seconds_until_expiry())
        logger.info(f"Account logged out: {claims.account_id}")
        return revoked

    async def resolve_token(self, token: Optional[str]) -> Optional[TokenClaims]:
        if not token:
            return None

        claims = verify_token(token)
        if not claims:
            return None

        if await is_token_revoked(self.redis_client, claims.jti):
            logger.warning(f"Revoked token presented for account {claims.account_id}")
            return None
        return claims

    async def get_account(self, claims: Optional[TokenClaims]) -> Optional[Account]:
        if claims is None:
            return None
        return await self.account_repo.get_by_id(claims.account_id)

    @staticmethod
    def describe(account: Account) -> AccountInfo:
        return AccountInfo(account_id=account.id, email=account.email, roles=account.role_list)
