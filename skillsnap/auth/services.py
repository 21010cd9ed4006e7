import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import List, Optional

from jose import JWTError, jwt

from ..config import settings
from ..core.logger import logger


@dataclass
class TokenClaims:
    account_id: int
    email: str
    roles: List[str]
    jti: str
    expires_at: datetime

    def seconds_until_expiry(self) -> int:
        remaining = self.expires_at - datetime.now(timezone.utc)
        return max(int(remaining.total_seconds()), 0)


def create_access_token(account_id: int, email: str, roles: Optional[List[str]] = None) -> str:
    now = datetime.now(timezone.utc)
    expire = now + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    payload = {
        "sub": str(account_id),
        "email": email,
        "roles": roles or [],
        "exp": expire,
        "iat": now,
        "jti": secrets.token_urlsafe(16),
        "type": "access",
        "iss": settings.JWT_ISSUER,
        "aud": settings.JWT_AUDIENCE,
    }

    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def verify_token(token: str) -> Optional[TokenClaims]:
    try:
        payload = jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[settings.ALGORITHM],
            issuer=settings.JWT_ISSUER,
            audience=settings.JWT_AUDIENCE,
        )
    except JWTError as e:
        logger.warning(f"JWT decoding error: {e}")
        return None

    if payload.get("type") != "access" or not payload.get("jti"):
        return None

    try:
        return TokenClaims(
            account_id=int(payload["sub"]),
            email=payload.get("email", ""),
            roles=list(payload.get("roles") or []),
            jti=payload["jti"],
            expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
        )
    except (KeyError, TypeError, ValueError) as e:
        logger.error(f"Malformed token payload: {e}")
        return None
