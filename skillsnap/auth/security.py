import secrets
from functools import lru_cache
from typing import Optional, Tuple

from passlib.context import CryptContext

pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")


@lru_cache(maxsize=1)
def _fake_hash() -> str:
    return pwd_context.hash(secrets.token_urlsafe(32))


def validate_password(password: str) -> Tuple[bool, str]:
    if len(password) < 8:
        return False, "Password must be at least 8 characters long."
    if len(password) > 64:
        return False, "Password is too long."
    if not any(c.isupper() for c in password):
        return False, "Password must contain at least one uppercase letter."
    if not any(c.islower() for c in password):
        return False, "Password must contain at least one lowercase letter."
    if not any(c.isdigit() for c in password):
        return False, "Password must contain at least one digit."
    return True, ""


def verify_account_password(plain_password: str, hashed_password: Optional[str]) -> bool:
    # Unknown accounts are verified against a throwaway hash so both paths cost the same.
    provided_hash = hashed_password or _fake_hash()
    is_valid = pwd_context.verify(plain_password, provided_hash)
    return bool(hashed_password) and is_valid


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)
