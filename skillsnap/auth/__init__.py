from .security import validate_password, verify_account_password, get_password_hash
from .validators import normalize_and_validated_email
from .services import TokenClaims, create_access_token, verify_token

__all__ = [
    "validate_password",
    "verify_account_password",
    "get_password_hash",
    "normalize_and_validated_email",
    "TokenClaims",
    "create_access_token",
    "verify_token",
]
