from typing import Optional

from email_validator import validate_email, EmailNotValidError


def normalize_and_validated_email(email: str) -> Optional[str]:
    try:
        validated = validate_email(email, check_deliverability=False)
        return validated.normalized
    except EmailNotValidError:
        return None
