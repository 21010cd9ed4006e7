from typing import Optional


def is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def clean_optional(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def too_long(field: str, value: Optional[str], max_length: int) -> Optional[str]:
    if value is not None and len(value) > max_length:
        return f"{field} must be at most {max_length} characters."
    return None


def first_error(*errors: Optional[str]) -> Optional[str]:
    return next((error for error in errors if error), None)


def normalize_name(value: str) -> str:
    return value.strip().casefold()
