import os
from dotenv import load_dotenv

load_dotenv(os.path.join(os.path.dirname(__file__), "..", ".env"))


def _int_env(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except (TypeError, ValueError):
        return default


class Settings:
    SECRET_KEY = os.getenv("SECRET_KEY")
    if not SECRET_KEY:
        raise ValueError("SECRET_KEY must be set in environment variables")

    DATABASE_URL = os.getenv("DATABASE_URL")
    if not DATABASE_URL:
        raise ValueError("DATABASE_URL must be set in environment variables")

    DEBUG = os.getenv("DEBUG", "False").lower() == "true"

    REDIS_URL = os.getenv("REDIS_URL", "redis://localhost:6379")
    ALGORITHM = os.getenv("ALGORITHM", "HS256")
    JWT_ISSUER = os.getenv("JWT_ISSUER", "skillsnap-auth")
    JWT_AUDIENCE = os.getenv("JWT_AUDIENCE", "skillsnap-users")

    ACCESS_TOKEN_EXPIRE_MINUTES = _int_env("ACCESS_TOKEN_EXPIRE_MINUTES", 60 * 24)
    LOGIN_ATTEMPTS_LIMIT = _int_env("LOGIN_ATTEMPTS_LIMIT", 5)
    LOGIN_ATTEMPTS_WINDOW_SECONDS = _int_env("LOGIN_ATTEMPTS_WINDOW_SECONDS", 3600)

    CACHE_MAX_ENTRIES = _int_env("CACHE_MAX_ENTRIES", 1024)
    LISTING_CACHE_ABSOLUTE_MINUTES = _int_env("LISTING_CACHE_ABSOLUTE_MINUTES", 30)
    LISTING_CACHE_SLIDING_MINUTES = _int_env("LISTING_CACHE_SLIDING_MINUTES", 10)
    STATISTICS_CACHE_MINUTES = _int_env("STATISTICS_CACHE_MINUTES", 15)

    # accounts registered with these emails get the Admin role
    ADMIN_EMAILS = [
        email.strip().lower()
        for email in os.getenv("ADMIN_EMAILS", "").split(",")
        if email.strip()
    ]

    CORS_ORIGINS = [
        origin.strip()
        for origin in os.getenv("CORS_ORIGINS", "http://localhost:5000").split(",")
        if origin.strip()
    ]


settings = Settings()
