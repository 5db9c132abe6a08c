"""
Settings read from the environment (and an optional .env at the project root).
"""
import os
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent.parent

load_dotenv(dotenv_path=BASE_DIR / ".env")


def is_production() -> bool:
    """True on a hosted deploy (Railway sets RAILWAY_ENVIRONMENT) or when ENVIRONMENT=production."""
    return bool(
        os.getenv("RAILWAY_ENVIRONMENT")
        or os.getenv("ENVIRONMENT", "").lower() == "production"
    )


def database_url() -> str:
    """DATABASE_URL, defaulting to a local SQLite file. Old postgres:// URLs get a driver."""
    url = os.getenv("DATABASE_URL", "sqlite:///./habit_quest.db").strip()
    if url.startswith("postgres://"):
        url = url.replace("postgres://", "postgresql+psycopg2://", 1)
    return url


def _secret_key() -> str:
    key = os.getenv("SECRET_KEY") or os.getenv("JWT_SECRET_KEY") or ""
    if key:
        return key
    if is_production():
        raise RuntimeError("SECRET_KEY or JWT_SECRET_KEY env var is required in production")
    print("[AUTH] WARNING: no SECRET_KEY set, using the development key", flush=True)
    return "habit-quest-dev-key-not-for-production"


SECRET_KEY = _secret_key()

# Login cookie / token lifetime
SESSION_DAYS = int(os.getenv("SESSION_DAYS", "7"))

# Name of the cookie carrying the signed token
SESSION_COOKIE = "access_token"
