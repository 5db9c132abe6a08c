"""
Password hashing and the signed session token kept in the login cookie.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional
import hashlib
import hmac
import os

from jose import jwt, JWTError

from app.core.config import SECRET_KEY, SESSION_DAYS

PBKDF2_ROUNDS = 100_000
ALGORITHM = "HS256"
BEARER = "Bearer "


def _derive(password: str, salt: bytes) -> bytes:
    return hashlib.pbkdf2_hmac("sha256", password.encode(), salt, PBKDF2_ROUNDS)


def hash_password(password: str) -> str:
    """Return ``salt_hex:hash_hex``."""
    salt = os.urandom(16)
    return f"{salt.hex()}:{_derive(password, salt).hex()}"


def verify_password(password: str, stored: str) -> bool:
    salt_hex, _, hash_hex = (stored or "").partition(":")
    try:
        salt, expected = bytes.fromhex(salt_hex), bytes.fromhex(hash_hex)
    except ValueError:
        return False
    if not salt or not expected:
        return False
    return hmac.compare_digest(_derive(password, salt), expected)


# ======================
# SESSION TOKEN
# ======================

def issue_session_cookie(user_id: int, lifetime: Optional[timedelta] = None) -> str:
    """Cookie value for a fresh login: ``Bearer <jwt>`` with the user id as subject."""
    expires = datetime.now(timezone.utc) + (lifetime or timedelta(days=SESSION_DAYS))
    token = jwt.encode({"sub": str(user_id), "exp": expires}, SECRET_KEY, algorithm=ALGORITHM)
    return BEARER + token


def session_user_id(cookie_value: Optional[str]) -> Optional[int]:
    """User id carried by a session cookie, or None if it is missing, expired or forged."""
    if not cookie_value:
        return None
    token = cookie_value
    if token.lower().startswith(BEARER.lower()):
        token = token[len(BEARER):].strip()

    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except jwt.ExpiredSignatureError:
        print("[AUTH] Session expired", flush=True)
        return None
    except JWTError as e:
        print(f"[AUTH] Bad session token: {type(e).__name__}", flush=True)
        return None

    try:
        return int(payload.get("sub"))
    except (TypeError, ValueError):
        return None
