from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.auth.bootstrap import register_user, UsernameTaken
from app.auth.models import User
from app.core.config import SESSION_COOKIE, SESSION_DAYS, is_production
from app.core.deps import get_current_user
from app.core.security import verify_password, issue_session_cookie

router = APIRouter(prefix="/api", tags=["auth"])


class Credentials(BaseModel):
    username: Optional[str] = ""
    password: Optional[str] = ""


def _login_response(user: User, redirect: str = "/") -> JSONResponse:
    token = issue_session_cookie(user.id)
    response = JSONResponse({"ok": True, "redirect": redirect})
    # Cookie security: httpOnly always; secure in production; samesite lax
    response.set_cookie(
        key=SESSION_COOKIE,
        value=token,
        max_age=SESSION_DAYS * 24 * 60 * 60,
        httponly=True,
        secure=is_production(),
        samesite="lax",
        path="/",
    )
    return response


# =========================
# REGISTER
# =========================
@router.post("/register")
def register(body: Credentials, db: Session = Depends(get_db)):
    try:
        user = register_user(db, body.username, body.password)
    except UsernameTaken:
        raise HTTPException(status_code=409, detail="Username already taken")
    return _login_response(user)


# =========================
# LOGIN
# =========================
@router.post("/login")
def login(body: Credentials, db: Session = Depends(get_db)):
    username = (body.username or "").strip()
    user = db.query(User).filter(User.username == username).first()

    if not user or not verify_password(body.password or "", user.password_hash):
        print("[AUTH] Invalid credentials for:", username, flush=True)
        raise HTTPException(status_code=401, detail="Invalid username or password")

    print("[AUTH] Login successful for:", user.username, flush=True)
    return _login_response(user)


# =========================
# LOGOUT
# =========================
@router.post("/logout")
def logout():
    response = JSONResponse({"ok": True, "redirect": "/login"})
    response.delete_cookie(key=SESSION_COOKIE, path="/")
    return response


@router.get("/me")
def me(user: User = Depends(get_current_user)):
    return {"username": user.username, "isAdmin": bool(user.is_admin)}
