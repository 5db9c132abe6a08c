from typing import Optional

from fastapi import Request, Depends, HTTPException
from sqlalchemy.orm import Session

from app.db.session import get_db, SqlUnitOfWork
from app.auth.models import User
from app.books.repository import SqlBookRepository
from app.core.config import SESSION_COOKIE
from app.core.security import session_user_id
from app.daily.repository import SqlCompletionRepository
from app.engine.game import Game
from app.ledger.repository import SqlLedgerRepository
from app.quests.repository import SqlQuestRepository


def _user_from_cookie(request: Request, db: Session) -> Optional[User]:
    user_id = session_user_id(request.cookies.get(SESSION_COOKIE))
    if user_id is None:
        return None
    return db.get(User, user_id)


def get_current_user(
    request: Request,
    db: Session = Depends(get_db)
) -> User:
    user = _user_from_cookie(request, db)
    if not user:
        print(f"[AUTH] reject path={request.url.path}", flush=True)
        raise HTTPException(status_code=401, detail="Not logged in")
    return user


def get_optional_user(
    request: Request,
    db: Session = Depends(get_db)
) -> Optional[User]:
    """Same lookup as get_current_user, but pages get None instead of a 401."""
    return _user_from_cookie(request, db)


def get_admin(
    user: User = Depends(get_current_user)
) -> User:
    """Dependency to ensure the user carries the administrator flag."""
    if not user.is_admin:
        raise HTTPException(status_code=403, detail="Forbidden")
    return user


def build_game(db: Session) -> Game:
    return Game(
        ledger_repo=SqlLedgerRepository(db),
        completions=SqlCompletionRepository(db),
        quests=SqlQuestRepository(db),
        books=SqlBookRepository(db),
        uow=SqlUnitOfWork(db),
    )


def get_game(db: Session = Depends(get_db)) -> Game:
    return build_game(db)
