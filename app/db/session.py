from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.db.base import SessionLocal
from app.engine.errors import StorageError


def get_db():
    """FastAPI dependency: one session per request, always closed."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


class SqlUnitOfWork:
    """
    Runs a logical mutation as one transaction on *db*.

    Re-entrant: a with_transaction() call made while another is running joins
    it, so only the outermost call commits. Any SQLAlchemy failure rolls the
    whole unit back and surfaces as StorageError.
    """

    def __init__(self, db: Session):
        self.db = db
        self._depth = 0

    def with_transaction(self, fn):
        self._depth += 1
        try:
            result = fn()
            if self._depth == 1:
                self.db.commit()
            return result
        except SQLAlchemyError as exc:
            if self._depth == 1:
                self.db.rollback()
                print(f"[DB] transaction rolled back: {exc!r}", flush=True)
                raise StorageError("Storage failure", {"error": type(exc).__name__}) from exc
            raise
        except Exception:
            if self._depth == 1:
                self.db.rollback()
            raise
        finally:
            self._depth -= 1
