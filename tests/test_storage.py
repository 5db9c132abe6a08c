import pytest
from sqlalchemy.exc import OperationalError

from app.auth.models import User
from app.core.deps import build_game
from app.engine.errors import StorageError
from app.ledger.models import LedgerEntry
from app.ledger.repository import SqlLedgerRepository


@pytest.fixture
def db(session_factory):
    session = session_factory()
    session.add(User(id=1, username="keeper", password_hash="x", is_admin=False))
    session.commit()
    try:
        yield session
    finally:
        session.close()


def test_failed_write_rolls_back_the_whole_delta(db, monkeypatch):
    game = build_game(db)
    assert game.ledger.apply_delta(1, 100, "Oct 19", "first") == 100

    def broken_trim(self, user_id, keep):
        raise OperationalError("DELETE FROM ledger_entries", {}, Exception("disk I/O error"))

    monkeypatch.setattr(SqlLedgerRepository, "trim_entries", broken_trim)

    with pytest.raises(StorageError):
        game.ledger.apply_delta(1, 50, "Oct 19", "second")

    assert game.ledger.total_xp(1) == 100
    assert game.ledger.history(1) == [{"date": "Oct 19", "note": "first", "xp": 100}]
    assert db.query(LedgerEntry).count() == 1


def test_trim_keeps_newest_entries_per_user(db):
    db.add(User(id=2, username="other", password_hash="x", is_admin=False))
    db.commit()
    game = build_game(db)
    game.ledger.apply_delta(2, 5, "Oct 18", "other user")
    for i in range(55):
        game.ledger.apply_delta(1, 1, "Oct 19", f"n{i}")

    notes = [e["note"] for e in game.ledger.history(1, limit=100)]
    assert notes == [f"n{i}" for i in range(54, 4, -1)]
    assert game.ledger.history(2) == [{"date": "Oct 18", "note": "other user", "xp": 5}]
