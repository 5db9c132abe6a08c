import os
import tempfile
from pathlib import Path

import pytest

# Settings must be in place before the app (and security module) are imported.
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ["DATABASE_URL"] = "sqlite:///" + str(Path(tempfile.mkdtemp()) / "test.db")

from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.main import app  # noqa: E402
from app.auth.bootstrap import seed_gear  # noqa: E402
from app.db.base import Base  # noqa: E402
from app.db.session import get_db  # noqa: E402
from app.engine.game import Game  # noqa: E402


# ======================================================
# IN-MEMORY FAKES (engine tests)
# ======================================================
class FakeUnitOfWork:
    def __init__(self):
        self.calls = 0

    def with_transaction(self, fn):
        self.calls += 1
        return fn()


class FakeLedgerRepository:
    def __init__(self):
        self.totals = {}
        self.entries = {}
        self._next_id = 1

    def get_total(self, user_id):
        return self.totals.get(user_id, 0)

    def set_total(self, user_id, total_xp):
        self.totals[user_id] = total_xp

    def append_entry(self, user_id, date_label, note, xp):
        self.entries.setdefault(user_id, []).append(
            {"id": self._next_id, "date": date_label, "note": note, "xp": xp}
        )
        self._next_id += 1

    def trim_entries(self, user_id, keep):
        rows = self.entries.get(user_id, [])
        self.entries[user_id] = rows[-keep:] if keep else []

    def clear_entries(self, user_id):
        self.entries[user_id] = []

    def recent_entries(self, user_id, limit):
        rows = list(reversed(self.entries.get(user_id, [])))[:limit]
        return [{"date": r["date"], "note": r["note"], "xp": r["xp"]} for r in rows]


class FakeCompletionRepository:
    def __init__(self):
        self.rows = {}

    def get_status(self, user_id, category, day):
        row = self.rows.get((user_id, category, day))
        return row["status"] if row else None

    def save(self, user_id, category, day, status, xp):
        self.rows[(user_id, category, day)] = {"status": status, "xp": xp}

    def for_day(self, user_id, day):
        return {c: dict(r) for (u, c, d), r in self.rows.items() if u == user_id and d == day}

    def completed_counts(self, user_id, start, end):
        counts = {}
        for (u, c, d), r in self.rows.items():
            if u == user_id and start <= d <= end and r["status"] == "completed":
                counts[c] = counts.get(c, 0) + 1
        return counts


class FakeQuestRepository:
    def __init__(self):
        self.quests = {}

    def add(self, user_id, quest_id, name, tag, xp):
        self.quests[quest_id] = {"id": quest_id, "user_id": user_id, "name": name,
                                 "tag": tag, "xp": xp, "status": "active"}

    def get_active(self, user_id, quest_id):
        q = self.quests.get(quest_id)
        if not q or q["user_id"] != user_id or q["status"] != "active":
            return None
        return {"id": q["id"], "name": q["name"], "tag": q["tag"], "xp": q["xp"]}

    def mark_completed(self, user_id, quest_id, when):
        self.quests[quest_id]["status"] = "completed"
        self.quests[quest_id]["completed_at"] = when


class FakeBookRepository:
    def __init__(self):
        self.books = {}

    def add(self, user_id, book_id, title, status="reading"):
        self.books[book_id] = {"id": book_id, "user_id": user_id, "title": title, "status": status}

    def get_reading(self, user_id, book_id):
        b = self.books.get(book_id)
        if not b or b["user_id"] != user_id or b["status"] != "reading":
            return None
        return {"id": b["id"], "title": b["title"]}

    def mark_completed(self, user_id, book_id, completed_label):
        self.books[book_id]["status"] = "completed"
        self.books[book_id]["completed_at"] = completed_label

    def count_completed(self, user_id):
        return sum(1 for b in self.books.values() if b["user_id"] == user_id and b["status"] == "completed")


@pytest.fixture
def fakes():
    return {
        "ledger": FakeLedgerRepository(),
        "completions": FakeCompletionRepository(),
        "quests": FakeQuestRepository(),
        "books": FakeBookRepository(),
        "uow": FakeUnitOfWork(),
    }


@pytest.fixture
def game(fakes):
    return Game(
        ledger_repo=fakes["ledger"],
        completions=fakes["completions"],
        quests=fakes["quests"],
        books=fakes["books"],
        uow=fakes["uow"],
    )


# ======================================================
# API CLIENT (fresh in-memory SQLite per test)
# ======================================================
@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = factory()
    seed_gear(db)
    db.close()
    yield factory
    engine.dispose()


@pytest.fixture
def client(session_factory):
    def _get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def register():
    def _register(client, username="hunter", password="password123"):
        return client.post("/api/register", json={"username": username, "password": password})
    return _register
