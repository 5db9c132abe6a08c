from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from app.core.config import database_url

DATABASE_URL = database_url()


def _make_engine(url: str):
    connect_args = {}
    if url.startswith("sqlite"):
        # One process, many request threads
        connect_args = {"check_same_thread": False}
    return create_engine(url, connect_args=connect_args)


engine = _make_engine(DATABASE_URL)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def log_database() -> None:
    """Print which database the app is pointed at (password hidden)."""
    url = engine.url
    print(f"[DB] backend={url.get_backend_name()} url={url.render_as_string(hide_password=True)}", flush=True)
    if url.get_backend_name() == "sqlite" and url.database:
        path = Path(url.database).resolve()
        size = path.stat().st_size if path.exists() else 0
        print(f"[DB] sqlite file={path} size_bytes={size}", flush=True)
