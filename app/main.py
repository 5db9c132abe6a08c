from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from app.db.base import Base, engine, SessionLocal, log_database
from app.engine.errors import GameError, StorageError

# Import models so create_all picks them up
from app.auth.models import User  # noqa: F401
from app.books.models import Book, ReadingListEntry  # noqa: F401
from app.daily.models import DailyCompletion, QuestLabel  # noqa: F401
from app.ledger.models import LedgerEntry, LedgerState  # noqa: F401
from app.map.models import MapCinematic, MapGear, RegionBoss  # noqa: F401
from app.quests.models import Quest  # noqa: F401

from app.auth.bootstrap import seed_gear
from app.auth.routes import router as auth_router
from app.api.routes import router as api_router
from app.quests.routes import router as quest_router
from app.books.routes import router as book_router
from app.map.routes import router as map_router
from app.admin.routes import router as admin_router
from app.web.routes import router as web_router


app = FastAPI(title="Habit Quest", version="0.1.0")

# Mount static files directory
static_dir = Path(__file__).parent.parent / "static"
if static_dir.exists():
    app.mount("/static", StaticFiles(directory=str(static_dir)), name="static")

log_database()

# Create database tables (still useful in dev; in production prefer Alembic)
Base.metadata.create_all(bind=engine)

# Global gear table is shared by every account
try:
    _db = SessionLocal()
    try:
        seed_gear(_db)
    finally:
        _db.close()
except Exception as e:
    print("[DB] map_gear seed failed:", repr(e), flush=True)


# ======================================================
# ERROR HANDLERS
# ======================================================
@app.exception_handler(GameError)
def handle_game_error(request: Request, exc: GameError):
    if isinstance(exc, StorageError):
        print(f"[DB] {request.method} {request.url.path} failed: {exc}", flush=True)
        return JSONResponse(status_code=exc.status_code, content={"detail": "Internal server error"})
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.exception_handler(RequestValidationError)
def handle_request_validation(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=400, content={"detail": "Invalid request"})


# Include routers
app.include_router(auth_router)
app.include_router(api_router)
app.include_router(quest_router)
app.include_router(book_router)
app.include_router(map_router)
app.include_router(admin_router)
app.include_router(web_router)
