from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from app.core.config import settings
from app.core.errors import DomainError
from app.core.logging import configure_logging
from app.db.init_db import init_db
from app.api.routes.auth import router as auth_router
from app.api.routes.me import router as me_router
from app.api.routes.admin_users import router as admin_users_router
from app.api.routes.moderator_schedule import router as moderator_schedule_router
from app.api.routes.prayer_teams import router as prayer_teams_router
from app.api.routes.family_board import router as family_board_router
from app.api.routes.news import router as news_router
from app.api.routes.prayer_subjects import router as prayer_subjects_router
from app.api.routes.prayer_requests import router as prayer_requests_router
from app.api.routes.birthdays import router as birthdays_router
from app.api.routes.dashboard import router as dashboard_router
from app.api.routes.upload import router as upload_router

configure_logging()

app = FastAPI(title="Intercession")
app.include_router(auth_router)
app.include_router(me_router)
app.include_router(admin_users_router)
app.include_router(moderator_schedule_router)
app.include_router(prayer_teams_router)
app.include_router(family_board_router)
app.include_router(news_router)
app.include_router(prayer_subjects_router)
app.include_router(prayer_requests_router)
app.include_router(birthdays_router)
app.include_router(dashboard_router)
app.include_router(upload_router)

# files written by /api/v1/upload; the returned imageUrl points here
app.mount("/uploads", StaticFiles(directory=settings.UPLOAD_DIR, check_dir=False), name="uploads")


@app.exception_handler(DomainError)
def domain_error_handler(request: Request, exc: DomainError):
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "code": exc.code},
    )


@app.on_event("startup")
def on_startup():
    Path(settings.UPLOAD_DIR).mkdir(parents=True, exist_ok=True)
    init_db()


@app.get("/health")
def health():
    return {"ok": True}
