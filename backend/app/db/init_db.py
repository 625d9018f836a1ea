import logging

from sqlalchemy.orm import Session

from app.crud.crud_lock import ensure_locks
from app.db.session import engine
from app.db.base import Base

# Registers every model on Base.metadata before creating tables
import app.models  # noqa: F401

logger = logging.getLogger(__name__)


def init_db(bind=None):
    bind = bind or engine
    Base.metadata.create_all(bind=bind)
    with Session(bind=bind) as db:
        created = ensure_locks(db)
    logger.info("Database tables ready (%s), %d lock row(s) added", bind.url, created)
