# app/crud/crud_lock.py
from sqlalchemy.orm import Session

from app.db.base import utc_now
from app.models.write_lock import WriteLock

LOCK_PRAYER_TEAMS = "prayer_teams"
LOCK_MODERATOR_SCHEDULE = "moderator_schedule"
ALL_LOCKS = (LOCK_PRAYER_TEAMS, LOCK_MODERATOR_SCHEDULE)


def acquire(db: Session, name: str) -> None:
    """
    Take the named lock for the rest of the current transaction.

    Must run before the reads it protects: on SQLite the UPDATE is what opens
    the transaction and takes the write lock.
    """
    updated = (
        db.query(WriteLock)
        .filter(WriteLock.name == name)
        .update({WriteLock.acquired_at: utc_now()}, synchronize_session=False)
    )
    if not updated:
        db.add(WriteLock(name=name, acquired_at=utc_now()))
        db.flush()


def ensure_locks(db: Session) -> int:
    existing = {name for (name,) in db.query(WriteLock.name).all()}
    missing = [name for name in ALL_LOCKS if name not in existing]
    for name in missing:
        db.add(WriteLock(name=name))
    db.commit()
    return len(missing)
