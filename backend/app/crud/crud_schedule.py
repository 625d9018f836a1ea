# app/crud/crud_schedule.py
from datetime import date
from typing import Iterable, Optional

from sqlalchemy.orm import Session

from app.models.moderator_schedule import ModeratorSchedule


def find_schedule(
    db: Session,
    on_date: date,
    slot_type: str,
    exclude_id: Optional[int] = None,
) -> Optional[ModeratorSchedule]:
    q = db.query(ModeratorSchedule).filter(
        ModeratorSchedule.date == on_date,
        ModeratorSchedule.slot_type == slot_type,
    )
    if exclude_id is not None:
        q = q.filter(ModeratorSchedule.id != exclude_id)
    return q.order_by(ModeratorSchedule.created_at.asc(), ModeratorSchedule.id.asc()).first()


def get_schedule(db: Session, schedule_id: int) -> Optional[ModeratorSchedule]:
    return db.query(ModeratorSchedule).filter(ModeratorSchedule.id == schedule_id).first()


def insert_schedules(db: Session, rows: list[dict]) -> list[ModeratorSchedule]:
    objs = [ModeratorSchedule(**r) for r in rows]
    db.add_all(objs)
    db.flush()  # assign ids without committing
    return objs


def list_schedules(db: Session, from_date: Optional[date] = None) -> list[ModeratorSchedule]:
    q = db.query(ModeratorSchedule)
    if from_date is not None:
        q = q.filter(ModeratorSchedule.date >= from_date)
    return (
        q.order_by(
            ModeratorSchedule.date.asc(),
            ModeratorSchedule.slot_type.asc(),
            ModeratorSchedule.created_at.asc(),
            ModeratorSchedule.id.asc(),
        )
        .all()
    )


def delete_schedules(db: Session, ids: Iterable[int]) -> int:
    ids = list(ids)
    if not ids:
        return 0
    return (
        db.query(ModeratorSchedule)
        .filter(ModeratorSchedule.id.in_(ids))
        .delete()
    )


def update_schedule(db: Session, schedule: ModeratorSchedule, fields: dict) -> ModeratorSchedule:
    for k, v in fields.items():
        setattr(schedule, k, v)
    db.flush()
    return schedule
