# app/services/moderator_schedule.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from sqlalchemy.orm import Session

from app.core.errors import NoUsersAvailable, NotFound, ScheduleConflict, UserNotFound
from app.crud import crud_lock, crud_schedule, crud_user
from app.models.moderator_schedule import SLOT_MONDAY, SLOT_SATURDAY, ModeratorSchedule
from app.models.user import User
from app.services.week_range import next_monday, next_saturday

logger = logging.getLogger(__name__)

# slot_type -> (start_time, end_time), local wall clock
DEFAULT_SLOT_TIMES: Dict[str, Tuple[str, str]] = {
    SLOT_MONDAY: ("18:00", "19:00"),
    SLOT_SATURDAY: ("16:30", "18:00"),
}


@dataclass(frozen=True)
class PlannedSlot:
    user_id: int
    date: date
    slot_type: str
    start_time: str
    end_time: str

    def as_row(self) -> dict:
        return {
            "user_id": self.user_id,
            "date": self.date,
            "slot_type": self.slot_type,
            "start_time": self.start_time,
            "end_time": self.end_time,
            "is_auto_generated": True,
        }


def slot_dates(start_from: date, weeks: int) -> List[Tuple[date, str]]:
    """(date, slot_type) pairs in assignment order: Monday then Saturday, week by week."""
    monday = next_monday(start_from)
    saturday = next_saturday(start_from)
    out: List[Tuple[date, str]] = []
    for week in range(weeks):
        shift = timedelta(days=7 * week)
        out.append((monday + shift, SLOT_MONDAY))
        out.append((saturday + shift, SLOT_SATURDAY))
    return out


def plan_rotation(
    user_ids: Sequence[int],
    weeks: int,
    start_from: date,
    is_taken: Callable[[date, str], bool],
) -> List[PlannedSlot]:
    """
    Round-robin over ``user_ids``. The cursor only moves when a slot is
    actually planned; slots already taken are skipped without consuming a
    user.
    """
    if not user_ids:
        raise NoUsersAvailable()

    planned: List[PlannedSlot] = []
    cursor = 0
    for slot_date, slot_type in slot_dates(start_from, weeks):
        if is_taken(slot_date, slot_type):
            continue
        start_time, end_time = DEFAULT_SLOT_TIMES[slot_type]
        planned.append(
            PlannedSlot(
                user_id=user_ids[cursor % len(user_ids)],
                date=slot_date,
                slot_type=slot_type,
                start_time=start_time,
                end_time=end_time,
            )
        )
        cursor += 1
    return planned


def generate_schedule(
    db: Session,
    user_ids: Sequence[int],
    weeks_to_generate: int,
    start_from: date,
) -> List[ModeratorSchedule]:
    try:
        crud_lock.acquire(db, crud_lock.LOCK_MODERATOR_SCHEDULE)
        planned = plan_rotation(
            user_ids,
            weeks_to_generate,
            start_from,
            lambda d, slot: crud_schedule.find_schedule(db, d, slot) is not None,
        )
        created = crud_schedule.insert_schedules(db, [p.as_row() for p in planned]) if planned else []
        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info(
        "Moderator rotation: %d new slot(s) over %d week(s) for %d user(s)",
        len(created), weeks_to_generate, len(user_ids),
    )
    return created


def _ensure_user(db: Session, user_id: int) -> None:
    if crud_user.get_user(db, user_id) is None:
        raise UserNotFound()


def create_schedule(
    db: Session,
    user_id: int,
    on_date: date,
    slot_type: str,
    start_time: str,
    end_time: str,
) -> ModeratorSchedule:
    _ensure_user(db, user_id)

    try:
        crud_lock.acquire(db, crud_lock.LOCK_MODERATOR_SCHEDULE)
        if crud_schedule.find_schedule(db, on_date, slot_type) is not None:
            raise ScheduleConflict()

        row = crud_schedule.insert_schedules(
            db,
            [{
                "user_id": user_id,
                "date": on_date,
                "slot_type": slot_type,
                "start_time": start_time,
                "end_time": end_time,
                "is_auto_generated": False,
            }],
        )[0]
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(row)
    return row


def update_schedule(
    db: Session,
    schedule_id: int,
    user_id: int,
    on_date: date,
    slot_type: str,
    start_time: str,
    end_time: str,
) -> ModeratorSchedule:
    _ensure_user(db, user_id)

    schedule = crud_schedule.get_schedule(db, schedule_id)
    if schedule is None:
        raise NotFound("Schedule not found")

    try:
        crud_lock.acquire(db, crud_lock.LOCK_MODERATOR_SCHEDULE)
        if crud_schedule.find_schedule(db, on_date, slot_type, exclude_id=schedule_id) is not None:
            raise ScheduleConflict()

        crud_schedule.update_schedule(
            db,
            schedule,
            {
                "user_id": user_id,
                "date": on_date,
                "slot_type": slot_type,
                "start_time": start_time,
                "end_time": end_time,
            },
        )
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(schedule)
    return schedule


def delete_schedule(db: Session, schedule_id: int) -> None:
    schedule = crud_schedule.get_schedule(db, schedule_id)
    if schedule is None:
        raise NotFound("Schedule not found")
    db.delete(schedule)
    db.commit()


def next_moderator(
    db: Session,
    slot_type: str,
    from_date: date,
    department: Optional[str] = None,
) -> Optional[ModeratorSchedule]:
    """Earliest schedule of ``slot_type`` on or after ``from_date``."""
    q = (
        db.query(ModeratorSchedule)
        .join(User, ModeratorSchedule.user_id == User.id)
        .filter(ModeratorSchedule.slot_type == slot_type, ModeratorSchedule.date >= from_date)
    )
    if department is not None:
        q = q.filter(User.department == department)
    return q.order_by(ModeratorSchedule.date.asc(), ModeratorSchedule.created_at.asc()).first()
