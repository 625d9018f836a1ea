# app/services/schedule_cleanup.py
from __future__ import annotations

import logging
from collections import defaultdict
from datetime import date, datetime
from typing import Dict, Iterable, List, Tuple

from sqlalchemy.orm import Session

from app.crud import crud_lock, crud_schedule
from app.models.moderator_schedule import ModeratorSchedule

logger = logging.getLogger(__name__)


def _day(value) -> date:
    # rows may come back as datetimes from some backends
    return value.date() if isinstance(value, datetime) else value


def duplicate_ids(rows: Iterable[ModeratorSchedule]) -> List[int]:
    """
    Input: rows ordered by (date, slot_type, created_at asc).
    Output: ids of every row except the earliest-created one per
    (calendar date, slot_type).
    """
    groups: Dict[Tuple[date, str], List[ModeratorSchedule]] = defaultdict(list)
    for r in rows:
        groups[(_day(r.date), r.slot_type)].append(r)

    out: List[int] = []
    for group in groups.values():
        if len(group) > 1:
            keep = min(group, key=lambda r: (r.created_at, r.id))
            out.extend(r.id for r in group if r.id != keep.id)
    return out


def cleanup_duplicates(db: Session) -> int:
    try:
        crud_lock.acquire(db, crud_lock.LOCK_MODERATOR_SCHEDULE)
        rows = crud_schedule.list_schedules(db)
        # the full deletion set is known before the first DELETE is issued
        to_delete = duplicate_ids(rows)
        deleted = crud_schedule.delete_schedules(db, to_delete)
        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info("Schedule cleanup: removed %d duplicate(s)", deleted)
    return deleted
