from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.security import require_admin
from app.crud import crud_schedule, crud_user
from app.db.session import get_db
from app.schemas.common import dump
from app.schemas.schedules import GenerateScheduleRequest, ScheduleOut, ScheduleWrite
from app.services import moderator_schedule as schedule_service
from app.services.schedule_cleanup import cleanup_duplicates
from app.services.week_range import today

router = APIRouter(prefix="/api/v1/moderator-schedule", tags=["moderator-schedule"])


@router.get("")
def upcoming_schedules(db: Session = Depends(get_db)):
    rows = crud_schedule.list_schedules(db, from_date=today())
    return {"schedules": [dump(ScheduleOut, r) for r in rows]}


@router.post("")
def generate_rotation(
    payload: Optional[GenerateScheduleRequest] = None,
    admin=Depends(require_admin),
    db: Session = Depends(get_db),
):
    weeks = settings.DEFAULT_WEEKS_TO_GENERATE
    if payload is not None and payload.weeks_to_generate is not None:
        weeks = payload.weeks_to_generate

    user_ids = [u.id for u in crud_user.list_users(db)]
    created = schedule_service.generate_schedule(db, user_ids, weeks, today())

    if not created:
        return {"count": 0, "message": "All schedules already exist for the specified period"}

    return {
        "count": len(created),
        "message": f"Created {len(created)} moderator schedules",
    }


@router.post("/create")
def create_schedule(payload: ScheduleWrite, admin=Depends(require_admin), db: Session = Depends(get_db)):
    row = schedule_service.create_schedule(
        db,
        user_id=payload.user_id,
        on_date=payload.date,
        slot_type=payload.day_type,
        start_time=payload.start_time,
        end_time=payload.end_time,
    )
    return {"message": "Schedule created successfully", "schedule": dump(ScheduleOut, row)}


@router.post("/cleanup")
def cleanup(admin=Depends(require_admin), db: Session = Depends(get_db)):
    deleted = cleanup_duplicates(db)
    if deleted == 0:
        return {"message": "No duplicate schedules found", "deletedCount": 0}
    return {"message": f"Cleaned up {deleted} duplicate schedules", "deletedCount": deleted}


@router.put("/{schedule_id}")
def update_schedule(
    schedule_id: int,
    payload: ScheduleWrite,
    admin=Depends(require_admin),
    db: Session = Depends(get_db),
):
    row = schedule_service.update_schedule(
        db,
        schedule_id,
        user_id=payload.user_id,
        on_date=payload.date,
        slot_type=payload.day_type,
        start_time=payload.start_time,
        end_time=payload.end_time,
    )
    return {"message": "Schedule updated successfully", "schedule": dump(ScheduleOut, row)}


@router.delete("/{schedule_id}")
def delete_schedule(schedule_id: int, admin=Depends(require_admin), db: Session = Depends(get_db)):
    schedule_service.delete_schedule(db, schedule_id)
    return {"message": "Schedule deleted successfully"}
