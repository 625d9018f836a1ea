from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.routes.news import list_news
from app.api.routes.prayer_subjects import list_subjects
from app.core.security import get_current_user
from app.crud import crud_user
from app.db.session import get_db
from app.models.moderator_schedule import SLOT_MONDAY, SLOT_SATURDAY
from app.models.user import User
from app.schemas.common import dump
from app.schemas.news import NewsOut
from app.schemas.prayer_subjects import SubjectOut
from app.services.birthdays import upcoming_birthdays
from app.services.formatting import format_date, format_month_day, format_time_range
from app.services.moderator_schedule import next_moderator
from app.services.week_range import today

router = APIRouter(prefix="/api/v1", tags=["dashboard"])


def _moderator_card(row):
    if row is None:
        return None
    return {
        "name": row.user.full_name,
        "date": format_date(row.date),
        "time": format_time_range(row.start_time, row.end_time),
    }


@router.get("/dashboard")
def dashboard(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    now = today()
    dept = user.department

    return {
        "mondayModerator": _moderator_card(next_moderator(db, SLOT_MONDAY, now, dept)),
        "saturdayModerator": _moderator_card(next_moderator(db, SLOT_SATURDAY, now, dept)),
        "upcomingBirthdays": [
            {"name": b.full_name, "date": format_month_day(b.next_occurrence)}
            for b in upcoming_birthdays(crud_user.list_users(db, department=dept), now)
        ],
        "prayerSubjects": [dump(SubjectOut, s) for s in list_subjects(db, active_only=True, department=dept)],
        "news": [dump(NewsOut, n) for n in list_news(db, dept)],
    }
