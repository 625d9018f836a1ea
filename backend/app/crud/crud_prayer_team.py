# app/crud/crud_prayer_team.py
from typing import Iterable, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from app.models.prayer_team import PrayerTeam
from app.services.week_range import WeekRange


def find_teams_in_week(db: Session, week: WeekRange) -> list[PrayerTeam]:
    # a team "belongs" to the week its week_start falls in
    q = db.query(PrayerTeam).filter(
        PrayerTeam.week_start >= week.start,
        PrayerTeam.week_start <= week.end,
    )
    return q.order_by(PrayerTeam.id.asc()).all()


def find_member_teams_overlapping(
    db: Session,
    member_ids: Iterable[int],
    week: WeekRange,
    exclude_id: Optional[int] = None,
) -> list[PrayerTeam]:
    ids = list(member_ids)
    q = db.query(PrayerTeam).filter(
        or_(PrayerTeam.member1_id.in_(ids), PrayerTeam.member2_id.in_(ids)),
        PrayerTeam.week_start <= week.end,
        PrayerTeam.week_end >= week.start,
    )
    if exclude_id is not None:
        q = q.filter(PrayerTeam.id != exclude_id)
    return q.all()


def get_team(db: Session, team_id: int) -> Optional[PrayerTeam]:
    return db.query(PrayerTeam).filter(PrayerTeam.id == team_id).first()


def insert_teams(db: Session, rows: list[dict]) -> list[PrayerTeam]:
    objs = [PrayerTeam(**r) for r in rows]
    db.add_all(objs)
    db.flush()
    return objs


def delete_teams_in_week(db: Session, week: WeekRange) -> int:
    return (
        db.query(PrayerTeam)
        .filter(
            PrayerTeam.week_start >= week.start,
            PrayerTeam.week_start <= week.end,
        )
        .delete()
    )


def update_team(db: Session, team: PrayerTeam, fields: dict) -> PrayerTeam:
    for k, v in fields.items():
        setattr(team, k, v)
    db.flush()
    return team
