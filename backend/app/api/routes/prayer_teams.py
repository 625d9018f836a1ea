from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.core.security import require_admin
from app.core.errors import NotFound
from app.crud import crud_prayer_team, crud_user
from app.db.session import get_db
from app.schemas.common import dump
from app.schemas.prayer_teams import ClearTeamsRequest, GenerateTeamsRequest, TeamOut, TeamWrite
from app.services import prayer_teams as teams_service
from app.services.week_range import WeekRange, custom_range, today, week_range

router = APIRouter(prefix="/api/v1/prayer-teams", tags=["prayer-teams"])


def _target_week(week_start: Optional[date], week_end: Optional[date]) -> WeekRange:
    if week_start is None and week_end is None:
        return week_range(today())
    if week_start is None or week_end is None:
        raise HTTPException(status_code=400, detail="weekStart and weekEnd must be given together")
    try:
        return custom_range(week_start, week_end)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("")
def current_week_teams(db: Session = Depends(get_db)):
    week = week_range(today())
    teams = crud_prayer_team.find_teams_in_week(db, week)
    return {
        "teams": [dump(TeamOut, t) for t in teams],
        "weekStart": week.start.isoformat(),
        "weekEnd": week.end.isoformat(),
    }


@router.post("")
def generate_teams(
    payload: Optional[GenerateTeamsRequest] = None,
    admin=Depends(require_admin),
    db: Session = Depends(get_db),
):
    payload = payload or GenerateTeamsRequest()
    week = _target_week(payload.week_start, payload.week_end)

    member_ids = [u.id for u in crud_user.list_users(db)]
    result = teams_service.generate_teams(db, member_ids, week, replace_existing=payload.replace_existing)

    verb = "Replaced with" if result.action == teams_service.ACTION_REPLACED else "Created"
    return {
        "message": f"{verb} {result.count} prayer teams",
        "count": result.count,
        "action": result.action,
        "weekStart": week.start.isoformat(),
        "weekEnd": week.end.isoformat(),
    }


@router.post("/create", status_code=201)
def create_team(payload: TeamWrite, admin=Depends(require_admin), db: Session = Depends(get_db)):
    team = teams_service.create_team(
        db,
        payload.member1_id,
        payload.member2_id,
        WeekRange(start=payload.week_start, end=payload.week_end),
    )
    return {"team": dump(TeamOut, team)}


@router.post("/clear")
def clear_teams(
    payload: Optional[ClearTeamsRequest] = None,
    admin=Depends(require_admin),
    db: Session = Depends(get_db),
):
    payload = payload or ClearTeamsRequest()
    week = _target_week(payload.week_start, payload.week_end)
    deleted = teams_service.clear_week(db, week)
    return {
        "message": f"Cleared {deleted} prayer teams",
        "count": deleted,
        "weekStart": week.start.isoformat(),
        "weekEnd": week.end.isoformat(),
    }


@router.get("/{team_id}")
def get_team(team_id: int, db: Session = Depends(get_db)):
    team = crud_prayer_team.get_team(db, team_id)
    if not team:
        raise NotFound("Prayer team not found")
    return {"team": dump(TeamOut, team)}


@router.put("/{team_id}")
def update_team(team_id: int, payload: TeamWrite, admin=Depends(require_admin), db: Session = Depends(get_db)):
    team = teams_service.update_team(
        db,
        team_id,
        payload.member1_id,
        payload.member2_id,
        WeekRange(start=payload.week_start, end=payload.week_end),
    )
    return {"team": dump(TeamOut, team)}


@router.delete("/{team_id}")
def delete_team(team_id: int, admin=Depends(require_admin), db: Session = Depends(get_db)):
    teams_service.delete_team(db, team_id)
    return {"message": "Prayer team deleted successfully"}
