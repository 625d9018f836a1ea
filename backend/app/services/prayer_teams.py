# app/services/prayer_teams.py
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from sqlalchemy.orm import Session

from app.core.errors import InsufficientMembers, MemberNotFound, NotFound, TeamConflict, TeamsAlreadyExist
from app.crud import crud_lock, crud_prayer_team, crud_user
from app.models.prayer_team import PrayerTeam
from app.services.week_range import WeekRange

logger = logging.getLogger(__name__)

ACTION_CREATED = "created"
ACTION_REPLACED = "replaced"


@dataclass
class GenerationResult:
    teams: List[PrayerTeam]
    action: str
    week: WeekRange

    @property
    def count(self) -> int:
        return len(self.teams)


def pair_members(member_ids: Sequence[int], rng: Optional[random.Random] = None) -> List[Tuple[int, int]]:
    """
    Shuffle (Fisher-Yates via random.shuffle) and pair consecutive members.

    With an odd count the leftover member is paired with the first member of
    the shuffled list, so that one member prays in two teams that week.
    """
    if len(member_ids) < 2:
        raise InsufficientMembers()

    shuffled = list(member_ids)
    (rng or random).shuffle(shuffled)

    pairs = [(shuffled[i], shuffled[i + 1]) for i in range(0, len(shuffled) - 1, 2)]
    if len(shuffled) % 2:
        pairs.append((shuffled[-1], shuffled[0]))
    return pairs


def generate_teams(
    db: Session,
    member_ids: Sequence[int],
    week: WeekRange,
    replace_existing: bool = False,
    rng: Optional[random.Random] = None,
) -> GenerationResult:
    # validate before touching the store
    pairs = pair_members(member_ids, rng)

    try:
        crud_lock.acquire(db, crud_lock.LOCK_PRAYER_TEAMS)
        existing = crud_prayer_team.find_teams_in_week(db, week)
        action = ACTION_CREATED
        if existing:
            if not replace_existing:
                raise TeamsAlreadyExist()
            crud_prayer_team.delete_teams_in_week(db, week)
            action = ACTION_REPLACED

        teams = crud_prayer_team.insert_teams(
            db,
            [
                {"member1_id": m1, "member2_id": m2, "week_start": week.start, "week_end": week.end}
                for m1, m2 in pairs
            ],
        )
        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info(
        "Prayer teams %s for %s..%s: %d team(s) from %d member(s)",
        action, week.start, week.end, len(teams), len(member_ids),
    )
    return GenerationResult(teams=teams, action=action, week=week)


def _resolve_members(db: Session, member1_id: int, member2_id: int) -> None:
    found = {u.id for u in crud_user.get_users(db, [member1_id, member2_id])}
    if member1_id not in found or member2_id not in found:
        raise MemberNotFound()


def check_conflict(
    db: Session,
    member1_id: int,
    member2_id: int,
    week: WeekRange,
    exclude_team_id: Optional[int] = None,
) -> bool:
    """
    True when the pair cannot be booked for ``week``: same person twice, or
    either member already sits in a team whose range intersects the week
    (the team being edited is ignored). Unknown ids raise MemberNotFound.
    """
    if member1_id == member2_id:
        return True

    _resolve_members(db, member1_id, member2_id)

    clashes = crud_prayer_team.find_member_teams_overlapping(
        db, [member1_id, member2_id], week, exclude_id=exclude_team_id
    )
    return len(clashes) > 0


def create_team(db: Session, member1_id: int, member2_id: int, week: WeekRange) -> PrayerTeam:
    if member1_id == member2_id:
        raise TeamConflict("Team members must be different people")

    try:
        crud_lock.acquire(db, crud_lock.LOCK_PRAYER_TEAMS)
        if check_conflict(db, member1_id, member2_id, week):
            raise TeamConflict()

        team = crud_prayer_team.insert_teams(
            db,
            [{"member1_id": member1_id, "member2_id": member2_id, "week_start": week.start, "week_end": week.end}],
        )[0]
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(team)
    return team


def update_team(db: Session, team_id: int, member1_id: int, member2_id: int, week: WeekRange) -> PrayerTeam:
    team = crud_prayer_team.get_team(db, team_id)
    if not team:
        raise NotFound("Prayer team not found")
    if member1_id == member2_id:
        raise TeamConflict("Team members must be different people")

    try:
        crud_lock.acquire(db, crud_lock.LOCK_PRAYER_TEAMS)
        if check_conflict(db, member1_id, member2_id, week, exclude_team_id=team_id):
            raise TeamConflict()

        crud_prayer_team.update_team(
            db,
            team,
            {"member1_id": member1_id, "member2_id": member2_id, "week_start": week.start, "week_end": week.end},
        )
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(team)
    return team


def delete_team(db: Session, team_id: int) -> None:
    team = crud_prayer_team.get_team(db, team_id)
    if not team:
        raise NotFound("Prayer team not found")
    db.delete(team)
    db.commit()


def clear_week(db: Session, week: WeekRange) -> int:
    try:
        crud_lock.acquire(db, crud_lock.LOCK_PRAYER_TEAMS)
        deleted = crud_prayer_team.delete_teams_in_week(db, week)
        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info("Cleared %d prayer team(s) for %s..%s", deleted, week.start, week.end)
    return deleted
