from datetime import date
from typing import Optional

from pydantic import model_validator

from app.schemas.common import CalendarDate, CamelModel, UserBrief


class GenerateTeamsRequest(CamelModel):
    replace_existing: bool = False
    week_start: Optional[CalendarDate] = None
    week_end: Optional[CalendarDate] = None


class ClearTeamsRequest(CamelModel):
    week_start: Optional[CalendarDate] = None
    week_end: Optional[CalendarDate] = None


class TeamWrite(CamelModel):
    member1_id: int
    member2_id: int
    week_start: CalendarDate
    week_end: CalendarDate

    @model_validator(mode="after")
    def _check_range(self):
        if self.week_start > self.week_end:
            raise ValueError("weekStart must not be after weekEnd")
        return self


class TeamOut(CamelModel):
    id: int
    member1_id: int
    member2_id: int
    week_start: date
    week_end: date
    member1: UserBrief
    member2: UserBrief
