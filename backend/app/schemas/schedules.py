from datetime import date, datetime
from typing import Literal, Optional

from pydantic import Field

from app.schemas.common import CalendarDate, CamelModel, UserBrief

HHMM = r"^([01]\d|2[0-3]):[0-5]\d$"


class GenerateScheduleRequest(CamelModel):
    weeks_to_generate: Optional[int] = Field(default=None, ge=1, le=52)


class ScheduleWrite(CamelModel):
    user_id: int
    date: CalendarDate
    day_type: Literal["MONDAY", "SATURDAY"]
    start_time: str = Field(pattern=HHMM)
    end_time: str = Field(pattern=HHMM)


class ScheduleOut(CamelModel):
    id: int
    user_id: int
    date: date
    day_type: str = Field(validation_alias="slot_type")
    start_time: str
    end_time: str
    is_auto_generated: bool
    created_at: datetime
    user: UserBrief
