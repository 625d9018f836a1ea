from datetime import date, datetime
from typing import Optional

from pydantic import Field

from app.schemas.common import CalendarDate, CamelModel


class NewsWrite(CamelModel):
    title: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1)
    event_date: Optional[CalendarDate] = None
    is_event: bool = False
    department: Optional[str] = None


class NewsOut(CamelModel):
    id: int
    title: str
    content: str
    event_date: Optional[date] = None
    is_event: bool
    department: str
    created_at: datetime
