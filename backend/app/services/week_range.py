# app/services/week_range.py
"""
Calendar-date helpers shared by team generation, team listing and the
moderator rotation.

Everything here works on ``datetime.date`` values (year, month, day). No
zoned instants are involved, so a week boundary never shifts by a day
depending on where the server runs. The only place a timezone appears is
``today()``, which decides which calendar day it currently is for the
congregation.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional
from zoneinfo import ZoneInfo

from dateutil import parser as dtparser

from app.core.config import settings

MONDAY = 0
SATURDAY = 5


@dataclass(frozen=True)
class WeekRange:
    start: date
    end: date

    def contains(self, d: date) -> bool:
        return self.start <= d <= self.end

    def overlaps(self, start: date, end: date) -> bool:
        return self.start <= end and start <= self.end


def today(tz: Optional[str] = None) -> date:
    return datetime.now(ZoneInfo(tz or settings.LOCAL_TIMEZONE)).date()


def week_range(d: date) -> WeekRange:
    """Monday..Sunday week containing ``d``."""
    start = d - timedelta(days=d.weekday())
    return WeekRange(start=start, end=start + timedelta(days=6))


def custom_range(start: date, end: date) -> WeekRange:
    if start > end:
        raise ValueError("weekStart must not be after weekEnd")
    return WeekRange(start=start, end=end)


def next_weekday(d: date, weekday: int) -> date:
    # strictly after d: a Monday asked for the next Monday gets d + 7
    days = (weekday - d.weekday()) % 7 or 7
    return d + timedelta(days=days)


def next_monday(d: date) -> date:
    return next_weekday(d, MONDAY)


def next_saturday(d: date) -> date:
    return next_weekday(d, SATURDAY)


def parse_calendar_date(value: str) -> date:
    """
    Accepts "YYYY-MM-DD" or a full ISO timestamp and keeps only the date part
    as written; the time and offset (if any) are ignored, never converted.
    """
    value = (value or "").strip()
    if not value:
        raise ValueError("empty date")
    return dtparser.isoparse(value).date()
