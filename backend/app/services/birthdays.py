from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, Optional


@dataclass
class UpcomingBirthday:
    full_name: str
    birthday: date
    next_occurrence: date


def _occurrence(birthday: date, year: int) -> date:
    try:
        return birthday.replace(year=year)
    except ValueError:
        # Feb 29 outside leap years
        return date(year, 2, 28)


def next_birthday(birthday: date, today: date) -> date:
    this_year = _occurrence(birthday, today.year)
    return this_year if this_year >= today else _occurrence(birthday, today.year + 1)


def upcoming_birthdays(users: Iterable, today: date) -> List[UpcomingBirthday]:
    """Users with a birthday, next occurrence within a year from ``today``, soonest first."""
    horizon = _occurrence(today, today.year + 1)
    out: List[UpcomingBirthday] = []
    for u in users:
        bday: Optional[date] = u.birthday
        if bday is None:
            continue
        nxt = next_birthday(bday, today)
        if nxt <= horizon:
            out.append(UpcomingBirthday(full_name=u.full_name, birthday=bday, next_occurrence=nxt))
    out.sort(key=lambda b: (b.next_occurrence, b.full_name))
    return out
