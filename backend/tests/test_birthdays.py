from datetime import date
from types import SimpleNamespace

from app.services.birthdays import next_birthday, upcoming_birthdays
from app.services.formatting import format_date, format_month_day, format_time, format_time_range


def _u(name, bday):
    return SimpleNamespace(full_name=name, birthday=bday)


def test_next_birthday_today_counts():
    assert next_birthday(date(1990, 10, 17), date(2026, 10, 17)) == date(2026, 10, 17)


def test_next_birthday_already_passed_rolls_over():
    assert next_birthday(date(1990, 3, 1), date(2026, 10, 17)) == date(2027, 3, 1)


def test_leap_day_birthday_in_common_year():
    assert next_birthday(date(2000, 2, 29), date(2026, 10, 17)) == date(2027, 2, 28)
    assert next_birthday(date(2000, 2, 29), date(2027, 10, 17)) == date(2028, 2, 29)


def test_upcoming_sorted_and_skips_missing():
    today = date(2026, 10, 17)
    users = [_u("Ann", date(1980, 1, 5)), _u("Bob", None), _u("Cy", date(1975, 10, 20))]
    result = upcoming_birthdays(users, today)
    assert [b.full_name for b in result] == ["Cy", "Ann"]
    assert result[0].next_occurrence == date(2026, 10, 20)


def test_formatting():
    assert format_date(date(2026, 10, 5)) == "Oct 05, 2026"
    assert format_month_day(date(2026, 10, 5)) == "Oct 5"
    assert format_time("18:00") == "6:00 PM"
    assert format_time("00:15") == "12:15 AM"
    assert format_time("12:30") == "12:30 PM"
    assert format_time_range("16:30", "18:00") == "4:30 PM - 6:00 PM"
