from datetime import date


def format_date(d: date) -> str:
    # "Oct 19, 2026"
    return d.strftime("%b %d, %Y")


def format_month_day(d: date) -> str:
    # "Oct 19"
    return f"{d.strftime('%b')} {d.day}"


def format_time(hhmm: str) -> str:
    # "18:00" -> "6:00 PM"
    hours, minutes = hhmm.split(":")[:2]
    hour = int(hours)
    suffix = "PM" if hour >= 12 else "AM"
    return f"{hour % 12 or 12}:{minutes} {suffix}"


def format_time_range(start: str, end: str) -> str:
    return f"{format_time(start)} - {format_time(end)}"
