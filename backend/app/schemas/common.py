from datetime import date
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_camel

from app.services.week_range import parse_calendar_date


def _calendar_date(value):
    if isinstance(value, str):
        return parse_calendar_date(value)
    return value


# "2026-10-19" or a full ISO timestamp; only the written day is kept
CalendarDate = Annotated[date, BeforeValidator(_calendar_date)]


class CamelModel(BaseModel):
    # JSON uses camelCase (weekStart, replaceExisting...), Python snake_case
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class UserBrief(CamelModel):
    id: int
    full_name: str
    email: str


def dump(schema: type[CamelModel], obj) -> dict:
    """ORM row -> camelCase dict, ready for a JSON envelope."""
    return schema.model_validate(obj).model_dump(mode="json", by_alias=True)
