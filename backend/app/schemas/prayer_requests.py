from pydantic import Field

from app.schemas.common import CamelModel


class PrayerRequestCreate(CamelModel):
    title: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1)
    is_anonymous: bool = False
