from datetime import datetime
from typing import Optional

from pydantic import Field

from app.schemas.common import CamelModel


class SubjectCreate(CamelModel):
    title: str = Field(min_length=1, max_length=200)
    description: Optional[str] = None
    department: Optional[str] = None


class SubjectUpdate(CamelModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    description: Optional[str] = None
    is_active: Optional[bool] = None


class SubjectOut(CamelModel):
    id: int
    title: str
    description: Optional[str] = None
    department: str
    is_active: bool
    created_at: datetime
