from datetime import datetime
from typing import Optional

from pydantic import Field

from app.schemas.common import CamelModel


class PostAuthor(CamelModel):
    full_name: str
    role: str


class PostWrite(CamelModel):
    title: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1)
    image_url: Optional[str] = None


class PostAction(CamelModel):
    post_id: int
    action: str


class PostOut(CamelModel):
    id: int
    title: str
    content: str
    image_url: Optional[str] = None
    views: int
    is_deleted: bool
    deleted_at: Optional[datetime] = None
    user_id: int
    created_at: datetime
    updated_at: datetime
    author: PostAuthor = Field(serialization_alias="user")
