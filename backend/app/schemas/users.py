from datetime import date, datetime
from typing import Optional

from app.schemas.common import CamelModel


class UserOut(CamelModel):
    id: int
    full_name: str
    email: str
    role: str
    department: str
    birthday: Optional[date] = None
    created_at: datetime


class RoleUpdate(CamelModel):
    role: str


class DepartmentUpdate(CamelModel):
    department: str
