from typing import Optional

from pydantic import EmailStr, Field

from app.core.roles import DEPT_INTERCESSION, ROLE_MEMBER
from app.schemas.common import CalendarDate, CamelModel


class RegisterRequest(CamelModel):
    full_name: str = Field(min_length=2, max_length=120)
    email: EmailStr
    password: str = Field(min_length=6, max_length=200)
    birthday: Optional[CalendarDate] = None
    role: str = ROLE_MEMBER
    department: str = DEPT_INTERCESSION


class LoginRequest(CamelModel):
    email: EmailStr
    password: str
