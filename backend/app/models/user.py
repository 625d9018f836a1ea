from sqlalchemy import Column, Date, DateTime, Integer, String

from app.core.roles import DEPT_INTERCESSION, ROLE_MEMBER
from app.db.base import Base, utc_now


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    full_name = Column(String, nullable=False)
    # always stored lowercased and trimmed
    email = Column(String, unique=True, index=True, nullable=False)
    password_hash = Column(String, nullable=False)

    role = Column(String, nullable=False, default=ROLE_MEMBER)
    department = Column(String, nullable=False, default=DEPT_INTERCESSION, index=True)

    birthday = Column(Date, nullable=True)
    created_at = Column(DateTime, default=utc_now, nullable=False)
