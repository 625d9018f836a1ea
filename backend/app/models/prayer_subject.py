from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text

from app.core.roles import DEPT_INTERCESSION
from app.db.base import Base, utc_now


class PrayerSubject(Base):
    __tablename__ = "prayer_subjects"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    department = Column(String, nullable=False, default=DEPT_INTERCESSION, index=True)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, default=utc_now, nullable=False)
