from sqlalchemy import Boolean, Column, Date, DateTime, Integer, String, Text

from app.core.roles import DEPT_INTERCESSION
from app.db.base import Base, utc_now


class News(Base):
    __tablename__ = "news"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    content = Column(Text, nullable=False)
    event_date = Column(Date, nullable=True)
    is_event = Column(Boolean, nullable=False, default=False)
    department = Column(String, nullable=False, default=DEPT_INTERCESSION, index=True)
    created_at = Column(DateTime, default=utc_now, nullable=False)
