from sqlalchemy import Boolean, Column, Date, DateTime, ForeignKey, Index, Integer, String
from sqlalchemy.orm import relationship

from app.db.base import Base, utc_now

SLOT_MONDAY = "MONDAY"
SLOT_SATURDAY = "SATURDAY"
ALL_SLOT_TYPES = (SLOT_MONDAY, SLOT_SATURDAY)


class ModeratorSchedule(Base):
    __tablename__ = "moderator_schedules"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    date = Column(Date, nullable=False)
    slot_type = Column(String, nullable=False)  # "MONDAY" | "SATURDAY"

    # local wall-clock "HH:MM", no zone
    start_time = Column(String, nullable=False)
    end_time = Column(String, nullable=False)

    is_auto_generated = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, default=utc_now, nullable=False)

    user = relationship("User", lazy="joined")

    # (date, slot_type) uniqueness is checked by the services; duplicates
    # from older data are removed by the cleanup job.
    __table_args__ = (
        Index("ix_moderator_schedule_date_slot", "date", "slot_type"),
    )
