from sqlalchemy import CheckConstraint, Column, Date, ForeignKey, Index, Integer
from sqlalchemy.orm import relationship

from app.db.base import Base


class PrayerTeam(Base):
    __tablename__ = "prayer_teams"

    id = Column(Integer, primary_key=True, index=True)

    member1_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    member2_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    week_start = Column(Date, nullable=False)
    week_end = Column(Date, nullable=False)

    member1 = relationship("User", foreign_keys=[member1_id], lazy="joined")
    member2 = relationship("User", foreign_keys=[member2_id], lazy="joined")

    __table_args__ = (
        CheckConstraint("member1_id <> member2_id", name="ck_prayer_team_distinct_members"),
        Index("ix_prayer_team_week", "week_start", "week_end"),
    )
