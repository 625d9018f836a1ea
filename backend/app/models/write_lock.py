from sqlalchemy import Column, DateTime, String

from app.db.base import Base


class WriteLock(Base):
    """
    One row per named write section. Updating the row inside a transaction
    holds it until commit or rollback, so check-then-write sequences on the
    same name run one after another (row lock on server databases, the
    database write lock on SQLite).
    """

    __tablename__ = "write_locks"

    name = Column(String, primary_key=True)
    acquired_at = Column(DateTime, nullable=True)
