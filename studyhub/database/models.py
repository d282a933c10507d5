"""SQLAlchemy ORM models for StudyHub."""

from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


class PhaseRecord(Base):
    """One finished timer phase (work or break)."""

    __tablename__ = "sessions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    phase = Column(String(10), nullable=False, default="work")  # work | break
    duration_minutes = Column(Integer, nullable=False, default=0)
    completed_at = Column(DateTime, nullable=False, default=datetime.now)

    def __repr__(self) -> str:
        return (
            f"<PhaseRecord id={self.id} phase={self.phase} "
            f"minutes={self.duration_minutes}>"
        )
