"""SQLAlchemy ORM models for ReadyGo."""

from datetime import datetime
from sqlalchemy import (
    Column, Integer, String, Boolean, DateTime,
)
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


class RoutineRecord(Base):
    """A saved routine.  ``position`` keeps the user's list order."""

    __tablename__ = "routines"

    id = Column(String(64), primary_key=True)
    name = Column(String(255), nullable=False, default="Default")
    work_seconds = Column(Integer, nullable=False, default=30)
    rest_seconds = Column(Integer, nullable=False, default=20)
    rounds = Column(Integer, nullable=False, default=10)
    cues_enabled = Column(Boolean, nullable=False, default=True)
    position = Column(Integer, nullable=False, default=0)

    def __repr__(self) -> str:
        return (
            f"<RoutineRecord id={self.id} name={self.name!r} "
            f"work={self.work_seconds} rest={self.rest_seconds} "
            f"rounds={self.rounds}>"
        )


class WorkoutLog(Base):
    """One completed workout."""

    __tablename__ = "workout_logs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    completed_at = Column(DateTime, nullable=False, default=datetime.now)
    total_display = Column(String(16), nullable=False)
    rounds = Column(Integer, nullable=False)

    def __repr__(self) -> str:
        return (
            f"<WorkoutLog id={self.id} name={self.name!r} "
            f"total={self.total_display} rounds={self.rounds}>"
        )
