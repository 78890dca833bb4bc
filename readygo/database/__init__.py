"""Database package."""

from .db import get_session, init_db
from .models import RoutineRecord, WorkoutLog
from .stores import SqlLogStore, SqlRoutineStore

__all__ = [
    "get_session", "init_db", "RoutineRecord", "WorkoutLog",
    "SqlLogStore", "SqlRoutineStore",
]
