"""Database connection and session management."""

from pathlib import Path
from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session as OrmSession

from .models import Base, RoutineRecord
from ..timer.routine import default_routine

# ── paths ────────────────────────────────────────────────────────────────────

APP_SUPPORT_DIR = Path.home() / "Library" / "Application Support" / "ReadyGo"
DB_PATH = APP_SUPPORT_DIR / "readygo.db"

# ── engine & session factory (created lazily) ─────────────────────────────

_engine = None
_SessionFactory = None


def _get_engine():
    global _engine
    if _engine is None:
        APP_SUPPORT_DIR.mkdir(parents=True, exist_ok=True)
        _engine = create_engine(
            f"sqlite:///{DB_PATH}",
            connect_args={"check_same_thread": False},
            echo=False,
        )
    return _engine


def _get_session_factory():
    global _SessionFactory
    if _SessionFactory is None:
        _SessionFactory = sessionmaker(bind=_get_engine(), expire_on_commit=False)
    return _SessionFactory


# ── public API ────────────────────────────────────────────────────────────


def configure_engine(url: str) -> None:
    """Override the database connection URL.  Used by tests to point at
    an in-memory SQLite database instead of the real one on disk."""
    global _engine, _SessionFactory
    _SessionFactory = None
    _engine = create_engine(
        url,
        connect_args={"check_same_thread": False},
        echo=False,
    )


def init_db() -> None:
    """Create all tables and seed the default routine on first run."""
    engine = _get_engine()
    Base.metadata.create_all(engine)

    factory = _get_session_factory()
    with factory() as session:
        if session.query(RoutineRecord).count() == 0:
            seed = default_routine()
            session.add(RoutineRecord(
                id=seed.id,
                name=seed.name,
                work_seconds=seed.work_seconds,
                rest_seconds=seed.rest_seconds,
                rounds=seed.rounds,
                cues_enabled=seed.cues_enabled,
                position=0,
            ))
            session.commit()


@contextmanager
def get_session():
    """Yield a SQLAlchemy session; commit on success, rollback on error."""
    factory = _get_session_factory()
    session: OrmSession = factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
