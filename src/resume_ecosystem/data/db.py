"""Database engine and session handling for the resume ecosystem.

All services share one lazily created engine. The first access creates the
users, achievements, resumes and integrations tables. ``DB_URL`` selects the
database; without it a SQLite file ``database.db`` next to ``src/`` is used.
Tests swap ``_engine`` and ``_SessionLocal`` for a temporary database.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from sqlalchemy import create_engine, event
from sqlalchemy.engine import URL, Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker


class Base(DeclarativeBase):
    """Declarative base shared by the user, achievement, resume and integration models."""


_engine: Engine | None = None
_SessionLocal: sessionmaker[Session] | None = None


def get_database_url() -> str:
    """Return ``DB_URL`` if set, else the URL of the local SQLite file."""
    env_url = os.getenv("DB_URL")
    if env_url:
        return env_url

    project_root = Path(__file__).resolve().parents[3]
    return URL.create("sqlite", database=str(project_root / "database.db")).render_as_string(
        hide_password=False
    )


def _enable_sqlite_foreign_keys(engine: Engine) -> None:
    """Enforce foreign keys on SQLite so deleting a user cascades to their rows."""
    if engine.dialect.name != "sqlite":
        return

    @event.listens_for(engine, "connect")
    def _set_pragma(dbapi_connection, connection_record) -> None:  # noqa: ANN001
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def _create_tables(engine: Engine) -> None:
    # Model modules register their tables on Base when imported
    from resume_ecosystem.data.models import (  # noqa: F401
        achievement,
        integration,
        resume,
        user,
    )

    Base.metadata.create_all(bind=engine)


def _get_engine() -> Engine:
    global _engine
    if _engine is None:
        engine = create_engine(get_database_url(), echo=False, future=True)
        _enable_sqlite_foreign_keys(engine)
        _create_tables(engine)
        _engine = engine
    return _engine


def _get_session_factory() -> sessionmaker[Session]:
    global _SessionLocal
    if _SessionLocal is None:
        # Loaded attributes stay readable after commit
        _SessionLocal = sessionmaker(bind=_get_engine(), autoflush=False, expire_on_commit=False)
    return _SessionLocal


def init_db() -> None:
    """Create the engine and tables now instead of on the first request."""
    _get_engine()


@contextmanager
def get_session() -> Iterator[Session]:
    """Yield a session that commits on success and rolls back on any exception.

    Service exceptions such as ``NotFoundError`` raised inside the block
    therefore discard every change made in it.
    """
    session = _get_session_factory()()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
