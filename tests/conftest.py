from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

import resume_ecosystem.data.db as db_module
from resume_ecosystem.data.db import init_db
from resume_ecosystem.data.models import Base, User


@pytest.fixture
def api_db(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Use a temporary SQLite DB for API tests."""
    db_path = tmp_path / "api.db"
    monkeypatch.setenv("DB_URL", f"sqlite:///{db_path.as_posix()}")
    db_module._engine = None
    db_module._SessionLocal = None
    init_db()
    yield
    # Dispose engine to release connections
    if db_module._engine is not None:
        db_module._engine.dispose()
        db_module._engine = None
        db_module._SessionLocal = None


@pytest.fixture
def tmp_db(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """Create a temporary database for service tests."""
    engine = create_engine(f"sqlite:///{tmp_path / 'test.db'}")
    db_module._enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(bind=engine)
    monkeypatch.setattr(db_module, "_engine", engine)
    monkeypatch.setattr(
        db_module, "_SessionLocal", sessionmaker(bind=engine, expire_on_commit=False)
    )
    yield
    engine.dispose()


@pytest.fixture
def make_user(tmp_db: None) -> Callable[..., int]:
    """Return a factory that inserts a user directly and returns its ID."""

    def _make_user(
        name: str = "Ada Lovelace", email: str = "ada@example.com", **fields: str
    ) -> int:
        with db_module.get_session() as session:
            user = User(name=name, email=email, password_hash="hash", **fields)
            session.add(user)
            session.flush()
            return user.id

    return _make_user

