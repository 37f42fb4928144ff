"""Pytest bootstrap: in-memory database and user factory shared by the suite."""

from pathlib import Path
import sys

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# Ensure project root is on sys.path so `import mentora` works without install
PROJECT_ROOT = Path(__file__).resolve().parents[1]
project_root_str = str(PROJECT_ROOT)
if project_root_str not in sys.path:
    sys.path.insert(0, project_root_str)

from mentora import models  # noqa: E402
from mentora.database import Base  # noqa: E402


@pytest.fixture
def db_session():
    engine = create_engine("sqlite:///:memory:")
    Base.metadata.create_all(engine)
    SessionLocal = sessionmaker(bind=engine)
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
        engine.dispose()


@pytest.fixture
def make_user(db_session):
    counter = {"n": 0}

    def _create_user(role=models.UserRole.MENTEE, name=None, email=None, **fields) -> models.User:
        counter["n"] += 1
        role = models.UserRole(role)
        user = models.User(
            name=name or f"{role.value.title()} {counter['n']}",
            email=email or f"{role.value}{counter['n']}@test.org",
            password_hash="hash",
            role=role,
            is_active=True,
            skills=fields.pop("skills", []),
            goals=[],
            interests=[],
            **fields,
        )
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user

    return _create_user
