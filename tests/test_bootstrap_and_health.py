import pytest

from mentora.main import app, health_check
from mentora.models.user import User, UserRole
from mentora.scripts.bootstrap_admin import CONFIRM_PHRASE, bootstrap_admin


@pytest.fixture
def admin_env(monkeypatch):
    monkeypatch.setenv("ENABLE_ADMIN_BOOTSTRAP", "true")
    monkeypatch.setenv("ADMIN_BOOTSTRAP_CONFIRM", CONFIRM_PHRASE)
    monkeypatch.setenv("ADMIN_NAME", "Site Admin")
    monkeypatch.setenv("ADMIN_EMAIL", "Admin@Mentora.org")
    monkeypatch.setenv("ADMIN_PASSWORD", "Password123")


def test_bootstrap_creates_first_admin_once(db_session, admin_env):
    assert bootstrap_admin(db_session) == 0

    admin = db_session.query(User).filter(User.email == "admin@mentora.org").one()
    assert admin.role == UserRole.ADMIN

    # One-time only.
    assert bootstrap_admin(db_session) == 1
    assert db_session.query(User).count() == 1


def test_bootstrap_requires_opt_in(db_session, admin_env, monkeypatch):
    monkeypatch.setenv("ENABLE_ADMIN_BOOTSTRAP", "false")
    assert bootstrap_admin(db_session) == 1

    monkeypatch.setenv("ENABLE_ADMIN_BOOTSTRAP", "true")
    monkeypatch.setenv("ADMIN_PASSWORD", "short")
    assert bootstrap_admin(db_session) == 1
    assert db_session.query(User).count() == 0


def test_health_and_routes_registered():
    assert health_check()["status"] == "healthy"

    paths = app.openapi()["paths"]
    for path in (
        "/auth/login",
        "/mentors/availability",
        "/mentors/{mentor_id}/slots",
        "/requests/{request_id}",
        "/sessions/{session_id}/feedback",
        "/admin/matches",
        "/admin/sessions/clear",
        "/health",
    ):
        assert path in paths
