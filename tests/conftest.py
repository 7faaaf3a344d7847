"""Shared fixtures: a throwaway SQLite database per test and an API client."""

import pytest
from fastapi.testclient import TestClient

from jobboard.api.app import app
from jobboard.api.deps import clear_contexts
from jobboard.api.limiter import limiter
from jobboard.auth import IdentityProvider, Role, register_account
from jobboard.config import settings
from jobboard.db import Job, get_session_factory, init_db, reset_engine

PASSWORD = "Welder123!"


@pytest.fixture()
def database(tmp_path, monkeypatch):  # type: ignore[no-untyped-def]
    """Point the app at a fresh SQLite file and create the tables."""
    monkeypatch.setattr(settings, "database_url", f"sqlite:///{tmp_path / 'test.db'}")
    reset_engine()
    init_db()
    yield get_session_factory()
    clear_contexts()
    reset_engine()


@pytest.fixture()
def db(database):  # type: ignore[no-untyped-def]
    session = database()
    yield session
    session.close()


@pytest.fixture()
def provider() -> IdentityProvider:
    return IdentityProvider()


@pytest.fixture()
def make_account(db, provider):  # type: ignore[no-untyped-def]
    """Register an account directly; returns (AuthSession, ResolvedRole)."""

    def _make(role: Role = Role.SEEKER, email: str | None = None, name: str = "Sam Seeker"):
        email = email or f"{role.value}-{name.split()[0].lower()}@example.com"
        return register_account(db, provider, email, PASSWORD, role, name)

    return _make


@pytest.fixture()
def make_job(db):  # type: ignore[no-untyped-def]
    def _make(employer_id: str, **kw: object) -> Job:
        fields: dict[str, object] = {
            "title": "CNC Machinist",
            "description": "Run 5-axis CNC mills on day shift.",
            "industry_category": "Manufacturing",
            "location": "Detroit, MI",
            "job_type": "full-time",
            "shift_type": "day",
            "experience_min": 2,
            "experience_max": 5,
        }
        fields.update(kw)
        job = Job(employer_id=employer_id, **fields)
        db.add(job)
        db.commit()
        db.refresh(job)
        return job

    return _make


@pytest.fixture()
def client(database):  # type: ignore[no-untyped-def]
    limiter.reset()
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def signup(client):  # type: ignore[no-untyped-def]
    """Sign up through the API; returns the session payload plus auth headers."""

    def _signup(role: str = "seeker", email: str | None = None, full_name: str = "Sam Seeker") -> dict:
        email = email or f"{role}-{full_name.split()[0].lower()}@example.com"
        response = client.post(
            "/auth/signup",
            json={
                "email": email,
                "password": PASSWORD,
                "confirm_password": PASSWORD,
                "role": role,
                "full_name": full_name,
            },
        )
        assert response.status_code == 201, response.text
        body = response.json()
        body["headers"] = {"Authorization": f"Bearer {body['token']}"}
        return body

    return _signup
