from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient
from jose import jwt

from lifeos.features.decision.api import get_decision_repository
from lifeos.main import app

TEST_SECRET = "test-secret"


class FakeDecisionRepository:
    """In-memory stand-in for DecisionRepository."""

    def __init__(self, context=None, goals=None, tasks=None, error=None):
        self.context = context
        self.goals = goals or []
        self.tasks = tasks or []
        self.error = error
        self.calls = []

    async def get_context_for_date(self, user_id, date):
        self.calls.append(("context", user_id, date))
        if self.error:
            raise self.error
        return self.context

    async def get_active_goals(self, user_id):
        self.calls.append(("goals", user_id))
        return list(self.goals)

    async def get_pending_tasks(self, user_id):
        self.calls.append(("tasks", user_id))
        return list(self.tasks)


def make_token(claims=None, secret=TEST_SECRET, expires_in=timedelta(hours=1)):
    payload = {"userId": "user-1"} if claims is None else dict(claims)
    payload["exp"] = datetime.now(timezone.utc) + expires_in
    return jwt.encode(payload, secret, algorithm="HS256")


@pytest.fixture(autouse=True)
def jwt_secret(monkeypatch):
    monkeypatch.setenv("JWT_SECRET", TEST_SECRET)


@pytest.fixture
def fake_repository():
    return FakeDecisionRepository()


@pytest.fixture
def client(fake_repository):
    app.dependency_overrides[get_decision_repository] = lambda: fake_repository
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {make_token()}"}
