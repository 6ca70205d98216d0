from datetime import timedelta

from conftest import make_token
from lifeos.features.decision.domain import DailyContext, EnergyLevel, Goal, Task


def test_requires_authorization_header(client):
    response = client.get("/api/decision/next")

    assert response.status_code == 401
    assert response.json() == {"ok": False, "error": "missing_token"}


def test_rejects_non_bearer_scheme(client):
    response = client.get("/api/decision/next", headers={"Authorization": "Basic abc"})

    assert response.status_code == 401
    assert response.json() == {"ok": False, "error": "missing_token"}


def test_rejects_token_with_wrong_signature(client):
    token = make_token(secret="someone-else")
    response = client.get("/api/decision/next", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401
    assert response.json() == {"ok": False, "error": "invalid_token"}


def test_rejects_expired_token(client):
    token = make_token(expires_in=timedelta(minutes=-5))
    response = client.get("/api/decision/next", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401
    assert response.json()["error"] == "invalid_token"


def test_rejects_token_without_user_claim(client):
    token = make_token(claims={"role": "user"})
    response = client.get("/api/decision/next", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401
    assert response.json()["error"] == "invalid_token"


def test_unconfigured_secret_is_server_error(client, auth_headers, monkeypatch):
    monkeypatch.delenv("JWT_SECRET")
    response = client.get("/api/decision/next", headers=auth_headers)

    assert response.status_code == 500
    assert response.json() == {"ok": False, "error": "auth_not_configured"}


def test_returns_recommendation_envelope(client, fake_repository, auth_headers):
    fake_repository.context = DailyContext(
        date="2025-01-15",
        energy_level=EnergyLevel.HIGH,
        available_minutes=90,
        stress_level=3,
    )
    fake_repository.goals = [Goal(id="g1", title="Ship v1", importance=90)]
    fake_repository.tasks = [
        Task(id="t1", title="Write release notes", description="Draft", goal_id="g1", effort=45, impact=60),
        Task(id="t2", title="Inbox chore", effort=10, impact=5),
    ]

    response = client.get("/api/decision/next", headers=auth_headers)

    assert response.status_code == 200
    body = response.json()
    assert body["ok"] is True
    assert "message" not in body["data"]
    assert body["data"]["recommendation"] == {
        "taskId": "t1",
        "taskTitle": "Write release notes",
        "taskDescription": "Draft",
        "goalTitle": "Ship v1",
        "goalImportance": 90,
        "effort": 45,
        "impact": 60,
        "reasoning": (
            "You have 90 min available with HIGH energy. "
            'This task supports your goal "Ship v1" (importance: 90/100) and fits your 90 min window.'
        ),
    }
    assert body["data"]["inputs"] == {
        "context": {
            "date": "2025-01-15",
            "energyLevel": "HIGH",
            "availableMinutes": 90,
            "stressLevel": 3,
            "contextSet": True,
        },
        "activeGoalCount": 1,
        "totalPendingTasks": 2,
        "goalTaskCounts": {"g1": 1},
    }


def test_loads_snapshots_for_token_user(client, fake_repository):
    token = make_token(claims={"sub": "user-42"})

    client.get("/api/decision/next", headers={"Authorization": f"Bearer {token}"})

    assert [call[0] for call in fake_repository.calls] == ["context", "goals", "tasks"]
    assert all(call[1] == "user-42" for call in fake_repository.calls)


def test_no_goals_and_no_context(client, fake_repository, auth_headers):
    fake_repository.tasks = [Task(id="t1", title="Inbox", effort=30, impact=20)]

    response = client.get("/api/decision/next", headers=auth_headers)

    data = response.json()["data"]
    assert response.status_code == 200
    assert data["recommendation"] is None
    assert data["message"] == "No active goals. Create a goal to get recommendations."
    assert data["inputs"]["context"]["contextSet"] is False
    assert data["inputs"]["context"]["availableMinutes"] == 480
    assert data["inputs"]["activeGoalCount"] == 0


def test_store_failure_is_internal_error(client, fake_repository, auth_headers):
    fake_repository.error = RuntimeError("connection refused")

    response = client.get("/api/decision/next", headers=auth_headers)

    assert response.status_code == 500
    assert response.json() == {"ok": False, "error": "internal_error"}
