from lifeos.utils.datetime_helper import get_today_str
from datetime import datetime, timedelta, timezone


def test_health_endpoints(client):
    for path in ("/health", "/api/health"):
        response = client.get(path)
        body = response.json()
        assert response.status_code == 200
        assert body["ok"] is True
        assert body["status"] == "ok"
        assert body["timestamp"].endswith("Z")


def test_root_banner(client):
    response = client.get("/")

    assert response.json()["docs"] == "/docs"


def test_unknown_route_uses_error_envelope(client):
    response = client.get("/api/nope")

    assert response.status_code == 404
    assert response.json() == {"ok": False, "error": "Not Found"}


def test_today_is_utc_date():
    late_evening_west = datetime(2025, 1, 15, 22, 30, tzinfo=timezone(timedelta(hours=-5)))

    assert get_today_str(late_evening_west) == "2025-01-16"
    assert get_today_str(datetime(2025, 1, 15, 23, 59)) == "2025-01-15"
