from config.settings import settings
from services.business_repository import BusinessRepository


def _boom(self):
    raise RuntimeError("driver exploded")


def test_root_and_health(client):
    assert client.get("/").json()["success"] is True
    health = client.get("/health").json()
    assert health["database"] == "connected"
    assert client.get("/test-db").status_code == 200


def test_server_error_includes_error_outside_production(client, make_user, monkeypatch):
    _, headers = make_user("Customer")
    monkeypatch.setattr(BusinessRepository, "get_all_businesses", _boom)

    res = client.get("/api/businesses", headers=headers)
    assert res.status_code == 500
    assert res.json() == {"success": False, "message": "Failed to retrieve businesses", "error": "driver exploded"}


def test_server_error_hides_error_in_production(client, make_user, monkeypatch):
    _, headers = make_user("Customer")
    monkeypatch.setattr(BusinessRepository, "get_all_businesses", _boom)
    monkeypatch.setattr(settings, "APP_ENV", "production")

    res = client.get("/api/businesses", headers=headers)
    assert res.status_code == 500
    assert "error" not in res.json()
