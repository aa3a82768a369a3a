from fastapi.testclient import TestClient

from robot_api.core.config import Settings, DEFAULT_SEED_PATH
from robot_api.main import create_app


def test_root(client: TestClient) -> None:
    resp = client.get("/")

    assert resp.status_code == 200
    assert resp.json()["message"] == "Robot Grid API is running."


def test_health_reports_world_size(client: TestClient) -> None:
    body = client.get("/health").json()

    assert body["status"] == "ok"
    assert body["robots"] == 3
    assert body["items"] == 4


def test_get_item_on_ground(client: TestClient) -> None:
    resp = client.get("/items/3")

    assert resp.status_code == 200
    assert resp.json() == {"id": 3, "robotId": None, "position": {"x": -1, "y": 4}, "inInventory": False}


def test_get_unknown_item(client: TestClient) -> None:
    resp = client.get("/items/999")

    assert resp.status_code == 404
    assert resp.json()["detail"] == "Item with id 999 not found"


def test_openapi_documents_robot_routes(client: TestClient) -> None:
    schema = client.get("/openapi.json").json()

    paths = schema["paths"]
    assert "/robot/{robot_id}/status" in paths
    assert "patch" in paths["/robot/{robot_id}/state"]
    assert "/robot/{robot_id}/attack/{target_id}" in paths
    assert schema["info"]["title"] == "Robot Grid API"


def test_swagger_ui_is_served(client: TestClient) -> None:
    assert client.get("/api-docs").status_code == 200


def test_create_app_returns_independent_app() -> None:
    app = create_app()
    with TestClient(app) as c:
        assert c.get("/health").status_code == 200


def test_settings_defaults(monkeypatch) -> None:
    monkeypatch.delenv("SEED_PATH", raising=False)
    settings = Settings(_env_file=None)

    assert settings.default_page_size == 5
    assert settings.resolved_seed_path() == DEFAULT_SEED_PATH


def test_settings_from_environment(monkeypatch, tmp_path) -> None:
    seed = tmp_path / "world.json"
    monkeypatch.setenv("SEED_PATH", str(seed))
    monkeypatch.setenv("DEFAULT_PAGE_SIZE", "10")

    settings = Settings(_env_file=None)

    assert settings.resolved_seed_path() == seed
    assert settings.default_page_size == 10
