from fastapi.testclient import TestClient

from app.core.config import settings
from app.main import app, create_app
from tests.helpers import create_employee


def test_health_ok():
    """Test health check endpoint"""
    client = TestClient(app)
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


def test_root_endpoint():
    """Root reports the service, its environment and where to go next"""
    client = TestClient(app)
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Employee Directory"
    assert data["env"] == settings.APP_ENV
    assert data["status"] == "ok"
    assert data["docs"] == "/docs"
    assert data["health"] == "/health"
    assert data["employees"] == "/employees"


def test_create_app_uses_injected_store(store):
    """An app built around a store serves that store's records"""
    create_employee(store, "a@x.com", "Alice Smith")

    client = TestClient(create_app(store=store))
    r = client.get("/employees")
    assert r.status_code == 200
    assert [e["fullName"] for e in r.json()] == ["Alice Smith"]
