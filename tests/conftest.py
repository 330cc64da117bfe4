import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_app


def make_settings(tmp_path, **overrides) -> Settings:
    return Settings(
        _env_file=None,
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'inventory.db'}",
        LOG_DIR=str(tmp_path / "logs"),
        **overrides,
    )


@pytest.fixture
def settings(tmp_path):
    return make_settings(tmp_path)


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest.fixture
def case_insensitive_client(tmp_path):
    settings = make_settings(tmp_path, UNIQUE_NAMES_CASE_INSENSITIVE=True)
    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest.fixture
def category(client):
    response = client.post("/categories", json={"name": "Electronics"})
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def supplier(client):
    response = client.post("/suppliers", json={"name": "Acme", "email": "sales@acme.test", "phone": "555-0100"})
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def product(client, category, supplier):
    response = client.post("/products", json={
        "name": "Laptop",
        "category_id": category["id"],
        "supplier_id": supplier["id"],
        "price": 999.99,
        "quantity": 5,
        "image_url": "https://cdn.example.test/laptop.png",
    })
    assert response.status_code == 201
    return response.json()
