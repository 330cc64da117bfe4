from app.main import create_app
from tests.conftest import make_settings


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_unknown_route_uses_error_envelope(client):
    response = client.get("/orders")
    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}


def test_settings_are_attached_to_app(tmp_path):
    settings = make_settings(tmp_path, UNIQUE_NAMES_CASE_INSENSITIVE=True)
    app = create_app(settings)
    assert app.state.settings.UNIQUE_NAMES_CASE_INSENSITIVE is True
    assert app.state.settings.DB_POOL_SIZE == 25
