import os

# Pas de Redis pendant les tests: le lifespan désactive le rate limiting
os.environ.setdefault("DISABLE_FASTAPI_LIMITER_INIT_FOR_TESTS", "1")

import pytest
from typing import Generator, Dict, Any
from fastapi.testclient import TestClient
from unittest.mock import MagicMock

from storefront.app import app as fastapi_app
from storefront.utils.security import require_admin

# Marquage automatique selon le dossier
def pytest_collection_modifyitems(config, items):
    for item in items:
        nodeid = item.nodeid.replace("\\", "/")
        if "/unit/" in nodeid:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in nodeid:
            item.add_marker(pytest.mark.integration)

class _Resp:
    """Réponse postgrest minimale: seul .data est lu par les repositories."""
    def __init__(self, data=None):
        self.data = data

@pytest.fixture
def resp_factory():
    return _Resp

@pytest.fixture(scope="session")
def app():
    return fastapi_app

@pytest.fixture()
def client(app) -> Generator[TestClient, None, None]:
    with TestClient(app) as c:
        yield c

@pytest.fixture
def admin_client(app, client):
    def _override_require_admin():
        return {"id": "admin-user-id", "role": "admin", "email": "admin@example.com"}
    app.dependency_overrides[require_admin] = _override_require_admin
    yield client
    app.dependency_overrides.clear()

@pytest.fixture
def fake_user() -> Dict[str, Any]:
    return {
        "id": "user-1",
        "email": "buyer@example.com",
        "metadata": {},
        "role": "user",
        "token": "tok-123",
    }

# Aucun appel réseau Supabase pendant les tests
@pytest.fixture(scope="function", autouse=True)
def mock_supabase_clients(monkeypatch):
    monkeypatch.setattr("storefront.infra.supabase_client.get_supabase", lambda: MagicMock())
    monkeypatch.setattr("storefront.infra.supabase_client.get_service_supabase", lambda: MagicMock())
    monkeypatch.setattr("storefront.infra.supabase_client.get_user_supabase", lambda token: MagicMock())

    # Modules qui importent les getters par nom
    monkeypatch.setattr("storefront.catalog.repository.get_supabase", lambda: MagicMock())
    monkeypatch.setattr("storefront.catalog.repository.get_service_supabase", lambda: MagicMock())
    monkeypatch.setattr("storefront.auth.repository.get_supabase", lambda: MagicMock())
