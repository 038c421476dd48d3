import types
import pytest
from unittest.mock import MagicMock

from storefront.auth import service as svc
from storefront.auth import repository as repo


@pytest.mark.parametrize("app_metadata, expected", [
    ({"role": "admin"}, "admin"),
    ({"role": "ADMIN"}, "admin"),
    ({"role": "scanner"}, "user"),
    ({}, "user"),
    (None, "user"),
])
def test_determine_role(app_metadata, expected):
    assert svc.determine_role(app_metadata) == expected

def test_get_user_from_token_role_from_app_metadata(monkeypatch):
    monkeypatch.setattr(svc, "_repo_get_user_from_token", lambda tok: {
        "id": "u1", "email": "a@b", "user_metadata": {"full_name": "A"}, "app_metadata": {"role": "admin"},
    })
    user = svc.get_user_from_token("tok")
    assert user == {
        "id": "u1",
        "email": "a@b",
        "metadata": {"full_name": "A"},
        "app_metadata": {"role": "admin"},
        "role": "admin",
        "token": "tok",
    }

def test_self_declared_admin_in_user_metadata_stays_user(monkeypatch):
    monkeypatch.setattr(svc, "_repo_get_user_from_token", lambda tok: {
        "id": "u1", "email": "a@b", "user_metadata": {"role": "admin"}, "app_metadata": {"provider": "email"},
    })
    assert svc.get_user_from_token("tok")["role"] == "user"

def test_get_user_from_token_propagates_errors(monkeypatch):
    def _raise(tok):
        raise RuntimeError("JWT expired")
    monkeypatch.setattr(svc, "_repo_get_user_from_token", _raise)
    with pytest.raises(RuntimeError):
        svc.get_user_from_token("tok")

def test_repository_reads_user_object(monkeypatch):
    client = MagicMock()
    client.auth.get_user.return_value = types.SimpleNamespace(
        user=types.SimpleNamespace(
            id="u2", email="c@d", user_metadata={"full_name": "C"}, app_metadata={"role": "admin"},
        )
    )
    monkeypatch.setattr(repo, "get_supabase", lambda: client)

    user = repo.get_user_from_access_token("tok")

    client.auth.get_user.assert_called_once_with("tok")
    assert user == {
        "id": "u2",
        "email": "c@d",
        "user_metadata": {"full_name": "C"},
        "app_metadata": {"role": "admin"},
    }

def test_repository_no_user(monkeypatch):
    client = MagicMock()
    client.auth.get_user.return_value = None
    monkeypatch.setattr(repo, "get_supabase", lambda: client)
    assert repo.get_user_from_access_token("tok") == {}
