import pytest
from unittest.mock import MagicMock

import storefront.catalog.repository as repo


def test_list_products_orders_by_id_desc(monkeypatch, resp_factory):
    client = MagicMock()
    order = client.table.return_value.select.return_value.order
    order.return_value.execute.return_value = resp_factory(data=[{"id": 2}, {"id": 1}])
    monkeypatch.setattr(repo, "get_supabase", lambda: client)

    assert repo.list_products() == [{"id": 2}, {"id": 1}]
    order.assert_called_once_with("id", desc=True)

def test_list_products_propagates_errors(monkeypatch):
    client = MagicMock()
    client.table.side_effect = RuntimeError("timeout")
    monkeypatch.setattr(repo, "get_supabase", lambda: client)
    with pytest.raises(RuntimeError):
        repo.list_products()

def test_get_product_found_and_missing(monkeypatch, resp_factory):
    client = MagicMock()
    limit = client.table.return_value.select.return_value.eq.return_value.limit
    limit.return_value.execute.return_value = resp_factory(data=[{"id": 5}])
    monkeypatch.setattr(repo, "get_supabase", lambda: client)
    assert repo.get_product(5) == {"id": 5}

    limit.return_value.execute.return_value = resp_factory(data=[])
    assert repo.get_product(6) is None

def test_create_product_returns_row(monkeypatch, resp_factory):
    client = MagicMock()
    client.table.return_value.insert.return_value.execute.return_value = resp_factory(data=[{"id": 9, "producto": "X"}])
    monkeypatch.setattr(repo, "get_service_supabase", lambda: client)
    assert repo.create_product({"producto": "X", "precio": 1}) == {"id": 9, "producto": "X"}

def test_create_product_failure_returns_none(monkeypatch):
    def _no_service():
        raise RuntimeError("SUPABASE_SERVICE_KEY manquant")
    monkeypatch.setattr(repo, "get_service_supabase", _no_service)
    assert repo.create_product({"producto": "X", "precio": 1}) is None

def test_update_product_without_returned_rows(monkeypatch, resp_factory):
    client = MagicMock()
    client.table.return_value.update.return_value.eq.return_value.execute.return_value = resp_factory(data=[])
    monkeypatch.setattr(repo, "get_service_supabase", lambda: client)
    assert repo.update_product(3, {"precio": 2}) == {"status": "ok"}

def test_delete_product(monkeypatch):
    client = MagicMock()
    monkeypatch.setattr(repo, "get_service_supabase", lambda: client)
    assert repo.delete_product(3) is True
    client.table.return_value.delete.return_value.eq.assert_called_once_with("id", 3)

    client.table.side_effect = RuntimeError("boom")
    assert repo.delete_product(3) is False
