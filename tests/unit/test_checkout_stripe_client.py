from types import SimpleNamespace
import pytest
import stripe

from storefront.checkout import stripe_client
from storefront.checkout.errors import UpstreamUnavailable


@pytest.fixture(autouse=True)
def _restore_stripe_globals(monkeypatch):
    # require_stripe modifie l'état global du module stripe
    monkeypatch.setattr(stripe, "api_key", None)
    monkeypatch.setattr(stripe, "max_network_retries", stripe.max_network_retries)
    monkeypatch.setattr(stripe, "default_http_client", None)

def _kwargs():
    return dict(
        line_items=[{"quantity": 1, "price_data": {"currency": "usd", "unit_amount": 100, "product_data": {"name": "A", "images": []}}}],
        mode="payment",
        success_url="https://shop.test/cart?success=true",
        cancel_url="https://shop.test/cart",
        allowed_countries=["US", "ES"],
        metadata={"user_id": "u1", "cart": "[]"},
    )

def test_require_stripe_missing_key(monkeypatch):
    monkeypatch.setattr("storefront.config.STRIPE_SECRET_KEY", "")
    with pytest.raises(UpstreamUnavailable) as exc:
        stripe_client.require_stripe()
    assert "STRIPE_SECRET_KEY" in exc.value.detail

def test_require_stripe_configures_client(monkeypatch):
    monkeypatch.setattr("storefront.config.STRIPE_SECRET_KEY", "sk_test_123")
    stripe_client.require_stripe()
    assert stripe.api_key == "sk_test_123"
    assert stripe.max_network_retries == 0
    assert stripe.default_http_client is not None

def test_require_stripe_reuses_http_client(monkeypatch):
    monkeypatch.setattr("storefront.config.STRIPE_SECRET_KEY", "sk_test_123")
    stripe_client.require_stripe()
    first = stripe.default_http_client
    stripe_client.require_stripe()
    stripe_client.require_stripe()
    assert stripe.default_http_client is first
    assert first is stripe_client._get_http_client()

def test_create_session_passes_shipping_and_metadata(monkeypatch):
    monkeypatch.setattr("storefront.config.STRIPE_SECRET_KEY", "sk_test_123")
    captured = {}
    def _fake_create(**kwargs):
        captured.update(kwargs)
        return SimpleNamespace(id="cs_test_1", url="https://checkout.stripe.test/cs_test_1")
    monkeypatch.setattr(stripe.checkout.Session, "create", _fake_create)

    session = stripe_client.create_session(**_kwargs())

    assert session == {"id": "cs_test_1", "url": "https://checkout.stripe.test/cs_test_1"}
    assert captured["mode"] == "payment"
    assert captured["shipping_address_collection"] == {"allowed_countries": ["US", "ES"]}
    assert captured["metadata"]["user_id"] == "u1"

def test_create_session_gateway_error(monkeypatch):
    monkeypatch.setattr("storefront.config.STRIPE_SECRET_KEY", "sk_test_123")
    def _fail(**kwargs):
        raise stripe.StripeError("Invalid currency")
    monkeypatch.setattr(stripe.checkout.Session, "create", _fail)

    with pytest.raises(UpstreamUnavailable) as exc:
        stripe_client.create_session(**_kwargs())
    assert "Invalid currency" in exc.value.detail
    assert exc.value.message == "Invalid currency"
