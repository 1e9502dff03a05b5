import pytest

from storefront.app import create_app
from storefront.common.store import MemoryStore
from storefront.notifications.webhook import WebhookNotifier

WEBHOOK_URL = "https://hooks.example.test/orders"


class FakeResponse:
    def __init__(self, status: int, reason: str = "OK"):
        self.status = status
        self.reason = reason

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        return False


class FakeSession:
    """Stands in for aiohttp.ClientSession and records every POST."""

    def __init__(self, status: int = 200, error: Exception = None):
        self.status = status
        self.error = error
        self.calls = []

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        return False

    def post(self, url, json=None, headers=None, timeout=None):
        self.calls.append({"url": url, "json": json, "headers": headers, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return FakeResponse(self.status, reason="OK" if self.status < 400 else "Bad Gateway")


def order_payload(product_id: str, **overrides):
    payload = {
        "productId": product_id,
        "customerName": "Mona Adel",
        "customerEmail": "mona@example.com",
        "customerPhone": "+20 100 123 4567",
        "customerAddress": "12 Nile St, Cairo",
        "size": "M",
        "quantity": 3,
        "unitPrice": "300.00",
        "totalAmount": "900.00",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def webhook_env(monkeypatch):
    monkeypatch.delenv("WEBHOOK_URL", raising=False)
    monkeypatch.setenv("N8N_WEBHOOK_URL", WEBHOOK_URL)
    return WEBHOOK_URL


@pytest.fixture
def no_webhook_env(monkeypatch):
    monkeypatch.delenv("N8N_WEBHOOK_URL", raising=False)
    monkeypatch.delenv("WEBHOOK_URL", raising=False)


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
async def product(store):
    return await store.create_product(
        name="Luxury Cropped Black T-Shirt",
        description="Minimal. Premium cotton. Built for grind.",
        price="300.00",
        original_price="350.00",
        image_url="https://img.example.test/shirt.jpg",
        thumbnail_urls=["https://img.example.test/shirt-1.jpg"],
    )


@pytest.fixture
def fake_session():
    return FakeSession(status=200)


@pytest.fixture
def notifier(fake_session):
    return WebhookNotifier(session_factory=lambda: fake_session, timeout=2.0)


@pytest.fixture
def app(store, notifier):
    return create_app(store=store, notifier=notifier)


@pytest.fixture
def client(app):
    return app.test_client()
