import json

import httpx
import pytest

from storefront_ai.adapters.easystore import LiveStoreSource, MockStoreSource
from storefront_ai.domain import fixtures
from storefront_ai.domain.models import StoreConfig

SHOP_PAYLOAD = {
    "shop": {
        "id": 7,
        "name": "Acme Outfitters",
        "domain": "acme.easystore.co",
        "email": "owner@acme.test",
        "currency": "MYR",
        "timezone": "Asia/Kuala_Lumpur",
    }
}


def store_payloads() -> dict[str, dict]:
    """Response envelopes keyed by resource, built from the demo fixtures."""
    return {
        "shop": SHOP_PAYLOAD,
        "products": {"products": [p.model_dump() for p in fixtures.DEMO_PRODUCTS]},
        "orders": {"orders": [o.model_dump() for o in fixtures.DEMO_ORDERS]},
        "customers": {"customers": [c.model_dump() for c in fixtures.DEMO_CUSTOMERS]},
    }


class RecordingHandler:
    """httpx.MockTransport handler serving canned envelopes and recording requests."""

    def __init__(self, payloads=None, status=None):
        self.payloads = payloads if payloads is not None else store_payloads()
        self.status = status or {}
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        resource = request.url.path.rsplit("/", 1)[-1]
        code = self.status.get(resource, 200)
        if code != 200:
            return httpx.Response(code, json={"error": "nope"})
        return httpx.Response(200, content=json.dumps(self.payloads.get(resource, {})))


@pytest.fixture
def config():
    return StoreConfig(shop_url="shop.example.com/", access_token="tok_123")


@pytest.fixture
def handler():
    return RecordingHandler()


@pytest.fixture
def live_source(config, handler):
    return LiveStoreSource(config, transport=httpx.MockTransport(handler))


@pytest.fixture
def fast_mock_source():
    return MockStoreSource(delay_s=0.01)
