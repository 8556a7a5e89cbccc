import time

import httpx
import pytest

from storefront_ai import settings
from storefront_ai.adapters.easystore import (
    EasyStoreAPIError,
    LiveStoreSource,
    MockStoreSource,
    make_store_source,
    normalize_base_url,
)
from storefront_ai.domain.models import StoreConfig

from conftest import RecordingHandler


# --- Base URL ---


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("shop.example.com", "https://shop.example.com"),
        ("shop.example.com/", "https://shop.example.com"),
        ("https://shop.example.com/", "https://shop.example.com"),
        ("http://localhost:8080", "http://localhost:8080"),
        ("httpbin-shop.example.com", "https://httpbin-shop.example.com"),
        ("", ""),
    ],
)
def test_normalize_base_url(raw, expected):
    assert normalize_base_url(raw) == expected


@pytest.mark.asyncio
async def test_live_source_requests_normalized_url_with_token(live_source, handler):
    products = await live_source.get_products()

    assert len(products) == 3
    request = handler.requests[0]
    assert str(request.url) == "https://shop.example.com/api/1.0/products?limit=250"
    assert request.headers[settings.ACCESS_TOKEN_HEADER] == "tok_123"
    assert request.method == "GET"


# --- Live reads ---


@pytest.mark.asyncio
async def test_get_orders_uses_paid_filter(live_source, handler):
    orders = await live_source.get_orders()

    assert [o.order_number for o in orders] == ["#1001", "#1002", "#1003"]
    params = handler.requests[0].url.params
    assert params["limit"] == "50"
    assert params["financial_status"] == "paid"


@pytest.mark.asyncio
async def test_get_customers_parses_records(live_source, handler):
    customers = await live_source.get_customers()

    assert handler.requests[0].url.path == "/api/1.0/customers"
    assert handler.requests[0].url.params["limit"] == "50"
    assert customers[1].name == "Jane Smith"
    assert customers[1].total_spent == "1250.00"


@pytest.mark.asyncio
async def test_missing_envelope_field_yields_empty_list(config):
    handler = RecordingHandler(payloads={"products": {}, "orders": {"orders": None}})
    source = LiveStoreSource(config, transport=httpx.MockTransport(handler))

    assert await source.get_products() == []
    assert await source.get_orders() == []


@pytest.mark.asyncio
async def test_http_error_propagates(config):
    handler = RecordingHandler(status={"orders": 500})
    source = LiveStoreSource(config, transport=httpx.MockTransport(handler))

    with pytest.raises(EasyStoreAPIError) as exc:
        await source.get_orders()
    assert exc.value.status_code == 500
    assert len(handler.requests) == 1  # no retry


@pytest.mark.asyncio
async def test_empty_token_sends_empty_header():
    handler = RecordingHandler(status={"products": 401})
    source = LiveStoreSource(StoreConfig(shop_url="shop.example.com"), transport=httpx.MockTransport(handler))

    with pytest.raises(EasyStoreAPIError) as exc:
        await source.get_products()
    assert exc.value.status_code == 401
    assert handler.requests[0].headers[settings.ACCESS_TOKEN_HEADER] == ""


@pytest.mark.asyncio
async def test_get_shop_info(live_source):
    shop = await live_source.get_shop_info()
    assert shop.name == "Acme Outfitters"
    assert shop.currency == "MYR"


@pytest.mark.asyncio
async def test_get_shop_info_returns_none_on_failure(config):
    source = LiveStoreSource(config, transport=httpx.MockTransport(RecordingHandler(status={"shop": 403})))
    assert await source.get_shop_info() is None


# --- Connection validation ---


@pytest.mark.asyncio
async def test_validate_connection_success(live_source, handler):
    assert await live_source.validate_connection() is True
    assert handler.requests[0].url.path == "/api/1.0/shop"


@pytest.mark.asyncio
@pytest.mark.parametrize("status", [401, 404, 500])
async def test_validate_connection_http_error_is_false(config, status):
    source = LiveStoreSource(config, transport=httpx.MockTransport(RecordingHandler(status={"shop": status})))
    assert await source.validate_connection() is False


@pytest.mark.asyncio
async def test_validate_connection_unreachable_is_false(config):
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    source = LiveStoreSource(config, transport=httpx.MockTransport(refuse))
    assert await source.validate_connection() is False


@pytest.mark.asyncio
async def test_validate_connection_bad_json_is_false(config):
    source = LiveStoreSource(
        config, transport=httpx.MockTransport(lambda request: httpx.Response(200, content=b"<html>"))
    )
    assert await source.validate_connection() is False


@pytest.mark.asyncio
@pytest.mark.parametrize("shop_url", ["", "http://[not-a-host", "ftp://"])
async def test_validate_connection_malformed_url_is_false(shop_url):
    source = LiveStoreSource(StoreConfig(shop_url=shop_url, access_token="x"))
    assert await source.validate_connection() is False


# --- Demo mode ---


@pytest.mark.asyncio
async def test_mock_source_serves_fixtures_after_delay():
    source = MockStoreSource(delay_s=0.05)

    t0 = time.perf_counter()
    products = await source.get_products()
    elapsed = time.perf_counter() - t0

    assert elapsed >= 0.04
    assert len(products) == 3
    assert len(await source.get_orders()) == 3
    assert len(await source.get_customers()) == 3
    assert await source.validate_connection() is True
    assert (await source.get_shop_info()).name == "Demo Store"


def test_default_mock_delay_is_positive():
    assert MockStoreSource().delay_s > 0


def test_factory_selects_variant(config):
    assert isinstance(make_store_source(None), MockStoreSource)
    assert isinstance(make_store_source(config), LiveStoreSource)
    assert isinstance(make_store_source(config, demo=True), MockStoreSource)


def test_live_source_is_immutable(live_source):
    with pytest.raises(Exception):
        live_source.config = StoreConfig(shop_url="other.example.com")
