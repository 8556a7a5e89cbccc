"""
EasyStore REST API data sources.

Two interchangeable sources share one interface: MockStoreSource serves the
demo fixtures without any network, LiveStoreSource issues authenticated GETs
against a configured shop. The mode is fixed when the source is built; new
credentials mean a new LiveStoreSource.
"""
from __future__ import annotations
import asyncio
import re
from dataclasses import dataclass
from typing import Any, Optional, Protocol

import httpx
from loguru import logger

from storefront_ai import settings
from storefront_ai.domain import fixtures
from storefront_ai.domain.models import Customer, Order, Product, Shop, StoreConfig


class EasyStoreAPIError(RuntimeError):
    def __init__(self, status_code: int, reason: str = ""):
        super().__init__(f"EasyStore API Error: {status_code} {reason}".rstrip())
        self.status_code = status_code
        self.reason = reason


class StoreDataSource(Protocol):
    is_demo: bool

    async def validate_connection(self) -> bool: ...

    async def get_shop_info(self) -> Optional[Shop]: ...

    async def get_products(self) -> list[Product]: ...

    async def get_orders(self) -> list[Order]: ...

    async def get_customers(self) -> list[Customer]: ...


@dataclass(frozen=True)
class MockStoreSource:
    """Demo data after a short simulated delay."""

    delay_s: float = settings.MOCK_DELAY_S
    is_demo: bool = True

    async def validate_connection(self) -> bool:
        return True

    async def get_shop_info(self) -> Optional[Shop]:
        return fixtures.DEMO_SHOP

    async def get_products(self) -> list[Product]:
        await asyncio.sleep(self.delay_s)
        return list(fixtures.DEMO_PRODUCTS)

    async def get_orders(self) -> list[Order]:
        await asyncio.sleep(self.delay_s)
        return list(fixtures.DEMO_ORDERS)

    async def get_customers(self) -> list[Customer]:
        await asyncio.sleep(self.delay_s)
        return list(fixtures.DEMO_CUSTOMERS)


def normalize_base_url(shop_url: str) -> str:
    """Drop one trailing slash and default the scheme to https."""
    url = (shop_url or "").strip()
    if not url:
        return ""
    if url.endswith("/"):
        url = url[:-1]
    if not re.match(r"^[a-z][a-z0-9+.-]*://", url, flags=re.I):
        url = f"https://{url}"
    return url


@dataclass(frozen=True)
class LiveStoreSource:
    config: StoreConfig
    transport: Optional[httpx.AsyncBaseTransport] = None
    timeout: Optional[float] = settings.HTTP_TIMEOUT_S
    is_demo: bool = False

    @property
    def base_url(self) -> str:
        return normalize_base_url(self.config.shop_url)

    @property
    def headers(self) -> dict[str, str]:
        return {
            settings.ACCESS_TOKEN_HEADER: self.config.access_token or "",
            "Content-Type": "application/json",
        }

    def endpoint(self, resource: str, **params: Any) -> str:
        path = f"{settings.EASYSTORE_API_PREFIX}/{resource}"
        if params:
            path += "?" + "&".join(f"{k}={v}" for k, v in params.items())
        return path

    async def _fetch_resource(self, endpoint: str) -> dict:
        url = f"{self.base_url}{endpoint}"
        logger.info(f"Fetching: {url}")
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            response = await client.get(url, headers=self.headers)
            if not response.is_success:
                raise EasyStoreAPIError(response.status_code, response.reason_phrase)
            return response.json()

    async def _fetch_list(self, resource: str, **params: Any) -> list[dict]:
        try:
            data = await self._fetch_resource(self.endpoint(resource, **params))
        except Exception as e:
            logger.error(f"Failed to fetch {resource}: {e}")
            raise
        return data.get(resource) or []

    async def validate_connection(self) -> bool:
        try:
            data = await self._fetch_resource(self.endpoint("shop"))
        except Exception as e:
            logger.warning(f"Connection validation failed: {e}")
            return False
        shop = data.get("shop") if isinstance(data, dict) else None
        logger.info(f"Connected to shop: {(shop or {}).get('name')}")
        return True

    async def get_shop_info(self) -> Optional[Shop]:
        try:
            data = await self._fetch_resource(self.endpoint("shop"))
            return Shop.model_validate(data["shop"])
        except Exception as e:
            logger.error(f"Failed to fetch shop info: {e}")
            return None

    async def get_products(self) -> list[Product]:
        items = await self._fetch_list("products", limit=settings.PRODUCTS_LIMIT)
        return [Product.model_validate(p) for p in items]

    async def get_orders(self) -> list[Order]:
        items = await self._fetch_list(
            "orders", limit=settings.ORDERS_LIMIT, financial_status=settings.ORDERS_FINANCIAL_STATUS
        )
        return [Order.model_validate(o) for o in items]

    async def get_customers(self) -> list[Customer]:
        items = await self._fetch_list("customers", limit=settings.CUSTOMERS_LIMIT)
        return [Customer.model_validate(c) for c in items]


def make_store_source(config: Optional[StoreConfig], demo: bool = False, **kwargs: Any) -> StoreDataSource:
    if demo or config is None:
        return MockStoreSource()
    return LiveStoreSource(config, **kwargs)
