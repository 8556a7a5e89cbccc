from __future__ import annotations
import asyncio
from dataclasses import dataclass
from typing import Optional

from loguru import logger

from storefront_ai.adapters.easystore import LiveStoreSource, StoreDataSource
from storefront_ai.domain.models import Customer, Order, Product, Shop, StoreConfig


class ConnectionRejected(RuntimeError):
    pass


@dataclass(frozen=True)
class StoreData:
    products: tuple[Product, ...] = ()
    orders: tuple[Order, ...] = ()
    customers: tuple[Customer, ...] = ()
    shop: Optional[Shop] = None

    def is_empty(self) -> bool:
        return not (self.products or self.orders or self.customers)


async def load_store_data(source: StoreDataSource) -> StoreData:
    # The three lists settle together and succeed or fail together; shop info is best effort.
    results = await asyncio.gather(
        source.get_products(),
        source.get_orders(),
        source.get_customers(),
        return_exceptions=True,
    )
    for r in results:
        if isinstance(r, BaseException):
            raise r
    products, orders, customers = results
    shop = await source.get_shop_info()
    logger.info(f"Loaded {len(products)} products, {len(orders)} orders, {len(customers)} customers")
    return StoreData(tuple(products), tuple(orders), tuple(customers), shop)


async def refresh_store_data(source: StoreDataSource, current: StoreData) -> StoreData:
    """Fresh data, or `current` untouched when any of the fetches fails."""
    try:
        return await load_store_data(source)
    except Exception:
        logger.exception("Failed to fetch data")
        return current


async def connect(config: StoreConfig, **kwargs) -> LiveStoreSource:
    source = LiveStoreSource(config, **kwargs)
    if not await source.validate_connection():
        raise ConnectionRejected(
            "Could not connect to EasyStore with these credentials. Please check URL and Token."
        )
    return source
