"""
Store records as returned by the EasyStore REST API, plus the two AI result
shapes. Monetary values stay decimal strings exactly as the API sends them;
see domain.metrics for the numeric views used by the dashboard.
"""
from __future__ import annotations

import re
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

FINANCIAL_STATUSES = ("paid", "pending", "refunded")
FULFILLMENT_STATUSES = ("fulfilled", "partial", None)


class Record(BaseModel):
    """Read-only record; unknown upstream fields are ignored.

    The API sends explicit nulls for blank fields. A null is replaced by the
    field's default (``""``, ``"0"``, ``0``, ``[]``), so one sparse record
    cannot fail a whole page.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def _nulls_to_defaults(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        defaulted = set()
        for name, field in cls.model_fields.items():
            if not field.is_required() and field.default is not None:
                defaulted.update({name, field.alias or name})
        return {k: v for k, v in data.items() if v is not None or k not in defaulted}


class StoreConfig(Record):
    shop_url: str = Field(default="", alias="shopUrl")
    access_token: str = Field(default="", alias="accessToken")

    @property
    def display_host(self) -> str:
        host = re.sub(r"^[a-z][a-z0-9+.-]*://", "", self.shop_url.strip(), flags=re.I)
        return host.rstrip("/")


class ProductVariant(Record):
    id: int
    product_id: Optional[int] = None
    title: str = ""
    price: str = "0"
    sku: Optional[str] = None
    inventory_quantity: int = 0


class ProductImage(Record):
    id: int
    product_id: Optional[int] = None
    src: str = ""


class Product(Record):
    id: int
    title: str = ""
    handle: str = ""
    body_html: Optional[str] = ""
    vendor: str = ""
    product_type: str = ""
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    published_at: Optional[str] = None
    tags: str = ""
    variants: list[ProductVariant] = []
    images: list[ProductImage] = []

    @property
    def inventory(self) -> int:
        return sum(v.inventory_quantity for v in self.variants)

    @property
    def image_url(self) -> Optional[str]:
        return self.images[0].src if self.images and self.images[0].src else None


class OrderCustomer(Record):
    first_name: Optional[str] = ""
    last_name: Optional[str] = ""
    email: Optional[str] = ""


class Order(Record):
    id: int
    order_number: str = ""
    email: Optional[str] = None
    created_at: str = ""
    currency: str = ""
    total_price: str = "0"
    subtotal_price: str = "0"
    # one of FINANCIAL_STATUSES / FULFILLMENT_STATUSES
    financial_status: Optional[str] = None
    fulfillment_status: Optional[str] = None
    customer: Optional[OrderCustomer] = None


class Customer(Record):
    id: int
    first_name: Optional[str] = ""
    last_name: Optional[str] = ""
    email: Optional[str] = ""
    orders_count: int = 0
    total_spent: str = "0"
    currency: str = ""
    created_at: Optional[str] = None

    @property
    def name(self) -> str:
        return " ".join(p for p in (self.first_name, self.last_name) if p)


class Shop(Record):
    id: int
    name: str = ""
    domain: str = ""
    email: Optional[str] = None
    currency: str = ""
    timezone: str = ""


class ProductCopy(Record):
    """Generated product content: SEO title, HTML description, comma-separated tags."""

    title: str = ""
    description: str = ""
    tags: str = ""

    @property
    def tag_list(self) -> list[str]:
        return [t.strip() for t in self.tags.split(",") if t.strip()]


class StoreAnalysis(Record):
    summary: str = ""
    trends: list[str] = []
    recommendations: list[str] = []
