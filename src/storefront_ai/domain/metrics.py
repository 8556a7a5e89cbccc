from __future__ import annotations
from typing import Sequence

import pandas as pd

from storefront_ai.domain.models import Order, Product


def _amount(value: str | None) -> float:
    try:
        return float(value or 0)
    except ValueError:
        return 0.0


def total_revenue(orders: Sequence[Order]) -> float:
    return sum(_amount(o.total_price) for o in orders)


def sales_trend_frame(orders: Sequence[Order]) -> pd.DataFrame:
    """Order totals for the trend chart, oldest first."""
    rows = [
        {
            "date": pd.to_datetime(o.created_at, utc=True, errors="coerce"),
            "order": o.order_number,
            "amount": _amount(o.total_price),
        }
        for o in orders
    ]
    df = pd.DataFrame(rows, columns=["date", "order", "amount"])
    if df.empty:
        df["label"] = pd.Series(dtype=str)
        return df
    df = df.sort_values("date", kind="stable").reset_index(drop=True)
    df["label"] = df["date"].dt.strftime("%b %d")
    return df


def products_frame(products: Sequence[Product]) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {
                "Image": p.image_url,
                "Product": p.title,
                "Status": "Active",
                "Inventory": f"{p.inventory} in stock",
                "Vendor": p.vendor,
            }
            for p in products
        ],
        columns=["Image", "Product", "Status", "Inventory", "Vendor"],
    )
