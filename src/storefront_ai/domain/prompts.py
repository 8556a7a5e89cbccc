from __future__ import annotations
import json
from typing import Iterable, Sequence

from storefront_ai import settings
from storefront_ai.domain.models import Customer, Order

# Response schemas in the generative-language API's OpenAPI subset.
PRODUCT_COPY_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "title": {"type": "STRING"},
        "description": {"type": "STRING"},
        "tags": {"type": "STRING"},
    },
}

STORE_ANALYSIS_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "summary": {"type": "STRING"},
        "trends": {"type": "ARRAY", "items": {"type": "STRING"}},
        "recommendations": {"type": "ARRAY", "items": {"type": "STRING"}},
    },
}


def build_product_prompt(name: str, features: str, tone: str = settings.PRODUCT_TONE_DEFAULT) -> str:
    return f"""
    Write a compelling product description for an e-commerce store.
    Product Name: {name}
    Key Features: {features}
    Tone: {tone}

    Return the result in JSON format with the following fields:
    - title: An SEO-optimized title
    - description: The HTML description (keep it clean, use <p> and <ul> tags)
    - tags: A comma-separated list of SEO tags
    """


def summarize_orders(orders: Iterable[Order], limit: int = settings.ANALYSIS_ORDER_SAMPLE) -> list[dict]:
    """Reduce the most recent orders to date/total/currency so the prompt stays small."""
    sample = list(orders)[:limit]
    return [{"date": o.created_at, "total": o.total_price, "currency": o.currency} for o in sample]


def summarize_customers(customers: Sequence[Customer]) -> dict:
    count = len(customers)
    if count:
        avg = sum(float(c.total_spent or 0) for c in customers) / count
        avg_spend = f"{avg:.2f}"
    else:
        avg_spend = "0"
    return {
        "totalCount": count,
        "returningCount": sum(1 for c in customers if c.orders_count > 1),
        "averageSpend": avg_spend,
    }


def build_analysis_prompt(orders: Iterable[Order], customers: Sequence[Customer]) -> str:
    order_summary = json.dumps(summarize_orders(orders), separators=(",", ":"))
    customer_summary = json.dumps(summarize_customers(customers), separators=(",", ":"))
    return f"""
    Analyze the performance of this e-commerce store based on the data provided.

    Recent Orders (Sample): {order_summary}
    Customer Metrics: {customer_summary}

    Provide a strategic summary, identify 2-3 key trends, and give 3 actionable recommendations
    to improve revenue and customer retention.
    """
