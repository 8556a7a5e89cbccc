from __future__ import annotations
from typing import Sequence

from loguru import logger

from storefront_ai import settings
from storefront_ai.adapters import llm_gemini as llm
from storefront_ai.domain import guardrails as gr
from storefront_ai.domain.models import Customer, Order, ProductCopy, StoreAnalysis
from storefront_ai.domain.prompts import (
    PRODUCT_COPY_SCHEMA,
    STORE_ANALYSIS_SCHEMA,
    build_analysis_prompt,
    build_product_prompt,
)


async def _complete(prompt: str, schema: dict, what: str) -> dict:
    try:
        result = await llm.generate_json(prompt, schema)
        payload = gr.parse_json_payload(result["text"])
    except Exception as e:
        logger.error(f"{what} failed: {e}")
        raise
    missing = gr.missing_fields(payload, schema)
    if payload and missing:
        logger.warning(f"{what}: model omitted {', '.join(missing)}")
    return payload


async def generate_product_description(
    name: str, features: str, tone: str = settings.PRODUCT_TONE_DEFAULT
) -> dict:
    """Ask the model for an SEO title, an HTML description and comma-separated tags."""
    prompt = build_product_prompt(name, features, tone)
    return await _complete(prompt, PRODUCT_COPY_SCHEMA, "Product description")


async def analyze_store_performance(orders: Sequence[Order], customers: Sequence[Customer]) -> dict:
    """Summary, trends and recommendations from recent orders plus customer aggregates."""
    prompt = build_analysis_prompt(orders, customers)
    return await _complete(prompt, STORE_ANALYSIS_SCHEMA, "Store analysis")


def as_product_copy(payload: dict) -> ProductCopy:
    return ProductCopy.model_validate(payload)


def as_store_analysis(payload: dict) -> StoreAnalysis:
    return StoreAnalysis.model_validate(payload)
