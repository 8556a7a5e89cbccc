from __future__ import annotations
import asyncio
import time
from typing import Optional

import certifi
import httpx
from loguru import logger

from storefront_ai import settings


class LLMConfigError(RuntimeError):
    pass


def call_gemini_sync(
    prompt: str,
    response_schema: dict,
    model_id: Optional[str] = None,
    transport: Optional[httpx.BaseTransport] = None,
) -> dict:
    """Single generateContent round trip constrained to a JSON response schema."""
    if not settings.GEMINI_API_KEY:
        raise LLMConfigError("GEMINI_API_KEY is not set.")
    model_id = model_id or settings.GENERATION_MODEL
    payload = {
        "contents": [{"role": "user", "parts": [{"text": prompt}]}],
        "generationConfig": {
            "responseMimeType": "application/json",
            "responseSchema": response_schema,
        },
    }
    with httpx.Client(
        timeout=settings.LLM_TIMEOUT_S,
        verify=certifi.where(),
        http2=False,
        trust_env=False,
        transport=transport,
    ) as client:
        r = client.post(
            f"{settings.GEMINI_BASE_URL}/models/{model_id}:generateContent",
            headers={"x-goog-api-key": settings.GEMINI_API_KEY, "Content-Type": "application/json"},
            json=payload,
        )
        r.raise_for_status()
        return r.json()


def response_text(data: dict) -> str:
    candidates = data.get("candidates") or []
    if not candidates:
        return ""
    parts = (candidates[0].get("content") or {}).get("parts") or []
    return "".join(p.get("text", "") for p in parts)


async def generate_json(prompt: str, response_schema: dict, model_id: Optional[str] = None) -> dict:
    model_id = model_id or settings.GENERATION_MODEL
    t0 = time.perf_counter()
    data = await asyncio.to_thread(call_gemini_sync, prompt, response_schema, model_id)
    dt_ms = int((time.perf_counter() - t0) * 1000)

    usage = data.get("usageMetadata", {}) or {}
    logger.info(
        f"{model_id} answered in {dt_ms} ms "
        f"(prompt={usage.get('promptTokenCount')}, output={usage.get('candidatesTokenCount')})"
    )
    return {
        "model": model_id,
        "text": response_text(data),
        "latency_ms": dt_ms,
        "usage": usage,
    }
