import json

import httpx
import pytest

from storefront_ai import settings
from storefront_ai.adapters import llm_gemini as llm
from storefront_ai.domain import fixtures
from storefront_ai.domain.guardrails import ModelOutputError
from storefront_ai.domain.prompts import PRODUCT_COPY_SCHEMA, STORE_ANALYSIS_SCHEMA
from storefront_ai.services import content_service

WIDGET_COPY = {
    "title": "Widget: Blue and Built to Last",
    "description": "<p>A durable blue widget.</p><ul><li>Blue</li><li>Durable</li></ul>",
    "tags": "widget, blue, durable",
}


def gemini_response(text: str) -> dict:
    return {
        "candidates": [{"content": {"role": "model", "parts": [{"text": text}]}}],
        "usageMetadata": {"promptTokenCount": 42, "candidatesTokenCount": 17},
    }


@pytest.fixture
def fake_completion(mocker):
    """Replace the model call with an AsyncMock returning `text` or raising `error`."""

    def install(text=None, error=None):
        completion = mocker.patch.object(llm, "generate_json", new_callable=mocker.AsyncMock)
        if error:
            completion.side_effect = error
        else:
            completion.return_value = {"model": "test", "text": text, "latency_ms": 1, "usage": {}}
        return completion

    return install


@pytest.fixture
def gemini_transport(monkeypatch):
    """Route call_gemini_sync through an httpx.MockTransport."""
    monkeypatch.setattr(settings, "GEMINI_API_KEY", "test-key")
    seen = []

    def install(handler):
        def recording(request):
            seen.append(request)
            return handler(request)

        original = llm.call_gemini_sync
        transport = httpx.MockTransport(recording)
        monkeypatch.setattr(
            llm, "call_gemini_sync",
            lambda prompt, schema, model_id=None: original(prompt, schema, model_id, transport=transport),
        )
        return seen

    return install


# --- Product descriptions ---


@pytest.mark.asyncio
async def test_generate_product_description_round_trip(gemini_transport):
    seen = gemini_transport(lambda request: httpx.Response(200, json=gemini_response(json.dumps(WIDGET_COPY))))

    result = await content_service.generate_product_description("Widget", "blue, durable")

    assert result["title"] and result["description"] and result["tags"]
    request = seen[0]
    assert request.url.path.endswith(f"/models/{settings.GENERATION_MODEL}:generateContent")
    assert request.headers["x-goog-api-key"] == "test-key"
    body = json.loads(request.content)
    assert body["generationConfig"]["responseMimeType"] == "application/json"
    assert body["generationConfig"]["responseSchema"] == PRODUCT_COPY_SCHEMA
    prompt = body["contents"][0]["parts"][0]["text"]
    assert "Product Name: Widget" in prompt
    assert "Key Features: blue, durable" in prompt
    assert "Tone: persuasive" in prompt


@pytest.mark.asyncio
async def test_generate_product_description_uses_requested_tone(fake_completion):
    completion = fake_completion(text=json.dumps(WIDGET_COPY))

    await content_service.generate_product_description("Widget", "blue", tone="enthusiastic")

    assert "Tone: enthusiastic" in completion.await_args.args[0]
    assert completion.await_args.args[1] is PRODUCT_COPY_SCHEMA


@pytest.mark.asyncio
async def test_generate_product_description_transport_failure_rejects(gemini_transport):
    gemini_transport(lambda request: httpx.Response(429, json={"error": {"message": "quota"}}))

    with pytest.raises(httpx.HTTPStatusError):
        await content_service.generate_product_description("Widget", "blue, durable")


@pytest.mark.asyncio
async def test_completion_error_rejects_without_partial_result(fake_completion):
    fake_completion(error=RuntimeError("model unavailable"))

    with pytest.raises(RuntimeError, match="model unavailable"):
        await content_service.generate_product_description("Widget", "blue, durable")


@pytest.mark.asyncio
async def test_unparseable_output_rejects(fake_completion):
    fake_completion(text="Sure! Here is your description: ...")

    with pytest.raises(ModelOutputError):
        await content_service.generate_product_description("Widget", "blue, durable")


@pytest.mark.asyncio
async def test_empty_output_is_empty_object(fake_completion):
    fake_completion(text="")

    assert await content_service.generate_product_description("Widget", "blue") == {}


@pytest.mark.asyncio
async def test_description_with_code_fences_is_kept_whole(fake_completion):
    copy = {**WIDGET_COPY, "description": "<p>Install:</p><pre>```pip install widget```</pre>"}
    completion = fake_completion(text=json.dumps(copy))

    result = await content_service.generate_product_description("Widget", "blue")

    assert result == copy
    completion.assert_awaited_once()


@pytest.mark.asyncio
async def test_missing_api_key_fails_before_network(monkeypatch):
    monkeypatch.setattr(settings, "GEMINI_API_KEY", "")

    with pytest.raises(llm.LLMConfigError):
        await content_service.generate_product_description("Widget", "blue")


# --- Store analysis ---


@pytest.mark.asyncio
async def test_analyze_store_performance(fake_completion):
    analysis = {"summary": "Healthy.", "trends": ["Repeat buyers"], "recommendations": ["Bundle", "Email", "Loyalty"]}
    completion = fake_completion(text=json.dumps(analysis))

    result = await content_service.analyze_store_performance(fixtures.DEMO_ORDERS, fixtures.DEMO_CUSTOMERS)

    assert result == analysis
    prompt = completion.await_args.args[0]
    assert '"totalCount":3' in prompt
    assert '"returningCount":2' in prompt
    assert '"averageSpend":"611.67"' in prompt
    assert '"total":"129.99"' in prompt
    assert completion.await_args.args[1] is STORE_ANALYSIS_SCHEMA


@pytest.mark.asyncio
async def test_analyze_with_no_customers_reports_zero_average(fake_completion):
    completion = fake_completion(text='{"summary": "", "trends": [], "recommendations": []}')

    await content_service.analyze_store_performance([], [])

    assert '"averageSpend":"0"' in completion.await_args.args[0]
    assert '"totalCount":0' in completion.await_args.args[0]


@pytest.mark.asyncio
async def test_analyze_failure_propagates(fake_completion):
    fake_completion(error=httpx.ConnectError("offline"))

    with pytest.raises(httpx.ConnectError):
        await content_service.analyze_store_performance(fixtures.DEMO_ORDERS, fixtures.DEMO_CUSTOMERS)


def test_typed_results_default_missing_fields():
    copy = content_service.as_product_copy({"title": "T", "tags": " a, b ,,c "})
    assert copy.description == ""
    assert copy.tag_list == ["a", "b", "c"]

    analysis = content_service.as_store_analysis({"summary": "ok"})
    assert analysis.trends == [] and analysis.recommendations == []
