from __future__ import annotations
import json
import re


class ModelOutputError(ValueError):
    """The model returned text that is not the JSON object we asked for."""


def strip_fence(text: str) -> str:
    """Body of a ```json ... ``` block when the whole text is one, else the text trimmed."""
    text = text.strip()
    if not text.startswith("```"):
        return text
    m = re.fullmatch(r"```[a-z]*\s*\n?(.*?)\n?\s*```", text, flags=re.S | re.I)
    return m.group(1).strip() if m else text


def parse_json_payload(text: str | None) -> dict:
    # An empty completion parses to an empty object; anything else must be valid JSON.
    if not text or not text.strip():
        return {}
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        body = strip_fence(text)
        if body == text.strip():
            raise ModelOutputError(f"Model output is not valid JSON: {e}") from e
        try:
            data = json.loads(body)
        except json.JSONDecodeError as e2:
            raise ModelOutputError(f"Model output is not valid JSON: {e2}") from e2
    if not isinstance(data, dict):
        raise ModelOutputError(f"Expected a JSON object, got {type(data).__name__}.")
    return data


def missing_fields(payload: dict, schema: dict) -> list[str]:
    return [k for k in schema.get("properties", {}) if k not in payload]
