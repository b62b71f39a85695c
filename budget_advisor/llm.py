# budget_advisor/llm.py
from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional

import requests

from . import config
from .errors import AdvisorAuthError, AdvisorRequestError, AdvisorResponseError

logger = logging.getLogger(__name__)

_AUTH_MARKERS = ("API_KEY_INVALID", "API key not valid", "API key", "PERMISSION_DENIED", "UNAUTHENTICATED")


def _to_contents(messages: List[Dict[str, str]]) -> List[Dict[str, Any]]:
    contents = []
    for m in messages:
        role = m.get("role", "user")
        if role == "system":
            role = "user"
        contents.append({"role": role, "parts": [{"text": m["content"]}]})
    return contents


def _is_auth_failure(resp: requests.Response) -> bool:
    if resp.status_code in (401, 403):
        return True
    if resp.status_code == 400:
        body = resp.text or ""
        return any(marker in body for marker in _AUTH_MARKERS)
    return False


def _extract_text(data: Dict[str, Any]) -> str:
    """candidates[0].content.parts[*].text, or "" when the model sent nothing."""
    candidates = data.get("candidates") or []
    if not candidates or not isinstance(candidates[0], dict):
        return ""
    parts = (candidates[0].get("content") or {}).get("parts") or []
    return "".join(str(p.get("text", "")) for p in parts if isinstance(p, dict))


def call_llm_json(
    messages: List[Dict[str, str]],
    *,
    response_schema: Optional[Dict[str, Any]] = None,
    model: Optional[str] = None,
    api_key: Optional[str] = None,
    temperature: Optional[float] = None,
    timeout_connect: Optional[int] = None,
    timeout_read: Optional[int] = None,
) -> Dict[str, Any]:
    """
    One generateContent call; returns the model's JSON object.
    There is no retry: every failure is raised to the caller.
    """
    model = model or config.DEFAULT_MODEL
    key = config.get_api_key() if api_key is None else api_key

    url = f"{config.GEMINI_API_BASE}/{model}:generateContent"
    # keep the key out of the URL
    headers = {"x-goog-api-key": key}

    generation_config: Dict[str, Any] = {"responseMimeType": "application/json"}
    if response_schema is not None:
        generation_config["responseSchema"] = response_schema
    if temperature is not None:
        generation_config["temperature"] = temperature

    payload = {
        "contents": _to_contents(messages),
        "generationConfig": generation_config,
    }

    timeout = (
        timeout_connect or config.TIMEOUT_CONNECT,
        timeout_read or config.TIMEOUT_READ,
    )

    logger.info("Requesting budget advice from %s", model)
    try:
        resp = requests.post(url, json=payload, headers=headers, timeout=timeout)
    except requests.RequestException as e:
        raise AdvisorRequestError(f"Gemini request failed: {e}") from e

    if resp.status_code != 200:
        logger.warning("Gemini returned HTTP %s", resp.status_code)
        if _is_auth_failure(resp):
            raise AdvisorAuthError(
                f"Gemini rejected the API key (HTTP {resp.status_code})",
                status_code=resp.status_code,
            )
        raise AdvisorRequestError(
            f"Gemini API call failed (HTTP {resp.status_code}): {resp.text}",
            status_code=resp.status_code,
        )

    try:
        data = resp.json()
    except ValueError as e:
        raise AdvisorResponseError(f"Gemini response body is not JSON: {e}") from e
    if not isinstance(data, dict):
        raise AdvisorResponseError("Gemini response body is not a JSON object")

    text = _extract_text(data)
    try:
        result = json.loads(text or "{}")
    except json.JSONDecodeError as e:
        raise AdvisorResponseError(f"Model output is not valid JSON: {e}") from e

    if not isinstance(result, dict):
        raise AdvisorResponseError(f"Model output is not a JSON object: {type(result).__name__}")
    return result
