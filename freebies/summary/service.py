from __future__ import annotations

from typing import Any

import httpx
import structlog

from freebies.core.config import get_settings
from freebies.summary.errors import SummaryGenerationError
from freebies.summary.prompt import SUMMARY_SYSTEM_ROLE, build_summary_prompt

logger = structlog.get_logger(__name__)


def _build_request_body(*, model: str, description: str) -> dict[str, Any]:
    return {
        "model": model,
        "messages": [
            {"role": "system", "content": SUMMARY_SYSTEM_ROLE},
            {"role": "user", "content": build_summary_prompt(description)},
        ],
    }


def _extract_text(payload: object) -> str:
    try:
        content = payload["choices"][0]["message"]["content"]  # type: ignore[index]
    except (KeyError, IndexError, TypeError) as exc:
        raise SummaryGenerationError("summary response has an unexpected shape") from exc
    if not isinstance(content, str) or not content.strip():
        raise SummaryGenerationError("summary response is empty")
    return content.strip()


async def generate_summary(description: str) -> str:
    settings = get_settings()
    if not settings.summary_api_key:
        raise SummaryGenerationError("summary api key is not configured")

    body = _build_request_body(model=settings.summary_model, description=description)
    headers = {"Authorization": f"Bearer {settings.summary_api_key}"}
    try:
        async with httpx.AsyncClient(timeout=settings.summary_timeout_seconds) as client:
            response = await client.post(settings.summary_api_url, json=body, headers=headers)
            response.raise_for_status()
            payload = response.json()
    except (httpx.HTTPError, ValueError) as exc:
        raise SummaryGenerationError(f"summary request failed: {exc.__class__.__name__}") from exc

    summary = _extract_text(payload)
    logger.debug("summary_generated", model=settings.summary_model, length=len(summary))
    return summary
