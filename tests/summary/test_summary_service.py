from __future__ import annotations

from types import SimpleNamespace
from typing import Any

import httpx
import pytest

from freebies.summary import service
from freebies.summary.errors import SummaryGenerationError
from freebies.summary.prompt import SUMMARY_SYSTEM_ROLE, build_summary_prompt


class _Response:
    def __init__(self, payload: object, *, status_code: int = 200) -> None:
        self._payload = payload
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            request = httpx.Request("POST", "https://llm.example.local/v1/chat/completions")
            raise httpx.HTTPStatusError(
                "bad status",
                request=request,
                response=httpx.Response(self.status_code, request=request),
            )

    def json(self) -> object:
        return self._payload


class _Client:
    def __init__(self, calls: list[dict[str, Any]], response: _Response | Exception) -> None:
        self._calls = calls
        self._response = response

    async def __aenter__(self) -> "_Client":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:  # type: ignore[override]
        return None

    async def post(self, url: str, *, json: dict[str, Any], headers: dict[str, str]) -> _Response:
        self._calls.append({"url": url, "json": json, "headers": headers})
        if isinstance(self._response, Exception):
            raise self._response
        return self._response


def _settings(*, api_key: str = "sk-test") -> SimpleNamespace:
    return SimpleNamespace(
        summary_api_url="https://llm.example.local/v1/chat/completions",
        summary_api_key=api_key,
        summary_model="test-model",
        summary_timeout_seconds=7.5,
    )


def _patch_http_client(
    monkeypatch: pytest.MonkeyPatch,
    calls: list[dict[str, Any]],
    response: _Response | Exception,
) -> None:
    monkeypatch.setattr(service.httpx, "AsyncClient", lambda timeout: _Client(calls, response))


def _completion(content: object) -> dict[str, Any]:
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


def test_summary_prompt_wraps_description() -> None:
    prompt = build_summary_prompt("Jump between floating islands.")

    assert SUMMARY_SYSTEM_ROLE not in prompt
    assert prompt.startswith("Please provide a concise")
    assert "maximum 3 sentences" in prompt
    assert "Game Description:\nJump between floating islands." in prompt
    assert prompt.endswith("Summary:")


@pytest.mark.asyncio
async def test_generate_summary_posts_chat_completion(monkeypatch) -> None:
    calls: list[dict[str, Any]] = []
    monkeypatch.setattr(service, "get_settings", _settings)
    _patch_http_client(monkeypatch, calls, _Response(_completion("  A tidy little puzzler.  ")))

    summary = await service.generate_summary("Solve puzzles.")

    assert summary == "A tidy little puzzler."
    assert len(calls) == 1
    call = calls[0]
    assert call["url"] == "https://llm.example.local/v1/chat/completions"
    assert call["headers"] == {"Authorization": "Bearer sk-test"}
    assert call["json"]["model"] == "test-model"
    assert call["json"]["messages"][0] == {"role": "system", "content": SUMMARY_SYSTEM_ROLE}
    assert call["json"]["messages"][1]["content"] == build_summary_prompt("Solve puzzles.")
    assert SUMMARY_SYSTEM_ROLE not in call["json"]["messages"][1]["content"]


@pytest.mark.asyncio
async def test_generate_summary_requires_api_key(monkeypatch) -> None:
    calls: list[dict[str, Any]] = []
    monkeypatch.setattr(service, "get_settings", lambda: _settings(api_key=""))
    _patch_http_client(monkeypatch, calls, _Response(_completion("unused")))

    with pytest.raises(SummaryGenerationError):
        await service.generate_summary("Solve puzzles.")
    assert calls == []


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "response",
    [
        httpx.ReadTimeout("timed out"),
        _Response({"error": "rate limited"}, status_code=429),
    ],
)
async def test_generate_summary_wraps_transport_failures(monkeypatch, response) -> None:
    monkeypatch.setattr(service, "get_settings", _settings)
    _patch_http_client(monkeypatch, [], response)

    with pytest.raises(SummaryGenerationError):
        await service.generate_summary("Solve puzzles.")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        {"choices": []},
        {"unexpected": True},
        [],
        _completion(""),
        _completion("   "),
        _completion(None),
    ],
)
async def test_generate_summary_rejects_unusable_responses(monkeypatch, payload: object) -> None:
    monkeypatch.setattr(service, "get_settings", _settings)
    _patch_http_client(monkeypatch, [], _Response(payload))

    with pytest.raises(SummaryGenerationError):
        await service.generate_summary("Solve puzzles.")
