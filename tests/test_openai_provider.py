from __future__ import annotations

import json
from typing import List

import httpx
import pytest

from preflop_advisor.config import AppSettings
from preflop_advisor.errors import ConfigurationError, UpstreamError
from preflop_advisor.strategy.providers.openai_ import OpenAIChatProvider, extract_content


MESSAGES = [{"role": "system", "content": "sys"}, {"role": "user", "content": "usr"}]


def _completion(content: str) -> dict:
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


def test_posts_chat_completion(settings: AppSettings) -> None:
    seen: List[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=_completion('  {"decision":"Call"}\n'))

    provider = OpenAIChatProvider(settings, transport=httpx.MockTransport(handler))
    assert provider.complete(MESSAGES) == '{"decision":"Call"}'

    assert len(seen) == 1
    request = seen[0]
    assert request.method == "POST"
    assert str(request.url) == "https://api.openai.com/v1/chat/completions"
    assert request.headers["Authorization"] == "Bearer sk-test"
    body = json.loads(request.content)
    assert body == {"model": "gpt-4o-mini", "temperature": 0.2, "messages": MESSAGES}


def test_non_success_status_raises_upstream_error(settings: AppSettings) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(429, text='{"error":{"message":"Rate limit reached"}}')

    provider = OpenAIChatProvider(settings, transport=httpx.MockTransport(handler))
    with pytest.raises(UpstreamError) as info:
        provider.complete(MESSAGES)
    assert info.value.status_code == 502
    assert info.value.upstream_status == 429
    assert info.value.to_payload() == {
        "error": "Upstream model error",
        "detail": '{"error":{"message":"Rate limit reached"}}',
    }


def test_missing_key_makes_no_request(settings_without_key: AppSettings) -> None:
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200, json=_completion("{}"))

    provider = OpenAIChatProvider(settings_without_key, transport=httpx.MockTransport(handler))
    with pytest.raises(ConfigurationError):
        provider.complete(MESSAGES)
    assert calls == []


def test_custom_api_base(settings: AppSettings) -> None:
    custom = settings.model_copy(update={"API_BASE": "http://localhost:11434/v1", "MODEL_NAME": "llama3.1:8b"})
    seen: List[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=_completion("{}"))

    OpenAIChatProvider(custom, transport=httpx.MockTransport(handler)).complete(MESSAGES)
    assert str(seen[0].url) == "http://localhost:11434/v1/chat/completions"
    assert json.loads(seen[0].content)["model"] == "llama3.1:8b"


@pytest.mark.parametrize(
    "data",
    [
        {},
        {"choices": []},
        {"choices": [{}]},
        {"choices": [{"message": {"content": None}}]},
        [],
    ],
)
def test_extract_content_missing_path(data: object) -> None:
    assert extract_content(data) == ""
