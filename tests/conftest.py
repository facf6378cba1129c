import json

import httpx
import pytest

from translator.config import Settings
from translator.llm.client import TranslatorClient

SETTINGS = Settings(
    api_key="test-key",
    endpoint="https://unit-test.openai.azure.com",
    default_target_language="pt-br",
)


def completion_response(content, status_code=200):
    body = {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "choices": [
            {"index": 0, "finish_reason": "stop", "message": {"role": "assistant", "content": content}},
        ],
    }
    return httpx.Response(status_code, json=body)


def rate_limited_response():
    return httpx.Response(429, json={"error": {"code": "429", "message": "Rate limit exceeded"}})


def request_json(request: httpx.Request):
    return json.loads(request.content.decode("utf-8"))


@pytest.fixture
def make_client():
    """Build a TranslatorClient over a mock transport; returns (client, recorded sleeps)."""
    clients = []

    def _make(handler):
        sleeps = []
        client = TranslatorClient.create(SETTINGS, transport=httpx.MockTransport(handler), sleep=sleeps.append)
        clients.append(client)
        return client, sleeps

    yield _make
    for client in clients:
        client.close()
