"""Client utilities for the Azure OpenAI chat-completion deployment.

One `httpx.Client` is shared by page fetching and by the `AzureOpenAI`
SDK client, so every outbound request of a session goes through the same
connection pool (and, in tests, the same mock transport).
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable, Optional

import httpx
from openai import AzureOpenAI

from translator.config import Settings

# Deployment and API version are fixed for this service
DEPLOYMENT = "gpt-4o-mini"
API_VERSION = "2024-08-01-preview"
MAX_TOKENS = 1000


def get_http_client(transport: Optional[httpx.BaseTransport] = None) -> httpx.Client:
    """Create the shared HTTP client.

    Doxygen:
    - @param transport: Optional transport (e.g. `httpx.MockTransport` in tests).
    - @return: `httpx.Client` sending `Accept: application/json` by default.
    """
    return httpx.Client(
        headers={"Accept": "application/json"},
        follow_redirects=True,
        transport=transport,
    )


def get_azure_client(settings: Settings, http_client: httpx.Client) -> AzureOpenAI:
    """Create an AzureOpenAI client bound to the shared HTTP client.

    SDK retries are disabled; rate-limit handling lives in
    `translator.llm.translate`.

    Doxygen:
    - @param settings: Loaded configuration with key and endpoint.
    - @param http_client: Shared `httpx.Client`.
    - @return: Configured `AzureOpenAI` instance.
    """
    return AzureOpenAI(
        api_key=settings.api_key,
        azure_endpoint=settings.endpoint,
        api_version=API_VERSION,
        max_retries=0,
        http_client=http_client,
    )


@dataclass
class TranslatorClient:
    """Everything an operation needs: configuration, HTTP, LLM and a sleep function."""

    settings: Settings
    http: httpx.Client
    llm: AzureOpenAI
    sleep: Callable[[float], None] = field(default=time.sleep)

    @classmethod
    def create(
        cls,
        settings: Settings,
        transport: Optional[httpx.BaseTransport] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> "TranslatorClient":
        http = get_http_client(transport)
        return cls(settings=settings, http=http, llm=get_azure_client(settings, http), sleep=sleep)

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "TranslatorClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
