"""Text translation through the Azure OpenAI chat-completion deployment.

Includes prompt construction, response parsing and the fixed-backoff
rate-limit retry loop. Failures are reported as a `TranslationResult`
status instead of being raised.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional

from openai import APIError

from .client import DEPLOYMENT, MAX_TOKENS, TranslatorClient

RATE_LIMIT_STATUS = 429
RATE_LIMIT_BACKOFF = 10.0
DEFAULT_MAX_RETRIES = 3


class TranslationStatus(Enum):
    OK = "ok"
    EMPTY_INPUT = "empty_input"
    RATE_LIMITED = "rate_limited"
    REQUEST_FAILED = "request_failed"
    MALFORMED_RESPONSE = "malformed_response"


@dataclass
class TranslationResult:
    status: TranslationStatus
    text: str = ""
    detail: Optional[str] = None
    attempts: int = 0

    @property
    def ok(self) -> bool:
        return self.status is TranslationStatus.OK


class MalformedResponseError(ValueError):
    """The response body is not JSON or lacks `choices[0].message.content`."""


def build_messages(text: str, target_language: str) -> List[Dict[str, str]]:
    """Return the system/user message pair for one translation."""
    return [
        {"role": "system", "content": f"You are an AI assistant that translates text to {target_language}."},
        {"role": "user", "content": f"Translate the text: '{text}' to {target_language}"},
    ]


def extract_translation_from_response(response_body: str) -> str:
    """Return the stripped `choices[0].message.content` of a completion body.

    Doxygen:
    - @param response_body: Raw JSON text returned by the endpoint.
    - @return: Translated text (may be empty if the model returned nothing).
    - @throws MalformedResponseError: If the body is not JSON or the path is absent.
    """
    try:
        obj = json.loads(response_body)
    except ValueError as e:
        raise MalformedResponseError(f"Error extracting translation from response: {e}") from e

    try:
        content = obj["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        raise MalformedResponseError("No translation found in the response.")
    if content is None:
        return ""
    if not isinstance(content, str):
        raise MalformedResponseError("No translation found in the response.")
    return content.strip()


def classify_failure(exc: APIError) -> Optional[int]:
    """Return the HTTP status code carried by a failed request, if any.

    Connection errors and timeouts have no status and yield None.
    """
    status = getattr(exc, "status_code", None)
    return status if isinstance(status, int) else None


def _send(client: TranslatorClient, messages: List[Dict[str, str]]) -> str:
    raw = client.llm.chat.completions.with_raw_response.create(
        model=DEPLOYMENT,
        messages=messages,
        max_tokens=MAX_TOKENS,
    )
    return raw.http_response.text


def translate_text_result(
    client: TranslatorClient,
    text: str,
    target_language: Optional[str] = None,
    max_retries: int = DEFAULT_MAX_RETRIES,
) -> TranslationResult:
    """Translate `text` and report how the call ended.

    Rate-limited attempts (HTTP 429) sleep a fixed `RATE_LIMIT_BACKOFF`
    seconds and retry, up to `max_retries` attempts in total. Any other
    failure stops immediately.

    Doxygen:
    - @param client: Shared `TranslatorClient`.
    - @param text: Source text; empty text makes no request.
    - @param target_language: Language code; defaults to the configured one.
    - @param max_retries: Total number of attempts.
    - @return: `TranslationResult` with the text only when status is OK.
    """
    if not text:
        print("No text to translate.")
        return TranslationResult(TranslationStatus.EMPTY_INPUT)

    target_language = target_language or client.settings.default_target_language
    messages = build_messages(text, target_language)

    attempts = 0
    while attempts < max_retries:
        attempts += 1
        try:
            body = _send(client, messages)
        except APIError as e:
            status = classify_failure(e)
            if status == RATE_LIMIT_STATUS:
                print("Error 429: Too many requests. Retrying...")
                if attempts < max_retries:
                    client.sleep(RATE_LIMIT_BACKOFF)
                continue
            print(f"Error making request to the API: {e}")
            return TranslationResult(TranslationStatus.REQUEST_FAILED, detail=str(e), attempts=attempts)

        try:
            translated = extract_translation_from_response(body)
        except MalformedResponseError as e:
            print(str(e))
            return TranslationResult(TranslationStatus.MALFORMED_RESPONSE, detail=str(e), attempts=attempts)
        return TranslationResult(TranslationStatus.OK, text=translated, attempts=attempts)

    print("Failed to translate after several attempts.")
    return TranslationResult(
        TranslationStatus.RATE_LIMITED,
        detail=f"rate limited on {attempts} attempt(s)",
        attempts=attempts,
    )


def translate_text(
    client: TranslatorClient,
    text: str,
    target_language: Optional[str] = None,
    max_retries: int = DEFAULT_MAX_RETRIES,
) -> str:
    """Translate `text`; returns an empty string when there is no translation.

    Use `translate_text_result` to tell an empty input from a failed call.
    """
    return translate_text_result(client, text, target_language, max_retries).text
