import httpx

from conftest import completion_response, rate_limited_response, request_json
from translator.llm.translate import (
    RATE_LIMIT_BACKOFF,
    TranslationStatus,
    build_messages,
    extract_translation_from_response,
    translate_text,
    translate_text_result,
)


def test_build_messages_names_language_and_quotes_text():
    messages = build_messages("Hello", "es")
    assert [m["role"] for m in messages] == ["system", "user"]
    assert "es" in messages[0]["content"]
    assert "'Hello'" in messages[1]["content"]


def test_translate_returns_stripped_content_and_sends_expected_request(make_client):
    seen = []

    def handler(request):
        seen.append(request)
        return completion_response("  Olá, como vai?  \n")

    client, sleeps = make_client(handler)
    assert translate_text(client, "Hello, how are you?") == "Olá, como vai?"

    assert len(seen) == 1
    req = seen[0]
    assert req.method == "POST"
    assert req.url.host == "unit-test.openai.azure.com"
    assert req.url.path == "/openai/deployments/gpt-4o-mini/chat/completions"
    assert req.url.params["api-version"] == "2024-08-01-preview"
    assert req.headers["api-key"] == "test-key"
    assert "application/json" in req.headers["accept"]
    body = request_json(req)
    assert body["max_tokens"] == 1000
    assert len(body["messages"]) == 2
    assert "pt-br" in body["messages"][0]["content"]
    assert "'Hello, how are you?'" in body["messages"][1]["content"]
    assert sleeps == []


def test_explicit_target_language_overrides_default(make_client):
    seen = []

    def handler(request):
        seen.append(request_json(request))
        return completion_response("Hola")

    client, _ = make_client(handler)
    assert translate_text(client, "Hello", "es") == "Hola"
    assert "to es" in seen[0]["messages"][1]["content"]


def test_empty_text_makes_no_request(make_client):
    calls = []

    def handler(request):
        calls.append(request)
        return completion_response("unused")

    client, _ = make_client(handler)
    result = translate_text_result(client, "")
    assert result.status is TranslationStatus.EMPTY_INPUT
    assert result.text == ""
    assert result.attempts == 0
    assert calls == []


def test_rate_limit_then_success_waits_once(make_client):
    responses = [rate_limited_response(), completion_response("Traduzido")]

    def handler(request):
        return responses.pop(0)

    client, sleeps = make_client(handler)
    result = translate_text_result(client, "Translated")
    assert result.ok
    assert result.text == "Traduzido"
    assert result.attempts == 2
    assert sleeps == [RATE_LIMIT_BACKOFF]


def test_rate_limit_exhausted_returns_empty(make_client):
    calls = []

    def handler(request):
        calls.append(request)
        return rate_limited_response()

    client, sleeps = make_client(handler)
    result = translate_text_result(client, "Hello", max_retries=3)
    assert result.status is TranslationStatus.RATE_LIMITED
    assert result.text == ""
    assert len(calls) == 3
    # no backoff after the final attempt
    assert sleeps == [RATE_LIMIT_BACKOFF] * 2
    assert translate_text(client, "Hello", max_retries=2) == ""


def test_server_error_aborts_without_retry(make_client):
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(500, json={"error": {"message": "boom"}})

    client, sleeps = make_client(handler)
    result = translate_text_result(client, "Hello")
    assert result.status is TranslationStatus.REQUEST_FAILED
    assert result.text == ""
    assert len(calls) == 1
    assert sleeps == []


def test_network_error_aborts_without_retry(make_client):
    calls = []

    def handler(request):
        calls.append(request)
        raise httpx.ConnectError("connection refused", request=request)

    client, sleeps = make_client(handler)
    result = translate_text_result(client, "Hello")
    assert result.status is TranslationStatus.REQUEST_FAILED
    assert len(calls) == 1
    assert sleeps == []


def test_response_without_choices_is_malformed(make_client):
    client, _ = make_client(lambda request: httpx.Response(200, json={"choices": []}))
    result = translate_text_result(client, "Hello")
    assert result.status is TranslationStatus.MALFORMED_RESPONSE
    assert result.text == ""


def test_non_json_response_is_malformed(make_client):
    client, _ = make_client(lambda request: httpx.Response(200, text="<html>gateway</html>"))
    result = translate_text_result(client, "Hello")
    assert result.status is TranslationStatus.MALFORMED_RESPONSE
    assert "Error extracting translation" in result.detail


def test_extract_translation_from_response_paths():
    assert extract_translation_from_response('{"choices": [{"message": {"content": " ok "}}]}') == "ok"
    assert extract_translation_from_response('{"choices": [{"message": {"content": null}}]}') == ""
