"""LLM (Large Language Model) integration package.

This package provides the Azure OpenAI client wrapper shared by all
operations and the text translation function with rate-limit retries.
"""

from .client import (
    API_VERSION,
    DEPLOYMENT,
    MAX_TOKENS,
    TranslatorClient,
    get_azure_client,
    get_http_client,
)
from .translate import (
    TranslationResult,
    TranslationStatus,
    build_messages,
    extract_translation_from_response,
    translate_text,
    translate_text_result,
)

__all__ = [
    "API_VERSION",
    "DEPLOYMENT",
    "MAX_TOKENS",
    "TranslatorClient",
    "get_azure_client",
    "get_http_client",
    "TranslationResult",
    "TranslationStatus",
    "build_messages",
    "extract_translation_from_response",
    "translate_text",
    "translate_text_result",
]
