"""Paragraph translator backed by an Azure OpenAI chat-completion deployment.

Packages:
- translator.llm: shared client and text translation with rate-limit retries
- translator.web: web page fetching and <p> extraction
- translator.docs: .docx reading/writing and document translation
"""

from translator.config import ConfigError, Settings, load_settings
from translator.docs import DocumentTranslation, translate_document
from translator.llm import TranslationResult, TranslationStatus, TranslatorClient, translate_text, translate_text_result
from translator.throttle import FixedIntervalThrottle, NoThrottle
from translator.web import extract_paragraphs

__all__ = [
    "ConfigError",
    "Settings",
    "load_settings",
    "TranslatorClient",
    "TranslationResult",
    "TranslationStatus",
    "translate_text",
    "translate_text_result",
    "extract_paragraphs",
    "DocumentTranslation",
    "translate_document",
    "FixedIntervalThrottle",
    "NoThrottle",
]
