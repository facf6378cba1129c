from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from translator.llm.client import TranslatorClient
from translator.llm.translate import translate_text_result
from translator.throttle import FixedIntervalThrottle

from .docx_io import read_docx_paragraphs, translated_output_path, write_docx

PARAGRAPH_INTERVAL = 2.0


@dataclass
class DocumentTranslation:
    input_path: str
    output_path: Optional[str] = None
    translated: int = 0
    dropped: int = 0
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.output_path is not None


def translate_document(
    client: TranslatorClient,
    input_path: str,
    target_language: Optional[str] = None,
    throttle=None,
) -> DocumentTranslation:
    """Translate a .docx paragraph by paragraph and save `{stem}_{lang}.docx` beside it.

    - Paragraphs whose translation is empty are left out of the output.
    - `throttle.wait()` gates every remote call; by default a
      `FixedIntervalThrottle(PARAGRAPH_INTERVAL)` using the client's sleep.
      The interval is measured from the previous `wait()`, so the time spent
      on a translation request counts towards it; paragraphs that make no
      request are not delayed.
    - Errors while opening, translating or saving are reported and returned
      in `error`; nothing is raised and no partial file is written.
    """
    target_language = target_language or client.settings.default_target_language
    if throttle is None:
        throttle = FixedIntervalThrottle(PARAGRAPH_INTERVAL, sleep=client.sleep)

    result = DocumentTranslation(input_path=input_path)
    try:
        paragraphs = read_docx_paragraphs(input_path)

        out_texts: List[str] = []
        for text in paragraphs:
            if text:
                throttle.wait()
            translated = translate_text_result(client, text, target_language)
            if translated.text:
                out_texts.append(translated.text)
            else:
                result.dropped += 1

        output_path = translated_output_path(input_path, target_language)
        write_docx(out_texts, output_path)
        result.output_path = output_path
        result.translated = len(out_texts)
    except Exception as e:
        print(f"Error processing the document: {e}")
        result.error = str(e)
    return result
