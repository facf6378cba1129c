"""
Entry point for the Azure OpenAI translator.

Runs the three operations in sequence: translate a sentence, extract and
translate the paragraphs of a web page, translate a Word document.

Packages:
- translator.llm: shared client and text translation with retries
- translator.web: paragraph extraction from web pages
- translator.docs: .docx translation
"""

from __future__ import annotations

import os

from translator.config import ConfigError, load_settings
from translator.docs import translate_document
from translator.llm import TranslatorClient, translate_text
from translator.web import extract_paragraphs

DEFAULT_TEXT = "This text should be translated from English to Brazilian Portuguese."
DEFAULT_URL = (
    "https://azure.microsoft.com/en-us/blog/"
    "introducing-o1-openais-new-reasoning-model-series-for-developers-and-enterprises-on-azure/"
)
DEFAULT_FILE = os.path.join(os.path.dirname(os.path.abspath(__file__)), "Resources", "sample.docx")


def _run(text: str, url: str, file_path: str, target: str | None) -> None:
    settings = load_settings()
    with TranslatorClient.create(settings) as client:
        if text:
            print(f"Input text: {text}")
            print(f"Translated Text: {translate_text(client, text, target)}")
        print()

        if url:
            paragraphs = extract_paragraphs(client, url)
            print(f"Extracted {len(paragraphs)} paragraphs from the URL.\n")
            print("Translating paragraphs...\n")
            for paragraph in paragraphs:
                print(translate_text(client, paragraph, target))
            print("URL translation complete.\n")

        if file_path:
            print(f"Translating Word document: {file_path}")
            if os.path.isfile(file_path):
                result = translate_document(client, file_path, target)
                if result.ok:
                    print(f"Document translation completed: {result.output_path}")
                    print(f"Paragraphs written: {result.translated}, dropped: {result.dropped}")
            else:
                print(f"The file {file_path} was not found.")


def _wait_for_exit() -> None:
    print()
    try:
        input("Press Enter to exit...")
    except EOFError:
        # stdin closed or redirected from an empty source
        pass


def _cli() -> None:
    """CLI for text, web page and document translation.

    --text: Text to translate (default: a sample sentence; empty string skips)
    --url: Web page whose <p> paragraphs are translated (empty string skips)
    --file / -f: Path to a .docx document (default: Resources/sample.docx)
    --target / -t: Target language code (default: DEFAULT_TARGET_LANGUAGE or pt-br)
    --no-pause: Exit without waiting for Enter
    """
    import argparse

    parser = argparse.ArgumentParser(description="Translate text, web pages and Word documents with Azure OpenAI.")
    parser.add_argument("--text", type=str, default=DEFAULT_TEXT, help="Text to translate")
    parser.add_argument("--url", type=str, default=DEFAULT_URL, help="URL whose paragraphs are translated")
    parser.add_argument("--file", "-f", type=str, default=DEFAULT_FILE, help="Path to input .docx document")
    parser.add_argument("--target", "-t", type=str, default=None, help="Target language code (e.g. pt-br, es)")
    parser.add_argument("--no-pause", action="store_true", help="Do not wait for Enter before exiting")

    args = parser.parse_args()

    try:
        _run(args.text, args.url, args.file, args.target)
    except ConfigError as e:
        print(f"An error occurred: {e}")
        raise SystemExit(2)
    except Exception as e:
        print(f"An error occurred: {e}")
        raise SystemExit(1)
    finally:
        if not args.no_pause:
            _wait_for_exit()


if __name__ == "__main__":
    _cli()
