from __future__ import annotations

from typing import List

import httpx
from bs4 import BeautifulSoup

from translator.llm.client import TranslatorClient


def parse_paragraphs(html: str) -> List[str]:
    """Return the text of every <p> element in document order, untrimmed."""
    soup = BeautifulSoup(html, "html.parser")
    return [node.get_text() for node in soup.find_all("p")]


def extract_paragraphs(client: TranslatorClient, url: str) -> List[str]:
    """Fetch `url` and return its paragraph texts.

    Network errors and non-success statuses are reported and yield an empty list.
    """
    try:
        response = client.http.get(url)
        response.raise_for_status()
    except httpx.HTTPError as e:
        print(f"Error accessing the URL: {e}")
        return []
    return parse_paragraphs(response.text)
