"""Web page fetching and paragraph extraction."""

from .extract import extract_paragraphs

__all__ = ["extract_paragraphs"]
