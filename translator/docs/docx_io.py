from __future__ import annotations

import os
from typing import Iterable, List

from docx import Document as DocxDocument


class DocumentStructureError(ValueError):
    """The file opened as a Word document but has no body."""


def read_docx_paragraphs(path: str) -> List[str]:
    """Return the plain text of each body paragraph, in order."""
    docx = DocxDocument(path)
    if docx.element.body is None:
        raise DocumentStructureError(f"The document '{path}' does not contain a body.")
    return [para.text for para in docx.paragraphs]


def write_docx(paragraphs: Iterable[str], out_path: str) -> str:
    """Write a new document with one single-run paragraph per text."""
    d = DocxDocument()
    # The default template starts with an empty body
    for text in paragraphs:
        p = d.add_paragraph()
        p.add_run(text)
    d.save(out_path)
    return out_path


def translated_output_path(input_path: str, target_language: str) -> str:
    """Insert `_{target_language}` before the extension, same directory."""
    base, ext = os.path.splitext(input_path)
    return f"{base}_{target_language}{ext}"
