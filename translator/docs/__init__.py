"""Word document (.docx) reading, writing and translation."""

from .docx_io import DocumentStructureError, read_docx_paragraphs, translated_output_path, write_docx
from .pipeline import DocumentTranslation, translate_document

__all__ = [
    "DocumentStructureError",
    "read_docx_paragraphs",
    "translated_output_path",
    "write_docx",
    "DocumentTranslation",
    "translate_document",
]
