"""Document Reader - turns brand-manual files into raw text.

Uses pypdf for PDF manuals and python-pptx for slide-deck brand books, and
reads plain text / Markdown as-is. The extractor only ever sees the text
this module returns; layout, images and embedded fonts are ignored.
"""

import logging
from pathlib import Path

from pptx import Presentation
from pypdf import PdfReader

from src.exceptions import (
    DocumentDecodeError,
    DocumentNotFoundError,
    UnsupportedDocumentError,
)

TEXT_SUFFIXES = {".txt", ".md", ".markdown"}
SUPPORTED_SUFFIXES = {".pdf", ".pptx"} | TEXT_SUFFIXES


def _pdf_text(path: Path) -> str:
    reader = PdfReader(str(path))
    pages = []
    for page in reader.pages:
        pages.append(page.extract_text() or "")
    return "\n".join(pages)


def _shape_text(shape) -> list[str]:
    """Text of a shape, its table cells, and any grouped children."""
    parts: list[str] = []
    if getattr(shape, "has_text_frame", False):
        parts.append(shape.text_frame.text)
    if getattr(shape, "has_table", False):
        for row in shape.table.rows:
            for cell in row.cells:
                parts.append(cell.text.replace("\x0b", " "))
    if hasattr(shape, "shapes"):
        for child in shape.shapes:
            parts.extend(_shape_text(child))
    return parts


def _pptx_text(path: Path) -> str:
    prs = Presentation(str(path))
    parts: list[str] = []
    for slide in prs.slides:
        for shape in slide.shapes:
            parts.extend(_shape_text(shape))
    return "\n".join(p for p in parts if p)


class DocumentReader:
    """Decodes a document file into text for attribute extraction."""

    def __init__(self, logger: logging.Logger | None = None):
        self.log = logger or logging.getLogger(__name__)

    def read(self, path: str | Path) -> str:
        """Return the document's text.

        Raises
        ------
        DocumentNotFoundError
            The path does not exist.
        UnsupportedDocumentError
            No decoder for the file extension.
        DocumentDecodeError
            The decoder failed on the file contents.
        """
        path = Path(path)
        if not path.is_file():
            raise DocumentNotFoundError(f"Document does not exist: {path}")

        suffix = path.suffix.lower()
        if suffix not in SUPPORTED_SUFFIXES:
            raise UnsupportedDocumentError(
                f"Unsupported document type {suffix or '(none)'!r}: {path}"
            )

        self.log.debug("Reading %s document %s", suffix, path)
        try:
            if suffix == ".pdf":
                text = _pdf_text(path)
            elif suffix == ".pptx":
                text = _pptx_text(path)
            else:
                text = path.read_text(encoding="utf-8")
        except Exception as e:
            raise DocumentDecodeError(f"Could not decode {path}: {e}") from e

        self.log.debug("Read %d characters from %s", len(text), path)
        return text


def read_document_text(path: str | Path,
                       logger: logging.Logger | None = None) -> str:
    """Convenience function: decode a single document to text."""
    return DocumentReader(logger=logger).read(path)
