"""Document analysis package - decodes brand documents into raw text."""

from .document_reader import (
    SUPPORTED_SUFFIXES,
    DocumentReader,
    read_document_text,
)

__all__ = ["SUPPORTED_SUFFIXES", "DocumentReader", "read_document_text"]
