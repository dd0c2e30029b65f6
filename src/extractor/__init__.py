"""Attribute extraction engine - derives a BrandProfile from document text.

Pattern-matches colors, typefaces, logo mentions, and brand-name phrasing
and produces a typed BrandProfile for the token synthesizer.
"""

from .attribute_extractor import (
    KNOWN_FONTS,
    AttributeExtractor,
    ExtractOptions,
    extract_profile,
)
from .ordering import PositionalOrderingPolicy

__all__ = [
    "KNOWN_FONTS",
    "AttributeExtractor",
    "ExtractOptions",
    "PositionalOrderingPolicy",
    "extract_profile",
]
