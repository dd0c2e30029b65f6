"""Attribute Extraction Engine - derives a BrandProfile from raw document text.

Scans the text of a brand manual for the signals that matter to a design
system and produces a typed BrandProfile for the synthesizer.

Detection heuristics:

Colors:
    - '#' hex literals (6 or 3 digits)  → one signal each, document order,
      categorized by position (primary, secondary, then accent)
    - RGB(r, g, b) expressions          → packed to hex, dropped when the
      same hex was already collected, appended uncategorized

Typography:
    - Fixed list of common commercial/web families, word-boundary match.
      List order decides heading vs body, not document position.
    - No match → Arial heading + Helvetica body

Logos:
    - 'logo'                                    → primary
    - 'icon' / 'isotipo' / 'símbolo'            → icon
    - 'alternativo' / 'secundario' / 'monocromático' → alternative

Brand name:
    - Lead-in phrases ('marca registrada', 'brand name', 'logotipo de')
      followed by a capitalized run of up to ~20 characters
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from src.schema.design_system import rgb_to_hex
from src.schema.models import (
    BrandProfile,
    ColorSignal,
    LogoKind,
    LogoSignal,
    TypographyCategory,
    TypographySignal,
)

from .ordering import DEFAULT_POLICY, PositionalOrderingPolicy

_HEX_PATTERN = re.compile(r"#(?:[A-Fa-f0-9]{6}|[A-Fa-f0-9]{3})")

_RGB_PATTERN = re.compile(
    r"RGB\s*\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*\)",
    re.IGNORECASE,
)

# Detection order follows this list, not the document
KNOWN_FONTS = (
    "Arial", "Helvetica", "Times", "Times New Roman", "Courier", "Verdana",
    "Georgia", "Palatino", "Garamond", "Bookman", "Tahoma", "Trebuchet MS",
    "Impact", "Comic Sans MS", "Webdings", "Symbol", "Montserrat", "Roboto",
    "Open Sans", "Lato", "Oswald", "Raleway", "PT Sans", "Merriweather",
    "Ubuntu", "Noto", "Playfair Display", "Poppins", "Nunito", "Work Sans",
)

_FONT_PATTERNS = [
    (font, re.compile(rf"\b{re.escape(font)}\b", re.IGNORECASE))
    for font in KNOWN_FONTS
]

DEFAULT_FONTS = (
    TypographySignal(family="Arial", category=TypographyCategory.HEADING),
    TypographySignal(family="Helvetica", category=TypographyCategory.BODY),
)

# (pattern, kind, name, description) - each tested independently
_LOGO_RULES = (
    (re.compile(r"\blogo\b", re.IGNORECASE),
     LogoKind.PRIMARY, "Primary Logo", "Primary logotype mentioned in the document"),
    (re.compile(r"\bicon\b|\bisotipo\b|\bsímbolo\b", re.IGNORECASE),
     LogoKind.ICON, "Icon", "Icon version of the logotype"),
    (re.compile(r"\balternativo\b|\bsecundario\b|\bmonocromático\b", re.IGNORECASE),
     LogoKind.ALTERNATIVE, "Alternative Logo", "Alternative version of the logotype"),
)

_BRAND_NAME_PATTERNS = (
    re.compile(r"marca\s+(?:registrada)?\s*[:\"']?\s*([A-Z][A-Za-z0-9\s]{0,20})",
               re.IGNORECASE),
    re.compile(r"[Bb]rand\s+[Nn]ame\s*[:\"']?\s*([A-Z][A-Za-z0-9\s]{0,20})"),
    re.compile(r"[Ll]ogotipo\s+(?:de)?\s*[:\"']?\s*([A-Z][A-Za-z0-9\s]{0,20})",
               re.IGNORECASE),
)


@dataclass(frozen=True)
class ExtractOptions:
    """Per-category switches. Brand-name detection always runs."""
    extract_colors: bool = True
    extract_typography: bool = True
    extract_logos: bool = True

    @classmethod
    def from_dict(cls, d: dict | None) -> "ExtractOptions":
        """Build from tool arguments; only an explicit ``False`` disables."""
        d = d or {}
        return cls(
            extract_colors=d.get("extractColors") is not False,
            extract_typography=d.get("extractTypography") is not False,
            extract_logos=d.get("extractLogos") is not False,
        )


class AttributeExtractor:
    """Extracts a BrandProfile from raw document text.

    Stateless between calls: one instance can serve any number of
    documents, concurrently or not.
    """

    def __init__(self, options: ExtractOptions | None = None,
                 ordering: PositionalOrderingPolicy | None = None,
                 logger: logging.Logger | None = None):
        self.options = options or ExtractOptions()
        self.ordering = ordering or DEFAULT_POLICY
        self.log = logger or logging.getLogger(__name__)

    def extract(self, text: str) -> BrandProfile:
        """Run every enabled detector and return the aggregated profile."""
        text = text or ""
        opts = self.options

        colors = self.extract_colors(text) if opts.extract_colors else []
        typography = self.extract_typography(text) if opts.extract_typography else []
        logos = self.extract_logos(text) if opts.extract_logos else []
        brand_name = self.extract_brand_name(text)

        self.log.debug(
            "Extracted %d color(s), %d font(s), %d logo(s), brand name %r",
            len(colors), len(typography), len(logos), brand_name,
        )
        return BrandProfile(
            colors=tuple(colors),
            typography=tuple(typography),
            logos=tuple(logos),
            brand_name=brand_name,
        )

    def extract_colors(self, text: str) -> list[ColorSignal]:
        """Hex literals first (document order), then unseen RGB expressions."""
        colors: list[ColorSignal] = []

        for index, match in enumerate(_HEX_PATTERN.finditer(text)):
            colors.append(ColorSignal(
                name=f"Color {index + 1}",
                hex=match.group(0),
                category=self.ordering.color_category(index),
            ))

        for match in _RGB_PATTERN.finditer(text):
            r, g, b = (int(match.group(i)) for i in (1, 2, 3))
            hex_value = rgb_to_hex(r, g, b)
            if any(c.same_color(hex_value) for c in colors):
                self.log.debug("Skipping RGB %s: %s already collected",
                               match.group(0), hex_value)
                continue
            colors.append(ColorSignal(
                name=f"Color RGB {len(colors) + 1}",
                hex=hex_value,
                rgb=f"rgb({r}, {g}, {b})",
            ))

        return colors

    def extract_typography(self, text: str) -> list[TypographySignal]:
        """Known family names present in the text, or the two defaults."""
        found: list[TypographySignal] = []
        for family, pattern in _FONT_PATTERNS:
            if pattern.search(text):
                found.append(TypographySignal(
                    family=family,
                    category=self.ordering.typography_category(len(found)),
                ))

        if not found:
            self.log.debug("No known font families found, using defaults")
            return list(DEFAULT_FONTS)
        return found

    def extract_logos(self, text: str) -> list[LogoSignal]:
        """Presence-only keyword tests; zero to three signals."""
        return [
            LogoSignal(name=name, kind=kind, description=description)
            for pattern, kind, name, description in _LOGO_RULES
            if pattern.search(text)
        ]

    def extract_brand_name(self, text: str) -> str | None:
        """First captured group of the first matching lead-in pattern."""
        for pattern in _BRAND_NAME_PATTERNS:
            match = pattern.search(text)
            if match and match.group(1):
                return match.group(1).strip()
        return None


def extract_profile(text: str, options: ExtractOptions | None = None,
                    logger: logging.Logger | None = None) -> BrandProfile:
    """Convenience function: extract a BrandProfile from document text."""
    return AttributeExtractor(options=options, logger=logger).extract(text)
