"""Ordering policy - positional category assignment for extracted signals.

Brand manuals rarely label their colors or fonts, so the extractor falls
back on document position: the first color found is the primary, the
second the secondary, the rest accents; the first typeface is the heading
face and the rest are body faces. All of that lives here so the heuristic
can be swapped without touching the pattern matching.
"""

from src.schema.models import ColorCategory, TypographyCategory


class PositionalOrderingPolicy:
    """Assigns categories from a signal's position in extraction order."""

    def color_category(self, index: int) -> ColorCategory:
        if index == 0:
            return ColorCategory.PRIMARY
        if index == 1:
            return ColorCategory.SECONDARY
        return ColorCategory.ACCENT

    def typography_category(self, index: int) -> TypographyCategory:
        if index == 0:
            return TypographyCategory.HEADING
        return TypographyCategory.BODY


DEFAULT_POLICY = PositionalOrderingPolicy()
