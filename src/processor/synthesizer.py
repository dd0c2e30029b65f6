"""Token synthesis - merges a BrandProfile over the baseline token set.

Override rules:
- The first color of category primary/secondary/accent replaces the
  ``500`` stop of that ramp. No other stop changes.
- The first typeface of category heading/body/accent becomes that family
  slot as ``"{family}, sans-serif"``.
- Metadata is stamped fresh on every call.

Everything else (remaining ramp stops, feedback colors, weights, sizes,
line heights, spacing) is the baseline, untouched. Logos carry no token.

Usage::

    from src.processor.synthesizer import TokenSynthesizer

    tokens = TokenSynthesizer().synthesize(profile)
"""

import logging
from datetime import datetime, timezone
from typing import Any

from src.schema.design_system import UNNAMED_BRAND, build_baseline_tokens
from src.schema.models import (
    BrandProfile,
    ColorCategory,
    DesignTokenSet,
    TypographyCategory,
)

OVERRIDE_STOP = "500"

# Keys of an external (e.g. Figma) payload that replace branding keys
# wholesale when merged.
MERGEABLE_KEYS = ("colors", "typography", "logos", "brandName")

_COLOR_GROUPS = (
    (ColorCategory.PRIMARY, "primary"),
    (ColorCategory.SECONDARY, "secondary"),
    (ColorCategory.ACCENT, "accent"),
)

_FAMILY_SLOTS = (
    (TypographyCategory.HEADING, "heading"),
    (TypographyCategory.BODY, "body"),
    (TypographyCategory.ACCENT, "accent"),
)


def iso_timestamp(now: datetime | None = None) -> str:
    """UTC ISO-8601 with millisecond precision and a 'Z' suffix."""
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    now = now.astimezone(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def merge_external_data(branding: dict[str, Any],
                        external: dict[str, Any] | None) -> dict[str, Any]:
    """Shallow, last-write-wins merge of external design data over branding.

    Top-level keys of ``external`` replace the same keys of ``branding``
    entirely; nested lists are not combined. See MERGEABLE_KEYS for the
    keys a BrandProfile actually reads.
    """
    if not external:
        return dict(branding)
    return {**branding, **external}


class TokenSynthesizer:
    """Builds a DesignTokenSet from a BrandProfile.

    Holds no per-call state; ``synthesize`` builds a fresh baseline each
    time so calls are independent.
    """

    def __init__(self, logger: logging.Logger | None = None):
        self.log = logger or logging.getLogger(__name__)

    def synthesize(self, profile: BrandProfile,
                   now: datetime | None = None) -> DesignTokenSet:
        """Apply profile overrides to the baseline and stamp metadata."""
        tokens = build_baseline_tokens(
            brand_name=profile.brand_name or UNNAMED_BRAND,
            created_at=iso_timestamp(now),
        )
        self._apply_colors(tokens, profile)
        self._apply_typography(tokens, profile)
        return tokens

    def _apply_colors(self, tokens: DesignTokenSet, profile: BrandProfile) -> None:
        ramps = tokens.colors.ramps()
        for category, group in _COLOR_GROUPS:
            matches = profile.colors_in(category)
            if not matches:
                continue
            ramps[group][OVERRIDE_STOP] = matches[0].hex
            self.log.debug("colors.%s.%s <- %s (%s)", group, OVERRIDE_STOP,
                           matches[0].hex, matches[0].name)

    def _apply_typography(self, tokens: DesignTokenSet, profile: BrandProfile) -> None:
        families = tokens.typography.families
        for category, slot in _FAMILY_SLOTS:
            font = profile.first_font(category)
            if font is None:
                continue
            setattr(families, slot, f"{font.family}, sans-serif")
            self.log.debug("typography.families.%s <- %s", slot, font.family)


def synthesize_tokens(profile: BrandProfile, now: datetime | None = None,
                      logger: logging.Logger | None = None) -> DesignTokenSet:
    """Convenience function: synthesize tokens for a single profile."""
    return TokenSynthesizer(logger=logger).synthesize(profile, now=now)
