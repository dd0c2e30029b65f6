"""Design system baseline - reference token values and color helpers.

The baseline is the complete DesignTokenSet every synthesis starts from:
- Color ramps: primary/secondary/accent/neutral, stops 50..900
  (neutral also carries white/black)
- Feedback quad: success, warning, error, info
- Type scale: families, weights light..extraBold, sizes xs..xxxl + base,
  line heights tight/normal/loose
- Spacing scale: base, xs..xxl
"""

import re

from .models import (
    ColorTokens,
    DesignTokenSet,
    FeedbackColors,
    FontFamilies,
    FontSizes,
    FontWeights,
    LineHeights,
    SpacingTokens,
    TokenMetadata,
    TypographyTokens,
)

TOKEN_VERSION = "1.0.0"
UNNAMED_BRAND = "Unnamed Brand"

RAMP_STOPS = ("50", "100", "200", "300", "400", "500", "600", "700", "800", "900")

_HEX_RE = re.compile(r"^#(?:[0-9A-Fa-f]{6}|[0-9A-Fa-f]{3})$")

_PRIMARY = ("#e6f0f9", "#cce0f3", "#99c2e8", "#66a3dc", "#3385d1",
            "#0066c5", "#00529e", "#003d76", "#00294f", "#001427")
_SECONDARY = ("#e6f5e6", "#ccebcc", "#99d699", "#66c266", "#33ad33",
              "#009900", "#007a00", "#005c00", "#003d00", "#001f00")
_ACCENT = ("#fef2e6", "#fde6cc", "#fbcc99", "#f9b366", "#f69933",
           "#f48000", "#c36600", "#924d00", "#613300", "#311a00")
_NEUTRAL = ("#f7f7f7", "#e3e3e3", "#c8c8c8", "#a4a4a4", "#818181",
            "#666666", "#515151", "#434343", "#383838", "#121212")


def _ramp(values: tuple[str, ...]) -> dict[str, str]:
    return dict(zip(RAMP_STOPS, values))


def baseline_colors() -> ColorTokens:
    """Default color ramps and feedback colors."""
    neutral = _ramp(_NEUTRAL)
    neutral["white"] = "#ffffff"
    neutral["black"] = "#000000"
    return ColorTokens(
        primary=_ramp(_PRIMARY),
        secondary=_ramp(_SECONDARY),
        accent=_ramp(_ACCENT),
        neutral=neutral,
        feedback=FeedbackColors(
            success="#00C851",
            warning="#FFBB33",
            error="#FF4444",
            info="#33B5E5",
        ),
    )


def baseline_typography() -> TypographyTokens:
    """Default families, weight scale, size scale and line heights."""
    return TypographyTokens(
        families=FontFamilies(
            heading="Arial, sans-serif",
            body="Helvetica, Arial, sans-serif",
        ),
        weights=FontWeights(
            light=300,
            regular=400,
            medium=500,
            semibold=600,
            bold=700,
            extra_bold=800,
        ),
        sizes=FontSizes(
            base="16px",
            xs="0.75rem",
            sm="0.875rem",
            md="1rem",
            lg="1.25rem",
            xl="1.5rem",
            xxl="2rem",
            xxxl="3rem",
        ),
        line_heights=LineHeights(tight=1.2, normal=1.5, loose=2),
    )


def baseline_spacing() -> SpacingTokens:
    """Default spacing scale."""
    return SpacingTokens(
        base="8px",
        xs="0.25rem",
        sm="0.5rem",
        md="1rem",
        lg="1.5rem",
        xl="2rem",
        xxl="3rem",
    )


def build_baseline_tokens(brand_name: str = UNNAMED_BRAND,
                          created_at: str = "") -> DesignTokenSet:
    """Return a fresh baseline DesignTokenSet.

    A new object graph is built on every call, so callers may override
    values in place without affecting later calls.
    """
    return DesignTokenSet(
        colors=baseline_colors(),
        typography=baseline_typography(),
        spacing=baseline_spacing(),
        metadata=TokenMetadata(
            brand_name=brand_name,
            version=TOKEN_VERSION,
            created_at=created_at,
        ),
    )


# ---------------------------------------------------------------------------
# Color helpers
# ---------------------------------------------------------------------------

def is_hex_color(value: object) -> bool:
    """True for '#' followed by 3 or 6 hex digits."""
    return isinstance(value, str) and bool(_HEX_RE.match(value))


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Pack RGB channels into a lowercase '#rrggbb' string.

    Channels outside 0..255 are clamped.
    """
    r, g, b = (max(0, min(255, int(c))) for c in (r, g, b))
    return f"#{(r << 16) | (g << 8) | b:06x}"
