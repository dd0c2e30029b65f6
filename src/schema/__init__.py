"""Brand schema package - typed models for signals and design tokens.

Provides the contract between the extractor, synthesizer, and renderer:

- models.py: Core dataclasses (BrandProfile, DesignTokenSet, signals, etc.)
- design_system.py: Baseline token values and color helpers
- loader.py: JSON/YAML serialization/deserialization
"""

from .design_system import (
    RAMP_STOPS,
    TOKEN_VERSION,
    UNNAMED_BRAND,
    build_baseline_tokens,
    is_hex_color,
    rgb_to_hex,
)
from .loader import (
    dump_data,
    load_data,
    load_profile,
    load_tokens,
    save_profile,
    save_tokens,
)
from .models import (
    BrandProfile,
    ColorCategory,
    ColorSignal,
    ColorTokens,
    DesignTokenSet,
    FeedbackColors,
    FontFamilies,
    FontSizes,
    FontWeights,
    LineHeights,
    LogoKind,
    LogoSignal,
    OutputFormat,
    SpacingTokens,
    TokenMetadata,
    TypographyCategory,
    TypographySignal,
    TypographyTokens,
)

__all__ = [
    # Models
    "BrandProfile",
    "ColorCategory",
    "ColorSignal",
    "ColorTokens",
    "DesignTokenSet",
    "FeedbackColors",
    "FontFamilies",
    "FontSizes",
    "FontWeights",
    "LineHeights",
    "LogoKind",
    "LogoSignal",
    "OutputFormat",
    "SpacingTokens",
    "TokenMetadata",
    "TypographyCategory",
    "TypographySignal",
    "TypographyTokens",
    # Baseline
    "RAMP_STOPS",
    "TOKEN_VERSION",
    "UNNAMED_BRAND",
    "build_baseline_tokens",
    "is_hex_color",
    "rgb_to_hex",
    # Loader
    "dump_data",
    "load_data",
    "load_profile",
    "load_tokens",
    "save_profile",
    "save_tokens",
]
