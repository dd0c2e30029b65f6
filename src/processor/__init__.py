"""Token processor module - BrandProfile to DesignTokenSet synthesis."""

from .synthesizer import (
    MERGEABLE_KEYS,
    TokenSynthesizer,
    iso_timestamp,
    merge_external_data,
    synthesize_tokens,
)
