"""QA validation package for design tokens.

Validates token sets against the baseline contract - checks required ramp
stops and scale keys, hex color literals, mandatory weights, and metadata.
"""

from .validator import (
    Issue,
    QAResult,
    TokenValidator,
    validate_tokens,
)

__all__ = [
    "Issue",
    "QAResult",
    "TokenValidator",
    "validate_tokens",
]
