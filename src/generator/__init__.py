"""Token generator package - renders design tokens to text formats.

Modules:
    renderer: structured (JSON), flat CSS variables, SCSS variables
"""

from .renderer import (
    FORMAT_ALIASES,
    iter_sections,
    render_flat_variables,
    render_preprocessor_variables,
    render_structured,
    render_tokens,
    resolve_format,
)

__all__ = [
    "FORMAT_ALIASES",
    "iter_sections",
    "render_flat_variables",
    "render_preprocessor_variables",
    "render_structured",
    "render_tokens",
    "resolve_format",
]
