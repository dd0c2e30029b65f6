"""Token renderer - serializes a DesignTokenSet to text.

Formats:
    structured             JSON, 2-space indent, DesignTokenSet field order
    flatVariables          CSS custom properties inside ``:root { ... }``
    preprocessorVariables  SCSS ``$name: value;`` assignments

Variable names join the token path with hyphens: ``color-primary-500``,
``color-success``, ``font-family-heading``, ``font-weight-bold``,
``font-size-lg``, ``line-height-tight``, ``spacing-md``.
"""

import json
import logging
from collections.abc import Iterator

from src.schema.models import DesignTokenSet, OutputFormat

logger = logging.getLogger(__name__)

# Names accepted besides the canonical OutputFormat values
FORMAT_ALIASES = {
    "json": OutputFormat.STRUCTURED,
    "css": OutputFormat.FLAT_VARIABLES,
    "scss": OutputFormat.PREPROCESSOR_VARIABLES,
}

Section = tuple[str, list[tuple[str, object]]]


def resolve_format(fmt: str | OutputFormat | None) -> OutputFormat:
    """Map a format name to an OutputFormat; unknown names mean structured."""
    if isinstance(fmt, OutputFormat):
        return fmt
    if not fmt:
        return OutputFormat.STRUCTURED
    if not isinstance(fmt, str):
        logger.warning("Token format %r is not a name, falling back to structured", fmt)
        return OutputFormat.STRUCTURED
    if fmt in FORMAT_ALIASES:
        return FORMAT_ALIASES[fmt]
    try:
        return OutputFormat(fmt)
    except ValueError:
        logger.warning("Unknown token format %r, falling back to structured", fmt)
        return OutputFormat.STRUCTURED


def iter_sections(tokens: DesignTokenSet) -> Iterator[Section]:
    """Yield (section title, [(variable name, value), ...]) for every leaf.

    Optional leaves (accent family, spacing block) are skipped when absent.
    """
    colors = tokens.colors
    for title, group in (("Primary Colors", "primary"),
                         ("Secondary Colors", "secondary"),
                         ("Accent Colors", "accent"),
                         ("Neutral Colors", "neutral")):
        ramp = colors.ramps()[group]
        yield title, [(f"color-{group}-{stop}", value) for stop, value in ramp.items()]

    yield "Feedback Colors", [
        (f"color-{name}", value) for name, value in colors.feedback.to_dict().items()
    ]

    typo = tokens.typography
    yield "Typography", [
        (f"font-family-{slot}", family) for slot, family in typo.families.to_dict().items()
    ]
    yield "Font Weights", [
        (f"font-weight-{key}", value) for key, value in typo.weights.to_dict().items()
    ]
    yield "Font Sizes", [
        (f"font-size-{key}", value) for key, value in typo.sizes.to_dict().items()
    ]
    yield "Line Heights", [
        (f"line-height-{key}", value) for key, value in typo.line_heights.to_dict().items()
    ]

    if tokens.spacing is not None:
        yield "Spacing", [
            (f"spacing-{key}", value) for key, value in tokens.spacing.to_dict().items()
        ]


def render_structured(tokens: DesignTokenSet) -> str:
    """JSON document mirroring ``tokens.to_dict()``."""
    return json.dumps(tokens.to_dict(), indent=2, ensure_ascii=False)


def render_flat_variables(tokens: DesignTokenSet) -> str:
    """CSS custom properties in a single ``:root`` block."""
    lines = [":root {"]
    for _, entries in iter_sections(tokens):
        for name, value in entries:
            lines.append(f"  --{name}: {value};")
    lines.append("}")
    return "\n".join(lines) + "\n"


def render_preprocessor_variables(tokens: DesignTokenSet) -> str:
    """SCSS variables grouped under section comments."""
    meta = tokens.metadata
    blocks = [
        "// Design tokens generated from brand identity\n"
        f"// Brand: {meta.brand_name}\n"
        f"// Version: {meta.version}"
    ]
    for title, entries in iter_sections(tokens):
        lines = [f"// {title}"]
        lines.extend(f"${name}: {value};" for name, value in entries)
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks) + "\n"


_RENDERERS = {
    OutputFormat.STRUCTURED: render_structured,
    OutputFormat.FLAT_VARIABLES: render_flat_variables,
    OutputFormat.PREPROCESSOR_VARIABLES: render_preprocessor_variables,
}


def render_tokens(tokens: DesignTokenSet,
                  fmt: str | OutputFormat | None = OutputFormat.STRUCTURED) -> str:
    """Render a token set in the requested format."""
    return _RENDERERS[resolve_format(fmt)](tokens)
