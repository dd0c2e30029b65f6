"""Tests for the token renderer (structured / CSS / SCSS)."""

import json
import re
from datetime import datetime, timezone

import pytest

from src.generator.renderer import (
    iter_sections,
    render_flat_variables,
    render_preprocessor_variables,
    render_structured,
    render_tokens,
    resolve_format,
)
from src.processor.synthesizer import TokenSynthesizer
from src.schema.design_system import RAMP_STOPS
from src.schema.models import (
    BrandProfile,
    ColorCategory,
    ColorSignal,
    DesignTokenSet,
    OutputFormat,
    TypographyCategory,
    TypographySignal,
)

NOW = datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc)

_CSS_LINE = re.compile(r"^  --([a-zA-Z0-9-]+): (.+);$")
_SCSS_LINE = re.compile(r"^\$([a-zA-Z0-9-]+): (.+);$")


@pytest.fixture
def empty_tokens():
    return TokenSynthesizer().synthesize(BrandProfile(), now=NOW)


@pytest.fixture
def brand_tokens():
    profile = BrandProfile(
        colors=(ColorSignal("Color 1", "#ff0000", category=ColorCategory.PRIMARY),),
        typography=(
            TypographySignal("Montserrat", TypographyCategory.HEADING),
            TypographySignal("Lato", TypographyCategory.BODY),
            TypographySignal("Oswald", TypographyCategory.ACCENT),
        ),
        brand_name="Acme",
    )
    return TokenSynthesizer().synthesize(profile, now=NOW)


def _css_vars(text):
    out = {}
    for line in text.splitlines():
        m = _CSS_LINE.match(line)
        if m:
            out[m.group(1)] = m.group(2)
    return out


def _scss_vars(text):
    out = {}
    for line in text.splitlines():
        m = _SCSS_LINE.match(line)
        if m:
            out[m.group(1)] = m.group(2)
    return out


def _expected_names(tokens):
    return [name for _, entries in iter_sections(tokens) for name, _ in entries]


# ---------------------------------------------------------------------------
# Format resolution
# ---------------------------------------------------------------------------

class TestResolveFormat:
    def test_canonical(self):
        assert resolve_format("structured") == OutputFormat.STRUCTURED
        assert resolve_format("flatVariables") == OutputFormat.FLAT_VARIABLES
        assert resolve_format("preprocessorVariables") == OutputFormat.PREPROCESSOR_VARIABLES

    def test_aliases(self):
        assert resolve_format("json") == OutputFormat.STRUCTURED
        assert resolve_format("css") == OutputFormat.FLAT_VARIABLES
        assert resolve_format("scss") == OutputFormat.PREPROCESSOR_VARIABLES

    def test_enum_passthrough(self):
        assert resolve_format(OutputFormat.FLAT_VARIABLES) == OutputFormat.FLAT_VARIABLES

    def test_unknown_falls_back(self):
        assert resolve_format("xml") == OutputFormat.STRUCTURED
        assert resolve_format(None) == OutputFormat.STRUCTURED
        assert resolve_format("") == OutputFormat.STRUCTURED

    def test_non_string_falls_back(self):
        assert resolve_format(["css"]) == OutputFormat.STRUCTURED
        assert resolve_format({"format": "scss"}) == OutputFormat.STRUCTURED
        assert resolve_format(42) == OutputFormat.STRUCTURED


# ---------------------------------------------------------------------------
# Structured
# ---------------------------------------------------------------------------

class TestStructured:
    def test_parses_back_to_tokens(self, brand_tokens):
        parsed = json.loads(render_structured(brand_tokens))
        assert parsed == brand_tokens.to_dict()
        assert DesignTokenSet.from_dict(parsed) == brand_tokens

    def test_two_space_indent(self, empty_tokens):
        text = render_structured(empty_tokens)
        assert text.splitlines()[1].startswith('  "colors"')

    def test_field_order(self, empty_tokens):
        parsed = json.loads(render_structured(empty_tokens))
        assert list(parsed) == ["colors", "typography", "spacing", "metadata"]
        assert list(parsed["colors"]) == ["primary", "secondary", "accent", "neutral", "feedback"]
        assert list(parsed["typography"]) == ["families", "weights", "sizes", "lineHeights"]

    def test_unknown_format_is_structured(self, empty_tokens):
        assert render_tokens(empty_tokens, "yaml") == render_structured(empty_tokens)

    def test_default_format(self, empty_tokens):
        assert render_tokens(empty_tokens) == render_structured(empty_tokens)


# ---------------------------------------------------------------------------
# Flat variables (CSS)
# ---------------------------------------------------------------------------

class TestFlatVariables:
    def test_root_block(self, empty_tokens):
        lines = render_flat_variables(empty_tokens).splitlines()
        assert lines[0] == ":root {"
        assert lines[-1] == "}"

    def test_every_baseline_key_present(self, empty_tokens):
        variables = _css_vars(render_tokens(empty_tokens, "flatVariables"))
        for group in ("primary", "secondary", "accent", "neutral"):
            for stop in RAMP_STOPS:
                assert f"color-{group}-{stop}" in variables
        assert variables["color-neutral-white"] == "#ffffff"
        assert variables["color-neutral-black"] == "#000000"
        for name in ("success", "warning", "error", "info"):
            assert f"color-{name}" in variables
        for key in ("light", "regular", "medium", "semibold", "bold", "extraBold"):
            assert f"font-weight-{key}" in variables
        for key in ("base", "xs", "sm", "md", "lg", "xl", "xxl", "xxxl"):
            assert f"font-size-{key}" in variables
        for key in ("tight", "normal", "loose"):
            assert f"line-height-{key}" in variables
        for key in ("base", "xs", "sm", "md", "lg", "xl", "xxl"):
            assert f"spacing-{key}" in variables

    def test_one_line_per_leaf(self, empty_tokens):
        text = render_flat_variables(empty_tokens)
        declared = [m.group(1) for m in map(_CSS_LINE.match, text.splitlines()) if m]
        assert declared == _expected_names(empty_tokens)

    def test_values(self, brand_tokens):
        variables = _css_vars(render_flat_variables(brand_tokens))
        assert variables["color-primary-500"] == "#ff0000"
        assert variables["font-family-heading"] == "Montserrat, sans-serif"
        assert variables["font-family-accent"] == "Oswald, sans-serif"
        assert variables["font-weight-bold"] == "700"
        assert variables["font-size-lg"] == "1.25rem"
        assert variables["line-height-tight"] == "1.2"
        assert variables["line-height-loose"] == "2"
        assert variables["spacing-md"] == "1rem"

    def test_accent_family_omitted(self, empty_tokens):
        assert "font-family-accent" not in _css_vars(render_flat_variables(empty_tokens))

    def test_spacing_omitted(self, empty_tokens):
        empty_tokens.spacing = None
        text = render_flat_variables(empty_tokens)
        assert "--spacing-" not in text


# ---------------------------------------------------------------------------
# Preprocessor variables (SCSS)
# ---------------------------------------------------------------------------

class TestPreprocessorVariables:
    def test_header(self, brand_tokens):
        lines = render_preprocessor_variables(brand_tokens).splitlines()
        assert lines[0].startswith("//")
        assert lines[1] == "// Brand: Acme"
        assert lines[2] == "// Version: 1.0.0"

    def test_same_leaves_as_css(self, brand_tokens):
        css = _css_vars(render_flat_variables(brand_tokens))
        scss = _scss_vars(render_preprocessor_variables(brand_tokens))
        assert scss == css

    def test_section_comments(self, empty_tokens):
        text = render_preprocessor_variables(empty_tokens)
        for title in ("// Primary Colors", "// Secondary Colors", "// Accent Colors",
                      "// Neutral Colors", "// Feedback Colors", "// Typography",
                      "// Font Weights", "// Font Sizes", "// Line Heights",
                      "// Spacing"):
            assert title in text

    def test_no_root_block(self, empty_tokens):
        text = render_tokens(empty_tokens, "preprocessorVariables")
        assert ":root" not in text
        assert "$color-primary-500: #0066c5;" in text

    def test_spacing_section_omitted(self, empty_tokens):
        empty_tokens.spacing = None
        text = render_preprocessor_variables(empty_tokens)
        assert "// Spacing" not in text
        assert "$spacing-" not in text


class TestPurity:
    def test_render_does_not_mutate(self, brand_tokens):
        before = brand_tokens.to_dict()
        for fmt in OutputFormat:
            render_tokens(brand_tokens, fmt)
        assert brand_tokens.to_dict() == before

    def test_render_repeatable(self, brand_tokens):
        for fmt in OutputFormat:
            assert render_tokens(brand_tokens, fmt) == render_tokens(brand_tokens, fmt)
