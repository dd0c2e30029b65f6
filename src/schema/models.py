"""Brand schema models - the contract between extractor, synthesizer, and renderer.

Defines the signal records scraped from brand documents, the BrandProfile
that aggregates them, and the normalized DesignTokenSet produced from a
profile. Every model round-trips through ``to_dict()`` / ``from_dict()``
using the camelCase wire keys that tool callers exchange.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from src.exceptions import InvalidParamsError


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class ColorCategory(Enum):
    """Semantic role of an extracted color."""
    PRIMARY = "primary"
    SECONDARY = "secondary"
    ACCENT = "accent"
    NEUTRAL = "neutral"


class TypographyCategory(Enum):
    """Where an extracted typeface is used."""
    HEADING = "heading"
    BODY = "body"
    ACCENT = "accent"


class LogoKind(Enum):
    """Which logo variant a document mentions."""
    PRIMARY = "primary"
    ALTERNATIVE = "alternative"
    ICON = "icon"


class OutputFormat(Enum):
    """Textual serializations of a DesignTokenSet."""
    STRUCTURED = "structured"                    # JSON, 2-space indent
    FLAT_VARIABLES = "flatVariables"             # CSS custom properties
    PREPROCESSOR_VARIABLES = "preprocessorVariables"  # SCSS variables


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _require(d: Any, key: str, where: str) -> Any:
    """Fetch a required key from a wire dict or raise InvalidParamsError."""
    if not isinstance(d, dict):
        raise InvalidParamsError(f"{where} must be an object, got {type(d).__name__}")
    if key not in d or d[key] is None:
        raise InvalidParamsError(f"{where} is missing required field {key!r}")
    return d[key]


def _enum(enum_cls: type[Enum], value: Any, where: str) -> Any:
    """Convert a wire value to an enum member (None passes through)."""
    if value is None:
        return None
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise InvalidParamsError(
            f"{where} has invalid value {value!r} (expected one of: {allowed})"
        ) from None


def _mapping(d: Any, key: str, where: str) -> dict:
    """Copy of a required object-valued field."""
    value = _require(d, key, where)
    if not isinstance(value, dict):
        raise InvalidParamsError(f"{where}.{key} must be an object")
    return dict(value)


def _list(d: dict, key: str, where: str) -> list:
    value = d.get(key) or []
    if not isinstance(value, (list, tuple)):
        raise InvalidParamsError(f"{where}.{key} must be a list")
    return list(value)


# ---------------------------------------------------------------------------
# Signals - raw extraction output
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ColorSignal:
    """A color literal found in document text."""
    name: str                                 # "Color 1", "Color RGB 4"
    hex: str                                  # "#0066c5" or "#fff", case as found
    rgb: str | None = None                    # "rgb(0, 102, 197)" for RGB matches
    category: ColorCategory | None = None

    def same_color(self, hex_value: str) -> bool:
        """Case-insensitive hex comparison."""
        return self.hex.lower() == hex_value.lower()

    def to_dict(self) -> dict:
        d: dict[str, Any] = {"name": self.name, "hex": self.hex}
        if self.rgb:
            d["rgb"] = self.rgb
        if self.category:
            d["category"] = self.category.value
        return d

    @classmethod
    def from_dict(cls, d: dict) -> "ColorSignal":
        hex_value = _require(d, "hex", "color")
        return cls(
            name=d.get("name", hex_value),
            hex=hex_value,
            rgb=d.get("rgb"),
            category=_enum(ColorCategory, d.get("category"), "color.category"),
        )


@dataclass(frozen=True)
class TypographySignal:
    """A known typeface family mentioned in document text."""
    family: str
    category: TypographyCategory | None = None

    def to_dict(self) -> dict:
        d: dict[str, Any] = {"family": self.family}
        if self.category:
            d["category"] = self.category.value
        return d

    @classmethod
    def from_dict(cls, d: dict) -> "TypographySignal":
        return cls(
            family=_require(d, "family", "typography"),
            category=_enum(TypographyCategory, d.get("category"), "typography.category"),
        )


@dataclass(frozen=True)
class LogoSignal:
    """Presence of a logo variant. No image payload is carried."""
    name: str
    kind: LogoKind
    description: str | None = None

    def to_dict(self) -> dict:
        d: dict[str, Any] = {"name": self.name, "type": self.kind.value}
        if self.description:
            d["description"] = self.description
        return d

    @classmethod
    def from_dict(cls, d: dict) -> "LogoSignal":
        return cls(
            name=_require(d, "name", "logo"),
            kind=_enum(LogoKind, _require(d, "type", "logo"), "logo.type"),
            description=d.get("description"),
        )


@dataclass(frozen=True)
class BrandProfile:
    """Everything extracted from one document's text.

    Produced once per extraction call and consumed once by synthesis.
    """
    colors: tuple[ColorSignal, ...] = ()
    typography: tuple[TypographySignal, ...] = ()
    logos: tuple[LogoSignal, ...] = ()
    brand_name: str | None = None

    def colors_in(self, category: ColorCategory) -> list[ColorSignal]:
        """Colors of one category, in extraction order."""
        return [c for c in self.colors if c.category == category]

    def first_font(self, category: TypographyCategory) -> TypographySignal | None:
        for t in self.typography:
            if t.category == category:
                return t
        return None

    def to_dict(self) -> dict:
        d: dict[str, Any] = {
            "colors": [c.to_dict() for c in self.colors],
            "typography": [t.to_dict() for t in self.typography],
            "logos": [lg.to_dict() for lg in self.logos],
        }
        if self.brand_name:
            d["brandName"] = self.brand_name
        return d

    @classmethod
    def from_dict(cls, d: dict) -> "BrandProfile":
        if not isinstance(d, dict):
            raise InvalidParamsError(
                f"brandingData must be an object, got {type(d).__name__}"
            )
        brand_name = d.get("brandName")
        if brand_name is not None and not isinstance(brand_name, str):
            raise InvalidParamsError("brandingData.brandName must be a string")
        return cls(
            colors=tuple(ColorSignal.from_dict(c) for c in _list(d, "colors", "brandingData")),
            typography=tuple(
                TypographySignal.from_dict(t) for t in _list(d, "typography", "brandingData")
            ),
            logos=tuple(LogoSignal.from_dict(lg) for lg in _list(d, "logos", "brandingData")),
            brand_name=brand_name,
        )


# ---------------------------------------------------------------------------
# Design tokens - normalized synthesis output
# ---------------------------------------------------------------------------

@dataclass
class FeedbackColors:
    """Fixed status colors."""
    success: str
    warning: str
    error: str
    info: str

    def to_dict(self) -> dict:
        return {"success": self.success, "warning": self.warning,
                "error": self.error, "info": self.info}

    @classmethod
    def from_dict(cls, d: dict) -> "FeedbackColors":
        where = "colors.feedback"
        return cls(
            success=_require(d, "success", where),
            warning=_require(d, "warning", where),
            error=_require(d, "error", where),
            info=_require(d, "info", where),
        )


@dataclass
class ColorTokens:
    """Color ramps keyed by weight stop ("50" lightest .. "900" darkest)."""
    primary: dict[str, str]
    secondary: dict[str, str]
    accent: dict[str, str]
    neutral: dict[str, str]              # also carries "white" / "black"
    feedback: FeedbackColors

    def ramps(self) -> dict[str, dict[str, str]]:
        """The four ramp groups in declaration order."""
        return {"primary": self.primary, "secondary": self.secondary,
                "accent": self.accent, "neutral": self.neutral}

    def to_dict(self) -> dict:
        d: dict[str, Any] = {name: dict(ramp) for name, ramp in self.ramps().items()}
        d["feedback"] = self.feedback.to_dict()
        return d

    @classmethod
    def from_dict(cls, d: dict) -> "ColorTokens":
        return cls(
            primary=_mapping(d, "primary", "colors"),
            secondary=_mapping(d, "secondary", "colors"),
            accent=_mapping(d, "accent", "colors"),
            neutral=_mapping(d, "neutral", "colors"),
            feedback=FeedbackColors.from_dict(_require(d, "feedback", "colors")),
        )


@dataclass
class FontFamilies:
    heading: str
    body: str
    accent: str | None = None

    def to_dict(self) -> dict:
        d = {"heading": self.heading, "body": self.body}
        if self.accent:
            d["accent"] = self.accent
        return d

    @classmethod
    def from_dict(cls, d: dict) -> "FontFamilies":
        where = "typography.families"
        return cls(heading=_require(d, "heading", where),
                   body=_require(d, "body", where),
                   accent=d.get("accent"))


@dataclass
class FontWeights:
    """Weight scale; only regular and bold are mandatory."""
    regular: int
    bold: int
    light: int | None = None
    medium: int | None = None
    semibold: int | None = None
    extra_bold: int | None = None

    def to_dict(self) -> dict:
        ordered = [
            ("light", self.light),
            ("regular", self.regular),
            ("medium", self.medium),
            ("semibold", self.semibold),
            ("bold", self.bold),
            ("extraBold", self.extra_bold),
        ]
        return {k: v for k, v in ordered if v is not None}

    @classmethod
    def from_dict(cls, d: dict) -> "FontWeights":
        where = "typography.weights"
        return cls(
            regular=_require(d, "regular", where),
            bold=_require(d, "bold", where),
            light=d.get("light"),
            medium=d.get("medium"),
            semibold=d.get("semibold"),
            extra_bold=d.get("extraBold"),
        )


@dataclass
class FontSizes:
    base: str
    xs: str
    sm: str
    md: str
    lg: str
    xl: str
    xxl: str
    xxxl: str

    KEYS = ("base", "xs", "sm", "md", "lg", "xl", "xxl", "xxxl")

    def to_dict(self) -> dict:
        return {k: getattr(self, k) for k in self.KEYS}

    @classmethod
    def from_dict(cls, d: dict) -> "FontSizes":
        return cls(**{k: _require(d, k, "typography.sizes") for k in cls.KEYS})


@dataclass
class LineHeights:
    tight: float
    normal: float
    loose: float

    def to_dict(self) -> dict:
        return {"tight": self.tight, "normal": self.normal, "loose": self.loose}

    @classmethod
    def from_dict(cls, d: dict) -> "LineHeights":
        where = "typography.lineHeights"
        return cls(tight=_require(d, "tight", where),
                   normal=_require(d, "normal", where),
                   loose=_require(d, "loose", where))


@dataclass
class TypographyTokens:
    families: FontFamilies
    weights: FontWeights
    sizes: FontSizes
    line_heights: LineHeights

    def to_dict(self) -> dict:
        return {
            "families": self.families.to_dict(),
            "weights": self.weights.to_dict(),
            "sizes": self.sizes.to_dict(),
            "lineHeights": self.line_heights.to_dict(),
        }

    @classmethod
    def from_dict(cls, d: dict) -> "TypographyTokens":
        return cls(
            families=FontFamilies.from_dict(_require(d, "families", "typography")),
            weights=FontWeights.from_dict(_require(d, "weights", "typography")),
            sizes=FontSizes.from_dict(_require(d, "sizes", "typography")),
            line_heights=LineHeights.from_dict(_require(d, "lineHeights", "typography")),
        )


@dataclass
class SpacingTokens:
    base: str
    xs: str
    sm: str
    md: str
    lg: str
    xl: str
    xxl: str

    KEYS = ("base", "xs", "sm", "md", "lg", "xl", "xxl")

    def to_dict(self) -> dict:
        return {k: getattr(self, k) for k in self.KEYS}

    @classmethod
    def from_dict(cls, d: dict) -> "SpacingTokens":
        return cls(**{k: _require(d, k, "spacing") for k in cls.KEYS})


@dataclass
class TokenMetadata:
    brand_name: str
    version: str
    created_at: str                      # ISO-8601 UTC, e.g. 2026-01-02T03:04:05.678Z
    description: str | None = None

    def to_dict(self) -> dict:
        d: dict[str, Any] = {"brandName": self.brand_name, "version": self.version}
        if self.description:
            d["description"] = self.description
        d["createdAt"] = self.created_at
        return d

    @classmethod
    def from_dict(cls, d: dict) -> "TokenMetadata":
        return cls(
            brand_name=_require(d, "brandName", "metadata"),
            version=_require(d, "version", "metadata"),
            created_at=_require(d, "createdAt", "metadata"),
            description=d.get("description"),
        )


@dataclass
class DesignTokenSet:
    """Complete, normalized design-token structure for one brand.

    Every key present in the baseline is present here; synthesis only
    overrides individual values.
    """
    colors: ColorTokens
    typography: TypographyTokens
    metadata: TokenMetadata
    spacing: SpacingTokens | None = None

    def to_dict(self) -> dict:
        d: dict[str, Any] = {
            "colors": self.colors.to_dict(),
            "typography": self.typography.to_dict(),
        }
        if self.spacing is not None:
            d["spacing"] = self.spacing.to_dict()
        d["metadata"] = self.metadata.to_dict()
        return d

    @classmethod
    def from_dict(cls, d: dict) -> "DesignTokenSet":
        spacing = d.get("spacing") if isinstance(d, dict) else None
        return cls(
            colors=ColorTokens.from_dict(_require(d, "colors", "tokens")),
            typography=TypographyTokens.from_dict(_require(d, "typography", "tokens")),
            metadata=TokenMetadata.from_dict(_require(d, "metadata", "tokens")),
            spacing=SpacingTokens.from_dict(spacing) if spacing else None,
        )
