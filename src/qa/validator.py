"""QA validator - structural checks on a design-token set.

Validates that a token set honours its contract: every baseline ramp stop
and scale key is present, color values are hex literals, and the mandatory
weights are usable numbers. Works on a DesignTokenSet or on its raw wire
dict, so hand-edited token files can be checked before they are loaded.

Usage::

    from src.qa.validator import TokenValidator

    result = TokenValidator().validate(tokens)
    assert result.passed, result.summary()
"""

from dataclasses import dataclass, field
from typing import Any

from src.schema.design_system import UNNAMED_BRAND, build_baseline_tokens, is_hex_color
from src.schema.models import DesignTokenSet


# ---------------------------------------------------------------------------
# Result types
# ---------------------------------------------------------------------------

@dataclass
class Issue:
    """A single QA issue found during validation."""
    severity: str       # "error" or "warning"
    group: str          # token path, e.g. "colors.primary"
    key: str            # "" for group-level issues
    category: str       # e.g. "missing_key", "invalid_color"
    message: str

    def __str__(self) -> str:
        loc = self.group
        if self.key:
            loc += f".{self.key}"
        return f"[{self.severity.upper()}] {loc}: {self.message}"


@dataclass
class QAResult:
    """Aggregated result of QA validation."""
    issues: list[Issue] = field(default_factory=list)

    @property
    def errors(self) -> list[Issue]:
        return [i for i in self.issues if i.severity == "error"]

    @property
    def warnings(self) -> list[Issue]:
        return [i for i in self.issues if i.severity == "warning"]

    @property
    def passed(self) -> bool:
        return len(self.errors) == 0

    def summary(self) -> str:
        """One-line summary string."""
        status = "PASS" if self.passed else "FAIL"
        return (
            f"QA {status}: {len(self.errors)} error(s), "
            f"{len(self.warnings)} warning(s)"
        )

    def report(self) -> str:
        """Multi-line report of all issues."""
        lines = [self.summary()]
        for issue in self.issues:
            lines.append(f"  {issue}")
        return "\n".join(lines)


# ---------------------------------------------------------------------------
# Validator
# ---------------------------------------------------------------------------

# Groups whose baseline keys must all be present (path inside the wire dict)
_REQUIRED_GROUPS = (
    ("colors", "primary"),
    ("colors", "secondary"),
    ("colors", "accent"),
    ("colors", "neutral"),
    ("colors", "feedback"),
    ("typography", "families"),
    ("typography", "sizes"),
    ("typography", "lineHeights"),
)

_REQUIRED_WEIGHTS = ("regular", "bold")


def _lookup(data: Any, path: tuple[str, ...]) -> Any:
    for part in path:
        if not isinstance(data, dict) or part not in data:
            return None
        data = data[part]
    return data


class TokenValidator:
    """Validates a token set against the baseline structure."""

    def __init__(self) -> None:
        self.baseline = build_baseline_tokens().to_dict()

    def validate(self, tokens: DesignTokenSet | dict[str, Any]) -> QAResult:
        """Run all checks and return the aggregated result."""
        data = tokens.to_dict() if isinstance(tokens, DesignTokenSet) else tokens
        result = QAResult()

        self._check_required_keys(data, result)
        self._check_colors(data, result)
        self._check_weights(data, result)
        self._check_spacing(data, result)
        self._check_metadata(data, result)
        return result

    def _check_required_keys(self, data: dict, result: QAResult) -> None:
        for path in _REQUIRED_GROUPS:
            group = ".".join(path)
            expected = _lookup(self.baseline, path)
            actual = _lookup(data, path)
            if not isinstance(actual, dict):
                result.issues.append(Issue(
                    "error", group, "", "missing_group",
                    f"Group {group} is missing",
                ))
                continue
            for key in expected:
                if key not in actual:
                    result.issues.append(Issue(
                        "error", group, key, "missing_key",
                        f"Baseline key {key!r} was removed",
                    ))

    def _check_colors(self, data: dict, result: QAResult) -> None:
        colors = data.get("colors")
        if not isinstance(colors, dict):
            return
        for group, values in colors.items():
            if not isinstance(values, dict):
                continue
            for key, value in values.items():
                if not is_hex_color(value):
                    result.issues.append(Issue(
                        "error", f"colors.{group}", key, "invalid_color",
                        f"{value!r} is not a hex color literal",
                    ))

    def _check_weights(self, data: dict, result: QAResult) -> None:
        weights = _lookup(data, ("typography", "weights"))
        if not isinstance(weights, dict):
            result.issues.append(Issue(
                "error", "typography.weights", "", "missing_group",
                "Group typography.weights is missing",
            ))
            return
        for key in _REQUIRED_WEIGHTS:
            value = weights.get(key)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                result.issues.append(Issue(
                    "error", "typography.weights", key, "invalid_weight",
                    f"Weight {key!r} must be a positive integer, got {value!r}",
                ))

    def _check_spacing(self, data: dict, result: QAResult) -> None:
        spacing = data.get("spacing")
        if spacing is None:
            return
        if not isinstance(spacing, dict):
            result.issues.append(Issue(
                "error", "spacing", "", "missing_group", "Spacing must be an object",
            ))
            return
        for key in self.baseline["spacing"]:
            if key not in spacing:
                result.issues.append(Issue(
                    "error", "spacing", key, "missing_key",
                    f"Baseline key {key!r} was removed",
                ))

    def _check_metadata(self, data: dict, result: QAResult) -> None:
        meta = data.get("metadata")
        if not isinstance(meta, dict):
            result.issues.append(Issue(
                "error", "metadata", "", "missing_group", "Group metadata is missing",
            ))
            return
        for key in ("brandName", "version", "createdAt"):
            if not meta.get(key):
                result.issues.append(Issue(
                    "error", "metadata", key, "missing_key",
                    f"Metadata field {key!r} is empty",
                ))
        if meta.get("brandName") == UNNAMED_BRAND:
            result.issues.append(Issue(
                "warning", "metadata", "brandName", "unnamed_brand",
                "No brand name was detected; placeholder in use",
            ))


def validate_tokens(tokens: DesignTokenSet | dict[str, Any]) -> QAResult:
    """Convenience function: validate a single token set."""
    return TokenValidator().validate(tokens)
