"""Profile/token loader - JSON and YAML serialization for brand data files.

Provides round-trip save/load so extracted profiles and synthesized token
sets can be reviewed, version-controlled, and edited by hand. The file
extension picks the format: ``.yaml`` / ``.yml`` for YAML, anything else
is JSON.
"""

import json
from pathlib import Path
from typing import Any

import yaml

from src.exceptions import InvalidParamsError

from .models import BrandProfile, DesignTokenSet

_YAML_SUFFIXES = {".yaml", ".yml"}


def _is_yaml(path: Path) -> bool:
    return path.suffix.lower() in _YAML_SUFFIXES


def dump_data(data: dict[str, Any], path: str | Path) -> None:
    """Write a wire dict to a JSON or YAML file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        if _is_yaml(path):
            yaml.dump(data, f, default_flow_style=False, sort_keys=False,
                      allow_unicode=True, width=120)
        else:
            json.dump(data, f, indent=2, ensure_ascii=False)
            f.write("\n")


def load_data(path: str | Path) -> dict[str, Any]:
    """Read a wire dict from a JSON or YAML file."""
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        if _is_yaml(path):
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise InvalidParamsError(f"{path} is not valid YAML: {e}") from e
        else:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise InvalidParamsError(f"{path} is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise InvalidParamsError(f"{path} does not contain an object")
    return data


def save_profile(profile: BrandProfile, path: str | Path) -> None:
    """Serialize a BrandProfile to a JSON or YAML file."""
    dump_data(profile.to_dict(), path)


def load_profile(path: str | Path) -> BrandProfile:
    """Deserialize a BrandProfile from a JSON or YAML file."""
    return BrandProfile.from_dict(load_data(path))


def save_tokens(tokens: DesignTokenSet, path: str | Path) -> None:
    """Serialize a DesignTokenSet to a JSON or YAML file."""
    dump_data(tokens.to_dict(), path)


def load_tokens(path: str | Path) -> DesignTokenSet:
    """Deserialize a DesignTokenSet from a JSON or YAML file."""
    return DesignTokenSet.from_dict(load_data(path))
