"""Configuration loading for propdoc (.propdoc.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .errors import ConfigError
from .filters import TagFilterRule
from .naming import get_naming_convention
from .resolver import DEFAULT_CONFIGURABLE_MARKERS

CONFIG_FILENAME = ".propdoc.yml"


@dataclass
class PropdocConfig:
    """Represents the settings defined in .propdoc.yml."""

    root: Path
    naming: str = "blueprint"
    configurable_markers: List[str] = field(
        default_factory=lambda: sorted(DEFAULT_CONFIGURABLE_MARKERS)
    )
    filters: List[TagFilterRule] = field(default_factory=list)


def load_config(config_path: Path) -> PropdocConfig:
    """Load configuration from disk, returning defaults when the file is absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return PropdocConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    config = PropdocConfig(root=root)

    naming = _as_str(data.get("naming"))
    if naming:
        try:
            get_naming_convention(naming)
        except ValueError as exc:
            raise ConfigError(str(exc)) from exc
        config.naming = naming.lower()

    markers = _as_str_list(data.get("configurable_markers"))
    if markers:
        config.configurable_markers = markers

    config.filters = _parse_filters(data.get("filters"))
    return config


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _parse_filters(value: Any) -> List[TagFilterRule]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ConfigError("filters must be a list of {key, value, exclude} mappings")

    rules: List[TagFilterRule] = []
    for index, entry in enumerate(value):
        if not isinstance(entry, dict):
            raise ConfigError(f"filters[{index}] must be a mapping")
        key = _as_str(entry.get("key"))
        tag_value = _as_str(entry.get("value"))
        if not key or tag_value is None:
            raise ConfigError(f"filters[{index}] requires both 'key' and 'value'")
        exclude = _as_bool(entry.get("exclude"))
        rules.append(TagFilterRule(key=key, value=tag_value, exclude=bool(exclude)))
    return rules


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return str(value).lower()
    return str(value) if isinstance(value, (str, int, float)) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []


__all__ = ["CONFIG_FILENAME", "PropdocConfig", "load_config"]
