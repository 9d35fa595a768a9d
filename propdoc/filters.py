"""Tag-based inclusion and exclusion of properties."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, List

from .logging import get_logger
from .tags import has_tag_value

if TYPE_CHECKING:  # pragma: no cover - typing aid
    from .models import Property, PropertyStruct

_LOGGER = get_logger("filters")


@dataclass(frozen=True)
class TagFilterRule:
    """Keep nodes tagged ``key:"...value..."``, or drop them when ``exclude``."""

    key: str
    value: str
    exclude: bool = False


def filter_properties_by_tag(props: List["Property"], key: str, value: str, exclude: bool) -> None:
    """Filter ``props`` in place, recursing into every surviving node."""
    kept = []
    for prop in props:
        if has_tag_value(prop.tag, key, value) == exclude:
            _LOGGER.debug("Dropping property %s (%s=%s, exclude=%s)", prop.name, key, value, exclude)
            continue
        filter_properties_by_tag(prop.properties, key, value, exclude)
        kept.append(prop)
    props[:] = kept


def filter_by_tag(tree: "PropertyStruct", key: str, value: str, exclude: bool) -> None:
    filter_properties_by_tag(tree.properties, key, value, exclude)


def apply_tag_filters(tree: "PropertyStruct", rules: Iterable[TagFilterRule]) -> None:
    """Apply each rule in order; later rules see the output of earlier ones."""
    for rule in rules:
        filter_properties_by_tag(tree.properties, rule.key, rule.value, rule.exclude)


__all__ = ["TagFilterRule", "apply_tag_filters", "filter_by_tag", "filter_properties_by_tag"]
