"""Property tree data model shared across propdoc components."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional

from markupsafe import Markup

from .filters import filter_properties_by_tag


@dataclass
class Property:
    """One documented field, possibly a nested group of properties."""

    name: str
    type: str = ""
    tag: str = ""
    text: Markup = field(default_factory=Markup)
    default: Optional[str] = None
    other_names: List[str] = field(default_factory=list)
    other_texts: List[Markup] = field(default_factory=list)
    anonymous: bool = False
    properties: List["Property"] = field(default_factory=list)

    def clone(self) -> "Property":
        return replace(
            self,
            other_names=list(self.other_names),
            other_texts=list(self.other_texts),
            properties=[prop.clone() for prop in self.properties],
        )

    def equal(self, other: "Property") -> bool:
        return (
            self.name == other.name
            and self.type == other.type
            and self.tag == other.tag
            and self.text == other.text
            and self.default == other.default
            and self.anonymous == other.anonymous
            and self.other_names == other.other_names
            and self.other_texts == other.other_texts
            and self.same_sub_properties(other)
        )

    def same_sub_properties(self, other: "Property") -> bool:
        if len(self.properties) != len(other.properties):
            return False
        return all(mine.equal(theirs) for mine, theirs in zip(self.properties, other.properties))

    def nest(self, nested: "PropertyStruct") -> None:
        """Merge ``nested``'s top-level properties into this group, skipping duplicates."""
        self.properties = nest_unique(self.properties, nested.properties)

    def set_anonymous(self) -> None:
        self.anonymous = True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "type": self.type,
            "tag": self.tag,
            "text": str(self.text),
            "default": self.default,
            "other_names": list(self.other_names),
            "other_texts": [str(text) for text in self.other_texts],
            "anonymous": self.anonymous,
            "properties": [prop.to_dict() for prop in self.properties],
        }


@dataclass
class PropertyStruct:
    """Documentation root for one record type."""

    name: str
    text: Markup = field(default_factory=Markup)
    properties: List[Property] = field(default_factory=list)

    def clone(self) -> "PropertyStruct":
        return replace(self, properties=[prop.clone() for prop in self.properties])

    def equal(self, other: "PropertyStruct") -> bool:
        if self.name != other.name or self.text != other.text:
            return False
        if len(self.properties) != len(other.properties):
            return False
        return all(mine.equal(theirs) for mine, theirs in zip(self.properties, other.properties))

    def nest(self, nested: "PropertyStruct") -> None:
        """Merge ``nested``'s top-level properties into this struct, skipping duplicates."""
        self.properties = nest_unique(self.properties, nested.properties)

    def get_by_name(self, name: str) -> Optional[Property]:
        """Return the live property at dotted path ``name``, or None.

        The returned object belongs to this tree; mutating it edits the tree.
        """
        return _get_by_name(name, "", self.properties)

    def filter_by_tag(self, key: str, value: str, exclude: bool) -> None:
        filter_properties_by_tag(self.properties, key, value, exclude)

    def include_by_tag(self, key: str, value: str) -> None:
        filter_properties_by_tag(self.properties, key, value, exclude=False)

    def exclude_by_tag(self, key: str, value: str) -> None:
        filter_properties_by_tag(self.properties, key, value, exclude=True)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "text": str(self.text),
            "properties": [prop.to_dict() for prop in self.properties],
        }


def nest_unique(existing: List[Property], additions: List[Property]) -> List[Property]:
    """Return ``existing`` followed by clones of additions not already present."""
    merged = list(existing)
    for candidate in additions:
        if not any(candidate.equal(present) for present in merged):
            merged.append(candidate.clone())
    return merged


def _get_by_name(name: str, prefix: str, props: List[Property]) -> Optional[Property]:
    for prop in props:
        path = prefix + prop.name
        if path == name:
            return prop
        if name.startswith(path + "."):
            return _get_by_name(name, path + ".", prop.properties)
    return None


__all__ = ["Property", "PropertyStruct", "nest_unique"]
