"""Field name <-> property name conventions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict


def blueprint_property_name(field_name: str) -> str:
    """Lower-case the first rune: ``CflagsExtra`` -> ``cflagsExtra``."""
    if not field_name:
        return field_name
    return field_name[0].lower() + field_name[1:]


def blueprint_field_name(property_name: str) -> str:
    """Upper-case the first rune: ``cflagsExtra`` -> ``CflagsExtra``."""
    if not property_name:
        return property_name
    return property_name[0].upper() + property_name[1:]


def _identity(name: str) -> str:
    return name


@dataclass(frozen=True)
class NamingConvention:
    """Bidirectional mapping between declared field names and property names.

    ``property_name`` is used when building trees and ``field_name`` when
    binding defaults from a live object, so the two must be inverses.
    """

    name: str
    property_name: Callable[[str], str]
    field_name: Callable[[str], str]


BLUEPRINT_NAMING = NamingConvention(
    name="blueprint",
    property_name=blueprint_property_name,
    field_name=blueprint_field_name,
)

IDENTITY_NAMING = NamingConvention(name="identity", property_name=_identity, field_name=_identity)

_CONVENTIONS: Dict[str, NamingConvention] = {
    BLUEPRINT_NAMING.name: BLUEPRINT_NAMING,
    IDENTITY_NAMING.name: IDENTITY_NAMING,
}


def get_naming_convention(name: str) -> NamingConvention:
    """Look up a built-in convention by name."""
    try:
        return _CONVENTIONS[name.lower()]
    except KeyError:
        known = ", ".join(sorted(_CONVENTIONS))
        raise ValueError(f"Unknown naming convention '{name}' (expected one of: {known})") from None


__all__ = [
    "BLUEPRINT_NAMING",
    "IDENTITY_NAMING",
    "NamingConvention",
    "blueprint_field_name",
    "blueprint_property_name",
    "get_naming_convention",
]
