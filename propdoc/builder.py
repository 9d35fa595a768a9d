"""Builds property trees from record type declarations."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from .errors import NotARecordError
from .logging import get_logger
from .models import PropertyStruct
from .naming import BLUEPRINT_NAMING, NamingConvention, get_naming_convention
from .resolver import DEFAULT_CONFIGURABLE_MARKERS, TypeShapeResolver
from .shapes import RecordType, TypeDecl
from .text import format_text

if TYPE_CHECKING:  # pragma: no cover - typing aid
    from .config import PropdocConfig


class PropertyTreeBuilder:
    """Turns a :class:`TypeDecl` describing a record into a :class:`PropertyStruct`."""

    def __init__(
        self,
        naming: NamingConvention = BLUEPRINT_NAMING,
        configurable_markers: Iterable[str] = DEFAULT_CONFIGURABLE_MARKERS,
    ) -> None:
        self.resolver = TypeShapeResolver(naming=naming, configurable_markers=configurable_markers)
        self.logger = get_logger("builder")

    @classmethod
    def from_config(cls, config: "PropdocConfig") -> "PropertyTreeBuilder":
        return cls(
            naming=get_naming_convention(config.naming),
            configurable_markers=config.configurable_markers,
        )

    def build(self, decl: TypeDecl) -> PropertyStruct:
        if not isinstance(decl.type, RecordType):
            raise NotARecordError(decl.name)

        properties = self.resolver.record_properties(decl.type.fields)
        self.logger.debug("Built %s with %d top-level properties", decl.name, len(properties))
        return PropertyStruct(name=decl.name, text=format_text(decl.doc), properties=properties)


def build_property_struct(
    decl: TypeDecl,
    *,
    naming: NamingConvention = BLUEPRINT_NAMING,
    configurable_markers: Iterable[str] = DEFAULT_CONFIGURABLE_MARKERS,
) -> PropertyStruct:
    """Build the property tree for ``decl`` with a one-off builder."""
    return PropertyTreeBuilder(naming=naming, configurable_markers=configurable_markers).build(decl)


__all__ = ["PropertyTreeBuilder", "build_property_struct"]
