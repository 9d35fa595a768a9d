"""Type shape resolution: descriptor strings and nested properties."""

from __future__ import annotations

from typing import FrozenSet, Iterable, List, Optional, Tuple

from .errors import UnknownTypeError
from .logging import get_logger
from .models import Property
from .naming import BLUEPRINT_NAMING, NamingConvention
from .shapes import (
    FieldDecl,
    GenericType,
    InterfaceType,
    ListType,
    NamedType,
    OpaqueType,
    PointerType,
    RecordType,
    TypeShape,
)
from .tags import unquote
from .text import format_text

DEFAULT_CONFIGURABLE_MARKERS: FrozenSet[str] = frozenset({"Configurable", "proptools.Configurable"})

_LOGGER = get_logger("resolver")


class TypeShapeResolver:
    """Maps declaration shapes to ``(descriptor, nested properties)`` pairs."""

    def __init__(
        self,
        naming: NamingConvention = BLUEPRINT_NAMING,
        configurable_markers: Iterable[str] = DEFAULT_CONFIGURABLE_MARKERS,
    ) -> None:
        self.naming = naming
        self.configurable_markers = frozenset(configurable_markers)

    def resolve(self, shape: TypeShape) -> Tuple[str, List[Property]]:
        if isinstance(shape, PointerType):
            shape = shape.element

        if isinstance(shape, ListType):
            element, nested = self.resolve(shape.element)
            return "list of " + element, nested
        if isinstance(shape, InterfaceType):
            return "interface", []
        if isinstance(shape, NamedType):
            return shape.name, []
        if isinstance(shape, RecordType):
            return shape.name or "", self.record_properties(shape.fields)
        if isinstance(shape, GenericType):
            if not self.is_configurable(shape):
                raise UnknownTypeError(repr(shape))
            inner, nested = self.resolve(shape.arguments[0])
            return "configurable " + inner, nested
        if isinstance(shape, OpaqueType):
            return shape.kind, []
        if isinstance(shape, PointerType):
            return "pointer", []
        raise UnknownTypeError(repr(shape))

    def is_configurable(self, shape: GenericType) -> bool:
        return shape.base.name in self.configurable_markers and len(shape.arguments) == 1

    def record_properties(self, fields: Iterable[FieldDecl]) -> List[Property]:
        """Build one property per declared field name, in declaration order."""
        props: List[Property] = []
        for decl in fields:
            names = decl.names or _embedded_names(decl.type)
            if not names:
                _LOGGER.debug("Skipping embedded field with unnamed type %r", decl.type)
                continue
            tag = unquote(decl.tag) if decl.tag is not None else ""
            type_name, inner = self.resolve(decl.type)
            for index, name in enumerate(names):
                props.append(
                    Property(
                        name=self.naming.property_name(name),
                        type=type_name,
                        tag=tag,
                        text=format_text(decl.doc),
                        # each name owns its subtree
                        properties=inner if index == 0 else [prop.clone() for prop in inner],
                    )
                )
        return props


def _embedded_names(shape: TypeShape) -> Tuple[str, ...]:
    """Embedded fields are named after their type identifier, when it has one."""
    if isinstance(shape, PointerType):
        shape = shape.element
    name: Optional[str] = None
    if isinstance(shape, NamedType):
        name = shape.name.rsplit(".", 1)[-1]
    elif isinstance(shape, RecordType):
        name = shape.name
    return (name,) if name else ()


__all__ = ["DEFAULT_CONFIGURABLE_MARKERS", "TypeShapeResolver"]
