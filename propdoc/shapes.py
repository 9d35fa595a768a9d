"""Abstract declaration shapes consumed by the tree builder.

Parsers (see :mod:`propdoc.parsers`) translate source text into these
immutable values; everything downstream dispatches on the shape class.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class ListType:
    """Slice or array of ``element``."""

    element: "TypeShape"


@dataclass(frozen=True)
class InterfaceType:
    """``interface{...}`` or ``any``."""


@dataclass(frozen=True)
class NamedType:
    """A type referenced by identifier, optionally package qualified (``pkg.Name``)."""

    name: str


@dataclass(frozen=True)
class RecordType:
    """Struct-like type; ``name`` is set when the record is known by identifier."""

    fields: Tuple["FieldDecl", ...] = ()
    name: Optional[str] = None


@dataclass(frozen=True)
class GenericType:
    """Instantiation of a generic type: ``base[arguments...]``."""

    base: NamedType
    arguments: Tuple["TypeShape", ...]


@dataclass(frozen=True)
class PointerType:
    element: "TypeShape"


@dataclass(frozen=True)
class OpaqueType:
    """A recognised type form with no documentable structure (map, chan, func)."""

    kind: str
    source: str = ""


TypeShape = Union[ListType, InterfaceType, NamedType, RecordType, GenericType, PointerType, OpaqueType]


@dataclass(frozen=True)
class FieldDecl:
    """One field line of a record declaration.

    ``names`` is empty for embedded fields. ``tag`` holds the raw quoted
    literal exactly as written in source, quotes included.
    """

    names: Tuple[str, ...]
    type: TypeShape
    tag: Optional[str] = None
    doc: str = ""


@dataclass(frozen=True)
class TypeDecl:
    """A named top-level type declaration with its doc comment."""

    name: str
    type: TypeShape
    doc: str = ""


__all__ = [
    "FieldDecl",
    "GenericType",
    "InterfaceType",
    "ListType",
    "NamedType",
    "OpaqueType",
    "PointerType",
    "RecordType",
    "TypeDecl",
    "TypeShape",
]
