from __future__ import annotations

import pytest

from propdoc.models import Property, PropertyStruct
from propdoc.shapes import FieldDecl, ListType, NamedType, RecordType, TypeDecl


@pytest.fixture
def module_decl() -> TypeDecl:
    """A record with a scalar, a slice and an embedded record."""
    return TypeDecl(
        name="ModuleProperties",
        doc="Properties shared by every module.\n",
        type=RecordType(
            fields=(
                FieldDecl(names=("Name",), type=NamedType("string"), doc="Name of the module.\n"),
                FieldDecl(names=("Count",), type=ListType(NamedType("int")), tag='`android:"arch_variant"`'),
                FieldDecl(
                    names=(),
                    type=RecordType(
                        name="Inner",
                        fields=(FieldDecl(names=("X",), type=NamedType("bool")),),
                    ),
                ),
            )
        ),
    )


@pytest.fixture
def tagged_tree() -> PropertyStruct:
    """Hand-built tree whose tags exercise include/exclude filtering."""
    return PropertyStruct(
        name="Tagged",
        properties=[
            Property(name="srcs", type="list of string", tag='android:"path,arch_variant"'),
            Property(
                name="target",
                type="",
                tag='android:"arch_variant"',
                properties=[
                    Property(name="host", type="bool", tag='android:"arch_variant"'),
                    Property(name="android", type="bool"),
                ],
            ),
            Property(name="owner", type="string"),
            Property(
                name="export",
                type="",
                properties=[Property(name="dirs", type="list of string", tag='android:"arch_variant"')],
            ),
        ],
    )
