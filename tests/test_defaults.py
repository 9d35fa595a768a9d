"""Tests for binding default values onto property trees."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from types import SimpleNamespace
from typing import List, Optional

import pytest

from propdoc.builder import build_property_struct
from propdoc.config import PropdocConfig
from propdoc.defaults import DefaultsBinder, is_record, is_zero, record_fields, render_value, set_defaults
from propdoc.errors import MissingFieldInvariantViolation, PropertyDocError
from propdoc.models import Property, PropertyStruct
from propdoc.shapes import TypeDecl


@dataclass
class Inner:
    X: bool = False


@dataclass
class ModuleDefaults:
    Name: str = ""
    Count: List[int] = field(default_factory=list)
    Inner: Optional[Inner] = None


class PlainInner:
    def __init__(self, x: bool = False) -> None:
        self.X = x


class PlainDefaults:
    def __init__(self, name: str = "", inner: Optional[PlainInner] = None) -> None:
        self.Name = name
        self.Count: List[int] = []
        self.Inner = inner


class SlottedInner:
    __slots__ = ("X",)

    def __init__(self, x: bool = False) -> None:
        self.X = x


def test_set_defaults_stamps_non_zero_leaves(module_decl: TypeDecl) -> None:
    tree = build_property_struct(module_decl)
    set_defaults(tree, ModuleDefaults(Name="libfoo", Count=[1, 2], Inner=Inner(X=True)))

    name, count, inner = tree.properties
    assert name.default == "libfoo"
    assert count.default == "[1 2]"
    assert inner.default is None
    assert inner.properties[0].default == "true"


def test_set_defaults_skips_zero_and_nil_values(module_decl: TypeDecl) -> None:
    tree = build_property_struct(module_decl)
    set_defaults(tree, ModuleDefaults())
    assert all(prop.default is None for prop in tree.properties)
    assert tree.properties[2].properties[0].default is None


def test_set_defaults_skips_records_with_only_zero_fields(module_decl: TypeDecl) -> None:
    tree = build_property_struct(module_decl)
    set_defaults(tree, ModuleDefaults(Name="libfoo", Inner=Inner()))
    assert tree.properties[0].default == "libfoo"
    assert tree.properties[2].properties[0].default is None


def test_set_defaults_accepts_mappings_and_namespaces(module_decl: TypeDecl) -> None:
    tree = build_property_struct(module_decl)
    set_defaults(tree, {"Name": "libbar", "Count": [], "Inner": SimpleNamespace(X=True)})
    assert tree.properties[0].default == "libbar"
    assert tree.properties[1].default is None
    assert tree.properties[2].properties[0].default == "true"


def test_set_defaults_recurses_into_plain_objects(module_decl: TypeDecl) -> None:
    tree = build_property_struct(module_decl)
    set_defaults(tree, PlainDefaults(name="libfoo", inner=PlainInner(x=True)))

    name, count, inner = tree.properties
    assert name.default == "libfoo"
    assert count.default is None
    assert inner.default is None
    assert inner.properties[0].default == "true"


def test_set_defaults_recurses_into_slotted_objects(module_decl: TypeDecl) -> None:
    tree = build_property_struct(module_decl)
    set_defaults(tree, ModuleDefaults(Inner=SlottedInner(x=True)))  # type: ignore[arg-type]

    inner = tree.properties[2]
    assert inner.default is None
    assert inner.properties[0].default == "true"


def test_record_fields_of_plain_and_slotted_objects() -> None:
    assert record_fields(PlainInner(x=True)) == {"X": True}
    assert record_fields(SlottedInner()) == {"X": False}
    assert record_fields(Inner(X=True)) == {"X": True}
    assert is_record(SimpleNamespace(a=1))


@pytest.mark.parametrize("value", ["text", 3, 1.5, [1], {"a": 1}, len, PlainInner, object()])
def test_scalars_containers_and_callables_are_not_records(value: object) -> None:
    assert not is_record(value)


def test_missing_field_is_an_invariant_violation(caplog: pytest.LogCaptureFixture) -> None:
    tree = PropertyStruct(name="Props", properties=[Property(name="name"), Property(name="stale")])

    with caplog.at_level(logging.CRITICAL, logger="propdoc"):
        with pytest.raises(MissingFieldInvariantViolation) as excinfo:
            set_defaults(tree, ModuleDefaults(Name="x"))

    assert not isinstance(excinfo.value, PropertyDocError)
    assert excinfo.value.field_name == "Stale"
    assert excinfo.value.owner == "ModuleDefaults"
    assert any("Stale" in record.getMessage() for record in caplog.records)


def test_binder_from_config_uses_naming() -> None:
    tree = PropertyStruct(name="Props", properties=[Property(name="cflags")])
    binder = DefaultsBinder.from_config(PropdocConfig(root=Path("."), naming="identity"))
    binder.bind(tree, SimpleNamespace(cflags=["-O2", "-g"]))
    assert tree.properties[0].default == "[-O2 -g]"


@pytest.mark.parametrize(
    "value",
    [None, False, 0, 0.0, "", [], {}, (), Inner(), SimpleNamespace(a=0, b=""), PlainInner(), SlottedInner()],
)
def test_is_zero_true(value: object) -> None:
    assert is_zero(value)


@pytest.mark.parametrize("value", [True, 1, -0.5, "x", [0], {"a": 0}, Inner(X=True), object()])
def test_is_zero_false(value: object) -> None:
    assert not is_zero(value)


def test_render_value_follows_go_formatting() -> None:
    assert render_value(True) == "true"
    assert render_value(42) == "42"
    assert render_value(2.0) == "2"
    assert render_value(0.25) == "0.25"
    assert render_value(["a", "b"]) == "[a b]"
    assert render_value({"b": 2, "a": 1}) == "map[a:1 b:2]"
    assert render_value({10: "x", 2: "y"}) == "map[2:y 10:x]"
    assert render_value({"z", "a"}) == "[a z]"
    assert render_value([None]) == "[<nil>]"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (1e8, "1e+08"),
        (1234567.0, "1.234567e+06"),
        (123456789.0, "1.23456789e+08"),
        (100000.0, "100000"),
        (-2.5, "-2.5"),
        (0.0001, "0.0001"),
        (1e-05, "1e-05"),
        (float("inf"), "+Inf"),
        (float("-inf"), "-Inf"),
        (float("nan"), "NaN"),
    ],
)
def test_render_value_floats_use_go_exponent_rule(value: float, expected: str) -> None:
    assert render_value(value) == expected
