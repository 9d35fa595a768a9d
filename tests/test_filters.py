"""Tests for tag-based filtering."""

from __future__ import annotations

from typing import List

from propdoc.filters import TagFilterRule, apply_tag_filters, filter_by_tag
from propdoc.models import Property, PropertyStruct
from propdoc.tags import has_tag_value


def _all_nodes(props: List[Property]) -> List[Property]:
    nodes: List[Property] = []
    for prop in props:
        nodes.append(prop)
        nodes.extend(_all_nodes(prop.properties))
    return nodes


def test_include_keeps_only_matching_nodes(tagged_tree: PropertyStruct) -> None:
    tagged_tree.include_by_tag("android", "arch_variant")

    assert [p.name for p in tagged_tree.properties] == ["srcs", "target"]
    assert [p.name for p in tagged_tree.properties[1].properties] == ["host"]
    assert all(has_tag_value(p.tag, "android", "arch_variant") for p in _all_nodes(tagged_tree.properties))


def test_exclude_drops_matching_nodes_and_recurses(tagged_tree: PropertyStruct) -> None:
    tagged_tree.exclude_by_tag("android", "arch_variant")

    assert [p.name for p in tagged_tree.properties] == ["owner", "export"]
    export = tagged_tree.get_by_name("export")
    assert export is not None
    assert export.properties == []
    assert not any(has_tag_value(p.tag, "android", "arch_variant") for p in _all_nodes(tagged_tree.properties))


def test_include_then_exclude_leaves_nothing(tagged_tree: PropertyStruct) -> None:
    filter_by_tag(tagged_tree, "android", "path", exclude=False)
    assert [p.name for p in tagged_tree.properties] == ["srcs"]
    filter_by_tag(tagged_tree, "android", "path", exclude=True)
    assert tagged_tree.properties == []


def test_filter_mutates_existing_lists_in_place(tagged_tree: PropertyStruct) -> None:
    top_level = tagged_tree.properties
    nested = tagged_tree.properties[1].properties

    tagged_tree.filter_by_tag("android", "arch_variant", exclude=False)

    assert tagged_tree.properties is top_level
    assert tagged_tree.properties[1].properties is nested


def test_apply_tag_filters_runs_rules_in_order(tagged_tree: PropertyStruct) -> None:
    apply_tag_filters(
        tagged_tree,
        [
            TagFilterRule(key="android", value="arch_variant"),
            TagFilterRule(key="android", value="path", exclude=True),
        ],
    )
    assert [p.name for p in tagged_tree.properties] == ["target"]
    assert [p.name for p in tagged_tree.properties[0].properties] == ["host"]
