"""Tree-sitter powered parser for Go type declarations."""

from __future__ import annotations

import re
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

import tree_sitter_go
from tree_sitter import Language, Node, Parser

from ..logging import get_logger
from ..shapes import (
    FieldDecl,
    GenericType,
    InterfaceType,
    ListType,
    NamedType,
    OpaqueType,
    PointerType,
    RecordType,
    TypeDecl,
    TypeShape,
)

GO_LANGUAGE = Language(tree_sitter_go.language())

_DIRECTIVE = re.compile(r"^(?:line |extern |export |[a-z0-9]+:[a-z0-9])")
_LIST_TYPES = {"slice_type", "array_type", "implicit_length_array_type"}
_OPAQUE_KINDS = {"map_type": "map", "channel_type": "chan", "function_type": "func"}


class GoDeclarationParser:
    """Extracts every ``type`` declaration of a Go source file."""

    def __init__(self) -> None:
        self._parser = Parser(GO_LANGUAGE)
        self.logger = get_logger("parsers.go")

    def parse(self, source: Union[str, bytes]) -> List[TypeDecl]:
        source_bytes = source.encode("utf-8") if isinstance(source, str) else source
        tree = self._parser.parse(source_bytes)
        if tree.root_node.has_error:
            self.logger.warning("Go source contains syntax errors; declarations may be incomplete")

        decls: List[TypeDecl] = []
        for node in tree.root_node.named_children:
            if node.type != "type_declaration":
                continue
            specs = [child for child in node.named_children if child.type in {"type_spec", "type_alias"}]
            for spec in specs:
                # a type spec comment wins over the declaration comment
                decls.append(
                    TypeDecl(
                        name=_text(spec.child_by_field_name("name")),
                        type=self._shape(spec.child_by_field_name("type")),
                        doc=_doc_comment(spec) or _doc_comment(node),
                    )
                )
        self.logger.debug("Parsed %d type declarations", len(decls))
        return decls

    def _shape(self, node: Optional[Node]) -> TypeShape:
        if node is None:
            return OpaqueType("missing")
        kind = node.type
        if kind == "parenthesized_type":
            return self._shape(_first_named(node))
        if kind == "pointer_type":
            return PointerType(self._shape(_first_named(node)))
        if kind in _LIST_TYPES:
            return ListType(self._shape(node.child_by_field_name("element")))
        if kind == "interface_type":
            return InterfaceType()
        if kind == "type_identifier":
            name = _text(node)
            return InterfaceType() if name == "any" else NamedType(name)
        if kind == "qualified_type":
            return NamedType("".join(_text(node).split()))
        if kind == "struct_type":
            field_list = _first_named(node)
            return RecordType(fields=self._fields(field_list) if field_list is not None else ())
        if kind == "generic_type":
            base = "".join(_text(node.child_by_field_name("type")).split())
            arguments = node.child_by_field_name("type_arguments")
            return GenericType(
                base=NamedType(base),
                arguments=tuple(self._shape(_type_argument(arg)) for arg in _named(arguments)),
            )
        return OpaqueType(_OPAQUE_KINDS.get(kind, kind), source=_text(node))

    def _fields(self, field_list: Node) -> Tuple[FieldDecl, ...]:
        fields: List[FieldDecl] = []
        for node in _named(field_list):
            if node.type != "field_declaration":
                continue
            names = tuple(_text(name) for name in node.children_by_field_name("name"))
            shape = self._shape(node.child_by_field_name("type"))
            if not names and any(child.type == "*" for child in node.children):
                shape = PointerType(shape)
            tag_node = node.child_by_field_name("tag")
            fields.append(
                FieldDecl(
                    names=names,
                    type=shape,
                    tag=_text(tag_node) if tag_node is not None else None,
                    doc=_doc_comment(node),
                )
            )
        return tuple(fields)


def parse_go_source(source: Union[str, bytes]) -> List[TypeDecl]:
    return GoDeclarationParser().parse(source)


def load_go_file(path: Path) -> List[TypeDecl]:
    """Parse every type declaration in the Go file at ``path``."""
    return GoDeclarationParser().parse(Path(path).read_bytes())


def comment_text(comments: Sequence[str]) -> str:
    """Return comment text the way ``go/ast.CommentGroup.Text`` does."""
    lines: List[str] = []
    for comment in comments:
        if comment.startswith("//"):
            body = comment[2:]
            if _DIRECTIVE.match(body):
                continue
            if body.startswith(" "):
                body = body[1:]
        else:
            body = comment[2:-2]
        lines.extend(line.rstrip() for line in body.split("\n"))

    collapsed: List[str] = []
    for line in lines:
        if line or (collapsed and collapsed[-1]):
            collapsed.append(line)
    while collapsed and not collapsed[-1]:
        collapsed.pop()
    if not collapsed:
        return ""
    return "\n".join(collapsed) + "\n"


def _doc_comment(node: Node) -> str:
    """Collect the comment group that ends on the line directly above ``node``."""
    group: List[Node] = []
    row = node.start_point[0]
    sibling = node.prev_named_sibling
    while sibling is not None and sibling.type == "comment" and sibling.end_point[0] == row - 1:
        group.append(sibling)
        row = sibling.start_point[0]
        sibling = sibling.prev_named_sibling
    # a comment sharing a line with the previous element trails that element
    if group and sibling is not None and sibling.end_point[0] == group[-1].start_point[0]:
        group.pop()
    group.reverse()
    return comment_text([_text(comment) for comment in group])


def _type_argument(node: Node) -> Optional[Node]:
    # newer grammars wrap each argument in a type_elem
    if node.type == "type_elem" and len(node.named_children) == 1:
        return node.named_children[0]
    return node


def _named(node: Optional[Node]) -> List[Node]:
    if node is None:
        return []
    return [child for child in node.named_children if child.type != "comment"]


def _first_named(node: Node) -> Optional[Node]:
    children = _named(node)
    return children[0] if children else None


def _text(node: Optional[Node]) -> str:
    if node is None or node.text is None:
        return ""
    return node.text.decode("utf-8", errors="ignore")


__all__ = ["GO_LANGUAGE", "GoDeclarationParser", "comment_text", "load_go_file", "parse_go_source"]
