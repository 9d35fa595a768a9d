"""Source parsers that produce :mod:`propdoc.shapes` declarations."""

from .go import GoDeclarationParser, load_go_file, parse_go_source

__all__ = ["GoDeclarationParser", "load_go_file", "parse_go_source"]
