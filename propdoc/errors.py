"""Exception types raised while building property documentation."""

from __future__ import annotations


class PropertyDocError(RuntimeError):
    """Base class for recoverable errors; callers may skip the offending type."""


class NotARecordError(PropertyDocError):
    """Raised when a documented declaration is not a record type."""

    def __init__(self, type_name: str) -> None:
        super().__init__(f"type of {type_name!r} is not a struct")
        self.type_name = type_name


class UnknownTypeError(PropertyDocError):
    """Raised when a field's type shape matches none of the supported shapes."""

    def __init__(self, dump: str) -> None:
        super().__init__(f"unknown type {dump}")
        self.dump = dump


class TagParseError(PropertyDocError):
    """Raised when a field tag literal is not a valid quoted string."""

    def __init__(self, literal: str, reason: str) -> None:
        super().__init__(f"invalid tag literal {literal!r}: {reason}")
        self.literal = literal
        self.reason = reason


class ConfigError(PropertyDocError):
    """Raised when the configuration file cannot be parsed."""


class MissingFieldInvariantViolation(AssertionError):
    """The live defaults object lacks a field the property tree documents.

    This is a programming defect (the documented type and the defaults type
    drifted apart) and is intentionally not a ``PropertyDocError``.
    """

    def __init__(self, field_name: str, owner: str) -> None:
        super().__init__(f"property {field_name!r} does not exist in {owner!r}")
        self.field_name = field_name
        self.owner = owner


__all__ = [
    "ConfigError",
    "MissingFieldInvariantViolation",
    "NotARecordError",
    "PropertyDocError",
    "TagParseError",
    "UnknownTypeError",
]
