"""propdoc: property reference models extracted from record type declarations."""

from .builder import PropertyTreeBuilder, build_property_struct
from .defaults import DefaultsBinder, set_defaults
from .errors import (
    ConfigError,
    MissingFieldInvariantViolation,
    NotARecordError,
    PropertyDocError,
    TagParseError,
    UnknownTypeError,
)
from .filters import TagFilterRule, apply_tag_filters, filter_by_tag
from .models import Property, PropertyStruct
from .naming import BLUEPRINT_NAMING, IDENTITY_NAMING, NamingConvention
from .resolver import TypeShapeResolver
from .tags import has_tag_value
from .text import format_text

__version__ = "0.1.0"

__all__ = [
    "BLUEPRINT_NAMING",
    "ConfigError",
    "DefaultsBinder",
    "IDENTITY_NAMING",
    "MissingFieldInvariantViolation",
    "NamingConvention",
    "NotARecordError",
    "Property",
    "PropertyDocError",
    "PropertyStruct",
    "PropertyTreeBuilder",
    "TagFilterRule",
    "TagParseError",
    "TypeShapeResolver",
    "UnknownTypeError",
    "apply_tag_filters",
    "build_property_struct",
    "filter_by_tag",
    "format_text",
    "has_tag_value",
    "set_defaults",
]
