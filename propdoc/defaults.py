"""Stamps default values from a live configuration object onto a property tree."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping, Sized
from decimal import Decimal
from enum import Enum
from numbers import Number
from typing import TYPE_CHECKING, Any, Callable, Dict, Iterable, List, Optional, Tuple

from .errors import MissingFieldInvariantViolation
from .logging import get_logger
from .models import Property, PropertyStruct
from .naming import BLUEPRINT_NAMING, NamingConvention, get_naming_convention

if TYPE_CHECKING:  # pragma: no cover - typing aid
    from .config import PropdocConfig

_MISSING = object()


class DefaultsBinder:
    """Walks a property tree in lock-step with a defaults object.

    Properties map back to attributes (or keys, for mappings) through the
    naming convention's ``field_name``. Zero values leave ``default`` unset
    and records recurse into the nested properties.
    """

    def __init__(self, naming: NamingConvention = BLUEPRINT_NAMING) -> None:
        self.naming = naming
        self.logger = get_logger("defaults")

    @classmethod
    def from_config(cls, config: "PropdocConfig") -> "DefaultsBinder":
        return cls(naming=get_naming_convention(config.naming))

    def bind(self, tree: PropertyStruct, defaults: Any) -> None:
        self._bind(tree.properties, defaults)

    def _bind(self, properties: List[Property], defaults: Any) -> None:
        for prop in properties:
            field_name = self.naming.field_name(prop.name)
            value = _field_value(defaults, field_name)
            if value is _MISSING:
                owner = type(defaults).__name__
                self.logger.critical(
                    "Property %s has no field %s on %s; documented and default types diverged",
                    prop.name,
                    field_name,
                    owner,
                )
                raise MissingFieldInvariantViolation(field_name, owner)

            if is_zero(value):
                continue
            if is_record(value):
                self._bind(prop.properties, value)
            else:
                prop.default = render_value(value)


def set_defaults(
    tree: PropertyStruct, defaults: Any, *, naming: NamingConvention = BLUEPRINT_NAMING
) -> None:
    DefaultsBinder(naming=naming).bind(tree, defaults)


def _field_value(defaults: Any, field_name: str) -> Any:
    if isinstance(defaults, Mapping):
        return defaults.get(field_name, _MISSING)
    return getattr(defaults, field_name, _MISSING)


def record_fields(value: Any) -> Optional[Dict[str, Any]]:
    """Return the attributes of a record-like value, or None for scalars and containers."""
    if isinstance(value, (type, str, bytes, bytearray, Number, Enum, Mapping, list, tuple, set, frozenset)):
        return None
    if dataclasses.is_dataclass(value):
        return {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
    if callable(value):
        return None
    if hasattr(value, "__dict__"):
        return dict(vars(value))
    slots = [
        name
        for cls in type(value).__mro__
        for name in _as_slot_names(getattr(cls, "__slots__", ()))
        if name not in {"__dict__", "__weakref__"}
    ]
    if not slots:
        return None
    return {name: getattr(value, name) for name in slots if hasattr(value, name)}


def _as_slot_names(slots: Any) -> Tuple[str, ...]:
    return (slots,) if isinstance(slots, str) else tuple(slots)


def is_record(value: Any) -> bool:
    return record_fields(value) is not None


def is_zero(value: Any) -> bool:
    """Return True for values that carry no default worth documenting."""
    if value is None:
        return True
    if isinstance(value, bool):
        return not value
    if isinstance(value, Number):
        return value == 0
    fields = record_fields(value)
    if fields is not None:
        return all(is_zero(item) for item in fields.values())
    if isinstance(value, Sized):
        return len(value) == 0
    return False


def render_value(value: Any) -> str:
    """Render ``value`` the way Go's ``%v`` verb prints the equivalent value."""
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, str):
        return value
    if isinstance(value, Mapping):
        items = _ordered(value.items(), key=lambda item: item[0])
        return "map[" + " ".join(f"{render_value(k)}:{render_value(v)}" for k, v in items) + "]"
    if isinstance(value, (list, tuple, set, frozenset)):
        members = _ordered(value, key=lambda item: item) if isinstance(value, (set, frozenset)) else value
        return "[" + " ".join(render_value(item) for item in members) + "]"
    return str(value)


def _format_float(value: float) -> str:
    """Shortest round-trip digits with the exponent rule of Go's ``%g``."""
    if value != value:
        return "NaN"
    if value in (float("inf"), float("-inf")):
        return "+Inf" if value > 0 else "-Inf"

    sign, digit_tuple, exponent = Decimal(repr(value)).as_tuple()
    prefix = "-" if sign else ""
    raw = "".join(str(d) for d in digit_tuple)
    digits = raw.rstrip("0")
    if not digits:
        return prefix + "0"
    point = len(raw) + exponent

    exp = point - 1
    if exp < -4 or exp >= 6:
        mantissa = digits[0] + ("." + digits[1:] if len(digits) > 1 else "")
        return f"{prefix}{mantissa}e{'-' if exp < 0 else '+'}{abs(exp):02d}"
    if point <= 0:
        return f"{prefix}0.{'0' * -point}{digits}"
    if point >= len(digits):
        return prefix + digits + "0" * (point - len(digits))
    return f"{prefix}{digits[:point]}.{digits[point:]}"


def _ordered(items: Iterable[Any], key: Callable[[Any], Any]) -> List[Any]:
    """Sort by natural order, falling back to the rendered form for mixed types."""
    values = list(items)
    try:
        return sorted(values, key=key)
    except TypeError:
        return sorted(values, key=lambda item: render_value(key(item)))


__all__ = ["DefaultsBinder", "is_record", "is_zero", "record_fields", "render_value", "set_defaults"]
