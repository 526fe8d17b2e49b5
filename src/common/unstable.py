from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from .json_values import JsonValue


_MISSING = object()


class HypixelError(RuntimeError):
    """Base error for hypixel-stats."""


class PropertyTypeError(HypixelError, TypeError):
    """A property is present but holds a different JSON type than requested."""

    def __init__(self, name: str, expected: str, actual: Any) -> None:
        super().__init__(
            f"Property '{name}' is not {expected} (got {_json_type_name(actual)})"
        )
        self.name = name
        self.expected = expected
        self.actual = actual


def _json_type_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def _split_path(name: str) -> Tuple[str, ...]:
    if not name:
        raise ValueError("property name is required")
    return tuple(name.split("."))


def resolve_property(raw: JsonValue, name: str, default: Any = None) -> Any:
    """
    Walk a dotted property path ("stats.Bedwars.packages") through nested objects.

    Returns `default` when a segment is missing, a parent is not an object, or
    the resolved value is JSON null.
    """
    node: Any = raw
    for part in _split_path(name):
        if not isinstance(node, dict):
            return default
        node = node.get(part, _MISSING)
        if node is _MISSING:
            return default
    return default if node is None else node


def get_array_property(raw: JsonValue, name: str) -> List[Any]:
    """
    Array value at `name`.

    Missing or null yields an empty list; any other non-array type raises
    `PropertyTypeError`.
    """
    value = resolve_property(raw, name)
    if value is None:
        return []
    if not isinstance(value, list):
        raise PropertyTypeError(name, "an array", value)
    return value


def get_object_property(raw: JsonValue, name: str) -> Dict[str, Any]:
    value = resolve_property(raw, name)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise PropertyTypeError(name, "an object", value)
    return value


class UnstableHypixelObject:
    """
    Read-only accessor over a raw JSON value from the Hypixel API.

    "Unstable" because the upstream schema is undocumented and changes without
    notice, so every getter tolerates missing keys and only fails when a key is
    present with an incompatible type.

    Notes
    - Property names may be dotted paths walking nested objects.
    - Missing keys and JSON null resolve to the getter's default.
    - The wrapped value is never mutated.
    """

    __slots__ = ("_raw",)

    def __init__(self, raw: JsonValue) -> None:
        self._raw = raw

    def get_raw(self) -> JsonValue:
        return self._raw

    def has_property(self, name: str) -> bool:
        return resolve_property(self._raw, name) is not None

    def get_property(self, name: str, default: Any = None) -> Any:
        return resolve_property(self._raw, name, default)

    def get_array_property(self, name: str) -> List[Any]:
        return get_array_property(self._raw, name)

    def get_object_property(self, name: str) -> Dict[str, Any]:
        return get_object_property(self._raw, name)

    def get_string_property(self, name: str, default: Optional[str] = None) -> Optional[str]:
        value = resolve_property(self._raw, name)
        if value is None:
            return default
        if not isinstance(value, str):
            raise PropertyTypeError(name, "a string", value)
        return value

    def get_int_property(self, name: str, default: int = 0) -> int:
        value = resolve_property(self._raw, name)
        if value is None:
            return default
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise PropertyTypeError(name, "an integer", value)
        if isinstance(value, float):
            if not value.is_integer():
                raise PropertyTypeError(name, "an integer", value)
            return int(value)
        return value

    def get_float_property(self, name: str, default: float = 0.0) -> float:
        value = resolve_property(self._raw, name)
        if value is None:
            return default
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise PropertyTypeError(name, "a number", value)
        return float(value)

    def get_bool_property(self, name: str, default: bool = False) -> bool:
        value = resolve_property(self._raw, name)
        if value is None:
            return default
        if not isinstance(value, bool):
            raise PropertyTypeError(name, "a boolean", value)
        return value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._raw!r})"


__all__ = [
    "HypixelError",
    "PropertyTypeError",
    "UnstableHypixelObject",
    "resolve_property",
    "get_array_property",
    "get_object_property",
]
