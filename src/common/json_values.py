from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Union


logger = logging.getLogger(__name__)

JsonPrimitive = Union[str, int, float, bool]
JsonValue = Union[JsonPrimitive, None, List[Any], Dict[str, Any]]


def is_primitive(value: Any) -> bool:
    """True for JSON strings, numbers and booleans. JSON null is not a primitive."""
    return isinstance(value, (str, bool, int, float))


def primitive_to_string(value: JsonPrimitive) -> str:
    """
    Textual form of a JSON primitive.

    - strings are returned as-is (no quotes)
    - booleans use JSON literals: "true" / "false"
    - numbers use their literal form ("5", "5.0", "0.25")
    """
    # bool is a subclass of int, so it must be checked first
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        return repr(value)
    raise TypeError(f"not a JSON primitive: {type(value).__name__}")


def to_json_text(value: JsonValue) -> str:
    # Compact JSON: no extra whitespace, keys in payload order
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def stringify_element(value: JsonValue) -> str:
    """
    Convert one array element into a string.

    Primitives use `primitive_to_string`. Objects, arrays and null fall back to
    their compact JSON text, braces and brackets included.
    """
    if is_primitive(value):
        return primitive_to_string(value)  # type: ignore[arg-type]
    logger.debug("Non-primitive element (%s); using JSON text", type(value).__name__)
    return to_json_text(value)


__all__ = [
    "JsonPrimitive",
    "JsonValue",
    "is_primitive",
    "primitive_to_string",
    "to_json_text",
    "stringify_element",
]
