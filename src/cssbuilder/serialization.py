"""JSON helpers: plain encoding and decoding onto a given class."""

from __future__ import annotations

import json
from typing import Any, TypeVar

from cssbuilder.errors import ParseError

__all__ = ["to_json", "from_json"]

T = TypeVar("T")


def to_json(value: Any) -> str:
    """Return the JSON text for *value* using the serializer's defaults."""
    return json.dumps(value)


def from_json(prototype: type[T], text: str) -> T:
    """Decode *text* into a record whose methods come from *prototype*.

    The instance is created without calling ``prototype.__init__``; the decoded
    object's keys become its attributes.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ParseError(f"Invalid JSON: {exc.msg}", line=exc.lineno, column=exc.colno) from exc
    if not isinstance(data, dict):
        raise ParseError(f"Expected a JSON object, got {type(data).__name__}")

    obj = prototype.__new__(prototype)
    for key, value in data.items():
        try:
            setattr(obj, key, value)
        except AttributeError as exc:
            raise ParseError(f"Cannot set {key!r} on {prototype.__name__}: {exc}") from exc
    return obj
