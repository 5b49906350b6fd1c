"""JSON helpers: compact serialization and data-transfer construction."""

from __future__ import annotations

import dataclasses
import json
from typing import Any, TypeVar

__all__ = ["get_json", "from_json"]

T = TypeVar("T")


def _default(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def get_json(obj: Any) -> str:
    """Return the compact JSON representation of *obj*.

    Dataclass instances are serialized field by field.
    """
    return json.dumps(obj, separators=(",", ":"), default=_default)


def from_json(cls: type[T], text: str) -> T:
    """Build an instance of *cls* from a JSON object.

    Every key of the decoded object is copied onto a new instance as an
    attribute; ``__init__`` is not called, so keys unknown to *cls* are kept
    and missing ones stay unset.

    Raises:
        json.JSONDecodeError: If *text* is not valid JSON.
        TypeError: If the document is not a JSON object.
    """
    values = json.loads(text)
    if not isinstance(values, dict):
        raise TypeError(
            f"Expected a JSON object, got {type(values).__name__}"
        )
    obj = cls.__new__(cls)
    for key, value in values.items():
        setattr(obj, key, value)
    return obj
