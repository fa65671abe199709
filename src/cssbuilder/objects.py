"""Small object helpers: a rectangle value type and JSON round-tripping."""

from __future__ import annotations

import dataclasses
import json
from dataclasses import dataclass
from typing import Any, TypeVar

__all__ = ["Rectangle", "to_json", "from_json"]

T = TypeVar("T")


@dataclass
class Rectangle:
    width: float
    height: float

    def area(self) -> float:
        return self.width * self.height


def _default(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def to_json(obj: Any) -> str:
    """Return the compact JSON representation of *obj*.

    Dataclass instances are serialised by field, e.g.
    ``to_json(Rectangle(10, 20)) == '{"width":10,"height":20}'``.
    """
    return json.dumps(obj, separators=(",", ":"), default=_default)


def from_json(cls: type[T], text: str) -> T:
    """Build an instance of *cls* from a JSON object without calling __init__.

    Every key of the object becomes an instance attribute, so the result
    has *cls*'s methods and exactly the data in *text*.
    """
    data = json.loads(text)
    if not isinstance(data, dict):
        raise TypeError(f"Expected a JSON object, got {type(data).__name__}")
    obj = cls.__new__(cls)
    obj.__dict__.update(data)
    return obj
