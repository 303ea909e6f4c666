"""Key/value documents serialised as YAML."""

from __future__ import annotations

from typing import Any, Dict, Optional, Sequence, Tuple

import yaml

from .color import Color
from .vector2 import Vector2

IVec2 = Tuple[int, int]


def encode_ivec2(value: Sequence[int]) -> list:
    x, y = value
    return [int(x), int(y)]


def decode_ivec2(node: Any) -> IVec2:
    """Read a two-element integer sequence; raises ValueError otherwise."""
    if not isinstance(node, (list, tuple)) or len(node) != 2:
        raise ValueError(f"expected a sequence of two integers, got {node!r}")
    return (_to_int(node[0]), _to_int(node[1]))


def _to_int(value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError(f"not an integer: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        return int(value.strip())
    raise ValueError(f"not an integer: {value!r}")


def _to_float(value: Any) -> float:
    if isinstance(value, bool):
        raise ValueError(f"not a number: {value!r}")
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        return float(value.strip())
    raise ValueError(f"not a number: {value!r}")


def _to_str(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    raise ValueError(f"not a scalar: {value!r}")


def _to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("true", "yes", "on", "y"):
            return True
        if lowered in ("false", "no", "off", "n"):
            return False
    raise ValueError(f"not a boolean: {value!r}")


def _convert(value: Any, fallback: Any) -> Any:
    """Convert ``value`` to the type of ``fallback``; raises ValueError on mismatch."""
    if fallback is None:
        return value
    if isinstance(fallback, bool):
        return _to_bool(value)
    if isinstance(fallback, int):
        return _to_int(value)
    if isinstance(fallback, float):
        return _to_float(value)
    if isinstance(fallback, str):
        return _to_str(value)
    if isinstance(fallback, tuple):
        if not isinstance(value, (list, tuple)) or len(value) != len(fallback):
            raise ValueError(f"expected a sequence of {len(fallback)} items")
        return tuple(_convert(item, fb) for item, fb in zip(value, fallback))
    if isinstance(fallback, list):
        if not isinstance(value, list):
            raise ValueError("expected a sequence")
        return value
    if isinstance(fallback, dict):
        if not isinstance(value, dict):
            raise ValueError("expected a mapping")
        return value
    return value


def _plain(value: Any) -> Any:
    if isinstance(value, Document):
        return _plain(value.node)
    if isinstance(value, dict):
        return {key: _plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return value


class Document:
    """A mapping of named values with typed accessors and YAML text form.

    Nested documents share their underlying mapping with the parent.
    """

    def __init__(self, node: Optional[Dict[str, Any]] = None) -> None:
        self._node: Dict[str, Any] = {} if node is None else node

    @property
    def node(self) -> Dict[str, Any]:
        return self._node

    def __contains__(self, name: str) -> bool:
        return name in self._node

    def set(self, name: str, value: Any) -> None:
        self._node[name] = value

    def get(self, name: str, fallback: Any) -> Any:
        """Return the value converted to the type of ``fallback``, or ``fallback``."""
        value = self._node.get(name)
        if value is None:
            return fallback
        try:
            return _convert(value, fallback)
        except (TypeError, ValueError):
            return fallback

    def _mapping_for(self, name: str) -> Dict[str, Any]:
        existing = self._node.get(name)
        if not isinstance(existing, dict):
            existing = {}
            self._node[name] = existing
        return existing

    def set_vec2(self, name: str, value: Vector2) -> None:
        mapping = self._mapping_for(name)
        mapping["x"] = value.x
        mapping["y"] = value.y

    def get_vec2(self, name: str, fallback: Vector2) -> Vector2:
        result = Vector2(fallback.x, fallback.y)
        vec = Document(self._node[name]) if isinstance(self._node.get(name), dict) else None
        if vec is not None:
            result.x = vec.get("x", result.x)
            result.y = vec.get("y", result.y)
        return result

    def set_color(self, name: str, color: Color) -> None:
        mapping = self._mapping_for(name)
        mapping["r"] = color.r
        mapping["g"] = color.g
        mapping["b"] = color.b
        mapping["a"] = color.a

    def get_color(self, name: str, fallback: Color) -> Color:
        result = Color(fallback.r, fallback.g, fallback.b, fallback.a)
        value = self._node.get(name)
        if isinstance(value, dict):
            color = Document(value)
            result.r = color.get("r", result.r)
            result.g = color.get("g", result.g)
            result.b = color.get("b", result.b)
            result.a = color.get("a", result.a)
        return result

    def set_document(self, name: str, doc: Document) -> None:
        self._node[name] = doc.node

    def get_document(self, name: str) -> Document:
        value = self._node.get(name)
        if isinstance(value, dict):
            return Document(value)
        return Document()

    def to_yaml(self) -> str:
        return yaml.safe_dump(_plain(self._node), sort_keys=False)

    @classmethod
    def from_yaml(cls, text: str) -> Document:
        """Parse YAML text whose top level is a mapping (or empty)."""
        node = yaml.safe_load(text)
        if node is None:
            return cls()
        if not isinstance(node, dict):
            raise ValueError("document must be a YAML mapping")
        return cls(node)