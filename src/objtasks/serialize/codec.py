"""Compact JSON encoding and constructor-driven decoding.

``to_json`` writes the most compact form (no whitespace between tokens) and
keeps key order. ``from_json`` parses text and feeds the parsed values, in
order, to a constructor::

    to_json({"width": 10, "height": 20})          # '{"width":10,"height":20}'
    from_json(Rectangle, '{"width":10,"height":20}').area()   # 200
"""

from __future__ import annotations

import dataclasses
import json
import logging
import math
from typing import Any

from objtasks.serialize.errors import ParseError

__all__ = ["to_json", "parse_json", "from_json"]

log = logging.getLogger(__name__)

_SEPARATORS = (",", ":")


def _finite(value: Any) -> Any:
    """Replace NaN and infinities with ``None`` so they encode as ``null``."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {k: _finite(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_finite(v) for v in value]
    return value


def _encode_default(obj: Any) -> Any:
    """Fallback encoder for values ``json`` does not handle natively."""
    if isinstance(obj, type) or callable(obj):
        raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")
    if dataclasses.is_dataclass(obj):
        return _finite({f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)})
    if hasattr(obj, "__dict__"):
        return _finite({k: v for k, v in vars(obj).items() if not k.startswith("_")})
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def to_json(obj: Any, *, indent: int | None = None) -> str:
    """Return the JSON text for ``obj``.

    Dataclass instances and plain objects are written as JSON objects of
    their public fields. NaN and infinities are written as ``null``. Raises
    ``TypeError`` for functions, classes and anything else that is not
    JSON-serializable.
    """
    return json.dumps(
        _finite(obj),
        separators=None if indent is not None else _SEPARATORS,
        indent=indent,
        ensure_ascii=False,
        allow_nan=False,
        default=_encode_default,
    )


def _positional_values(data: Any) -> list[Any]:
    if isinstance(data, dict):
        return list(data.values())
    if isinstance(data, (list, str)):
        return list(data)
    return []


def parse_json(text: str) -> Any:
    """Parse JSON text, raising ``ParseError`` with the failing position."""
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        log.debug("invalid JSON at line %d column %d: %s", exc.lineno, exc.colno, exc.msg)
        raise ParseError(
            f"Invalid JSON: {exc.msg}", line=exc.lineno, column=exc.colno
        ) from exc


def from_json(prototype: Any, text: str) -> Any:
    """Build an instance of ``prototype``'s type from JSON text.

    ``prototype`` may be a class or an instance. The parsed values are passed
    positionally to the constructor: object values in key order, array items
    in order. Raises ``ParseError`` if ``text`` is not valid JSON.
    """
    data = parse_json(text)
    factory = prototype if isinstance(prototype, type) else type(prototype)
    return factory(*_positional_values(data))
