"""JSON encoding of plain values and decoding into record types.

Decoding never patches the type of an already-built object: the parsed
mapping is handed to the record type's constructor, so the result carries
whatever methods that type defines::

    rect = from_json(Rectangle, '{"width": 10, "height": 20}')
    rect.get_area()  # => 200
"""

from __future__ import annotations

import dataclasses
import json
import math
from typing import Any, Callable, TypeVar

from selectorkit.errors import PayloadError

__all__ = ["to_json", "from_json"]

T = TypeVar("T")


def _plain(value: Any) -> Any:
    """Convert *value* into data the json module can encode.

    Dataclasses become their field mapping; NaN and infinities become None.
    """
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        value = dataclasses.asdict(value)
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {key: _plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return value


def to_json(value: Any) -> str:
    """Return the compact JSON representation of *value*.

    Dataclass instances are encoded as their field mapping, NaN and
    infinities as ``null``. Non-ASCII text is written unescaped.
    """
    return json.dumps(_plain(value), separators=(",", ":"), ensure_ascii=False)


def from_json(record_type: Callable[..., T], payload: str) -> T:
    """Decode a JSON object *payload* into an instance of *record_type*.

    Raises :class:`PayloadError` if *payload* is not valid JSON, is not an
    object, or has keys the record type does not accept.
    """
    try:
        data = json.loads(payload)
    except json.JSONDecodeError as exc:
        raise PayloadError(f"Invalid JSON payload: {exc}", cause=exc) from exc

    if not isinstance(data, dict):
        raise PayloadError(
            f"Expected a JSON object, got {type(data).__name__}"
        )

    try:
        return record_type(**data)
    except TypeError as exc:
        name = getattr(record_type, "__name__", repr(record_type))
        raise PayloadError(f"Cannot build {name} from payload: {exc}", cause=exc) from exc
