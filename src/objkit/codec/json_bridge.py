"""JSON text encoding and template-driven decoding.

Encoding follows the conventional JSON text encoder:

    {"width": 10, "height": 20}   =>  '{"width":10,"height":20}'
    [1, print, 3]                 =>  '[1,null,3]'
    {"a": 1, "f": print}          =>  '{"a":1}'

Decoding allocates a blank value of the template's kind and overlays the
parsed fields onto it; the kind's own constructor never sees the data.
"""

from __future__ import annotations

import json
import logging
import math
from collections.abc import Mapping
from typing import Any

from objkit.codec.errors import DecodeError, EncodeError, UnsupportedTemplateError
from objkit.model.overlay import Overlayable

__all__ = ["encode_to_text", "decode_from_text"]

logger = logging.getLogger(__name__)

# Marks a value the text format drops (callables).
_OMIT = object()


def encode_to_text(value: Any, indent: int | None = None) -> str:
    """Encode *value* as JSON text.

    Raises EncodeError for cyclic structures, for a callable at the top
    level, and for values with no JSON form (bytes, sets, complex numbers).
    """
    plain = _to_plain(value, set())
    if plain is _OMIT:
        raise EncodeError(f"Top-level {type(value).__name__} is not representable")
    separators = (",", ":") if indent is None else (",", ": ")
    text = json.dumps(
        plain, indent=indent, separators=separators, ensure_ascii=False, allow_nan=False
    )
    logger.debug("Encoded %s into %d characters", type(value).__name__, len(text))
    return text


def decode_from_text(template: Any, text: str) -> Any:
    """Decode *text* into a fresh value of the same kind as *template*.

    *template* may be an instance or the kind itself. Kinds providing
    ``blank()``/``overlay()`` and dicts are supported.
    """
    kind = template if isinstance(template, type) else type(template)
    try:
        data = json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise DecodeError(
            f"Malformed JSON: {exc.msg}", line=exc.lineno, column=exc.colno, cause=exc
        ) from exc
    except ValueError as exc:
        raise DecodeError(f"Malformed JSON: {exc}", cause=exc) from exc

    fields = _own_fields(data)
    if issubclass(kind, dict):
        result = kind()
        result.update(fields)
    elif issubclass(kind, Overlayable):
        result = kind.blank()
        try:
            result.overlay(fields)
        except (TypeError, AttributeError) as exc:
            raise DecodeError(
                f"Cannot overlay fields onto {kind.__name__}: {exc}", cause=exc
            ) from exc
    else:
        raise UnsupportedTemplateError(
            f"Cannot decode into {kind.__name__}: no blank()/overlay() capability"
        )

    logger.debug("Decoded %d field(s) into %s", len(fields), kind.__name__)
    return result


def _own_fields(data: Any) -> dict[str, Any]:
    """Fields carried by a parsed value: object keys, or array indices as keys.

    Scalars and null carry no fields.
    """
    if isinstance(data, dict):
        return data
    if isinstance(data, list):
        return {str(index): item for index, item in enumerate(data)}
    return {}


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def _to_plain(value: Any, active: set[int]) -> Any:
    """Convert *value* to a tree of JSON-native types.

    *active* holds the ids of containers on the current path, so a container
    reached twice along different paths is encoded twice, not rejected.
    """
    if value is None or isinstance(value, (bool, str, int)):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if callable(value):
        return _OMIT

    if isinstance(value, Mapping):
        items = value.items()
    elif isinstance(value, (list, tuple)):
        items = None
    elif hasattr(value, "__dict__"):
        items = vars(value).items()
    else:
        raise EncodeError(f"Object of type {type(value).__name__} is not JSON serializable")

    marker = id(value)
    if marker in active:
        raise EncodeError("Cyclic reference detected")
    active.add(marker)
    try:
        if items is None:
            return [
                None if item is _OMIT else item
                for item in (_to_plain(element, active) for element in value)
            ]
        group: dict[str, Any] = {}
        for key, item in items:
            plain = _to_plain(item, active)
            if plain is not _OMIT:
                group[_key_text(key)] = plain
        return group
    finally:
        active.discard(marker)


def _key_text(key: Any) -> str:
    if isinstance(key, str):
        return key
    if key is None or isinstance(key, (bool, int, float)):
        return json.dumps(key)
    raise EncodeError(f"Keys must be str, int, float, bool or None, not {type(key).__name__}")
