"""Objkit codec layer: JSON text bridge."""

from objkit.codec.errors import CodecError, DecodeError, EncodeError, UnsupportedTemplateError
from objkit.codec.json_bridge import decode_from_text, encode_to_text

__all__ = [
    "encode_to_text",
    "decode_from_text",
    "CodecError",
    "EncodeError",
    "DecodeError",
    "UnsupportedTemplateError",
]
