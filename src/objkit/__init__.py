"""Objkit: shape value objects, a JSON bridge, and a CSS selector builder."""

from objkit.codec import (
    CodecError,
    DecodeError,
    EncodeError,
    UnsupportedTemplateError,
    decode_from_text,
    encode_to_text,
)
from objkit.model import Circle, Rectangle, create_circle, create_rectangle
from objkit.selector import (
    DuplicateSelectorPartError,
    SelectorBuilder,
    SelectorError,
    SelectorOrderError,
    combine,
    new_selector_builder,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # shapes
    "Rectangle",
    "Circle",
    "create_rectangle",
    "create_circle",
    # codec
    "encode_to_text",
    "decode_from_text",
    "CodecError",
    "EncodeError",
    "DecodeError",
    "UnsupportedTemplateError",
    # selector
    "new_selector_builder",
    "combine",
    "SelectorBuilder",
    "SelectorError",
    "DuplicateSelectorPartError",
    "SelectorOrderError",
]
