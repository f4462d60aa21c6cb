"""Default-plus-overlay capability used when decoding into a known kind."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, Self, runtime_checkable


@runtime_checkable
class Overlayable(Protocol):
    """A kind that can be allocated blank and then filled field by field."""

    @classmethod
    def blank(cls) -> Self: ...

    def overlay(self, fields: Mapping[str, Any]) -> None: ...


class FieldOverlay:
    """Mixin giving a default-constructible class the overlay capability.

    ``blank`` relies on every field having a default; ``overlay`` sets each
    entry as an attribute, so unknown names are added verbatim.
    """

    @classmethod
    def blank(cls) -> Self:
        return cls()

    def overlay(self, fields: Mapping[str, Any]) -> None:
        for name, value in fields.items():
            setattr(self, name, value)
