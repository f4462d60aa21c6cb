"""Selector builder error types."""

from __future__ import annotations

from objkit.selector.model import FragmentKind


class SelectorError(Exception):
    """Base error for selector construction failures."""


class DuplicateSelectorPartError(SelectorError):
    """Raised when element, id or pseudo-element is appended a second time."""

    def __init__(self, kind: FragmentKind) -> None:
        self.kind = kind
        super().__init__(
            "Element, id and pseudo-element should not occur more then one time "
            "inside the selector"
        )


class SelectorOrderError(SelectorError):
    """Raised when a part is appended after a part that must follow it."""

    def __init__(self, previous: FragmentKind, kind: FragmentKind) -> None:
        self.previous = previous
        self.kind = kind
        super().__init__(
            "Selector parts should be arranged in the following order: element, "
            "id, class, attribute, pseudo-class, pseudo-element"
        )
