"""Selector model: FragmentKind ordering and rendered Fragment values."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import total_ordering


@total_ordering
class FragmentKind(Enum):
    """Kinds of selector fragment, ordered by declaration.

    The order of the simple-selector kinds is the order CSS requires inside
    a compound selector. COMBINATOR sorts last and is never order-checked.
    """

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo_class"
    PSEUDO_ELEMENT = "pseudo_element"
    COMBINATOR = "combinator"

    @property
    def rank(self) -> int:
        return _RANKS[self]

    @property
    def singleton(self) -> bool:
        """True for kinds that may appear at most once per selector."""
        return self in SINGLETON_KINDS

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, FragmentKind):
            return NotImplemented
        return self.rank < other.rank


_RANKS: dict[FragmentKind, int] = {kind: i for i, kind in enumerate(FragmentKind)}

SINGLETON_KINDS = frozenset(
    {FragmentKind.ELEMENT, FragmentKind.ID, FragmentKind.PSEUDO_ELEMENT}
)

_TEMPLATES: dict[FragmentKind, str] = {
    FragmentKind.ELEMENT: "{}",
    FragmentKind.ID: "#{}",
    FragmentKind.CLASS: ".{}",
    FragmentKind.ATTRIBUTE: "[{}]",
    FragmentKind.PSEUDO_CLASS: ":{}",
    FragmentKind.PSEUDO_ELEMENT: "::{}",
    FragmentKind.COMBINATOR: " {} ",
}


@dataclass(frozen=True)
class Fragment:
    """One rendered piece of a selector, e.g. ``#main`` or `` + ``."""

    text: str
    kind: FragmentKind

    @classmethod
    def render(cls, kind: FragmentKind, value: str) -> Fragment:
        return cls(text=_TEMPLATES[kind].format(value), kind=kind)
