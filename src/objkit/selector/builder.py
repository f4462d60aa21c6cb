"""Incremental CSS selector builder.

Each compound selector is made of parts in a fixed order, where only
class, attribute and pseudo-class may repeat:

    element#id.class[attr]:pseudo-class::pseudo-element

Compound selectors are joined with a combinator (' ', '+', '~', '>'):

    combine(
        new_selector_builder().element("div").id("main"),
        "+",
        new_selector_builder().element("table").id("data"),
    ).stringify()
    => 'div#main + table#data'
"""

from __future__ import annotations

import logging

from objkit.selector.errors import DuplicateSelectorPartError, SelectorOrderError
from objkit.selector.model import Fragment, FragmentKind

__all__ = ["SelectorBuilder", "new_selector_builder", "combine"]

logger = logging.getLogger(__name__)


class SelectorBuilder:
    """Ordered sequence of selector fragments, mutated in place by each call.

    Append methods validate before appending and return the builder itself
    so calls can be chained. A rejected append leaves the sequence untouched.
    """

    def __init__(self) -> None:
        self._fragments: list[Fragment] = []

    @property
    def fragments(self) -> tuple[Fragment, ...]:
        return tuple(self._fragments)

    # --- simple selectors -----------------------------------------------------

    def element(self, name: str) -> SelectorBuilder:
        return self._append(FragmentKind.ELEMENT, name)

    def id(self, name: str) -> SelectorBuilder:
        return self._append(FragmentKind.ID, name)

    def class_(self, name: str) -> SelectorBuilder:
        return self._append(FragmentKind.CLASS, name)

    def attribute(self, expr: str) -> SelectorBuilder:
        return self._append(FragmentKind.ATTRIBUTE, expr)

    attr = attribute

    def pseudo_class(self, name: str) -> SelectorBuilder:
        return self._append(FragmentKind.PSEUDO_CLASS, name)

    def pseudo_element(self, name: str) -> SelectorBuilder:
        return self._append(FragmentKind.PSEUDO_ELEMENT, name)

    # --- combination ----------------------------------------------------------

    def combine(self, combinator: str, other: SelectorBuilder) -> SelectorBuilder:
        """Append *combinator* and then every fragment of *other*.

        The fragments of *other* were validated when it was built and are
        copied verbatim.
        """
        tail = list(other._fragments)
        self._fragments.append(Fragment.render(FragmentKind.COMBINATOR, combinator))
        self._fragments.extend(tail)
        logger.debug("Combined selectors with %r (%d fragments)", combinator, len(self))
        return self

    # --- rendering ------------------------------------------------------------

    def stringify(self) -> str:
        return "".join(fragment.text for fragment in self._fragments)

    def __str__(self) -> str:
        return self.stringify()

    def __len__(self) -> int:
        return len(self._fragments)

    def __repr__(self) -> str:
        return f"SelectorBuilder({self.stringify()!r})"

    # --- internals ------------------------------------------------------------

    def _validate(self, kind: FragmentKind) -> None:
        if kind.singleton and any(f.kind is kind for f in self._fragments):
            raise DuplicateSelectorPartError(kind)
        if self._fragments:
            previous = self._fragments[-1].kind
            if previous > kind:
                raise SelectorOrderError(previous, kind)

    def _append(self, kind: FragmentKind, value: str) -> SelectorBuilder:
        self._validate(kind)
        self._fragments.append(Fragment.render(kind, value))
        return self


def new_selector_builder() -> SelectorBuilder:
    """Return an empty builder, the entry point for every selector."""
    return SelectorBuilder()


def combine(left: SelectorBuilder, combinator: str, right: SelectorBuilder) -> SelectorBuilder:
    """Combine two selectors; *left* absorbs the result and is returned."""
    return left.combine(combinator, right)
