from objkit.selector.builder import SelectorBuilder, combine, new_selector_builder
from objkit.selector.errors import (
    DuplicateSelectorPartError,
    SelectorError,
    SelectorOrderError,
)
from objkit.selector.model import Fragment, FragmentKind, SINGLETON_KINDS

__all__ = [
    "new_selector_builder",
    "combine",
    "SelectorBuilder",
    "Fragment",
    "FragmentKind",
    "SINGLETON_KINDS",
    "SelectorError",
    "DuplicateSelectorPartError",
    "SelectorOrderError",
]
