"""CSS selector builder: ordered, cardinality-checked selector construction."""

from objtasks.selector.builder import (
    EMPTY,
    Selector,
    SelectorBuilder,
    combine,
    css_selector_builder,
)
from objtasks.selector.errors import (
    DuplicateSingleton,
    OrderViolation,
    SelectorError,
    SelectorSyntaxError,
)
from objtasks.selector.model import KIND_ORDER, SINGLETON_KINDS, Kind, check_append
from objtasks.selector.parser import parse_selector

__all__ = [
    "Kind",
    "KIND_ORDER",
    "SINGLETON_KINDS",
    "check_append",
    "Selector",
    "SelectorBuilder",
    "EMPTY",
    "combine",
    "css_selector_builder",
    "parse_selector",
    "SelectorError",
    "OrderViolation",
    "DuplicateSingleton",
    "SelectorSyntaxError",
]
