"""objtasks: object-literal exercises -- rectangles, JSON helpers and a CSS selector builder."""

from objtasks.selector import (
    EMPTY,
    DuplicateSingleton,
    Kind,
    OrderViolation,
    Selector,
    SelectorBuilder,
    SelectorError,
    combine,
    css_selector_builder,
    parse_selector,
)
from objtasks.serialize import ParseError, from_json, to_json
from objtasks.shapes import Rectangle

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # selector
    "Kind",
    "Selector",
    "SelectorBuilder",
    "EMPTY",
    "combine",
    "css_selector_builder",
    "parse_selector",
    "SelectorError",
    "OrderViolation",
    "DuplicateSingleton",
    # serialize
    "to_json",
    "from_json",
    "ParseError",
    # shapes
    "Rectangle",
]
