"""Selector error types."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from objtasks.selector.model import Kind


class SelectorError(Exception):
    """Base error for all selector construction failures."""


class OrderViolation(SelectorError):
    """A part was appended after a part that must come later."""

    def __init__(self, kind: Kind, previous: Kind) -> None:
        self.kind = kind
        self.previous = previous
        super().__init__(
            "Selector parts should be arranged in the following order: "
            "element, id, class, attribute, pseudo-class, pseudo-element"
        )


class DuplicateSingleton(SelectorError):
    """Element, id or pseudo-element appended twice in one chain."""

    def __init__(self, kind: Kind) -> None:
        self.kind = kind
        self.previous = kind
        super().__init__(
            "Element, id and pseudo-element should not occur more then one time "
            "inside the selector"
        )


class SelectorSyntaxError(SelectorError):
    """Raised when selector text cannot be parsed."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)
