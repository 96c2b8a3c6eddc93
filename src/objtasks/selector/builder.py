"""Persistent selector values and the builder facade.

Every append returns a new ``Selector``; the receiver is never modified, so
one prefix can be branched into several selectors::

    base = css_selector_builder.element("a")
    base.pseudo_class("hover").stringify()   # 'a:hover'
    base.attr('href$=".png"').stringify()    # 'a[href$=".png"]'
"""

from __future__ import annotations

from dataclasses import dataclass

from objtasks.selector.model import Kind, check_append, render_part

__all__ = ["Selector", "SelectorBuilder", "EMPTY", "combine", "css_selector_builder"]


@dataclass(frozen=True)
class Selector:
    """An immutable, partially or fully built CSS selector.

    Attributes:
        text: The selector text accumulated so far.
        last_kind: Kind of the most recently appended part, or ``None`` for
            the empty selector and for combined selectors.
    """

    text: str = ""
    last_kind: Kind | None = None

    # --- atomic appends -------------------------------------------------------

    def element(self, value: str) -> Selector:
        return self._append(Kind.ELEMENT, value)

    def id(self, value: str) -> Selector:
        return self._append(Kind.ID, value)

    def class_(self, value: str) -> Selector:
        return self._append(Kind.CLASS, value)

    def attribute(self, value: str) -> Selector:
        return self._append(Kind.ATTRIBUTE, value)

    attr = attribute

    def pseudo_class(self, value: str) -> Selector:
        return self._append(Kind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> Selector:
        return self._append(Kind.PSEUDO_ELEMENT, value)

    def append(self, kind: Kind, value: str) -> Selector:
        """Append a part of the given ``kind``; used when the kind is data."""
        return self._append(kind, value)

    # --- rendering ------------------------------------------------------------

    def stringify(self) -> str:
        """Return the selector text."""
        return self.text

    def __str__(self) -> str:
        return self.text

    # --- internal helpers -----------------------------------------------------

    def _append(self, kind: Kind, value: str) -> Selector:
        check_append(self.last_kind, kind)
        return Selector(text=self.text + render_part(kind, value), last_kind=kind)


# Shared root every chain starts from.
EMPTY = Selector()


def combine(left: Selector, combinator: str, right: Selector) -> Selector:
    """Join two selectors with a combinator (``" "``, ``"+"``, ``"~"``, ``">"``).

    The combinator is not validated. The result has no ``last_kind``, so any
    part may be appended to it.
    """
    return Selector(text=f"{left.text} {combinator} {right.text}", last_kind=None)


class SelectorBuilder:
    """Entry-point facade: each method starts a new chain from ``EMPTY``."""

    def element(self, value: str) -> Selector:
        return EMPTY.element(value)

    def id(self, value: str) -> Selector:
        return EMPTY.id(value)

    def class_(self, value: str) -> Selector:
        return EMPTY.class_(value)

    def attribute(self, value: str) -> Selector:
        return EMPTY.attribute(value)

    attr = attribute

    def pseudo_class(self, value: str) -> Selector:
        return EMPTY.pseudo_class(value)

    def pseudo_element(self, value: str) -> Selector:
        return EMPTY.pseudo_element(value)

    def combine(self, left: Selector, combinator: str, right: Selector) -> Selector:
        return combine(left, combinator, right)


css_selector_builder = SelectorBuilder()
