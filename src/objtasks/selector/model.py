"""Selector part kinds and the ordering/cardinality tables that govern them."""

from __future__ import annotations

import logging
from enum import Enum

from objtasks.selector.errors import DuplicateSingleton, OrderViolation

log = logging.getLogger(__name__)


class Kind(Enum):
    """Kind of an atomic selector part."""

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo_class"
    PSEUDO_ELEMENT = "pseudo_element"


# Legal append order: a part may only follow parts of equal or lower rank.
KIND_ORDER: dict[Kind, int] = {
    Kind.ELEMENT: 1,
    Kind.ID: 2,
    Kind.CLASS: 3,
    Kind.ATTRIBUTE: 4,
    Kind.PSEUDO_CLASS: 5,
    Kind.PSEUDO_ELEMENT: 6,
}

# Kinds allowed at most once per chain.
SINGLETON_KINDS: frozenset[Kind] = frozenset(
    {Kind.ELEMENT, Kind.ID, Kind.PSEUDO_ELEMENT}
)

# (prefix, suffix) wrapped around a part's value when rendered.
_TOKENS: dict[Kind, tuple[str, str]] = {
    Kind.ELEMENT: ("", ""),
    Kind.ID: ("#", ""),
    Kind.CLASS: (".", ""),
    Kind.ATTRIBUTE: ("[", "]"),
    Kind.PSEUDO_CLASS: (":", ""),
    Kind.PSEUDO_ELEMENT: ("::", ""),
}


def render_part(kind: Kind, value: str) -> str:
    """Return the literal token for a part, e.g. ``#main`` or ``[href]``."""
    prefix, suffix = _TOKENS[kind]
    return f"{prefix}{value}{suffix}"


def check_append(previous: Kind | None, kind: Kind) -> None:
    """Validate appending a ``kind`` part after a ``previous`` part.

    Only the immediate predecessor is consulted. Since every step must be
    non-decreasing in rank, the whole chain stays ordered by induction.

    Raises ``OrderViolation`` if ``kind`` ranks below ``previous`` and
    ``DuplicateSingleton`` if a singleton kind is repeated.
    """
    if previous is None:
        return
    if KIND_ORDER[previous] > KIND_ORDER[kind]:
        log.debug("rejected %s after %s: out of order", kind.value, previous.value)
        raise OrderViolation(kind, previous)
    if previous is kind and kind in SINGLETON_KINDS:
        log.debug("rejected repeated %s", kind.value)
        raise DuplicateSingleton(kind)
